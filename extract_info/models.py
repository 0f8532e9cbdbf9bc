"""Data models shared by the extractors, page sources, CLI, and GUI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple


# --- Page Content ---

@dataclass(frozen=True)
class PageSnapshot:
    """Everything a scan reads from a page.

    ``links`` holds the raw ``href`` attribute of every ``a[href]`` element in
    document order, exactly as written in the markup (not resolved).
    ``text`` is the visible rendered text of the page body.
    """

    url: str = ""
    title: str = ""
    links: Tuple[str, ...] = ()
    text: str = ""

    @classmethod
    def build(
        cls,
        *,
        url: Optional[str] = None,
        title: Optional[str] = None,
        links: Iterable[Optional[str]] = (),
        text: Optional[str] = None,
    ) -> "PageSnapshot":
        """Create a snapshot, dropping ``None`` link values from drivers."""

        return cls(
            url=url or "",
            title=title or "",
            links=tuple(link for link in links if link is not None),
            text=text or "",
        )


# --- Social Platforms ---

@dataclass(frozen=True)
class SocialPlatform:
    """A known social network: display name, registered domain, and glyph."""

    name: str
    domain: str
    icon: str


@dataclass(frozen=True)
class SocialLink:
    """A validated link to a social-media profile or page."""

    url: str
    platform: str
    icon: str

    def as_dict(self) -> Dict[str, str]:
        return {"url": self.url, "platform": self.platform, "icon": self.icon}


# --- Scan Results ---

@dataclass(frozen=True)
class ResultBundle:
    """Complete output of one scan. Created fresh for every scan."""

    emails: Tuple[str, ...] = ()
    phones: Tuple[str, ...] = ()
    socials: Tuple[SocialLink, ...] = ()
    page_url: str = ""
    page_title: str = ""
    timestamp: str = ""

    def is_empty(self) -> bool:
        return not (self.emails or self.phones or self.socials)

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON-serialisable wire representation."""

        return {
            "emails": list(self.emails),
            "phones": list(self.phones),
            "socials": [social.as_dict() for social in self.socials],
            "pageUrl": self.page_url,
            "pageTitle": self.page_title,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ResultBundle":
        socials = tuple(
            SocialLink(
                url=str(item.get("url", "")),
                platform=str(item.get("platform", "")),
                icon=str(item.get("icon", "")),
            )
            for item in payload.get("socials") or []
        )
        return cls(
            emails=tuple(payload.get("emails") or ()),
            phones=tuple(payload.get("phones") or ()),
            socials=socials,
            page_url=payload.get("pageUrl") or "",
            page_title=payload.get("pageTitle") or "",
            timestamp=payload.get("timestamp") or "",
        )


@dataclass
class ScanResponse:
    """Outcome of a ``scanPage`` request: a bundle or an error message."""

    success: bool
    data: Optional[ResultBundle] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, bundle: ResultBundle) -> "ScanResponse":
        return cls(success=True, data=bundle)

    @classmethod
    def failed(cls, message: str) -> "ScanResponse":
        return cls(success=False, error=message)

    def to_payload(self) -> Dict[str, Any]:
        if self.success and self.data is not None:
            return {"success": True, "data": self.data.to_payload()}
        return {"success": False, "error": self.error or ""}

    @classmethod
    def from_payload(cls, payload: Optional[Mapping[str, Any]]) -> "ScanResponse":
        """Rebuild a response; a missing or malformed payload counts as a failure."""

        if not payload:
            return cls.failed("")
        if payload.get("success") and isinstance(payload.get("data"), Mapping):
            return cls.ok(ResultBundle.from_payload(payload["data"]))
        return cls.failed(str(payload.get("error") or ""))


@dataclass
class ExportRow:
    """Flat representation of one extracted item, used by exporters."""

    category: str
    value: str
    platform: str = ""
    icon: str = ""
    metadata: Dict[str, str] = field(default_factory=dict)


def bundle_to_rows(bundle: ResultBundle) -> List[ExportRow]:
    """Flatten a bundle into one row per email, phone, and social link."""

    page = {
        "page_url": bundle.page_url,
        "page_title": bundle.page_title,
        "timestamp": bundle.timestamp,
    }
    rows: List[ExportRow] = []
    rows.extend(ExportRow(category="email", value=email, metadata=dict(page)) for email in bundle.emails)
    rows.extend(ExportRow(category="phone", value=phone, metadata=dict(page)) for phone in bundle.phones)
    rows.extend(
        ExportRow(
            category="social",
            value=social.url,
            platform=social.platform,
            icon=social.icon,
            metadata=dict(page),
        )
        for social in bundle.socials
    )
    return rows
