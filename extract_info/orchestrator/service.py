"""Scan orchestration: runs the extractors and carries requests to a page."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Protocol, Sequence

from ..errors import NoActivePageError, RestrictedPageError
from ..extraction.emails import extract_emails
from ..extraction.phones import extract_phones
from ..extraction.socials import extract_social_links
from ..models import PageSnapshot, ResultBundle, ScanResponse

LOGGER = logging.getLogger(__name__)

SCAN_PAGE_ACTION = "scanPage"
DEFAULT_RESTRICTED_PREFIXES = ("chrome://", "chrome-extension://", "edge://")

Clock = Callable[[], datetime]


class PageSourceProtocol(Protocol):
    """Interface implemented by everything that can capture a page."""

    name: str

    def snapshot(self, target: str) -> PageSnapshot:  # pragma: no cover - runtime protocol
        """Load *target* and return its links, text, URL, and title."""

    def close(self) -> None:  # pragma: no cover - runtime protocol
        """Release any browser or driver held by the source."""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Render *moment* as an ISO-8601 UTC instant with millisecond precision."""

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def extract_all_data(page: PageSnapshot, *, clock: Optional[Clock] = None) -> ResultBundle:
    """Run every extractor over *page* and assemble a fresh result bundle."""

    emails = extract_emails(page.links, page.text)
    phones = extract_phones(page.links, page.text)
    socials = extract_social_links(page.links, page.url)

    return ResultBundle(
        emails=tuple(emails),
        phones=tuple(phones),
        socials=tuple(socials),
        page_url=page.url,
        page_title=page.title,
        timestamp=format_timestamp((clock or _utc_now)()),
    )


def scan_page(page: PageSnapshot, *, clock: Optional[Clock] = None) -> ScanResponse:
    """Extract everything from *page*, converting any fault into a failure response."""

    try:
        bundle = extract_all_data(page, clock=clock)
    except Exception as exc:
        LOGGER.exception("Extraction failed for %s", page.url or "(unknown page)")
        return ScanResponse.failed(str(exc))

    LOGGER.info(
        "Scanned %s: %s emails, %s phones, %s social links",
        page.url or "(unknown page)",
        len(bundle.emails),
        len(bundle.phones),
        len(bundle.socials),
    )
    return ScanResponse.ok(bundle)


def handle_message(
    request: Mapping[str, Any], page: PageSnapshot, *, clock: Optional[Clock] = None
) -> Optional[Dict[str, Any]]:
    """Answer a request addressed to the page; unknown actions get no reply."""

    if request.get("action") != SCAN_PAGE_ACTION:
        LOGGER.debug("Ignoring unsupported action %r", request.get("action"))
        return None
    return scan_page(page, clock=clock).to_payload()


def is_restricted_url(url: str, prefixes: Iterable[str] = DEFAULT_RESTRICTED_PREFIXES) -> bool:
    return any(url.startswith(prefix) for prefix in prefixes)


class ScanService:
    """Delivers ``scanPage`` requests to a page source and returns the response.

    Transport-level problems are raised as :class:`~extract_info.errors.ScanError`
    subclasses so callers can tell them apart from extraction failures, which
    come back as an unsuccessful :class:`ScanResponse`.
    """

    def __init__(
        self,
        source: PageSourceProtocol,
        *,
        restricted_prefixes: Sequence[str] = DEFAULT_RESTRICTED_PREFIXES,
        clock: Optional[Clock] = None,
    ) -> None:
        self._source = source
        self._restricted_prefixes = tuple(restricted_prefixes)
        self._clock = clock

    @property
    def source(self) -> PageSourceProtocol:
        return self._source

    def scan_page(self, target: Optional[str] = None) -> ScanResponse:
        """Capture *target* and run a scan over it."""

        target = (target or "").strip()
        if not target:
            raise NoActivePageError()
        if is_restricted_url(target, self._restricted_prefixes):
            raise RestrictedPageError(target)

        LOGGER.debug("Capturing %s with %s", target, self._source.name)
        page = self._source.snapshot(target)
        if is_restricted_url(page.url, self._restricted_prefixes):
            raise RestrictedPageError(page.url)

        payload = handle_message({"action": SCAN_PAGE_ACTION}, page, clock=self._clock)
        return ScanResponse.from_payload(payload)

    def close(self) -> None:
        self._source.close()
