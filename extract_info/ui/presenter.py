"""Display logic for the scanner panel, kept free of any Tk dependency."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from urllib.parse import urlsplit

from ..errors import NoActivePageError, RestrictedPageError, TargetUnreachableError
from ..models import ResultBundle, ScanResponse
from ..orchestrator.service import ScanService

LOGGER = logging.getLogger(__name__)

SCAN_LABEL = "🔍  Scan Page"
SCANNING_LABEL = "⏳  Scanning..."
RESCAN_LABEL = "🔄  Scan Again"

COPY_LABEL = "Copy"
COPIED_LABEL = "Copied!"
COPY_FAILED_LABEL = "Failed"
COPY_FEEDBACK_MS = 1500

MAX_PATH_DISPLAY = 40

NO_ACTIVE_PAGE_MESSAGE = "No active page found"
RESTRICTED_PAGE_MESSAGE = "Cannot scan browser internal pages"
UNREACHABLE_PAGE_MESSAGE = "Lost connection to the page. Please refresh the page and try again."
EXTRACTION_FAILED_MESSAGE = "Failed to extract data from page"


@dataclass
class ItemView:
    """One row in a results section."""

    text: str
    copy_value: str
    icon: str = ""
    platform: str = ""
    url: str = ""
    tooltip: str = ""


@dataclass
class SectionView:
    """A labelled group of results with its count and empty-state text."""

    key: str
    title: str
    empty_message: str
    items: List[ItemView] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def heading(self) -> str:
        return f"{self.title} ({self.count})"


def shorten_url_path(url: str, limit: int = MAX_PATH_DISPLAY) -> str:
    """Show only the path of *url*, cut to *limit* characters."""

    try:
        path = urlsplit(url).path
    except ValueError:
        return url
    if len(path) > limit:
        return path[:limit] + "..."
    return path


def page_status(bundle: ResultBundle) -> str:
    return f"Scanned: {bundle.page_title or 'Unknown Page'}"


def build_sections(bundle: ResultBundle) -> List[SectionView]:
    emails = SectionView(
        key="emails",
        title="📧 Emails",
        empty_message="No emails found",
        items=[ItemView(text=email, copy_value=email) for email in bundle.emails],
    )
    phones = SectionView(
        key="phones",
        title="📞 Phone Numbers",
        empty_message="No phone numbers found",
        items=[ItemView(text=phone, copy_value=phone) for phone in bundle.phones],
    )
    socials = SectionView(
        key="socials",
        title="🌐 Social Links",
        empty_message="No social links found",
        items=[
            ItemView(
                text=shorten_url_path(social.url),
                copy_value=social.url,
                icon=social.icon,
                platform=social.platform,
                url=social.url,
                tooltip=social.url,
            )
            for social in bundle.socials
        ],
    )
    return [emails, phones, socials]


def describe_scan_error(exc: BaseException) -> str:
    """Turn a scan failure into a short message for the user."""

    if isinstance(exc, NoActivePageError):
        return NO_ACTIVE_PAGE_MESSAGE
    if isinstance(exc, RestrictedPageError):
        return RESTRICTED_PAGE_MESSAGE
    if isinstance(exc, TargetUnreachableError):
        return UNREACHABLE_PAGE_MESSAGE
    return f"Error scanning page: {exc}"


def describe_failed_response(response: ScanResponse) -> str:
    return response.error or EXTRACTION_FAILED_MESSAGE


def perform_scan(service: ScanService, target: Optional[str]) -> Tuple[Optional[ResultBundle], Optional[str]]:
    """Run one scan and return either the bundle or a user-facing error message."""

    try:
        response = service.scan_page(target)
    except Exception as exc:
        LOGGER.error("Scan error for %s: %s", target or "(no page)", exc)
        return None, describe_scan_error(exc)

    if response.success and response.data is not None:
        return response.data, None
    return None, describe_failed_response(response)
