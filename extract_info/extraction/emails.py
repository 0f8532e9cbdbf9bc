"""Email address extraction from ``mailto:`` links and page text."""
from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional

MAILTO_PREFIX = "mailto:"

EMAIL_SCAN_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_EMAIL_VALID_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_MAILTO_SCHEME = re.compile(r"^mailto:", re.IGNORECASE)


def is_valid_email(candidate: str) -> bool:
    """Return ``True`` when *candidate* is a plausible address without ``..``."""

    return bool(_EMAIL_VALID_PATTERN.fullmatch(candidate)) and ".." not in candidate


def email_from_mailto(href: str) -> str:
    """Strip the scheme and any query string from a ``mailto:`` target."""

    address = _MAILTO_SCHEME.sub("", href)
    address = address.split("?", 1)[0]
    return address.strip().lower()


def extract_emails(links: Iterable[str], text: Optional[str]) -> List[str]:
    """Return unique, normalised email addresses in order of discovery.

    ``mailto:`` link targets are read first, then the visible text is scanned.
    """

    emails: Dict[str, None] = {}

    for href in links:
        if not href.startswith(MAILTO_PREFIX):
            continue
        email = email_from_mailto(href)
        if is_valid_email(email):
            emails[email] = None

    for match in EMAIL_SCAN_PATTERN.findall(text or ""):
        email = match.strip().lower()
        if is_valid_email(email):
            emails[email] = None

    return list(emails)


__all__ = ["EMAIL_SCAN_PATTERN", "email_from_mailto", "extract_emails", "is_valid_email"]
