"""Phone number extraction from ``tel:`` links and page text.

Several overlapping patterns are run over the text. Numbers that normalise to
the same digit string collapse into one result; numbers that normalise
differently (for example when one pattern picks up an extra digit) are kept as
separate results.
"""
from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Tuple

TEL_PREFIX = "tel:"
MIN_PHONE_LENGTH = 10

_TEL_SCHEME = re.compile(r"^tel:", re.IGNORECASE)
_NON_PHONE_CHARS = re.compile(r"[^0-9+]")

# (label, pattern) pairs, applied in order.
PHONE_PATTERNS: Tuple[Tuple[str, "re.Pattern[str]"], ...] = (
    ("international", re.compile(r"\+[0-9]{1,4}[\s.-]?\(?[0-9]{1,4}\)?[\s.-]?[0-9]{1,4}[\s.-]?[0-9]{1,9}")),
    ("us_parentheses", re.compile(r"\(?[0-9]{3}\)?[\s.-]?[0-9]{3}[\s.-]?[0-9]{4}")),
    ("us_separated", re.compile(r"[0-9]{3}[\s.-][0-9]{3}[\s.-][0-9]{4}")),
    ("international_compact", re.compile(r"\+[0-9]{10,15}")),
)


def clean_phone_number(raw: str) -> Optional[str]:
    """Normalise *raw* to digits with an optional leading ``+``.

    A ``+`` anywhere but the first position is treated as noise and every
    ``+`` is removed. Returns ``None`` when fewer than ten characters remain.
    """

    cleaned = _NON_PHONE_CHARS.sub("", raw)
    if "+" in cleaned and not cleaned.startswith("+"):
        cleaned = cleaned.replace("+", "")
    return cleaned if len(cleaned) >= MIN_PHONE_LENGTH else None


def extract_phones(links: Iterable[str], text: Optional[str]) -> List[str]:
    """Return unique normalised phone numbers in order of discovery."""

    phones: Dict[str, None] = {}

    for href in links:
        if not href.startswith(TEL_PREFIX):
            continue
        phone = clean_phone_number(_TEL_SCHEME.sub("", href))
        if phone:
            phones[phone] = None

    body = text or ""
    for _label, pattern in PHONE_PATTERNS:
        for match in pattern.findall(body):
            cleaned = clean_phone_number(match)
            if cleaned and len(cleaned) >= MIN_PHONE_LENGTH:
                phones[cleaned] = None

    return list(phones)


__all__ = ["MIN_PHONE_LENGTH", "PHONE_PATTERNS", "clean_phone_number", "extract_phones"]
