"""Pure extraction rules for emails, phone numbers, and social links."""

from .emails import extract_emails, is_valid_email  # noqa: F401
from .phones import clean_phone_number, extract_phones  # noqa: F401
from .socials import (  # noqa: F401
    SOCIAL_PLATFORMS,
    extract_social_links,
    is_valid_social_link,
    match_platform,
)

__all__ = [
    "SOCIAL_PLATFORMS",
    "clean_phone_number",
    "extract_emails",
    "extract_phones",
    "extract_social_links",
    "is_valid_email",
    "is_valid_social_link",
    "match_platform",
]
