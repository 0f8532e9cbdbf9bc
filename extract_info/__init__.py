"""Extract emails, phone numbers, and social-media links from a web page."""

from . import models  # noqa: F401
from .errors import (  # noqa: F401
    NoActivePageError,
    RestrictedPageError,
    ScanError,
    TargetUnreachableError,
)
from .models import (  # noqa: F401
    PageSnapshot,
    ResultBundle,
    ScanResponse,
    SocialLink,
    SocialPlatform,
)
from .orchestrator import ScanService, extract_all_data, handle_message, scan_page  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "NoActivePageError",
    "PageSnapshot",
    "RestrictedPageError",
    "ResultBundle",
    "ScanError",
    "ScanResponse",
    "ScanService",
    "SocialLink",
    "SocialPlatform",
    "TargetUnreachableError",
    "extract_all_data",
    "handle_message",
    "scan_page",
    "extraction",
    "orchestrator",
]
