"""Exceptions raised while delivering a scan request to a page."""
from __future__ import annotations

from typing import Optional


class ScanError(RuntimeError):
    """Base class for failures that prevent a scan from reaching the page."""


class NoActivePageError(ScanError):
    """Raised when there is no page to scan."""

    def __init__(self, message: str = "No page address was supplied") -> None:
        super().__init__(message)


class RestrictedPageError(ScanError):
    """Raised for browser internal pages that cannot be scanned."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Refusing to scan restricted page '{url}'")
        self.url = url


class TargetUnreachableError(ScanError):
    """Raised when the page source cannot load or read the target page."""

    def __init__(self, target: str, reason: Optional[str] = None) -> None:
        message = f"Could not reach '{target}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.target = target
        self.reason = reason


__all__ = [
    "NoActivePageError",
    "RestrictedPageError",
    "ScanError",
    "TargetUnreachableError",
]
