"""User interface components for the page scanner.

The Tk window lives in :mod:`extract_info.ui.app`; import it explicitly so that
the display helpers stay usable on systems without Tk.
"""

from .presenter import build_sections, describe_scan_error, perform_scan  # noqa: F401

__all__ = ["build_sections", "describe_scan_error", "perform_scan"]
