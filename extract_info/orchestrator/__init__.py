"""Scan orchestration and request handling."""

from .service import ScanService, extract_all_data, handle_message, scan_page

__all__ = ["ScanService", "extract_all_data", "handle_message", "scan_page"]
