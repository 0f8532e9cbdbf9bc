"""Factory helpers for constructing page sources from configuration."""
from __future__ import annotations

import importlib
from typing import Any, Dict

from .config import ConfigurationError, get_restricted_prefixes, get_source_config
from .orchestrator.service import DEFAULT_RESTRICTED_PREFIXES, ScanService

SOURCE_TYPES = {
    "html": "extract_info.sources.html.HtmlPageSource",
    "playwright": "extract_info.sources.playwright_page.PlaywrightPageSource",
    "selenium": "extract_info.sources.selenium_page.SeleniumPageSource",
}


def _load_class(path: str):
    module_name, _, attr = path.rpartition(".")
    if not module_name:
        raise ConfigurationError(f"Invalid page source class path '{path}'")
    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as exc:
        raise ConfigurationError(f"Page source module '{module_name}' could not be imported: {exc}") from exc
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        raise ConfigurationError(f"Module '{module_name}' does not define '{attr}'") from exc


def build_page_source(config: Dict[str, Any]):
    """Instantiate the page source described by the ``source`` section."""

    source_cfg = get_source_config(config)
    class_path = source_cfg.get("class")
    if not class_path:
        source_type = str(source_cfg["type"]).lower()
        class_path = SOURCE_TYPES.get(source_type)
        if class_path is None:
            raise ConfigurationError(
                f"Unknown page source type '{source_type}'. Choose one of: {sorted(SOURCE_TYPES)}"
            )

    source_cls = _load_class(class_path)
    options = source_cfg.get("options") or {}
    try:
        return source_cls(options) if options else source_cls()
    except TypeError as exc:
        raise ConfigurationError(f"Invalid options for page source '{class_path}': {exc}") from exc


def build_scan_service(config: Dict[str, Any]) -> ScanService:
    """Build a :class:`ScanService` around the configured page source."""

    return ScanService(
        build_page_source(config),
        restricted_prefixes=get_restricted_prefixes(config, DEFAULT_RESTRICTED_PREFIXES),
    )
