"""Page source backed by a Playwright-driven Chromium browser.

Prerequisites
-------------
* Requires :mod:`playwright` with Chromium installed (``playwright install``).
* Each :meth:`PlaywrightPageSource.snapshot` call launches a fresh browser, so
  no page state is shared between scans.
"""
from __future__ import annotations

import contextlib
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from ..errors import TargetUnreachableError
from ..models import PageSnapshot
from .base import INNER_TEXT_SCRIPT, LINK_HREFS_SCRIPT, LINK_SELECTOR, BrowserPageSource, BrowserSourceConfig

LOGGER = logging.getLogger(__name__)


@dataclass
class PlaywrightSourceConfig(BrowserSourceConfig):
    """Extends :class:`BrowserSourceConfig` with Playwright specific options."""

    wait_until: str = "domcontentloaded"
    user_agent: Optional[str] = None


class PlaywrightPageSource(BrowserPageSource):
    """Loads the target in Chromium and reads links and text from the live DOM."""

    name = "playwright"

    def __init__(
        self,
        config: Optional[PlaywrightSourceConfig | Dict[str, Any]] = None,
        *,
        playwright_factory: Optional[Callable[[], Any]] = None,
    ) -> None:
        if isinstance(config, dict):
            resolved_config = PlaywrightSourceConfig(**config)
        else:
            resolved_config = config or PlaywrightSourceConfig()
        super().__init__(config=resolved_config)
        self._playwright_factory = playwright_factory or sync_playwright

    def snapshot(self, target: str) -> PageSnapshot:
        try:
            with self._playwright_factory() as playwright:
                browser = playwright.chromium.launch(headless=self.config.headless)
                try:
                    page = browser.new_page(user_agent=self.config.user_agent) if self.config.user_agent else browser.new_page()
                    page.set_default_navigation_timeout(self.config.navigation_timeout * 1000)
                    LOGGER.info("Navigating to %s", target)
                    page.goto(target, wait_until=self.config.wait_until)
                    self._apply_settle_delay()
                    return self.read_page(page)
                finally:
                    with contextlib.suppress(PlaywrightError):
                        browser.close()
        except PlaywrightError as exc:
            raise TargetUnreachableError(target, str(exc).splitlines()[0] if str(exc) else None) from exc

    @staticmethod
    def read_page(page) -> PageSnapshot:
        """Capture an already loaded Playwright ``Page``."""

        links = page.eval_on_selector_all(LINK_SELECTOR, LINK_HREFS_SCRIPT)
        text = page.evaluate(INNER_TEXT_SCRIPT)
        return PageSnapshot.build(url=page.url, title=page.title(), links=links or [], text=text)
