"""Common utilities shared by page sources."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

LOGGER = logging.getLogger(__name__)

# Returns the body's rendered text the same way a content script would read it.
INNER_TEXT_SCRIPT = "() => document.body ? document.body.innerText : ''"
LINK_HREFS_SCRIPT = "elements => elements.map((element) => element.getAttribute('href'))"
LINK_SELECTOR = "a[href]"


@dataclass
class BrowserSourceConfig:
    """Runtime configuration shared by all browser based page sources."""

    headless: bool = True
    settle_seconds: float = 0.0
    navigation_timeout: float = 30.0


class BrowserPageSource:
    """Base class for sources that drive a real browser."""

    name = "browser"

    def __init__(self, config: Optional[BrowserSourceConfig] = None) -> None:
        self.config = config or BrowserSourceConfig()

    def __enter__(self) -> "BrowserPageSource":
        return self

    def __exit__(self, exc_type, exc, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Release browser resources. Sources without long-lived state do nothing."""

    def _apply_settle_delay(self) -> None:
        # Gives client-side rendering a chance to populate links and text.
        if self.config.settle_seconds > 0:
            LOGGER.debug("Waiting %s seconds for the page to settle", self.config.settle_seconds)
            time.sleep(self.config.settle_seconds)
