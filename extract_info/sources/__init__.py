"""Page sources that capture links and visible text for a scan."""

from .base import BrowserPageSource, BrowserSourceConfig  # noqa: F401
from .html import HtmlPageSource, HtmlSourceConfig, snapshot_from_html  # noqa: F401

__all__ = [
    "BrowserPageSource",
    "BrowserSourceConfig",
    "HtmlPageSource",
    "HtmlSourceConfig",
    "snapshot_from_html",
]

try:  # pragma: no cover - optional dependency
    from .playwright_page import PlaywrightPageSource, PlaywrightSourceConfig  # noqa: F401
except ModuleNotFoundError:  # pragma: no cover - optional dependency
    PlaywrightPageSource = None  # type: ignore[assignment,misc]
    PlaywrightSourceConfig = None  # type: ignore[assignment,misc]
else:  # pragma: no cover - optional dependency
    __all__ += ["PlaywrightPageSource", "PlaywrightSourceConfig"]

try:  # pragma: no cover - optional dependency
    from .selenium_page import SeleniumPageSource, SeleniumSourceConfig  # noqa: F401
except ModuleNotFoundError:  # pragma: no cover - optional dependency
    SeleniumPageSource = None  # type: ignore[assignment,misc]
    SeleniumSourceConfig = None  # type: ignore[assignment,misc]
else:  # pragma: no cover - optional dependency
    __all__ += ["SeleniumPageSource", "SeleniumSourceConfig"]
