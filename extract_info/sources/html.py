"""Page source that reads static HTML markup with BeautifulSoup."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import urlsplit
from urllib.request import url2pathname

from bs4 import BeautifulSoup

from ..errors import TargetUnreachableError
from ..models import PageSnapshot

LOGGER = logging.getLogger(__name__)

_HIDDEN_TAGS = ["head", "script", "style", "noscript", "template"]
_BLOCK_TAGS = [
    "address", "article", "aside", "blockquote", "br", "dd", "div", "dl", "dt",
    "fieldset", "figcaption", "figure", "footer", "form", "h1", "h2", "h3", "h4",
    "h5", "h6", "header", "hr", "li", "main", "nav", "ol", "option", "p", "pre",
    "section", "table", "td", "th", "tr", "ul",
]
_INLINE_WHITESPACE = re.compile(r"[ \t\r\f\v]+")


def _render_text(soup: BeautifulSoup) -> str:
    """Approximate ``innerText``: hidden elements dropped, one line per block."""

    for tag in soup.find_all(_HIDDEN_TAGS):
        # Nested hidden tags go away with their ancestor.
        if not tag.decomposed:
            tag.decompose()
    for tag in soup.find_all(_BLOCK_TAGS):
        tag.insert_before("\n")
        tag.insert_after("\n")
    root = soup.body or soup
    lines: List[str] = []
    for line in root.get_text().splitlines():
        line = _INLINE_WHITESPACE.sub(" ", line).strip()
        if line:
            lines.append(line)
    return "\n".join(lines)


def snapshot_from_html(html: str, url: str = "", *, parser: str = "lxml") -> PageSnapshot:
    """Parse *html* into a :class:`PageSnapshot` for a page served from *url*."""

    soup = BeautifulSoup(html or "", parser)
    title = ""
    if soup.title is not None:
        title = _INLINE_WHITESPACE.sub(" ", soup.title.get_text()).strip()
    links = [anchor.get("href") for anchor in soup.find_all("a", href=True)]
    text = _render_text(soup)
    return PageSnapshot.build(url=url, title=title, links=links, text=text)


@dataclass
class HtmlSourceConfig:
    """Options for :class:`HtmlPageSource`."""

    base_url: Optional[str] = None
    encoding: str = "utf-8"
    parser: str = "lxml"


class HtmlPageSource:
    """Reads a saved HTML page from disk.

    ``base_url`` stands in for the address the page was served from so that
    relative links resolve; without it the file's own URI is used.
    """

    name = "html"

    def __init__(self, config: Optional[HtmlSourceConfig | Dict[str, Any]] = None) -> None:
        if isinstance(config, dict):
            config = HtmlSourceConfig(**config)
        self.config = config or HtmlSourceConfig()

    def snapshot(self, target: str) -> PageSnapshot:
        path = self._resolve_path(target)
        LOGGER.info("Reading HTML from %s", path)
        try:
            html = path.read_text(encoding=self.config.encoding, errors="replace")
        except OSError as exc:
            raise TargetUnreachableError(target, exc.strerror or str(exc)) from exc
        url = self.config.base_url or path.resolve().as_uri()
        return snapshot_from_html(html, url, parser=self.config.parser)

    def close(self) -> None:
        return None

    def _resolve_path(self, target: str) -> Path:
        parts = urlsplit(target)
        if parts.scheme == "file":
            return Path(url2pathname(parts.path))
        if parts.scheme in {"http", "https"}:
            raise TargetUnreachableError(target, "the html source only reads local files")
        return Path(target).expanduser()
