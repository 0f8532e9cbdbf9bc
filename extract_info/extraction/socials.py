"""Social-media profile link extraction.

Every hyperlink on the page is resolved to an absolute URL and matched against
:data:`SOCIAL_PLATFORMS` in order. Share widgets, authentication flows, bare
homepages, and generic navigation pages are discarded.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple
from urllib.parse import quote, urljoin, urlsplit, urlunsplit

from ..models import SocialLink, SocialPlatform

LOGGER = logging.getLogger(__name__)

SOCIAL_PLATFORMS: Tuple[SocialPlatform, ...] = (
    SocialPlatform(name="Facebook", domain="facebook.com", icon="📘"),
    SocialPlatform(name="LinkedIn", domain="linkedin.com", icon="💼"),
    SocialPlatform(name="Twitter", domain="twitter.com", icon="🐦"),
    SocialPlatform(name="X", domain="x.com", icon="✖️"),
    SocialPlatform(name="Instagram", domain="instagram.com", icon="📷"),
    SocialPlatform(name="TikTok", domain="tiktok.com", icon="🎵"),
    SocialPlatform(name="YouTube", domain="youtube.com", icon="🎬"),
    SocialPlatform(name="Pinterest", domain="pinterest.com", icon="📌"),
    SocialPlatform(name="GitHub", domain="github.com", icon="🐙"),
)

# Substrings that mark share widgets and sign-in flows anywhere in the URL.
EXCLUDED_KEYWORDS: Tuple[str, ...] = ("sharer", "share", "intent", "login", "signup", "register")

GENERIC_PATHS = frozenset(
    {"login", "signup", "register", "help", "about", "privacy", "terms", "settings", "explore", "search"}
)

_DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}

# Characters left as-is in each component; everything else is percent-encoded.
_PATH_SAFE_CHARS = "/%:@!$&'()*+,;=[\\]^|~"
_QUERY_SAFE_CHARS = "/%:@!$&()*+,;=?[\\]^`{|}~"
_FRAGMENT_SAFE_CHARS = "/%:@!#$&'()*+,;=?[\\]^{|}~"


def _normalise_slashes(href: str) -> str:
    """Treat backslashes before the query or fragment as ``/``, as browsers do for web URLs."""

    cut = len(href)
    for marker in ("?", "#"):
        index = href.find(marker)
        if index != -1:
            cut = min(cut, index)
    return href[:cut].replace("\\", "/") + href[cut:]


def _origin(page_url: str) -> Optional[str]:
    try:
        parts = urlsplit(page_url)
    except ValueError:
        return None
    if not parts.scheme or not parts.netloc:
        return None
    host = parts.netloc.rpartition("@")[2]
    if not host:
        return None
    return f"{parts.scheme}://{host}/"


def _canonicalise(url: str) -> Optional[str]:
    """Serialise web URLs the way a browser reports ``URL.href``."""

    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    if scheme not in _DEFAULT_PORTS:
        return url

    hostname = parts.hostname
    if not hostname:
        return None
    port = parts.port
    host = f"[{hostname}]" if ":" in hostname else hostname
    if port is not None and port != _DEFAULT_PORTS[scheme]:
        host = f"{host}:{port}"
    userinfo, _, _ = parts.netloc.rpartition("@")
    netloc = f"{userinfo}@{host}" if userinfo else host

    path = quote(parts.path, safe=_PATH_SAFE_CHARS) or "/"
    query = quote(parts.query, safe=_QUERY_SAFE_CHARS)
    fragment = quote(parts.fragment, safe=_FRAGMENT_SAFE_CHARS)
    return urlunsplit((scheme, netloc, path, query, fragment))


def resolve_link(href: str, page_url: str) -> Optional[str]:
    """Resolve *href* against the origin of *page_url*.

    Returns ``None`` for empty or malformed targets and for relative targets
    when the page has no usable origin.
    """

    href = (href or "").strip()
    if not href:
        return None
    try:
        scheme = urlsplit(href).scheme.lower()
        if not scheme or scheme in _DEFAULT_PORTS:
            href = _normalise_slashes(href)
        if scheme:
            resolved = href
        else:
            origin = _origin(page_url)
            if origin is None:
                return None
            resolved = urljoin(origin, href)
        return _canonicalise(resolved)
    except ValueError:
        LOGGER.debug("Skipping malformed link target %r", href)
        return None


def hostname_of(url: str) -> str:
    try:
        return (urlsplit(url).hostname or "").lower()
    except ValueError:
        return ""


def match_platform(hostname: str) -> Optional[SocialPlatform]:
    """Return the first platform whose domain occurs in *hostname*."""

    hostname = hostname.lower()
    for platform in SOCIAL_PLATFORMS:
        if platform.domain in hostname or hostname.endswith(platform.domain):
            return platform
    return None


def is_valid_social_link(url: str) -> bool:
    """Return ``True`` for links that look like a profile or page, not a widget."""

    url_lower = url.lower()
    if any(keyword in url_lower for keyword in EXCLUDED_KEYWORDS):
        return False

    try:
        path = urlsplit(url).path
    except ValueError:
        return False

    if path in {"", "/"}:
        return False

    segments = [segment for segment in path.split("/") if segment]
    if not segments:
        return False

    return segments[0].lower() not in GENERIC_PATHS


def extract_social_links(links: Iterable[str], page_url: str = "") -> List[SocialLink]:
    """Return validated social links, one per unique resolved URL."""

    found: Dict[str, SocialLink] = {}

    for href in links:
        url = resolve_link(href, page_url)
        if url is None:
            continue
        platform = match_platform(hostname_of(url))
        if platform is None:
            continue
        if is_valid_social_link(url):
            found[url] = SocialLink(url=url, platform=platform.name, icon=platform.icon)

    return list(found.values())


__all__ = [
    "EXCLUDED_KEYWORDS",
    "GENERIC_PATHS",
    "SOCIAL_PLATFORMS",
    "extract_social_links",
    "is_valid_social_link",
    "match_platform",
    "resolve_link",
]
