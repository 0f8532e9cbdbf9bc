from __future__ import annotations

import pytest

from extract_info.extraction.socials import (
    SOCIAL_PLATFORMS,
    extract_social_links,
    is_valid_social_link,
    match_platform,
    resolve_link,
)
from extract_info.models import SocialLink


def test_platform_table_order_is_fixed() -> None:
    assert [platform.name for platform in SOCIAL_PLATFORMS] == [
        "Facebook",
        "LinkedIn",
        "Twitter",
        "X",
        "Instagram",
        "TikTok",
        "YouTube",
        "Pinterest",
        "GitHub",
    ]


def test_resolve_link_uses_page_origin_for_relative_targets() -> None:
    assert resolve_link("brand", "https://example.com/dir/page.html") == "https://example.com/brand"
    assert resolve_link("/brand", "https://www.facebook.com/pages/x") == "https://www.facebook.com/brand"
    assert resolve_link("//github.com/acme", "https://example.com/") == "https://github.com/acme"


def test_resolve_link_canonicalises_absolute_urls() -> None:
    assert resolve_link("https://Facebook.COM", "") == "https://facebook.com/"
    assert resolve_link("HTTPS://github.com:443/acme", "") == "https://github.com/acme"
    assert resolve_link("  https://x.com/acme  ", "") == "https://x.com/acme"


@pytest.mark.parametrize(
    "href, page_url",
    [
        ("", "https://example.com/"),
        ("/relative", ""),
        ("/relative", "file:///tmp/page.html"),
        ("https://facebook.com:notaport/acme", ""),
        ("https:///nohost", ""),
    ],
)
def test_resolve_link_skips_unusable_targets(href: str, page_url: str) -> None:
    assert resolve_link(href, page_url) is None


def test_match_platform_uses_first_matching_domain() -> None:
    assert match_platform("www.facebook.com").name == "Facebook"
    assert match_platform("M.X.COM").name == "X"
    assert match_platform("github.com").name == "GitHub"
    assert match_platform("example.com") is None
    assert match_platform("") is None


def test_match_platform_matches_domain_anywhere_in_hostname() -> None:
    assert match_platform("facebook.com.cdn.example.net").name == "Facebook"


@pytest.mark.parametrize(
    "url",
    [
        "https://www.facebook.com/somebrand",
        "https://www.linkedin.com/company/acme",
        "https://github.com/someuser",
        "https://www.youtube.com/@acme",
    ],
)
def test_is_valid_social_link_accepts_profiles(url: str) -> None:
    assert is_valid_social_link(url)


@pytest.mark.parametrize(
    "url",
    [
        "https://facebook.com/",
        "https://facebook.com",
        "https://facebook.com/sharer/sharer.php?u=https://acme.test",
        "https://twitter.com/intent/tweet?text=hi",
        "https://linkedin.com/login",
        "https://twitter.com/about",
        "https://www.instagram.com/Explore/tags",
        "https://www.pinterest.com//",
    ],
)
def test_is_valid_social_link_rejects_widgets_and_navigation(url: str) -> None:
    assert not is_valid_social_link(url)


def test_extract_social_links_builds_records() -> None:
    links = extract_social_links(["https://github.com/someuser"], "https://example.com/")

    assert links == [SocialLink(url="https://github.com/someuser", platform="GitHub", icon="🐙")]


def test_extract_social_links_deduplicates_by_resolved_url() -> None:
    links = extract_social_links(
        ["https://github.com/acme", "https://x.com/acme", "https://GitHub.com/acme"],
        "https://example.com/",
    )

    assert [link.url for link in links] == ["https://github.com/acme", "https://x.com/acme"]


def test_extract_social_links_resolves_relative_links_on_social_sites() -> None:
    links = extract_social_links(["/brand", "mailto:hi@instagram.com", ""], "https://www.instagram.com/")

    assert links == [SocialLink(url="https://www.instagram.com/brand", platform="Instagram", icon="📷")]


def test_extract_social_links_ignores_other_sites() -> None:
    assert extract_social_links(["https://example.com/team", "/about"], "https://example.com/") == []


def test_resolve_link_treats_backslashes_as_path_separators() -> None:
    assert resolve_link("https://github.com\\acme", "") == "https://github.com/acme"
    assert resolve_link("\\brand", "https://www.facebook.com/") == "https://www.facebook.com/brand"
    assert resolve_link("https://x.com/acme?q=a\\b", "") == "https://x.com/acme?q=a\\b"


def test_resolve_link_percent_encodes_like_a_browser() -> None:
    assert resolve_link("https://x.com/acme?q=a b", "") == "https://x.com/acme?q=a%20b"
    assert resolve_link("https://github.com/a|b", "") == "https://github.com/a|b"
    assert resolve_link("https://github.com/a b", "") == "https://github.com/a%20b"


def test_resolve_link_drops_credentials_from_page_origin() -> None:
    assert resolve_link("/brand", "https://user:pw@www.facebook.com/") == "https://www.facebook.com/brand"


def test_extract_social_links_keeps_backslashed_profiles() -> None:
    links = extract_social_links(["https://github.com\\acme"], "https://example.com/")

    assert links == [SocialLink(url="https://github.com/acme", platform="GitHub", icon="🐙")]
