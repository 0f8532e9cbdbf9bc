from __future__ import annotations

from extract_info.errors import NoActivePageError, RestrictedPageError, TargetUnreachableError
from extract_info.models import PageSnapshot, ResultBundle, ScanResponse, SocialLink
from extract_info.orchestrator.service import ScanService
from extract_info.ui.presenter import (
    EXTRACTION_FAILED_MESSAGE,
    NO_ACTIVE_PAGE_MESSAGE,
    RESTRICTED_PAGE_MESSAGE,
    UNREACHABLE_PAGE_MESSAGE,
    build_sections,
    describe_failed_response,
    describe_scan_error,
    page_status,
    perform_scan,
    shorten_url_path,
)


class StaticSource:
    name = "static"

    def __init__(self, page: PageSnapshot) -> None:
        self.page = page

    def snapshot(self, target: str) -> PageSnapshot:
        return self.page

    def close(self) -> None:
        return None


class BrokenSource(StaticSource):
    def snapshot(self, target: str) -> PageSnapshot:
        raise TargetUnreachableError(target, "tab closed")


def _bundle() -> ResultBundle:
    return ResultBundle(
        emails=("team@acme.test",),
        phones=(),
        socials=(
            SocialLink(
                url="https://www.linkedin.com/company/acme-widgets-international-holdings-limited",
                platform="LinkedIn",
                icon="💼",
            ),
        ),
        page_url="https://acme.test/",
        page_title="",
        timestamp="2026-10-19T08:30:00.000Z",
    )


def test_build_sections_lists_categories_in_display_order() -> None:
    sections = build_sections(_bundle())

    assert [section.key for section in sections] == ["emails", "phones", "socials"]
    assert [section.heading for section in sections] == [
        "📧 Emails (1)",
        "📞 Phone Numbers (0)",
        "🌐 Social Links (1)",
    ]
    assert sections[1].empty_message == "No phone numbers found"


def test_social_items_show_short_path_but_copy_full_url() -> None:
    item = build_sections(_bundle())[2].items[0]

    assert item.text == "/company/acme-widgets-international-hold..."
    assert item.copy_value == "https://www.linkedin.com/company/acme-widgets-international-holdings-limited"
    assert item.url == item.copy_value
    assert item.platform == "LinkedIn"
    assert item.tooltip == item.copy_value
    assert item.icon == "💼"


def test_shorten_url_path_keeps_short_paths() -> None:
    assert shorten_url_path("https://github.com/acme") == "/acme"
    assert shorten_url_path("https://github.com") == ""


def test_page_status_falls_back_for_untitled_pages() -> None:
    assert page_status(_bundle()) == "Scanned: Unknown Page"
    assert page_status(ResultBundle(page_title="Acme")) == "Scanned: Acme"


def test_describe_scan_error_maps_transport_failures() -> None:
    assert describe_scan_error(NoActivePageError()) == NO_ACTIVE_PAGE_MESSAGE
    assert describe_scan_error(RestrictedPageError("chrome://settings")) == RESTRICTED_PAGE_MESSAGE
    assert describe_scan_error(TargetUnreachableError("https://acme.test/")) == UNREACHABLE_PAGE_MESSAGE
    assert describe_scan_error(ValueError("odd")) == "Error scanning page: odd"


def test_describe_failed_response_uses_error_text() -> None:
    assert describe_failed_response(ScanResponse.failed("boom")) == "boom"
    assert describe_failed_response(ScanResponse.failed("")) == EXTRACTION_FAILED_MESSAGE


def test_perform_scan_returns_bundle() -> None:
    page = PageSnapshot(url="https://acme.test/", title="Acme", links=("mailto:team@acme.test",))
    bundle, error = perform_scan(ScanService(StaticSource(page)), "https://acme.test/")

    assert error is None
    assert bundle is not None
    assert bundle.emails == ("team@acme.test",)


def test_perform_scan_reports_transport_errors() -> None:
    service = ScanService(BrokenSource(PageSnapshot()))

    assert perform_scan(service, "https://acme.test/") == (None, UNREACHABLE_PAGE_MESSAGE)
    assert perform_scan(service, "") == (None, NO_ACTIVE_PAGE_MESSAGE)
    assert perform_scan(service, "edge://settings") == (None, RESTRICTED_PAGE_MESSAGE)


def test_perform_scan_reports_extraction_failures(monkeypatch) -> None:
    def explode(*_args, **_kwargs):
        raise RuntimeError("regex engine exploded")

    monkeypatch.setattr("extract_info.orchestrator.service.extract_emails", explode)
    service = ScanService(StaticSource(PageSnapshot(url="https://acme.test/")))

    assert perform_scan(service, "https://acme.test/") == (None, "regex engine exploded")
