from __future__ import annotations

import pytest

from extract_info.config import ConfigurationError
from extract_info.factory import build_page_source, build_scan_service
from extract_info.orchestrator.service import DEFAULT_RESTRICTED_PREFIXES
from extract_info.sources.html import HtmlPageSource


def test_build_page_source_by_type() -> None:
    source = build_page_source({"source": {"type": "HTML", "options": {"base_url": "https://acme.test/"}}})

    assert isinstance(source, HtmlPageSource)
    assert source.config.base_url == "https://acme.test/"


def test_build_page_source_by_class_path() -> None:
    source = build_page_source({"source": {"class": "extract_info.sources.html.HtmlPageSource"}})

    assert isinstance(source, HtmlPageSource)


@pytest.mark.parametrize(
    "source",
    [
        {"type": "carrier-pigeon"},
        {"class": "NoModulePath"},
        {"class": "extract_info.missing_module.Source"},
        {"class": "extract_info.sources.html.MissingSource"},
        {"type": "html", "options": {"bogus": True}},
    ],
)
def test_build_page_source_rejects_bad_configuration(source) -> None:
    with pytest.raises(ConfigurationError):
        build_page_source({"source": source})


def test_build_scan_service_applies_restricted_prefixes(sample_html_file) -> None:
    service = build_scan_service({"source": {"type": "html"}, "restricted_prefixes": ["file:///nowhere/"]})

    assert isinstance(service.source, HtmlPageSource)
    assert service.scan_page(str(sample_html_file)).success


def test_build_scan_service_uses_default_prefixes() -> None:
    service = build_scan_service({"source": {"type": "html"}})

    assert service._restricted_prefixes == DEFAULT_RESTRICTED_PREFIXES
