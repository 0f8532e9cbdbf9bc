from __future__ import annotations

import json

import pytest

from extract_info.config import (
    DEFAULT_SOURCE_TYPE,
    ConfigurationError,
    get_restricted_prefixes,
    get_source_config,
    load_configuration,
)


def test_load_configuration_reads_json(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"source": {"type": "html"}}), encoding="utf-8")

    assert load_configuration(path) == {"source": {"type": "html"}}


def test_load_configuration_reads_yaml(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "source:\n  type: selenium\n  options:\n    headless: false\nrestricted_prefixes:\n  - 'about:'\n",
        encoding="utf-8",
    )

    config = load_configuration(path)

    assert config["source"] == {"type": "selenium", "options": {"headless": False}}
    assert config["restricted_prefixes"] == ["about:"]


def test_load_configuration_treats_empty_yaml_as_empty_mapping(tmp_path) -> None:
    path = tmp_path / "config.yml"
    path.write_text("", encoding="utf-8")

    assert load_configuration(path) == {}


@pytest.mark.parametrize(
    "name, content",
    [
        ("config.json", "{not json"),
        ("config.yaml", "source: [unclosed"),
        ("config.json", "[1, 2]"),
        ("config.toml", "source = 1"),
    ],
)
def test_load_configuration_rejects_bad_files(tmp_path, name: str, content: str) -> None:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_configuration(path)


def test_load_configuration_requires_existing_file(tmp_path) -> None:
    with pytest.raises(ConfigurationError, match="was not found"):
        load_configuration(tmp_path / "absent.json")


def test_get_source_config_defaults_type() -> None:
    assert get_source_config({}) == {"type": DEFAULT_SOURCE_TYPE}
    assert get_source_config({"source": {"type": "html"}}) == {"type": "html"}


def test_get_source_config_validates_sections() -> None:
    with pytest.raises(ConfigurationError):
        get_source_config({"source": "html"})
    with pytest.raises(ConfigurationError):
        get_source_config({"source": {"type": "html", "options": ["headless"]}})


def test_get_restricted_prefixes() -> None:
    default = ("chrome://",)

    assert get_restricted_prefixes({}, default) == default
    assert get_restricted_prefixes({"restricted_prefixes": ["about:", "edge://"]}, default) == ("about:", "edge://")
    with pytest.raises(ConfigurationError):
        get_restricted_prefixes({"restricted_prefixes": "about:"}, default)
