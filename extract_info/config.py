"""Configuration helpers for the page scanner."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

LOGGER = logging.getLogger(__name__)

CONFIG_ENV_VAR = "EXTRACT_INFO_CONFIG"
DEFAULT_SOURCE_TYPE = "playwright"


class ConfigurationError(RuntimeError):
    """Raised when configuration files are missing or malformed."""


_SUPPORTED_EXTENSIONS = {".json", ".yaml", ".yml"}


def load_configuration(path: str | Path) -> Dict[str, Any]:
    """Load configuration data from a JSON or YAML file."""

    file_path = Path(path)
    if not file_path.exists():
        raise ConfigurationError(f"Configuration file '{file_path}' was not found")

    if file_path.suffix.lower() not in _SUPPORTED_EXTENSIONS:
        raise ConfigurationError(
            f"Unsupported configuration format '{file_path.suffix}'. Supported extensions: {sorted(_SUPPORTED_EXTENSIONS)}"
        )

    text = file_path.read_text(encoding="utf-8")
    try:
        if file_path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Configuration file '{file_path}' could not be parsed: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file '{file_path}' must contain a mapping at the top level")
    return data


def get_source_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Return the ``source`` section, defaulting the type when it is omitted."""

    source = config.get("source") or {}
    if not isinstance(source, dict):
        raise ConfigurationError("The 'source' configuration entry must be a mapping")
    if not source.get("type") and not source.get("class"):
        LOGGER.debug("No page source type configured, defaulting to %s", DEFAULT_SOURCE_TYPE)
        source = {**source, "type": DEFAULT_SOURCE_TYPE}
    options = source.get("options", {})
    if not isinstance(options, dict):
        raise ConfigurationError("The 'source.options' configuration entry must be a mapping")
    return source


def get_restricted_prefixes(config: Dict[str, Any], default: Tuple[str, ...]) -> Tuple[str, ...]:
    prefixes = config.get("restricted_prefixes")
    if prefixes is None:
        return default
    if isinstance(prefixes, str) or not all(isinstance(prefix, str) for prefix in prefixes):
        raise ConfigurationError("'restricted_prefixes' must be a list of strings")
    return tuple(prefixes)
