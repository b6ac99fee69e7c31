from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..errors import ConfigError
from ..models.options import (
    DEFAULT_HEADER_LABEL,
    DEFAULT_KEY_COLUMN,
    DEFAULT_SEPARATOR,
    CrossRefOptions,
)

"""Config loader.

- Load YAML (default ``config/crossref.yml``, or ``$CROSSREF_CONFIG``)
- Validate against config_schema.json shipped with the package
- Apply defaults for every missing key
"""

__all__ = [
    "ConfigError",
    "CrossRefConfig",
    "DEFAULT_CONFIG_PATH",
    "CONFIG_ENV_VAR",
    "default_config",
    "load_config",
    "resolve_config",
]

SCHEMA_PATH = Path(__file__).parent / "config_schema.json"
DEFAULT_CONFIG_PATH = Path("config/crossref.yml")
CONFIG_ENV_VAR = "CROSSREF_CONFIG"


@dataclass(frozen=True)
class CrossRefConfig:
    key_column: str = DEFAULT_KEY_COLUMN
    sheet_key_column: str | None = None
    header_label: str = DEFAULT_HEADER_LABEL
    separator: str = DEFAULT_SEPARATOR
    sheet_name: str | None = None  # Worksheet to update; None -> active sheet

    def to_options(self) -> CrossRefOptions:
        return CrossRefOptions(
            key_column=self.key_column,
            sheet_key_column=self.sheet_key_column,
            header_label=self.header_label,
            separator=self.separator,
        )


def default_config() -> CrossRefConfig:
    return CrossRefConfig()


def _validate_config_schema(data: Any) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: the schema file is missing or unreadable, or the data
            fails validation (unknown keys, wrong types).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")
    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> CrossRefConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e

    _validate_config_schema(data)

    return CrossRefConfig(
        key_column=data.get("key_column", DEFAULT_KEY_COLUMN),
        sheet_key_column=data.get("sheet_key_column"),
        header_label=data.get("header_label", DEFAULT_HEADER_LABEL),
        separator=data.get("separator", DEFAULT_SEPARATOR),
        sheet_name=data.get("sheet_name"),
    )


def resolve_config(path: Path | None = None) -> CrossRefConfig:
    """Load the config from an explicit path, $CROSSREF_CONFIG, or the default path.

    An explicit path (argument or environment variable) must exist; a missing
    default file just means defaults.
    """
    if path is None and os.getenv(CONFIG_ENV_VAR):
        path = Path(os.environ[CONFIG_ENV_VAR])
    if path is not None:
        return load_config(path)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return default_config()
