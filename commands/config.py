"""Invocation arguments with optional YAML defaults."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field

from recordstore_core.errors import ConfigError


ADD = "add"
LIST = "list"
FIND_BY_ID = "findById"
REMOVE = "remove"

OPERATIONS = (ADD, LIST, FIND_BY_ID, REMOVE)

# YAML key -> Arguments field name
_CONFIG_KEYS = {
    "operation": "operation",
    "fileName": "file_name",
    "item": "item",
    "id": "id",
}


class Arguments(BaseModel):
    """Flag values for one invocation, built once and never mutated."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    operation: str = ""
    file_name: str = Field(default="", alias="fileName")
    item: str = ""
    id: str = ""

    @classmethod
    def from_flags(
        cls,
        defaults: Mapping[str, str] | None = None,
        **flags: str | None,
    ) -> "Arguments":
        """Merge explicit flags over defaults; unset flags are None."""
        values: dict[str, str] = dict(defaults or {})
        for key, value in flags.items():
            if value is not None:
                values[key] = value
        return cls.model_validate(values)


def load_config(yaml_path: str | Path) -> dict[str, str]:
    """Load flag defaults from a YAML file.

    Args:
        yaml_path: Path to a YAML mapping with any of the keys
            operation, fileName, item, id

    Returns:
        Mapping of Arguments field name to string value

    Raises:
        ConfigError: If the file is missing, unreadable or not a mapping
    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise ConfigError(f"Config file not found: {yaml_path}")

    try:
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Invalid config file {yaml_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {yaml_path}")

    unknown = sorted(str(key) for key in data if key not in _CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config keys in {yaml_path}: {', '.join(unknown)}")

    return {_CONFIG_KEYS[key]: _as_flag_value(key, value) for key, value in data.items()}


def _as_flag_value(key: str, value: object) -> str:
    # item may be written as a nested YAML mapping instead of JSON text
    if key == "item" and isinstance(value, dict):
        return json.dumps(value)
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ConfigError(f"Config key {key} must be a scalar")
    return str(value)
