"""YAML config loader and saver with runtime get/set by dotted key."""

import json
from pathlib import Path
from typing import Any

import yaml

from shoresquad.config.schema import AdvisoryConfig


def load_config(path: str | Path) -> AdvisoryConfig:
    """Load and validate config from a YAML file.

    An empty file yields the built-in defaults.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return AdvisoryConfig(**raw)


def save_config(config: AdvisoryConfig, path: str | Path) -> None:
    """Write the config back to a YAML file."""
    with open(Path(path), "w", encoding="utf-8") as f:
        yaml.safe_dump(
            config.model_dump(mode="json"), f, sort_keys=False, allow_unicode=True
        )


def get_config_value(config: AdvisoryConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'scoring.base_score'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif isinstance(obj, dict):
            obj = obj[part]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(
    config: AdvisoryConfig, dotted_key: str, value: Any
) -> AdvisoryConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new AdvisoryConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target[int(part)] if isinstance(target, list) else target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    # Attempt type coercion for common cases
    old_value = target.get(parts[-1])
    if isinstance(old_value, bool) and isinstance(value, str):
        value = value.lower() in ("1", "true", "yes", "on")
    elif isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    elif isinstance(old_value, list) and isinstance(value, str):
        value = [v.strip() for v in value.split(",") if v.strip()]
    target[parts[-1]] = value
    return AdvisoryConfig(**data)
