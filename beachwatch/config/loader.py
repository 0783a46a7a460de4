"""YAML config loader with runtime set and save."""

import json
from pathlib import Path
from typing import Any

import yaml

from beachwatch.config.defaults import DEFAULT_BEACHES
from beachwatch.config.schema import BeachwatchConfig


def load_config(path: str | Path | None = None) -> BeachwatchConfig:
    """Load and validate config from a YAML file.

    A missing path or file yields the built-in defaults. If no beaches are
    specified in the YAML, injects DEFAULT_BEACHES.
    """
    raw: dict[str, Any] = {}
    if path is not None and Path(path).exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    if "beaches" not in raw or not raw["beaches"]:
        raw["beaches"] = [b.model_dump() for b in DEFAULT_BEACHES]

    return BeachwatchConfig(**raw)


def set_config_value(
    config: BeachwatchConfig, dotted_key: str, value: Any
) -> BeachwatchConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new BeachwatchConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target: Any = data
    for part in parts[:-1]:
        target = target[int(part)] if isinstance(target, list) else target[part]
    if not isinstance(target, dict) or parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    old_value = target[parts[-1]]
    if isinstance(old_value, bool) and isinstance(value, str):
        value = value.strip().lower() in ("1", "true", "yes", "on")
    elif isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return BeachwatchConfig(**data)


def save_config(config: BeachwatchConfig, path: str | Path) -> Path:
    """Write a validated config back to YAML, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(mode="json"), f, sort_keys=False)
    return path
