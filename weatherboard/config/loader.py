"""YAML config loader with environment override and dotted-key lookup."""

import os
from pathlib import Path
from typing import Any

import yaml

from weatherboard.config.defaults import API_KEY_ENV_VAR
from weatherboard.config.schema import AppConfig


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    With no path, or an empty file, the defaults apply. A path that does
    not exist raises FileNotFoundError. The API key from $CWA_API_KEY wins
    over the one in the file.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

    env_key = os.getenv(API_KEY_ENV_VAR)
    if env_key:
        raw.setdefault("feed", {})
        raw["feed"]["api_key"] = env_key

    return AppConfig(**raw)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'schedule.refresh_interval_minutes'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def redacted_dump(config: AppConfig) -> str:
    """JSON dump of the config with the API key masked."""
    feed = config.feed
    if feed.api_key:
        masked = feed.api_key[:4] + "****"
        config = config.model_copy(
            update={"feed": feed.model_copy(update={"api_key": masked})}
        )
    return config.model_dump_json(indent=2)
