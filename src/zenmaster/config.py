# -*- coding: utf-8 -*-
"""Settings persistence and validation."""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any

from zenmaster.constants import (
    BREATH_INTERVAL_SECONDS,
    DEFAULT_HOTKEYS,
    DEFAULT_PROFILE_FILE,
    DEFAULT_SETTINGS_FILE,
    DEFAULT_WINDOW_SIZE,
    SWIPE_THRESHOLD,
)
from zenmaster.utils.file_utils import read_json_file, write_json_file


DEFAULT_CONFIG: dict[str, Any] = {
    "window": deepcopy(DEFAULT_WINDOW_SIZE),
    "navigation": {"swipe_threshold": SWIPE_THRESHOLD},
    "breathing": {"interval_seconds": BREATH_INTERVAL_SECONDS},
    "profile": {"store_file": DEFAULT_PROFILE_FILE},
    "hotkeys": deepcopy(DEFAULT_HOTKEYS),
}


class ConfigError(ValueError):
    """Raised when settings are invalid."""


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default config."""
    return deepcopy(DEFAULT_CONFIG)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _load_env_file(env_path: Path) -> dict[str, str]:
    """Load a simple .env file (KEY=VALUE)."""
    values: dict[str, str] = {}
    if not env_path.exists():
        return values

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if (value.startswith('"') and value.endswith('"')) or (
            value.startswith("'") and value.endswith("'")
        ):
            value = value[1:-1]
        values[key] = value
    return values


def _apply_env_overrides(config: dict[str, Any], env_values: dict[str, str]) -> dict[str, Any]:
    merged = deepcopy(config)
    profile_file = env_values.get("ZENMASTER_PROFILE_FILE", "").strip()
    if profile_file:
        merged.setdefault("profile", {})
        merged["profile"]["store_file"] = profile_file
    return merged


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_config(config: dict[str, Any]) -> None:
    """Validate fields the app relies on at startup."""
    interval = config.get("breathing", {}).get("interval_seconds")
    if not _is_number(interval) or not (0 < float(interval) <= 60):
        raise ConfigError("breathing.interval_seconds must be a number in range (0, 60]")

    threshold = config.get("navigation", {}).get("swipe_threshold")
    if not _is_number(threshold) or float(threshold) < 0:
        raise ConfigError("navigation.swipe_threshold must be a non-negative number")

    window = config.get("window", {})
    for key in ("width", "height"):
        size = window.get(key)
        if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
            raise ConfigError(f"window.{key} must be a positive int")

    store_file = config.get("profile", {}).get("store_file")
    if not isinstance(store_file, str) or not store_file.strip():
        raise ConfigError("profile.store_file must be a non-empty path")


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config from JSON and merge into defaults."""
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    env_values = _load_env_file(config_path.parent / ".env")
    if not config_path.exists():
        return _apply_env_overrides(get_default_config(), env_values)

    loaded = read_json_file(config_path)
    merged = _deep_merge(get_default_config(), loaded)
    merged = _apply_env_overrides(merged, env_values)
    validate_config(merged)
    return merged


def save_config(config: dict[str, Any], path: str | Path | None = None) -> Path:
    """Validate and save config as JSON."""
    validate_config(config)
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    return write_json_file(config_path, config)


def resolve_profile_path(config: dict[str, Any], settings_path: str | Path | None = None) -> Path:
    """Return the profile store path, relative paths anchored at the settings file."""
    store_file = Path(str(config.get("profile", {}).get("store_file", DEFAULT_PROFILE_FILE)))
    if store_file.is_absolute():
        return store_file
    base_dir = Path(settings_path or DEFAULT_SETTINGS_FILE).parent
    return base_dir / store_file
