# -*- coding: utf-8 -*-
"""Settings persistence and validation."""

from __future__ import annotations

import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Mapping

from gameimage_wizard.constants import (
    BACKEND_COMMAND,
    DEFAULT_SETTINGS_FILE,
    DEFAULT_YEAR,
    EXPECTED_BACKEND_VERSION,
    HEARTBEAT_INTERVAL_MS,
    WINE_DISTS,
    YEAR_FIRST,
    YEAR_LAST,
)
from gameimage_wizard.utils.file_utils import read_json_file, write_json_file


DEFAULT_CONFIG: dict[str, Any] = {
    "backend": {"command": BACKEND_COMMAND, "expected_version": EXPECTED_BACKEND_VERSION},
    "build_dir": "",
    "heartbeat_ms": HEARTBEAT_INTERVAL_MS,
    "wine": {"dist": "default", "default_year": DEFAULT_YEAR},
    "ui": {
        "width": 640,
        "height": 540,
        "font_path": "/usr/share/fonts/noto/NotoSans-Regular.ttf",
        "font_size": 12,
        "icon_path": "",
    },
    "logging": {"dir": "logs"},
}

# Environment variable -> dotted config key
ENV_OVERRIDES = {
    "GIMG_DIR": "build_dir",
    "GIMG_BACKEND": "backend.command",
    "GIMG_WINE_DIST": "wine.dist",
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


def _apply_env_overrides(config: dict[str, Any], env_values: Mapping[str, str]) -> dict[str, Any]:
    """Apply environment-based overrides to runtime config."""
    merged = deepcopy(config)
    for env_name, dotted in ENV_OVERRIDES.items():
        value = env_values.get(env_name, "").strip()
        if not value:
            continue
        *parents, leaf = dotted.split(".")
        node = merged
        for parent in parents:
            node = node.setdefault(parent, {})
        node[leaf] = value
    return merged


def validate_config(config: dict[str, Any]) -> None:
    """Validate the fields the wizard depends on."""
    command = config.get("backend", {}).get("command")
    if not isinstance(command, str) or not command.strip():
        raise ConfigError("backend.command must be a non-empty string")

    expected = config.get("backend", {}).get("expected_version")
    if not isinstance(expected, str) or not expected.strip():
        raise ConfigError("backend.expected_version must be a non-empty string")

    heartbeat = config.get("heartbeat_ms")
    if not isinstance(heartbeat, int) or not (1 <= heartbeat <= 10_000):
        raise ConfigError("heartbeat_ms must be an int in range 1..10000")

    dist = config.get("wine", {}).get("dist")
    if dist not in WINE_DISTS:
        raise ConfigError(f"wine.dist must be one of {', '.join(WINE_DISTS)}")

    year = config.get("wine", {}).get("default_year")
    if not isinstance(year, int) or not (YEAR_FIRST <= year <= YEAR_LAST):
        raise ConfigError(f"wine.default_year must be an int in range {YEAR_FIRST}..{YEAR_LAST}")


def load_config(path: str | Path | None = None, environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Load config from JSON and merge into defaults.

    Values from a ``.env`` file next to the settings file are applied first,
    the process environment wins over both.
    """
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    env_values = _load_env_file(config_path.parent / ".env")
    env_values.update(os.environ if environ is None else environ)

    if config_path.exists():
        merged = _deep_merge(get_default_config(), read_json_file(config_path))
    else:
        merged = get_default_config()
    merged = _apply_env_overrides(merged, env_values)
    validate_config(merged)
    return merged


def save_config(config: dict[str, Any], path: str | Path | None = None) -> Path:
    """Validate and save config as JSON."""
    validate_config(config)
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    write_json_file(config_path, config)
    return config_path
