"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

SAVE_DIR_ENV = "DELVE_SAVE_DIR"
_DEFAULT_START_AREA = "area_01"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "Delve"
        return Path.home() / "Delve"
    return Path.home() / ".config" / "delve"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _default_config() -> Dict[str, str]:
    return {
        "save_dir": str(get_user_data_dir() / "saves"),
        "start_area": _DEFAULT_START_AREA,
    }


def _normalize(raw: Dict[str, object]) -> Dict[str, str]:
    config = _default_config()
    for key in config:
        value = raw.get(key)
        if isinstance(value, str) and value.strip():
            config[key] = value.strip()
    return config


def load_config(path: Path | None = None) -> Dict[str, str]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return _default_config()
    if not isinstance(raw, dict):
        return _default_config()
    return _normalize(raw)


def save_config(config: Dict[str, str], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = _normalize(dict(config))
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


def get_save_dir(config: Dict[str, str] | None = None) -> Path:
    """Return the save directory; the DELVE_SAVE_DIR environment variable wins."""
    override = os.environ.get(SAVE_DIR_ENV)
    if override:
        return Path(override)
    return Path((config or load_config())["save_dir"])
