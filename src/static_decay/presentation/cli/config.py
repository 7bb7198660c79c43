"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

DEFAULT_LOG_LINES = 5
MAX_LOG_LINES = 20
_DEFAULT_DISTORTION = "on"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "StaticDecay"
        return Path.home() / "StaticDecay"
    return Path.home() / ".config" / "static_decay"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_log_lines(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_LOG_LINES
    return max(1, min(MAX_LOG_LINES, value))


def _normalize_distortion(value: object) -> str:
    return "off" if value == "off" else _DEFAULT_DISTORTION


def _defaults() -> Dict[str, object]:
    return {"log_lines": DEFAULT_LOG_LINES, "map_distortion": _DEFAULT_DISTORTION}


def load_config(path: Path | None = None) -> Dict[str, object]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return _defaults()
    if not isinstance(raw, dict):
        return _defaults()
    return {
        "log_lines": _normalize_log_lines(raw.get("log_lines")),
        "map_distortion": _normalize_distortion(raw.get("map_distortion")),
    }


def save_config(config: Dict[str, object], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "log_lines": _normalize_log_lines(config.get("log_lines")),
        "map_distortion": _normalize_distortion(config.get("map_distortion")),
    }
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
