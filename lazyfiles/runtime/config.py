"""JSON config helpers.

Supplies default root candidates, the Pygments style, and the log level.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazyfiles"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

_LOG_LEVEL_NAMES = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def default_root_candidates() -> list[Path]:
    """Home directory first, then the working directory."""
    return [Path.home(), Path.cwd()]


def load_root_candidates() -> list[Path]:
    """Return configured root candidates, or the defaults when unset.

    Non-string and empty items are dropped; an empty result falls back to the
    defaults.
    """
    value = load_config().get("root_candidates")
    if not isinstance(value, list):
        return default_root_candidates()
    candidates = [Path(item).expanduser() for item in value if isinstance(item, str) and item.strip()]
    return candidates or default_root_candidates()


def load_style_name() -> str | None:
    """Load configured Pygments style name, returning ``None`` when unset/invalid."""
    value = load_config().get("style")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_log_level() -> int | None:
    """Return the configured logging level, or ``None`` when unset/invalid."""
    value = load_config().get("log_level")
    if not isinstance(value, str):
        return None
    name = value.strip().upper()
    if name not in _LOG_LEVEL_NAMES:
        return None
    return getattr(logging, name)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "default_root_candidates",
    "load_root_candidates",
    "load_style_name",
    "load_log_level",
]
