"""Persistent JSON config helpers.

Stores listing defaults: hidden-entry display, detail mode, theme, time column.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from .formatting import TIME_FIELDS

logger = logging.getLogger(__name__)

APP_NAME = "dirlist"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_TIME_FIELD = "modified"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("Ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and ignored so listing never fails because
    config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.debug("Cannot write config %s: %s", CONFIG_PATH, exc)


def _load_bool(key: str) -> bool:
    """Only explicit booleans count; anything else reads as ``False``."""
    value = load_config().get(key)
    return value if isinstance(value, bool) else False


def _save_value(key: str, value: object) -> None:
    config = load_config()
    config[key] = value
    save_config(config)


def load_show_hidden() -> bool:
    """Return persisted hidden-entry display preference."""
    return _load_bool("show_hidden")


def save_show_hidden(show_hidden: bool) -> None:
    _save_value("show_hidden", bool(show_hidden))


def load_detailed() -> bool:
    """Return persisted detail-mode preference."""
    return _load_bool("detailed")


def save_detailed(detailed: bool) -> None:
    _save_value("detailed", bool(detailed))


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    _save_value("theme", stripped)


def load_time_field() -> str:
    """Return the persisted detail-row time column, defaulting to modified time."""
    value = load_config().get("time_field")
    if isinstance(value, str) and value in TIME_FIELDS:
        return value
    return DEFAULT_TIME_FIELD


def save_time_field(time_field: str) -> None:
    if time_field not in TIME_FIELDS:
        return
    _save_value("time_field", time_field)
