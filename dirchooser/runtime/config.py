"""Persistent JSON config helpers.

Stores the UI theme name and the most recently selected directory.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from ..navigator.locations import APP_NAME

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


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
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write errors are logged and otherwise ignored; a chooser run never fails
    because its settings could not be stored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("cannot write config %s: %s", CONFIG_PATH, exc)


def _load_nonempty_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_nonempty_string("theme")


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def load_last_directory() -> Path | None:
    """Return the last selected directory, or ``None`` when unset/invalid."""
    value = _load_nonempty_string("last_directory")
    return Path(value) if value is not None else None


def save_last_directory(path: Path) -> None:
    """Remember ``path`` as the most recently selected directory."""
    config = load_config()
    config["last_directory"] = str(path)
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "save_config",
    "load_theme_name",
    "save_theme_name",
    "load_last_directory",
    "save_last_directory",
]
