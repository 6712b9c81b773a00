"""Start-directory resolution and application directory providers."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "dirchooser"


def _as_directory(candidate: Path | str | None) -> Path | None:
    """Return ``candidate`` as an absolute path when it is an existing directory."""
    if candidate is None:
        return None
    raw = str(candidate)
    if not raw:
        return None
    path = Path(os.path.abspath(os.path.expanduser(raw)))
    return path if path.is_dir() else None


def default_directory() -> Path | None:
    """Return the per-user application data directory when it exists.

    The directory is looked up, never created.
    """
    return _as_directory(user_data_dir(APP_NAME, appauthor=False))


def fallback_directory() -> Path:
    """Return an application-private directory that always exists.

    Prefers the user's home directory and falls back to the filesystem root
    of the current working directory.
    """
    try:
        home = _as_directory(Path.home())
    except RuntimeError:
        home = None
    if home is not None:
        return home
    try:
        return Path(Path(os.getcwd()).anchor or os.sep)
    except OSError:
        return Path(os.sep)


def first_existing_directory(candidates: Iterable[Path | str | None]) -> Path | None:
    """Return the first candidate that is an existing directory."""
    for candidate in candidates:
        directory = _as_directory(candidate)
        if directory is not None:
            return directory
    return None


__all__ = [
    "APP_NAME",
    "default_directory",
    "fallback_directory",
    "first_existing_directory",
]
