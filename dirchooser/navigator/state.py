"""Immutable state, configuration, and result types for the navigator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..listing import DirectoryEntry


@dataclass(frozen=True)
class ChooserConfig:
    """Construction-time chooser options."""

    initial_directory: Path | str | None = None


@dataclass(frozen=True)
class NavigatorState:
    """Snapshot of one browsed directory.

    ``entries`` is the listing taken when the snapshot was produced; it is
    never patched, a new snapshot replaces the old one on every transition.
    """

    current_path: Path
    entries: tuple[DirectoryEntry, ...] = ()
    can_navigate_up: bool = False


@dataclass(frozen=True)
class Selected:
    """Terminal result carrying the chosen directory."""

    path: Path


@dataclass(frozen=True)
class Cancelled:
    """Terminal result for an abandoned interaction."""


ChooserResult = Selected | Cancelled


__all__ = [
    "ChooserConfig",
    "NavigatorState",
    "Selected",
    "Cancelled",
    "ChooserResult",
]
