"""Domain datatypes for directory listings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DirectoryEntry:
    """One navigable child directory of a listed parent."""

    name: str
    path: Path


__all__ = [
    "DirectoryEntry",
]
