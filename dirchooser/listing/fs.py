"""Filesystem queries producing filtered, sorted child-directory listings."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from .types import DirectoryEntry

logger = logging.getLogger(__name__)

_FILE_ATTRIBUTE_HIDDEN = getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0x2)


def is_hidden_entry(entry: os.DirEntry) -> bool:
    """Return whether the filesystem flags ``entry`` as hidden.

    Dot-prefixed names are hidden everywhere. On Windows the hidden file
    attribute is honored as well.
    """
    if entry.name.startswith("."):
        return True
    if os.name != "nt":
        return False
    try:
        attributes = entry.stat(follow_symlinks=False).st_file_attributes
    except (OSError, AttributeError):
        return False
    return bool(attributes & _FILE_ATTRIBUTE_HIDDEN)


def entry_sort_key(entry: DirectoryEntry) -> tuple[str, str]:
    """Case-insensitive name order with exact-name tie-break."""
    return (entry.name.lower(), entry.name)


def list_child_directories(directory: Path) -> tuple[DirectoryEntry, ...]:
    """List visible child directories of ``directory`` in display order.

    Files and hidden entries are skipped. Symlinks count as directories when
    their target is one. An unreadable directory yields an empty tuple; an
    entry whose type cannot be determined is dropped.
    """
    base = Path(os.path.abspath(directory))
    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(base) as children:
            for child in children:
                if is_hidden_entry(child):
                    continue
                try:
                    is_dir = child.is_dir()
                except OSError:
                    continue
                if not is_dir:
                    continue
                entries.append(DirectoryEntry(name=child.name, path=base / child.name))
    except OSError as exc:
        logger.debug("cannot list %s: %s", base, exc)
        return ()

    entries.sort(key=entry_sort_key)
    return tuple(entries)


class DirectoryLister:
    """Synchronous child-directory lister used by the navigator engine."""

    def list(self, path: Path | str) -> tuple[DirectoryEntry, ...]:
        """Return the visible child directories of ``path``."""
        return list_child_directories(Path(path))


__all__ = [
    "DirectoryLister",
    "entry_sort_key",
    "is_hidden_entry",
    "list_child_directories",
]
