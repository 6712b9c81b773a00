"""Directory listing primitives for the chooser.

This package contains non-UI listing code:
- the immutable child-directory entry datatype
- filesystem scanning with hidden/file filtering and stable ordering
"""

from __future__ import annotations

from .fs import DirectoryLister, entry_sort_key, is_hidden_entry, list_child_directories
from .types import DirectoryEntry

__all__ = [
    "DirectoryEntry",
    "DirectoryLister",
    "entry_sort_key",
    "is_hidden_entry",
    "list_child_directories",
]
