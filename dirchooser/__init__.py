"""Public package surface for dirchooser.

Exports the navigator engine and its types for programmatic use, plus
``main`` for CLI invocation.
"""

from __future__ import annotations

import logging

from .listing import DirectoryEntry, DirectoryLister
from .navigator import (
    Cancelled,
    ChooserConfig,
    ChooserError,
    ChooserResult,
    ChooserTerminatedError,
    InvalidCommandError,
    NavigatorEngine,
    NavigatorState,
    Selected,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "Cancelled",
    "ChooserConfig",
    "ChooserError",
    "ChooserResult",
    "ChooserTerminatedError",
    "DirectoryEntry",
    "DirectoryLister",
    "InvalidCommandError",
    "NavigatorEngine",
    "NavigatorState",
    "Selected",
    "main",
]
