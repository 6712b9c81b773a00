"""Directory navigation state machine.

The engine owns exactly one current :class:`NavigatorState` and replaces it
wholesale on every navigation command. ``select_current`` and ``cancel`` end
the interaction with a single :data:`ChooserResult`; afterwards every command
is rejected.

Filesystem trouble never escapes: unreadable directories list as empty, and a
target directory that disappeared between commands is swapped for the
application-private fallback directory.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from ..listing import DirectoryEntry, DirectoryLister
from .errors import ChooserTerminatedError, InvalidCommandError
from .locations import default_directory, fallback_directory, first_existing_directory
from .state import Cancelled, ChooserConfig, ChooserResult, NavigatorState, Selected

logger = logging.getLogger(__name__)


class Lister(Protocol):
    def list(self, path: Path) -> tuple[DirectoryEntry, ...]: ...


def has_parent(path: Path) -> bool:
    """Return whether ``path`` has a parent directory distinct from itself."""
    return path.parent != path


class NavigatorEngine:
    """Caller-driven directory chooser, one level at a time."""

    def __init__(
        self,
        config: ChooserConfig | None = None,
        *,
        lister: Lister | None = None,
        default_directory_provider: Callable[[], Path | None] = default_directory,
        fallback_directory_provider: Callable[[], Path] = fallback_directory,
        on_state_change: Callable[[NavigatorState], None] | None = None,
        on_result: Callable[[ChooserResult], None] | None = None,
    ) -> None:
        """Resolve the start directory and publish the first state."""
        config = config or ChooserConfig()
        self._lister = lister if lister is not None else DirectoryLister()
        self._fallback_directory_provider = fallback_directory_provider
        self._on_state_change = on_state_change
        self._on_result = on_result
        self._result: ChooserResult | None = None

        start = first_existing_directory((config.initial_directory, default_directory_provider()))
        if start is None:
            start = self._fallback()
        logger.debug("chooser starting in %s (requested %s)", start, config.initial_directory)
        self._state = self._build_state(start)
        self._publish(self._state)

    @property
    def state(self) -> NavigatorState:
        return self._state

    @property
    def result(self) -> ChooserResult | None:
        return self._result

    @property
    def is_terminated(self) -> bool:
        return self._result is not None

    def _require_active(self) -> None:
        if self._result is not None:
            raise ChooserTerminatedError(f"chooser already finished with {self._result!r}")

    def _build_state(self, directory: Path) -> NavigatorState:
        return NavigatorState(
            current_path=directory,
            entries=tuple(self._lister.list(directory)),
            can_navigate_up=has_parent(directory),
        )

    def _fallback(self) -> Path:
        return Path(os.path.abspath(self._fallback_directory_provider()))

    def _existing_or_fallback(self, target: Path) -> Path:
        if target.is_dir():
            return target
        fallback = self._fallback()
        logger.info("directory %s vanished, using fallback %s", target, fallback)
        return fallback

    def _publish(self, state: NavigatorState) -> None:
        if self._on_state_change is not None:
            self._on_state_change(state)

    def _move_to(self, target: Path) -> NavigatorState:
        self._state = self._build_state(self._existing_or_fallback(target))
        self._publish(self._state)
        return self._state

    def _finish(self, result: ChooserResult) -> ChooserResult:
        self._result = result
        if self._on_result is not None:
            self._on_result(result)
        return result

    def navigate_into(self, entry: DirectoryEntry) -> NavigatorState:
        """Descend into ``entry``, which must be listed in the current state."""
        self._require_active()
        if entry not in self._state.entries:
            raise InvalidCommandError(f"{entry.path} is not listed under {self._state.current_path}")
        return self._move_to(entry.path)

    def navigate_up(self) -> NavigatorState:
        """Move to the parent directory; a no-op at the filesystem root."""
        self._require_active()
        if not self._state.can_navigate_up:
            return self._state
        return self._move_to(self._state.current_path.parent)

    def refresh(self) -> NavigatorState:
        """Re-list the current directory."""
        self._require_active()
        return self._move_to(self._state.current_path)

    def select_current(self) -> ChooserResult:
        """Finish with the directory currently being browsed."""
        self._require_active()
        return self._finish(Selected(self._state.current_path))

    def cancel(self) -> ChooserResult:
        """Finish without a selection."""
        self._require_active()
        return self._finish(Cancelled())


__all__ = [
    "Lister",
    "NavigatorEngine",
    "has_parent",
]
