"""Interactive chooser session: cursor state, key dispatch, and the event loop.

The session is the presentation-side projection of a
:class:`~dirchooser.navigator.NavigatorEngine`. It keeps only what the engine
does not care about (cursor and scroll offset) and turns key tokens into
engine commands.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from pathlib import Path

from ..input import read_key
from ..navigator import ChooserConfig, ChooserResult, NavigatorEngine, NavigatorState
from ..render import ChooserRow, build_chooser_screen, chooser_rows, list_area_rows
from ..terminal import TerminalController
from ..ui_theme import UITheme

MOVE_UP_KEYS = frozenset({"UP", "k"})
MOVE_DOWN_KEYS = frozenset({"DOWN", "j"})
ACTIVATE_KEYS = frozenset({"ENTER", "RIGHT", "l"})
NAVIGATE_UP_KEYS = frozenset({"BACKSPACE", "LEFT", "h"})
SELECT_KEYS = frozenset({"s"})
REFRESH_KEYS = frozenset({"r", "CTRL_R"})
CANCEL_KEYS = frozenset({"ESC", "CTRL_C", "EOF", "q"})
IDLE_TIMEOUT_MS = 200


class ChooserSession:
    """Cursor-bearing view of one chooser interaction."""

    def __init__(self, config: ChooserConfig | None = None, **engine_kwargs) -> None:
        self.rows: list[ChooserRow] = []
        self.cursor = 0
        self.list_start = 0
        self.page_rows = 1
        self.dirty = True
        self._focus_path: Path | None = None
        self.engine = NavigatorEngine(config, on_state_change=self._on_state_change, **engine_kwargs)

    def _on_state_change(self, state: NavigatorState) -> None:
        self.rows = chooser_rows(state.entries, state.can_navigate_up)
        self.cursor = 0
        focus = self._focus_path
        self._focus_path = None
        if focus is not None:
            for idx, row in enumerate(self.rows):
                if row.entry is not None and row.entry.path == focus:
                    self.cursor = idx
                    break
        self.list_start = 0
        self.dirty = True

    @property
    def state(self) -> NavigatorState:
        return self.engine.state

    @property
    def result(self) -> ChooserResult | None:
        return self.engine.result

    def move_cursor(self, delta: int) -> None:
        if not self.rows:
            return
        moved = max(0, min(len(self.rows) - 1, self.cursor + delta))
        if moved != self.cursor:
            self.cursor = moved
            self.dirty = True

    def scroll_to_cursor(self, visible_rows: int) -> None:
        """Clamp ``list_start`` so the cursor row is on screen."""
        visible_rows = max(1, visible_rows)
        self.page_rows = visible_rows
        if self.cursor < self.list_start:
            self.list_start = self.cursor
        elif self.cursor >= self.list_start + visible_rows:
            self.list_start = self.cursor - visible_rows + 1
        self.list_start = max(0, min(self.list_start, max(0, len(self.rows) - visible_rows)))

    def _highlighted_path(self) -> Path | None:
        if not self.rows or self.rows[self.cursor].entry is None:
            return None
        return self.rows[self.cursor].entry.path

    def navigate_up(self) -> None:
        # Land on the directory we just left.
        self._focus_path = self.state.current_path
        before = self.state
        self.engine.navigate_up()
        if self.state is before:
            self._focus_path = None

    def activate(self) -> None:
        """Open the highlighted row."""
        if not self.rows:
            return
        row = self.rows[self.cursor]
        if row.entry is None:
            self.navigate_up()
        else:
            self.engine.navigate_into(row.entry)

    def handle_key(self, key: str) -> bool:
        """Apply one key token; return whether the interaction has ended."""
        if key in MOVE_UP_KEYS:
            self.move_cursor(-1)
        elif key in MOVE_DOWN_KEYS:
            self.move_cursor(1)
        elif key in {"HOME", "g"}:
            self.move_cursor(-len(self.rows))
        elif key in {"END", "G"}:
            self.move_cursor(len(self.rows))
        elif key == "PAGE_UP":
            self.move_cursor(-self.page_rows)
        elif key == "PAGE_DOWN":
            self.move_cursor(self.page_rows)
        elif key in ACTIVATE_KEYS:
            self.activate()
        elif key in NAVIGATE_UP_KEYS:
            self.navigate_up()
        elif key in REFRESH_KEYS:
            self._focus_path = self._highlighted_path()
            self.engine.refresh()
        elif key in SELECT_KEYS:
            self.engine.select_current()
        elif key in CANCEL_KEYS:
            self.engine.cancel()
        return self.engine.is_terminated


def run_chooser(
    session: ChooserSession,
    stdin_fd: int,
    stdout_fd: int,
    theme: UITheme,
    *,
    terminal_size: Callable[[], tuple[int, int]] | None = None,
) -> ChooserResult:
    """Drive ``session`` from terminal input until it produces a result.

    The screen is redrawn whenever the session changed or the terminal was
    resized. Input EOF cancels the interaction.
    """
    if terminal_size is None:
        def terminal_size() -> tuple[int, int]:
            size = shutil.get_terminal_size((80, 24))
            return size.columns, size.lines

    terminal = TerminalController(stdin_fd, stdout_fd)
    last_size: tuple[int, int] | None = None
    with terminal.raw_mode():
        while session.result is None:
            size = terminal_size()
            if session.dirty or size != last_size:
                width, height = size
                session.scroll_to_cursor(list_area_rows(height))
                terminal.draw(
                    build_chooser_screen(
                        session.state.current_path,
                        session.rows,
                        session.cursor,
                        session.list_start,
                        width,
                        height,
                        theme,
                    )
                )
                session.dirty = False
                last_size = size

            key = read_key(stdin_fd, timeout_ms=IDLE_TIMEOUT_MS)
            if key == "":
                continue
            session.handle_key(key)
    return session.result


__all__ = [
    "ChooserSession",
    "run_chooser",
]
