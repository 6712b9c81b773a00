"""Screen composition for the chooser.

Everything here is presentation-only and side-effect free: a navigator
snapshot plus cursor position goes in, a list of display rows comes out.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .listing import DirectoryEntry
from .ui_theme import DEFAULT_THEME, UITheme

TITLE = "Select Directory"
PARENT_LABEL = ".."
EMPTY_HINT = "(no subdirectories)"
# title, current path, two dividers, key hints
CHROME_ROWS = 5


@dataclass(frozen=True)
class ChooserRow:
    """One selectable list row; ``entry`` is ``None`` for the parent row."""

    label: str
    entry: DirectoryEntry | None = None

    @property
    def is_parent(self) -> bool:
        return self.entry is None


def chooser_rows(entries: Sequence[DirectoryEntry], can_navigate_up: bool) -> list[ChooserRow]:
    """Build list rows: ``..`` when up-navigation exists, then each entry."""
    rows = [ChooserRow(PARENT_LABEL)] if can_navigate_up else []
    rows.extend(ChooserRow(f"{entry.name}/", entry) for entry in entries)
    return rows


def list_area_rows(screen_height: int) -> int:
    """Return how many list rows fit below the chrome."""
    return max(1, screen_height - CHROME_ROWS)


def clip_right(text: str, width: int) -> str:
    """Trim ``text`` to ``width`` columns, marking the cut with an ellipsis."""
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width == 1:
        return "…"
    return text[: width - 1] + "…"


def clip_left(text: str, width: int) -> str:
    """Trim the head of ``text`` so its tail (the deepest path part) stays visible."""
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width == 1:
        return "…"
    return "…" + text[-(width - 1):]


def _key_hints(theme: UITheme) -> str:
    key = theme.help_key
    dim = theme.help_dim
    reset = theme.reset
    parts = (
        ("Enter", "open"),
        ("Backspace", "up"),
        ("s", "select"),
        ("r", "refresh"),
        ("q", "cancel"),
    )
    return "  ".join(f"{key}{label}{reset} {dim}{action}{reset}" for label, action in parts)


def build_chooser_screen(
    current_path: Path,
    rows: Sequence[ChooserRow],
    cursor: int,
    list_start: int,
    width: int,
    height: int,
    theme: UITheme | None = None,
) -> list[str]:
    """Render the full chooser screen as ANSI-styled rows."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    width = max(1, width)
    divider = f"{active_theme.divider}{'─' * width}{reset}"

    out = [
        f"{active_theme.title}{clip_right(TITLE, width)}{reset}",
        f"{active_theme.current_path}{clip_left(str(current_path), width)}{reset}",
        divider,
    ]

    visible = list_area_rows(height)
    if not rows:
        out.append(f"{active_theme.empty_hint}{clip_right(EMPTY_HINT, width)}{reset}")
    for idx in range(list_start, min(len(rows), list_start + visible)):
        row = rows[idx]
        color = active_theme.entry_parent if row.is_parent else active_theme.entry_dir
        text = clip_right(("> " if idx == cursor else "  ") + row.label, width)
        if idx == cursor:
            out.append(f"{active_theme.reverse}{color}{text}{reset}")
        else:
            out.append(f"{color}{text}{reset}")

    out.append(divider)
    out.append(_key_hints(active_theme))
    return out


__all__ = [
    "CHROME_ROWS",
    "ChooserRow",
    "EMPTY_HINT",
    "PARENT_LABEL",
    "TITLE",
    "build_chooser_screen",
    "chooser_rows",
    "clip_left",
    "clip_right",
    "list_area_rows",
]
