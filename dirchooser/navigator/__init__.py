"""Directory navigator engine: state model, commands, and terminal results.

The engine has no UI concerns. Presentation layers read
:attr:`NavigatorEngine.state` (or subscribe through ``on_state_change``) and
issue commands in response to user input.
"""

from __future__ import annotations

from .engine import Lister, NavigatorEngine, has_parent
from .errors import ChooserError, ChooserTerminatedError, InvalidCommandError
from .locations import APP_NAME, default_directory, fallback_directory, first_existing_directory
from .state import Cancelled, ChooserConfig, ChooserResult, NavigatorState, Selected

__all__ = [
    "APP_NAME",
    "Cancelled",
    "ChooserConfig",
    "ChooserError",
    "ChooserResult",
    "ChooserTerminatedError",
    "InvalidCommandError",
    "Lister",
    "NavigatorEngine",
    "NavigatorState",
    "Selected",
    "default_directory",
    "fallback_directory",
    "has_parent",
    "first_existing_directory",
]
