"""Caller-contract violations raised by the navigator engine."""

from __future__ import annotations


class ChooserError(Exception):
    """Base class for chooser contract violations."""


class InvalidCommandError(ChooserError, ValueError):
    """Raised when a command targets an entry missing from the current listing."""


class ChooserTerminatedError(ChooserError, RuntimeError):
    """Raised when a command arrives after the chooser produced its result."""


__all__ = [
    "ChooserError",
    "InvalidCommandError",
    "ChooserTerminatedError",
]
