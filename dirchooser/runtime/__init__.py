"""Runtime layer: persisted settings and the interactive chooser session."""

from __future__ import annotations


def run_chooser(*args, **kwargs):
    """Lazily import the session loop to keep config imports free of tty modules."""
    from .session import run_chooser as _run_chooser

    return _run_chooser(*args, **kwargs)


__all__ = ["run_chooser"]
