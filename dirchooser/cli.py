"""Command-line front door for dirchooser.

Parses CLI options and resolves the start directory. Then either prints the
listing (``--list``) or runs the interactive chooser on the controlling
terminal and prints the selected path on stdout.
"""

from __future__ import annotations

import argparse
import contextlib
import logging
import os
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path

from .navigator import ChooserConfig, NavigatorEngine, Selected
from .runtime import run_chooser
from .runtime.config import load_last_directory, load_theme_name, save_last_directory, save_theme_name
from .ui_theme import available_theme_names, resolve_theme

EXIT_CANCELLED = 1
TTY_PATH = "/dev/tty"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirchooser",
        description="Pick a directory interactively and print its absolute path.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to start browsing in. Defaults to the application data directory.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        type=str.lower,
        choices=available_theme_names(),
        help=f"UI theme name ({', '.join(available_theme_names())}). Remembered for later runs.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the subdirectories of the start directory and exit.",
    )
    parser.add_argument(
        "--resume",
        action="store_true",
        help="Start in the last selected directory when no path is given.",
    )
    parser.add_argument("--log-file", metavar="FILE", default=None, help="Write debug logs to FILE.")
    return parser


def _configure_logging(log_file: str | None) -> None:
    """Attach a debug file handler when requested; the tty stays log-free."""
    if log_file is None:
        return
    logging.basicConfig(filename=log_file, level=logging.DEBUG, format=LOG_FORMAT)


@contextlib.contextmanager
def _open_controlling_tty() -> Iterator[int]:
    """Yield a read/write fd on the controlling terminal.

    Stdout stays free for the selected path, so ``cd "$(dirchooser)"`` works.
    """
    try:
        fd = os.open(TTY_PATH, os.O_RDWR | os.O_NOCTTY)
    except OSError as exc:
        raise SystemExit(f"dirchooser needs an interactive terminal: {exc}") from exc
    try:
        yield fd
    finally:
        os.close(fd)


def print_listing(engine: NavigatorEngine) -> None:
    """Write one subdirectory name per line for the engine's current state."""
    for entry in engine.state.entries:
        sys.stdout.write(f"{entry.name}\n")


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and run the chooser.

    Exits with status ``1`` when the interaction is cancelled.
    """
    args = _build_parser().parse_args(argv)
    _configure_logging(args.log_file)

    initial = args.path
    if initial is None and args.resume:
        initial = load_last_directory()
    config = ChooserConfig(initial_directory=initial)

    if args.list:
        if args.path is not None and not Path(args.path).expanduser().is_dir():
            raise SystemExit(f"dirchooser: {args.path} is not a directory")
        print_listing(NavigatorEngine(config))
        return

    theme_name = args.theme
    if theme_name is not None:
        save_theme_name(theme_name)
    else:
        theme_name = load_theme_name()
    theme = resolve_theme(theme_name, no_color=args.no_color)

    # Imported late: the session pulls in termios/tty.
    from .runtime.session import ChooserSession

    session = ChooserSession(config)
    with _open_controlling_tty() as tty_fd:
        result = run_chooser(session, tty_fd, tty_fd, theme)

    if not isinstance(result, Selected):
        raise SystemExit(EXIT_CANCELLED)
    save_last_directory(result.path)
    sys.stdout.write(f"{result.path}\n")


if __name__ == "__main__":
    main()
