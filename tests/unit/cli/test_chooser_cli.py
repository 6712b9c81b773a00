"""CLI behavior tests for ``dirchooser.cli.main``.

Covers listing mode, selection output, cancellation exit status, and the
config-backed ``--resume`` and ``--theme`` options.
"""

from __future__ import annotations

import contextlib
import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirchooser import cli
from dirchooser.navigator import Cancelled, Selected
from dirchooser.ui_theme import OCEAN_THEME, PLAIN_THEME


@contextlib.contextmanager
def _fake_tty():
    yield 99


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(os.path.abspath(self._tmp.name))
        for name in ("beta", "Alpha", ".cache"):
            (self.root / name).mkdir()
        (self.root / "readme.txt").write_text("x\n", encoding="utf-8")
        self._config_patch = mock.patch("dirchooser.runtime.config.CONFIG_PATH", self.root / "cfg" / "config.json")
        self._config_patch.start()

    def tearDown(self) -> None:
        self._config_patch.stop()
        self._tmp.cleanup()

    def test_list_mode_prints_visible_subdirectories(self) -> None:
        stdout = io.StringIO()
        with mock.patch("sys.stdout", stdout), mock.patch("dirchooser.cli.run_chooser") as run_chooser:
            cli.main([str(self.root), "--list"])

        run_chooser.assert_not_called()
        self.assertEqual(stdout.getvalue(), "Alpha\nbeta\n")

    def test_list_mode_rejects_missing_or_file_path(self) -> None:
        for target in (self.root / "nope", self.root / "readme.txt"):
            stdout = io.StringIO()
            with mock.patch("sys.stdout", stdout):
                with self.assertRaises(SystemExit) as raised:
                    cli.main([str(target), "--list"])

            self.assertEqual(raised.exception.code, f"dirchooser: {target} is not a directory")
            self.assertEqual(stdout.getvalue(), "")

    def test_selection_is_printed_and_remembered(self) -> None:
        stdout = io.StringIO()
        selected = self.root / "beta"
        with mock.patch("sys.stdout", stdout), mock.patch(
            "dirchooser.cli._open_controlling_tty", _fake_tty
        ), mock.patch("dirchooser.cli.run_chooser", return_value=Selected(selected)) as run_chooser:
            cli.main([str(self.root), "--no-color"])

        session, stdin_fd, stdout_fd, theme = run_chooser.call_args.args
        self.assertEqual(session.state.current_path, self.root)
        self.assertEqual((stdin_fd, stdout_fd), (99, 99))
        self.assertIs(theme, PLAIN_THEME)
        self.assertEqual(stdout.getvalue(), f"{selected}\n")
        self.assertEqual(cli.load_last_directory(), selected)

    def test_cancel_exits_with_status_one(self) -> None:
        stdout = io.StringIO()
        with mock.patch("sys.stdout", stdout), mock.patch(
            "dirchooser.cli._open_controlling_tty", _fake_tty
        ), mock.patch("dirchooser.cli.run_chooser", return_value=Cancelled()):
            with self.assertRaises(SystemExit) as raised:
                cli.main([str(self.root)])

        self.assertEqual(raised.exception.code, cli.EXIT_CANCELLED)
        self.assertEqual(stdout.getvalue(), "")
        self.assertIsNone(cli.load_last_directory())

    def test_resume_starts_in_last_selected_directory(self) -> None:
        cli.save_last_directory(self.root / "Alpha")
        (self.root / "Alpha" / "inner").mkdir()
        stdout = io.StringIO()
        with mock.patch("sys.stdout", stdout):
            cli.main(["--resume", "--list"])

        self.assertEqual(stdout.getvalue(), "inner\n")

    def test_theme_option_is_persisted_and_reused(self) -> None:
        with mock.patch("sys.stdout", io.StringIO()), mock.patch(
            "dirchooser.cli._open_controlling_tty", _fake_tty
        ), mock.patch("dirchooser.cli.run_chooser", return_value=Selected(self.root)) as run_chooser:
            cli.main([str(self.root), "--theme", "Ocean"])
            cli.main([str(self.root)])

        first_theme = run_chooser.call_args_list[0].args[3]
        second_theme = run_chooser.call_args_list[1].args[3]
        self.assertIs(first_theme, OCEAN_THEME)
        self.assertIs(second_theme, OCEAN_THEME)

    def test_unknown_theme_is_rejected_and_not_saved(self) -> None:
        with mock.patch("sys.stderr", io.StringIO()) as stderr, mock.patch("dirchooser.cli.run_chooser") as run_chooser:
            with self.assertRaises(SystemExit) as raised:
                cli.main([str(self.root), "--theme", "bogus"])

        self.assertEqual(raised.exception.code, 2)
        self.assertIn("bogus", stderr.getvalue())
        run_chooser.assert_not_called()
        self.assertIsNone(cli.load_theme_name())

    def test_missing_terminal_is_reported(self) -> None:
        with mock.patch("dirchooser.cli.os.open", side_effect=OSError("no tty")):
            with self.assertRaises(SystemExit) as raised:
                cli.main([str(self.root)])

        self.assertIn("interactive terminal", str(raised.exception.code))

    def test_log_file_receives_debug_records(self) -> None:
        log_path = self.root / "chooser.log"
        with mock.patch("dirchooser.cli.logging.basicConfig") as basic_config, mock.patch(
            "sys.stdout", io.StringIO()
        ):
            cli.main([str(self.root), "--list", "--log-file", str(log_path)])

        basic_config.assert_called_once()
        self.assertEqual(basic_config.call_args.kwargs["filename"], str(log_path))


if __name__ == "__main__":
    unittest.main()
