"""Tests for start-directory resolution and directory providers."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirchooser.navigator import locations


class FirstExistingDirectoryTests(unittest.TestCase):
    def test_prefers_earliest_existing_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            initial = Path(tmp) / "initial"
            default = Path(tmp) / "default"
            initial.mkdir()
            default.mkdir()

            resolved = locations.first_existing_directory((initial, default))

            self.assertEqual(resolved, Path(os.path.abspath(initial)))

    def test_skips_missing_empty_and_file_candidates(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            default = Path(tmp) / "default"
            default.mkdir()
            notes = Path(tmp) / "notes.txt"
            notes.write_text("x\n", encoding="utf-8")

            self.assertEqual(
                locations.first_existing_directory((Path(tmp) / "missing", "", None, notes, default)),
                Path(os.path.abspath(default)),
            )
            self.assertIsNone(locations.first_existing_directory((None, Path(tmp) / "missing")))

    def test_expands_user_home_marker(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch.dict(os.environ, {"HOME": tmp}):
                resolved = locations.first_existing_directory(("~",))

            self.assertEqual(resolved, Path(os.path.abspath(tmp)))

    def test_relative_directory_becomes_absolute(self) -> None:
        resolved = locations.first_existing_directory((".",))

        self.assertIsNotNone(resolved)
        self.assertTrue(resolved.is_absolute())
        self.assertEqual(resolved, Path(os.path.abspath(".")))


class DirectoryProviderTests(unittest.TestCase):
    def test_default_directory_is_not_created(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "data" / "dirchooser"
            with mock.patch.object(locations, "user_data_dir", return_value=str(missing)):
                self.assertIsNone(locations.default_directory())
            self.assertFalse(missing.exists())

    def test_default_directory_returns_existing_data_dir(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch.object(locations, "user_data_dir", return_value=tmp):
                self.assertEqual(locations.default_directory(), Path(os.path.abspath(tmp)))

    def test_fallback_directory_prefers_home(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch.object(locations.Path, "home", return_value=Path(tmp)):
                self.assertEqual(locations.fallback_directory(), Path(os.path.abspath(tmp)))

    def test_fallback_directory_uses_filesystem_root_without_home(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch.object(locations.Path, "home", return_value=Path(tmp) / "nobody"):
                fallback = locations.fallback_directory()

        self.assertTrue(fallback.is_dir())
        self.assertEqual(fallback, Path(fallback.anchor))

    def test_fallback_directory_survives_unknown_home(self) -> None:
        with mock.patch.object(locations.Path, "home", side_effect=RuntimeError("Could not determine home directory.")):
            fallback = locations.fallback_directory()

        self.assertTrue(fallback.is_dir())
        self.assertEqual(fallback, Path(fallback.anchor))


if __name__ == "__main__":
    unittest.main()
