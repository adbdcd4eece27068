"""Tests for config persistence and default sanitization."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from foldersvg import config


class ConfigDefaultsTests(unittest.TestCase):
    def test_missing_config_uses_builtin_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("foldersvg.config.CONFIG_PATH", Path(tmp) / "missing.json"):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_defaults(), config.Defaults())
                self.assertEqual(config.load_defaults().output, "structure.svg")

    def test_malformed_config_falls_back(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("foldersvg.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_defaults(), config.Defaults())

            config_path.write_text("[1, 2]", encoding="utf-8")
            with mock.patch("foldersvg.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_round_trip_and_value_normalization(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("foldersvg.config.CONFIG_PATH", config_path):
                config.save_config({"output": " tree.svg ", "folders_only": True, "exclude": [".DLL", 3, "Thumbs.db"]})
                defaults = config.load_defaults()

            self.assertEqual(defaults.output, "tree.svg")
            self.assertTrue(defaults.folders_only)
            self.assertEqual(defaults.exclude, frozenset({".dll", "thumbs.db"}))

    def test_invalid_values_fall_back_per_key(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("foldersvg.config.CONFIG_PATH", config_path):
                config.save_config({"output": "", "folders_only": "yes", "exclude": ".pyc, .log"})
                defaults = config.load_defaults()

            self.assertEqual(defaults.output, "structure.svg")
            self.assertFalse(defaults.folders_only)
            self.assertEqual(defaults.exclude, frozenset({".pyc", ".log"}))

    def test_unwritable_config_location_is_logged_not_raised(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "blocker"
            blocker.write_text("", encoding="utf-8")
            config_path = blocker / "config.json"
            with mock.patch("foldersvg.config.CONFIG_PATH", config_path):
                with self.assertLogs("foldersvg.config", level="DEBUG") as logs:
                    config.save_config({"output": "tree.svg"})

            self.assertFalse(config_path.exists())
            self.assertIn("could not save config", logs.output[0])

    def test_unserializable_value_is_not_written(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("foldersvg.config.CONFIG_PATH", config_path):
                config.save_config({"output": object()})

            self.assertFalse(config_path.exists())


if __name__ == "__main__":
    unittest.main()
