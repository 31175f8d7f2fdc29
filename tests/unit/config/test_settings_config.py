"""Tests for settings persistence and input sanitization.

Malformed config data must fall back to defaults instead of failing.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from indexkeeper import config
from indexkeeper.settings import DEFAULT_INDEX_PREFIX, IndexSettings


class SettingsConfigTests(unittest.TestCase):
    def test_missing_config_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "missing" / "config.json"
            with mock.patch("indexkeeper.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_settings(), IndexSettings())

    def test_settings_round_trip_and_keep_unrelated_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "native" / "config.json"
            with mock.patch("indexkeeper.config.CONFIG_PATH", config_path):
                config.save_config({"other": 1})
                expected = IndexSettings(index_prefix="idx-", folders_included="Projects/*")
                config.save_settings(expected)

                self.assertEqual(config.load_settings(), expected)
                self.assertEqual(config.load_config().get("other"), 1)

    def test_malformed_values_fall_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("indexkeeper.config.CONFIG_PATH", config_path):
                config.save_config({"index_prefix": "   ", "folders_included": ["Projects"]})
                loaded = config.load_settings()

            self.assertEqual(loaded.index_prefix, DEFAULT_INDEX_PREFIX)
            self.assertEqual(loaded.folders_included, "")

    def test_non_object_json_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("[1, 2, 3]\n", encoding="utf-8")
            with mock.patch("indexkeeper.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_blank_prefix_is_never_persisted(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("indexkeeper.config.CONFIG_PATH", config_path):
                config.save_settings(IndexSettings(index_prefix="keep-"))
                config.save_settings(IndexSettings(index_prefix=" ", folders_included="A"))
                loaded = config.load_settings()

            self.assertEqual(loaded, IndexSettings(index_prefix="keep-", folders_included="A"))


if __name__ == "__main__":
    unittest.main()
