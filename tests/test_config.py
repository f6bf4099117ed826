"""Unit tests for dashboard Config."""
import json
import os
import tempfile
import unittest
from unittest.mock import patch
from tagtracker.config import Config, API_BASE, REFRESH_INTERVAL_MS, TREND_WINDOW


class TestConfig(unittest.TestCase):
    """Defaults and file overlay."""

    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "settings.json")

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def _write(self, content: str) -> None:
        with open(self.path, 'w') as f:
            f.write(content)

    def test_defaults_without_file(self) -> None:
        config = Config(config_path=None)

        self.assertEqual(config.api_base, API_BASE)
        self.assertEqual(config.refresh_interval_ms, REFRESH_INTERVAL_MS)
        self.assertEqual(config.trend_window, TREND_WINDOW)
        self.assertEqual(config.theme, "dark")

    def test_file_overrides_defaults(self) -> None:
        self._write(json.dumps({
            "api_base": "http://example.test:9000/",
            "refresh_interval_ms": 1000,
            "trend_window": 5,
            "theme": "light",
        }))

        config = Config(self.path)

        self.assertEqual(config.api_base, "http://example.test:9000")
        self.assertEqual(config.refresh_interval_ms, 1000)
        self.assertEqual(config.trend_window, 5)
        self.assertEqual(config.theme, "light")

    def test_broken_file_falls_back(self) -> None:
        self._write("{not json")

        with patch('builtins.print'):
            config = Config(self.path)

        self.assertEqual(config.api_base, API_BASE)

    def test_non_numeric_value_falls_back(self) -> None:
        """Unusable value for one key keeps that key's default only."""
        self._write(json.dumps({"refresh_interval_ms": "fast", "trend_window": 4}))

        with patch('builtins.print'):
            config = Config(self.path)

        self.assertEqual(config.refresh_interval_ms, REFRESH_INTERVAL_MS)
        self.assertEqual(config.trend_window, 4)

    def test_null_value_falls_back(self) -> None:
        self._write(json.dumps({"trend_window": None, "api_base": None}))

        with patch('builtins.print'):
            config = Config(self.path)

        self.assertEqual(config.trend_window, TREND_WINDOW)
        self.assertEqual(config.api_base, API_BASE)

    def test_unknown_theme_falls_back(self) -> None:
        self._write(json.dumps({"theme": "neon"}))

        self.assertEqual(Config(self.path).theme, "dark")

    def test_reload_picks_up_changes(self) -> None:
        self._write(json.dumps({"trend_window": 3}))
        config = Config(self.path)

        self._write(json.dumps({"trend_window": 8}))
        config.reload()

        self.assertEqual(config.trend_window, 8)


if __name__ == "__main__":
    unittest.main()
