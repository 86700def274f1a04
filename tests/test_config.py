import os
import tempfile
import textwrap
import unittest
from unittest.mock import patch

from superkit.lib.config import Config
from superkit.lib.logger import Logger


class TestConfig(unittest.TestCase):
    def setUp(self):
        fd, path = tempfile.mkstemp(prefix="superkit_", suffix=".cfg")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(textwrap.dedent(
                """
                    [board]
                    pin_factory = mock        # no Pi in CI

                    [runner]
                    cycles = 3
                    time_scale = 0.5

                    [dev]
                    log_level = debug
                    stack_trace_errors = true
                """
            ).lstrip())

        self.path = path
        Config.load(self.path)

    def tearDown(self):
        try:
            os.remove(self.path)
        except FileNotFoundError:
            pass

    def test_loaded(self):
        self.assertEqual(Config.get("board", "pin_factory"), "mock")
        self.assertEqual(Config.get("runner", "cycles"), 3)
        self.assertEqual(Config.get("runner", "time_scale"), 0.5)
        self.assertEqual(Config.get("dev", "log_level"), Logger.DEBUG)
        self.assertEqual(Config.get("dev", "stack_trace_errors"), True)

    def test_fallback(self):
        self.assertIsNone(Config.get("runner", "unknown"))
        self.assertEqual(Config.get("runner", "new_property", "new_value"), "new_value")
        self.assertEqual(Config.get("unknown_category", "unknown_property", "unknown_value"), "unknown_value")

    def test_set_overrides_value(self):
        Config.set("runner", "cycles", 7)
        self.assertEqual(Config.get("runner", "cycles"), 7)

    def test_partial_section_keeps_defaults(self):
        fd, path = tempfile.mkstemp(prefix="superkit_", suffix=".cfg")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write("[runner]\ncycles = 2\n")

        try:
            Config.load(path)
        finally:
            os.remove(path)

        self.assertEqual(Config.get("runner", "cycles"), 2)
        self.assertEqual(Config.get("runner", "time_scale"), 1.0)
        self.assertEqual(Config.get("board", "pin_factory"), "")

    def test_load_missing_config(self):
        missing = os.path.join(tempfile.gettempdir(), "definitely_not_here.cfg")
        with patch("superkit.lib.logger.Logger.warning") as warn:
            Config.load(missing)
            warn.assert_called()

        self.assertEqual(Config.get("runner", "cycles"), 0)
        self.assertEqual(Config.get("dev", "log_level"), Logger.INFO)

    def test_load_wrong_extension(self):
        fd, path = tempfile.mkstemp(prefix="superkit_", suffix=".ini")
        os.close(fd)

        try:
            with patch("superkit.lib.logger.Logger.warning") as warn:
                Config.load(path)
                warn.assert_called_once()
        finally:
            os.remove(path)

        self.assertEqual(Config.get("runner", "time_scale"), 1.0)

    def test_invalid_log_level(self):
        fd, path = tempfile.mkstemp(prefix="superkit_", suffix=".cfg")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write("[dev]\nlog_level = loud\n")

        try:
            with self.assertRaises(ValueError):
                Config.load(path)
        finally:
            os.remove(path)

    def test_get_before_load(self):
        with patch.object(Config, "_data", None):
            with self.assertRaises(RuntimeError):
                Config.get("runner", "cycles")
