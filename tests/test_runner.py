import signal
import threading
import time
import unittest
from unittest.mock import call, patch

from superkit.lib.config import Config
from superkit.lib.logger import Logger
from superkit.lib.runner import Runner


class TestRunner(unittest.TestCase):
    def setUp(self):
        Logger.setup(Logger.INFO)
        Logger._logger.handlers.clear()  # Silence std logs
        Config.load("/nonexistent/superkit.cfg")

    def test_defaults_from_config(self):
        Config.set("runner", "cycles", 4)
        Config.set("runner", "time_scale", 0.25)

        runner = Runner("test")

        self.assertEqual(runner.cycles, 4)
        self.assertEqual(runner.time_scale, 0.25)

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            Runner("test", cycles=-1)
        with self.assertRaises(ValueError):
            Runner("test", time_scale=-0.5)

    def test_loop_counts_cycles(self):
        runner = Runner("test", cycles=3, time_scale=0, install_sigint_handler=False)
        self.assertEqual(list(runner.loop()), [0, 1, 2])

    def test_loop_until_stopped(self):
        runner = Runner("test", cycles=0, time_scale=0, install_sigint_handler=False)

        seen = []
        for cycle in runner.loop():
            seen.append(cycle)
            if cycle == 9:
                runner.stop()

        self.assertEqual(len(seen), 10)
        self.assertFalse(runner.running)

    def test_sleep_scaled(self):
        runner = Runner("test", time_scale=0, install_sigint_handler=False)

        with patch.object(runner._stopped, "wait") as wait:
            self.assertTrue(runner.sleep(5))
            wait.assert_not_called()

        runner.time_scale = 0.5
        with patch.object(runner._stopped, "wait") as wait:
            runner.sleep(2)
            wait.assert_called_once_with(1.0)

    def test_sleep_returns_early_when_stopped(self):
        runner = Runner("test", time_scale=1, install_sigint_handler=False)
        runner.stop()

        start = time.monotonic()
        self.assertFalse(runner.sleep(30))
        self.assertLess(time.monotonic() - start, 5)

    def test_context_logs_start_and_stop(self):
        with self.assertLogs(Logger._logger.name, level="INFO") as cm:
            with Runner("01_LED", cycles=1, install_sigint_handler=False) as runner:
                self.assertTrue(runner.running)

        self.assertIn("01_LED started on a ", cm.output[0])
        self.assertTrue(cm.output[-1].endswith("01_LED stopped"))
        self.assertFalse(runner.running)

    def test_sigint_stops_runner(self):
        before = signal.getsignal(signal.SIGINT)

        with Runner("test", cycles=0, time_scale=0) as runner:
            handler = signal.getsignal(signal.SIGINT)
            self.assertIsNot(handler, before)

            handler(signal.SIGINT, None)
            self.assertFalse(runner.running)
            self.assertEqual(list(runner.loop()), [])

        self.assertIs(signal.getsignal(signal.SIGINT), before)

    def test_enter_off_main_thread(self):
        before = signal.getsignal(signal.SIGINT)
        errors = []
        cycles = []

        def run():
            try:
                with Runner("test", cycles=2, time_scale=0) as runner:
                    cycles.extend(runner.loop())
            except Exception as err:
                errors.append(err)

        thread = threading.Thread(target=run)
        thread.start()
        thread.join()

        self.assertEqual(errors, [])
        self.assertEqual(cycles, [0, 1])
        self.assertIs(signal.getsignal(signal.SIGINT), before)

    def test_restores_default_when_previous_handler_unknown(self):
        # getsignal() is None when the handler was installed outside Python
        with patch("superkit.lib.runner.signal.getsignal", return_value=None), patch(
            "superkit.lib.runner.signal.signal"
        ) as install:
            with Runner("test", cycles=1, time_scale=0):
                pass

        self.assertEqual(install.call_count, 2)
        self.assertEqual(install.call_args_list[-1], call(signal.SIGINT, signal.SIG_DFL))
