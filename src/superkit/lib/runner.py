"""
Run loop shared by every lesson.

`Runner` owns the stop flag a lesson polls, installs a SIGINT handler that
raises it, and provides a sleep that wakes as soon as Ctrl-C is pressed.
"""

import signal
import threading
from collections.abc import Iterator
from contextlib import suppress

from superkit.lib import board
from superkit.lib.config import Config
from superkit.lib.logger import Logger


class Runner:
    """
    Ctrl-C aware loop control for a lesson.

    Use as a context manager around the lesson body:

        with setup() as led, Runner("01_LED") as runner:
            for _ in runner.loop():
                ...
                if not runner.sleep(0.5):
                    break
    """

    def __init__(
        self,
        name: str,
        cycles: int | None = None,
        time_scale: float | None = None,
        install_sigint_handler: bool = True,
    ):
        """
        Initialize a lesson runner.

        Args:
            name (str): Lesson name used in the start/stop messages.
            cycles (int, optional): Number of outer loop iterations, 0 for
                unlimited. Defaults to config value.
            time_scale (float, optional): Multiplier applied to every sleep.
                Defaults to config value.
            install_sigint_handler (bool): If True, Ctrl-C stops the runner
                instead of raising KeyboardInterrupt.
        """

        self.name = name
        self.cycles = cycles if cycles is not None else Config.get("runner", "cycles", 0)
        self.time_scale = time_scale if time_scale is not None else Config.get("runner", "time_scale", 1.0)
        self.install_sigint_handler = install_sigint_handler

        if self.cycles < 0:
            raise ValueError(f"cycles must be >= 0, got {self.cycles}")
        if self.time_scale < 0:
            raise ValueError(f"time_scale must be >= 0, got {self.time_scale}")

        self._stopped = threading.Event()
        self._prev_sig = None
        self._sig_installed = False

    def __enter__(self) -> "Runner":
        if self.install_sigint_handler:

            def on_sigint(_sig: int, _frm: object) -> None:
                self.stop()

            # Handlers can only be installed from the main thread
            with suppress(ValueError):
                self._prev_sig = signal.getsignal(signal.SIGINT)
                signal.signal(signal.SIGINT, on_sigint)
                self._sig_installed = True

        Logger.info(f"{self.name} started on a {board.model()}")
        return self

    def __exit__(self, *exc) -> None:
        self.stop()

        if self._sig_installed:
            # getsignal() returns None for a handler not installed from Python
            previous = self._prev_sig if self._prev_sig is not None else signal.SIG_DFL
            with suppress(ValueError):
                signal.signal(signal.SIGINT, previous)
            self._prev_sig = None
            self._sig_installed = False

        Logger.info(f"{self.name} stopped")

    @property
    def running(self) -> bool:
        return not self._stopped.is_set()

    def stop(self) -> None:
        """Ask the lesson to finish at its next sleep or loop check."""

        self._stopped.set()

    def sleep(self, seconds: float) -> bool:
        """
        Sleep for `seconds` scaled by `time_scale`, waking early when stopped.

        Args:
            seconds (float): Unscaled delay.

        Returns:
            bool: True if the lesson should keep running.
        """

        delay = seconds * self.time_scale
        if delay > 0:
            self._stopped.wait(delay)

        return self.running

    def loop(self) -> Iterator[int]:
        """Yield cycle numbers until stopped or `cycles` have completed."""

        cycle = 0
        while self.running and (self.cycles == 0 or cycle < self.cycles):
            yield cycle
            cycle += 1
