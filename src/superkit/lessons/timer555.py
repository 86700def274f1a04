"""Lesson 09: count the pulses of a 555 timer in astable mode."""

import threading

from gpiozero import DigitalInputDevice

from superkit.lib.board import claim
from superkit.lib.logger import Logger
from superkit.lib.runner import Runner

SIG_PIN = 17
DELAY = 0.05


class PulseCounter:
    def __init__(self):
        self._count = 0
        self._lock = threading.Lock()

    @property
    def count(self) -> int:
        with self._lock:
            return self._count

    def pulse(self) -> None:
        with self._lock:
            self._count += 1


def setup(counter: PulseCounter) -> DigitalInputDevice:
    sig = claim(DigitalInputDevice, SIG_PIN, "sig", pull_up=True)
    # With the pull-up the device is active low, so a rising edge deactivates it.
    sig.when_deactivated = counter.pulse
    return sig


def execute() -> None:
    counter = PulseCounter()

    with setup(counter), Runner("09_timer555") as runner:
        for _ in runner.loop():
            Logger.info(f"counter = {counter.count}")
            if not runner.sleep(DELAY):
                break
