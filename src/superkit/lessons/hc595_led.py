"""Lesson 10: drive eight LEDs from a 74HC595 through several patterns."""

from superkit.lib.hc595 import HC595
from superkit.lib.logger import Logger
from superkit.lib.runner import Runner

DELAY = 0.1
# Each row is one pattern, one byte per step.
MODES = (
    (0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80),  # running light
    (0x01, 0x03, 0x07, 0x0F, 0x1F, 0x3F, 0x7F, 0xFF),  # fill
    (0x01, 0x05, 0x15, 0x55, 0xB5, 0xF5, 0xFB, 0xFF),  # blink mode 2
    (0x02, 0x03, 0x0B, 0x0F, 0x2F, 0x3F, 0xBF, 0xFF),  # blink mode 3
)


def setup() -> HC595:
    return HC595()


def play(hc595: HC595, runner: Runner, steps) -> bool:
    """Latch each byte of `steps` for DELAY. Returns False if interrupted."""

    for data in steps:
        hc595.write(data)
        if not runner.sleep(DELAY):
            return False

    return True


def execute() -> None:
    with setup() as hc595, Runner("10_74HC595_LED") as runner:
        for _ in runner.loop():
            for row, mode in enumerate(MODES):
                Logger.info(f"mode = {row}")
                Logger.info("forward ...")
                if not play(hc595, runner, mode) or not runner.sleep(DELAY):
                    return

                Logger.info("... reverse")
                if not play(hc595, runner, reversed(mode)):
                    return
