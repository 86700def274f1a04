"""Lesson 11: count through hex digits on a 7-segment display via a 74HC595."""

from superkit.lib.hc595 import HC595
from superkit.lib.logger import Logger
from superkit.lib.runner import Runner

DELAY = 0.5
# Common cathode segment codes for 0-F, then the decimal point.
SEG_CODES = (
    0x3F, 0x06, 0x5B, 0x4F, 0x66, 0x6D, 0x7D, 0x07,
    0x7F, 0x6F, 0x77, 0x7C, 0x39, 0x5E, 0x79, 0x71,
    0x80,
)


def setup() -> HC595:
    return HC595()


def show(hc595: HC595, runner: Runner, codes) -> bool:
    for code in codes:
        Logger.info(f"code = 0x{code:02X}")
        hc595.write(code)
        if not runner.sleep(DELAY):
            return False

    return True


def execute() -> None:
    with setup() as hc595, Runner("11_Segment") as runner:
        for _ in runner.loop():
            Logger.info("forward ...")
            if not show(hc595, runner, SEG_CODES):
                break

            Logger.info("... reverse")
            if not show(hc595, runner, reversed(SEG_CODES)) or not runner.sleep(DELAY):
                break
