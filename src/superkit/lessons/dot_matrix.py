"""
Lesson 12: scan patterns across an 8x8 dot matrix.

Two 74HC595s are chained: the first byte shifted ends up driving the
columns (active low), the second drives the rows.
"""

from superkit.lib.hc595 import HC595
from superkit.lib.logger import Logger
from superkit.lib.runner import Runner

DELAY = 0.1

CODE_H = (
    0x01, 0xFF, 0x80, 0xFF, 0x01, 0x02, 0x04, 0x08, 0x10, 0x20,
    0x40, 0x80, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,
)
CODE_L = (
    0x00, 0x7F, 0x00, 0xFE, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0xFE, 0xFD, 0xFB, 0xF7, 0xEF, 0xDF, 0xBF, 0x7F,
)
FRAMES = tuple(zip(CODE_L, CODE_H))


def setup() -> HC595:
    return HC595()


def scan(hc595: HC595, runner: Runner, frames) -> bool:
    for low, high in frames:
        hc595.write(low, high)
        if not runner.sleep(DELAY):
            return False

    return True


def execute() -> None:
    with setup() as hc595, Runner("12_DotMatrix") as runner:
        for _ in runner.loop():
            Logger.info("forward ...")
            if not scan(hc595, runner, FRAMES):
                break

            Logger.info("... reverse")
            if not scan(hc595, runner, reversed(FRAMES)) or not runner.sleep(DELAY):
                break
