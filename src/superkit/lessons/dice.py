"""
Lesson 11 (dice): roll a die on the 7-segment display.

The display spins through 1-6 until the button is pressed, then holds a
random roll for two seconds.
"""

import random
from contextlib import ExitStack

from gpiozero import Button

from superkit.lib.board import claim
from superkit.lib.hc595 import HC595
from superkit.lib.logger import Logger
from superkit.lib.runner import Runner

BUTTON = 22
DELAY = 0.01
HOLD = 2.0
# Segment codes for 1-6
SEG_CODES = (0x06, 0x5B, 0x4F, 0x66, 0x6D, 0x7D)


def roll(rng: random.Random | None = None) -> int:
    """Return a die roll, 1-6."""

    return (rng or random).randint(1, len(SEG_CODES))


def setup() -> tuple[HC595, Button]:
    with ExitStack() as stack:
        hc595 = HC595()
        stack.callback(hc595.close)
        button = claim(Button, BUTTON, "button", pull_up=True)
        stack.pop_all()

    return hc595, button


def spin(hc595: HC595, button: Button, runner: Runner, rng: random.Random | None = None) -> bool:
    """Show each face once, stopping on a roll if the button is down."""

    for code in SEG_CODES:
        hc595.write(code)

        if button.is_pressed:
            number = roll(rng)
            hc595.write(SEG_CODES[number - 1])
            Logger.info(f"number = {number}")
            if not runner.sleep(HOLD):
                return False
        elif not runner.sleep(DELAY):
            return False

    return True


def execute() -> None:
    hc595, button = setup()

    with hc595, button, Runner("11_Dice") as runner:
        Logger.info("Press button to roll ...")
        for _ in runner.loop():
            if not spin(hc595, button, runner):
                break
