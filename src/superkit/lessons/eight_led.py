"""Lesson 03: flash eight LEDs in sequence, forward then back."""

from gpiozero import LEDBoard

from superkit.lib.board import claim
from superkit.lib.logger import Logger
from superkit.lib.runner import Runner

PINS = (17, 18, 27, 22, 23, 24, 25, 4)
# LED on time in seconds.
DELAY = 0.05


def setup() -> LEDBoard:
    return claim(LEDBoard, PINS, "led", active_high=False, initial_value=False)


def sweep(leds: LEDBoard, runner: Runner, reverse: bool = False) -> bool:
    """Light each LED in turn for DELAY. Returns False if interrupted."""

    order = reversed(leds.leds) if reverse else leds.leds
    for led in order:
        led.on()
        running = runner.sleep(DELAY)
        led.off()
        if not running:
            return False

    return True


def execute() -> None:
    with setup() as leds, Runner("03_8Led") as runner:
        for _ in runner.loop():
            Logger.info("forward ...")
            if not sweep(leds, runner):
                break

            Logger.info("... reverse")
            if not sweep(leds, runner, reverse=True):
                break
