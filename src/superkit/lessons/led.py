"""Lesson 01: blink an LED wired between 3.3V and GPIO17."""

from gpiozero import LED

from superkit.lib.board import claim
from superkit.lib.logger import Logger
from superkit.lib.runner import Runner

LED_PIN = 17
DELAY = 0.5


def setup() -> LED:
    # The LED's anode is on 3.3V, so it lights when the pin is low.
    return claim(LED, LED_PIN, "led", active_high=False, initial_value=False)


def execute() -> None:
    with setup() as led, Runner("01_LED") as runner:
        try:
            for _ in runner.loop():
                Logger.info("... led on")
                led.on()
                if not runner.sleep(DELAY):
                    break

                Logger.info("led off ...")
                led.off()
                runner.sleep(DELAY)
        finally:
            led.off()
