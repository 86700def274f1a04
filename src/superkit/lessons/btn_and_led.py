"""Lesson 02: light an LED while a button is held down."""

from contextlib import ExitStack

from gpiozero import LED, Button

from superkit.lib.board import claim
from superkit.lib.logger import Logger
from superkit.lib.runner import Runner

BTN_PIN = 18
LED_PIN = 17
# Polling interval, also a crude debounce.
DELAY = 0.2


def setup() -> tuple[Button, LED]:
    with ExitStack() as stack:
        button = claim(Button, BTN_PIN, "button", pull_up=True)
        stack.callback(button.close)
        led = claim(LED, LED_PIN, "led", active_high=False, initial_value=False)
        stack.pop_all()

    return button, led


def update(button: Button, led: LED) -> bool:
    """Mirror the button onto the LED and return whether the LED is lit."""

    # Momentary switch, no latching
    if button.is_pressed:
        Logger.info("... led on")
        led.on()
    else:
        Logger.info("led off ...")
        led.off()

    return led.is_lit


def execute() -> None:
    button, led = setup()
    with button, led, Runner("02_BtnAndLed") as runner:
        try:
            for _ in runner.loop():
                update(button, led)
                if not runner.sleep(DELAY):
                    break
        finally:
            led.off()
