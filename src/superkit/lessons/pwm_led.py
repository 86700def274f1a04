"""Lesson 04: breathe an LED on GPIO18 with software PWM."""

from gpiozero import PWMLED

from superkit.lib.board import claim
from superkit.lib.logger import Logger
from superkit.lib.runner import Runner

LED_PIN = 18
FREQUENCY = 1000
STEP = 4
DELAY = 0.05
PAUSE = 1.0

BRIGHTER = [percent / 100 for percent in range(0, 101, STEP)]
DIMMER = BRIGHTER[::-1]


def setup() -> PWMLED:
    return claim(PWMLED, LED_PIN, "led", frequency=FREQUENCY, initial_value=0)


def ramp(led: PWMLED, runner: Runner, duties: list[float]) -> bool:
    """Step the duty cycle through `duties`. Returns False if interrupted."""

    for duty in duties:
        led.value = duty
        if not runner.sleep(DELAY):
            return False

    return runner.sleep(PAUSE)


def execute() -> None:
    with setup() as led, Runner("04_PwmLed") as runner:
        try:
            for _ in runner.loop():
                Logger.info("brighter ...")
                if not ramp(led, runner, BRIGHTER):
                    break

                Logger.info("... dimmer")
                if not ramp(led, runner, DIMMER):
                    break
        finally:
            led.off()
