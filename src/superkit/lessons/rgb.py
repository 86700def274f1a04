"""
Lesson 05: fade an RGB LED through a sequence of colours.

Each channel is a PWMLED at 2 kHz; a colour's 0-255 component becomes the
channel's duty cycle.
"""

from contextlib import ExitStack

from gpiozero import PWMLED

from superkit.lib.board import claim
from superkit.lib.logger import Logger
from superkit.lib.runner import Runner

COLORS = (
    0x000000, 0x3F0000, 0x7F0000, 0xBF0000, 0xFF0000,  # brighten red
    0xFF0000, 0xBF3F00, 0x7F7F00, 0x3FBF00, 0x00FF00,  # fade to green
    0x00FF00, 0x00BF00, 0x007F00, 0x003F00, 0x000000,  # dim green
    0x000000, 0x003F00, 0x007F00, 0x00BF00, 0x00FF00,  # brighten green
    0x00FF00, 0x00BF3F, 0x007F7F, 0x003FBF, 0x0000FF,  # fade to blue
    0x0000FF, 0x0000BF, 0x00007F, 0x00003F, 0x000000,  # dim blue
    0x000000, 0x00003F, 0x00007F, 0x0000BF, 0x0000FF,  # brighten blue
    0x0000FF, 0x3F00BF, 0x7F007F, 0xBF003F, 0xFF0000,  # fade to red
    0xFF0000, 0xBF0000, 0x7F0000, 0x3F0000, 0x000000,  # dim red
    0x000000, 0x3F3F3F, 0x7F7F7F, 0xBFBFBF, 0xFFFFFF,  # brighten white
    0xFFFFFF, 0xBFBFBF, 0x7F7F7F, 0x3F3F3F, 0x000000,  # dim white
)
DELAY = 0.5
PAUSE = 1.0
FREQUENCY = 2000
# Red, green, blue
PINS = (17, 18, 27)


def split_color(color: int) -> tuple[float, float, float]:
    """Split a 0xRRGGBB colour into red, green and blue duty cycles (0-1)."""

    if not 0 <= color <= 0xFFFFFF:
        raise ValueError(f"Color must be 0x000000-0xFFFFFF, got {color:#x}")

    red = (color & 0xFF0000) >> 16
    green = (color & 0x00FF00) >> 8
    blue = color & 0x0000FF

    return red / 255, green / 255, blue / 255


class RgbLed:
    """Three PWM channels of a common cathode RGB LED."""

    def __init__(self, pins: tuple[int, int, int] = PINS, frequency: int = FREQUENCY):
        with ExitStack() as stack:
            self.red = claim(PWMLED, pins[0], "red led", frequency=frequency)
            stack.callback(self.red.close)
            self.green = claim(PWMLED, pins[1], "green led", frequency=frequency)
            stack.callback(self.green.close)
            self.blue = claim(PWMLED, pins[2], "blue led", frequency=frequency)
            stack.pop_all()

    def __enter__(self) -> "RgbLed":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    @property
    def channels(self) -> tuple[PWMLED, PWMLED, PWMLED]:
        return self.red, self.green, self.blue

    def set_color(self, color: int) -> None:
        for channel, duty in zip(self.channels, split_color(color)):
            channel.value = duty

    def close(self) -> None:
        if self.red.closed:
            return

        self.set_color(0x000000)
        for channel in self.channels:
            channel.close()


def setup() -> RgbLed:
    return RgbLed()


def execute() -> None:
    with setup() as leds, Runner("05_RGB") as runner:
        for _ in runner.loop():
            for color in COLORS:
                Logger.info(f"color = 0x{color:06X}")
                leds.set_color(color)
                if not runner.sleep(DELAY):
                    return

            runner.sleep(PAUSE)
