"""
# SuperKit

SuperKit is a set of Python lessons for the Sunfounder Super Starter Kit on
the Raspberry Pi: blinking LEDs, buttons, PWM, an RGB LED, a DC motor, a
rotary encoder, a 555 timer, 74HC595 shift registers driving LEDs, a
7-segment display and a dot matrix, and an LCD1602.

---

## Hardware

Every lesson uses BCM GPIO numbering and the wiring from the kit's own
tutorial. GPIO is driven through gpiozero, so any pin factory gpiozero
supports will work. Select `mock` in the `[board]` section of the config
(or pass `--mock`) to run a lesson without a Pi.

---

## How to Use This Documentation

- `superkit.lessons` documents each lesson and its pin assignments.
- `superkit.lib` holds the shared run loop, configuration, logging and the
  drivers for the 74HC595 and LCD1602.
- Private helpers (`_method`, `_Class`) are minimally documented.

---

## License

Code is MIT licensed; documentation is CC-BY-SA 4.0.
"""

from importlib.metadata import version

__version__ = version("superkit")
