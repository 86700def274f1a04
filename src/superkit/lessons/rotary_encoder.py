"""
Lesson 08: count rotary encoder detents.

CLK and DT are polled; each change of CLK is one step, clockwise when DT
differs from CLK. Pressing the encoder's switch resets the count.
"""

import threading
from contextlib import ExitStack

from gpiozero import Button, DigitalInputDevice

from superkit.lib.board import claim
from superkit.lib.logger import Logger
from superkit.lib.runner import Runner

DT_PIN = 17
CLK_PIN = 18
SW_PIN = 27
DELAY = 0.01


def step(last_clk: bool, clk: bool, dt: bool) -> int:
    """Return +1, -1 or 0 for one poll of the encoder."""

    if clk == last_clk:
        return 0

    return 1 if dt != clk else -1


class Counter:
    """Encoder position shared between the poll loop and the switch callback."""

    def __init__(self):
        self._value = 0
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def add(self, delta: int) -> int:
        with self._lock:
            self._value += delta
            return self._value

    def reset(self) -> None:
        with self._lock:
            self._value = 0
        Logger.info("counter = 0")


def setup() -> tuple[DigitalInputDevice, DigitalInputDevice, Button]:
    # The encoder board carries its own pull-ups on CLK and DT.
    with ExitStack() as stack:
        clk = claim(DigitalInputDevice, CLK_PIN, "clk", pull_up=None, active_state=True)
        stack.callback(clk.close)
        dt = claim(DigitalInputDevice, DT_PIN, "dt", pull_up=None, active_state=True)
        stack.callback(dt.close)
        sw = claim(Button, SW_PIN, "sw", pull_up=True)
        stack.pop_all()

    return clk, dt, sw


def execute() -> None:
    counter = Counter()
    clk, dt, sw = setup()

    with clk, dt, sw, Runner("08_RotaryEncoder") as runner:
        sw.when_pressed = counter.reset
        Logger.info(f"counter = {counter.value}")

        last_clk = clk.is_active
        for _ in runner.loop():
            current_clk = clk.is_active
            delta = step(last_clk, current_clk, dt.is_active)
            if delta:
                Logger.info(f"counter = {counter.add(delta)}")

            last_clk = current_clk
            if not runner.sleep(DELAY):
                break
