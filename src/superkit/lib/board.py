"""
GPIO board access for SuperKit.

Lessons never construct gpiozero devices directly; they go through `claim`
so a missing or busy pin surfaces as a `HardwareError` naming the pin's role.
"""

import os
from typing import Any, TypeVar

from gpiozero import Device, GPIOZeroError
from gpiozero.pins.mock import MockFactory, MockPWMPin

from superkit.lib.config import Config
from superkit.lib.logger import Logger

T = TypeVar("T")


class HardwareError(Exception):
    """Raised when a GPIO pin cannot be claimed or driven."""

    pass


def use_pin_factory(name: str | None = None) -> None:
    """
    Select the gpiozero pin factory used by every device created afterwards.

    Args:
        name (str, optional): "mock" for gpiozero's MockFactory, any other
            factory name gpiozero understands, or blank for gpiozero's default.
            Defaults to config value.
    """

    name = (name if name is not None else Config.get("board", "pin_factory", "")).strip().lower()

    if not name:
        return

    if name == "mock":
        if not isinstance(Device.pin_factory, MockFactory):
            Logger.debug("Using mock pin factory.")
            Device.pin_factory = MockFactory(pin_class=MockPWMPin)
        return

    Logger.debug(f"Using pin factory '{name}'.")
    os.environ["GPIOZERO_PIN_FACTORY"] = name


def claim(device_class: type[T], pin: Any, role: str, **kwargs: Any) -> T:
    """
    Construct a gpiozero device on a pin.

    Args:
        device_class (type): gpiozero device class, e.g. `LED` or `Button`.
        pin: GPIO (BCM) pin number, or a tuple of them for composite devices.
        role (str): Human readable role of the pin, used in errors.
        **kwargs: Passed through to the device constructor.

    Returns:
        The constructed device.

    Raises:
        HardwareError: If gpiozero cannot claim the pin.
    """

    pins = pin if isinstance(pin, tuple) else (pin,)
    try:
        return device_class(*pins, **kwargs)
    except GPIOZeroError as err:
        raise HardwareError(f"Failed to get {role} pin {pin}: {err}") from err


def model() -> str:
    """Return the board model reported by the active pin factory."""

    factory = Device.pin_factory
    if factory is None:
        return "unknown"

    try:
        return str(factory.board_info.model)
    except (AttributeError, GPIOZeroError):
        return "unknown"
