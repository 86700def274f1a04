"""
74HC595 8-bit serial-in, parallel-out shift register.

Used by the shift register LED bar, seven segment, dice and dot matrix
lessons. Bytes are clocked in MSB first on SDI/SRCLK and copied to the
output pins by a pulse on RCLK.
"""

import time
from contextlib import ExitStack

from gpiozero import DigitalOutputDevice

from superkit.lib.board import claim

SDI = 17
RCLK = 18
SRCLK = 27

# Shift register clock pulse width in seconds.
PULSE = 1e-6


def bits_msb_first(data: int) -> list[bool]:
    """Return the eight bits of `data`, most significant first."""

    if not 0 <= data <= 0xFF:
        raise ValueError(f"Shift register data must be 0-255, got {data}")

    return [bool(data & mask) for mask in (0x80, 0x40, 0x20, 0x10, 0x08, 0x04, 0x02, 0x01)]


class HC595:
    """
    A 74HC595 shift register wired to three GPIO outputs.

    Closing the register (or leaving its `with` block) clears the outputs
    before the pins are released.
    """

    def __init__(self, sdi: int = SDI, rclk: int = RCLK, srclk: int = SRCLK):
        """
        Claim the register's pins and drive them low.

        Args:
            sdi (int): Serial data input pin.
            rclk (int): Storage (latch) register clock pin.
            srclk (int): Shift register clock pin.
        """

        with ExitStack() as stack:
            self.sdi = claim(DigitalOutputDevice, sdi, "sdi", initial_value=False)
            stack.callback(self.sdi.close)
            self.rclk = claim(DigitalOutputDevice, rclk, "rclk", initial_value=False)
            stack.callback(self.rclk.close)
            self.srclk = claim(DigitalOutputDevice, srclk, "srclk", initial_value=False)
            stack.pop_all()

        self.closed = False

    def __enter__(self) -> "HC595":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def serial_in(self, data: int) -> None:
        """
        Shift one byte into the register, MSB first.

        Args:
            data (int): Byte to shift, 0-255.
        """

        for bit in bits_msb_first(data):
            if bit:
                self.sdi.on()
            else:
                self.sdi.off()

            # Strobe shift register clock
            self.srclk.on()
            time.sleep(PULSE)
            self.srclk.off()

    def parallel_out(self) -> None:
        """Latch the shifted bits onto the parallel outputs."""

        self.rclk.on()
        time.sleep(PULSE)
        self.rclk.off()

    def write(self, *data: int) -> None:
        """
        Shift in each byte in order, then latch.

        With two chained registers the first byte ends up in the second chip.
        """

        for byte in data:
            self.serial_in(byte)
        self.parallel_out()

    def close(self) -> None:
        if self.closed:
            return

        self.serial_in(0)
        self.parallel_out()

        for pin in (self.sdi, self.rclk, self.srclk):
            pin.off()
            pin.close()

        self.closed = True
