"""
HD44780 character LCD (LCD1602) driven over a 4-bit parallel bus.

Only the write direction is used: R/W is tied to ground on the kit's
breadboard layout, so the driver waits fixed execution times instead of
polling the busy flag.
"""

import time
from contextlib import ExitStack

from gpiozero import DigitalOutputDevice

from superkit.lib.board import claim

# Control pins
RS = 27
E = 22
# Data pins D4-D7
DATA = (25, 24, 23, 18)

COLUMNS = 16
ROWS = 2
ROW_OFFSETS = (0x00, 0x40)

# Instructions
CLEAR_DISPLAY = 0x01
RETURN_HOME = 0x02
ENTRY_MODE_SET = 0x04
DISPLAY_CONTROL = 0x08
FUNCTION_SET = 0x20
SET_DDRAM_ADDR = 0x80

# Flags
ENTRY_LEFT = 0x02
DISPLAY_ON = 0x04
TWO_LINES = 0x08

# Execution times in seconds
POWER_ON_DELAY = 0.05
INIT_DELAY = 0.0045
SHORT_INIT_DELAY = 0.00015
COMMAND_DELAY = 0.00005
HOME_DELAY = 0.002
PULSE = 1e-6


class LCD1602:
    """A 16x2 HD44780 display in 4-bit mode."""

    def __init__(
        self,
        rs: int = RS,
        e: int = E,
        data: tuple[int, int, int, int] = DATA,
        columns: int = COLUMNS,
        rows: int = ROWS,
    ):
        if len(data) != 4:
            raise ValueError(f"A 4-bit bus needs exactly 4 data pins, got {len(data)}")
        if not 1 <= rows <= len(ROW_OFFSETS):
            raise ValueError(f"rows must be 1-{len(ROW_OFFSETS)}, got {rows}")

        self.columns = columns
        self.rows = rows
        self.data = []
        with ExitStack() as stack:
            self.rs = claim(DigitalOutputDevice, rs, "register select", initial_value=False)
            stack.callback(self.rs.close)
            self.e = claim(DigitalOutputDevice, e, "enable", initial_value=False)
            stack.callback(self.e.close)
            for n, pin in enumerate(data, start=4):
                self.data.append(claim(DigitalOutputDevice, pin, f"data D{n}", initial_value=False))
                stack.callback(self.data[-1].close)
            stack.pop_all()

        self.closed = False

    def __enter__(self) -> "LCD1602":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _pulse_enable(self) -> None:
        # Data is latched on the falling edge of E
        self.e.on()
        time.sleep(PULSE)
        self.e.off()
        time.sleep(COMMAND_DELAY)

    def _write_nibble(self, nibble: int) -> None:
        for bit, pin in enumerate(self.data):
            if nibble >> bit & 0x01:
                pin.on()
            else:
                pin.off()
        self._pulse_enable()

    def _send(self, value: int, char_mode: bool) -> None:
        if char_mode:
            self.rs.on()
        else:
            self.rs.off()

        self._write_nibble(value >> 4 & 0x0F)
        self._write_nibble(value & 0x0F)

    def init(self) -> None:
        """Reset the controller into 4-bit, two line mode and clear it."""

        time.sleep(POWER_ON_DELAY)
        self.rs.off()

        # Three 8-bit function sets put the controller in a known state
        # whatever mode it powered up in, then switch to 4-bit.
        self._write_nibble(0x03)
        time.sleep(INIT_DELAY)
        self._write_nibble(0x03)
        time.sleep(INIT_DELAY)
        self._write_nibble(0x03)
        time.sleep(SHORT_INIT_DELAY)
        self._write_nibble(0x02)

        self.command(FUNCTION_SET | (TWO_LINES if self.rows > 1 else 0))
        self.command(DISPLAY_CONTROL | DISPLAY_ON)
        self.clear()
        self.command(ENTRY_MODE_SET | ENTRY_LEFT)

    def command(self, value: int) -> None:
        """Send an instruction byte."""

        if not 0 <= value <= 0xFF:
            raise ValueError(f"Command must be 0-255, got {value}")

        self._send(value, char_mode=False)

    def write_byte(self, value: int) -> None:
        """Write one character code at the cursor."""

        if not 0 <= value <= 0xFF:
            raise ValueError(f"Character must be 0-255, got {value}")

        self._send(value, char_mode=True)

    def clear(self) -> None:
        self.command(CLEAR_DISPLAY)
        time.sleep(HOME_DELAY)

    def home(self) -> None:
        self.command(RETURN_HOME)
        time.sleep(HOME_DELAY)

    def set_cursor(self, column: int, row: int) -> None:
        """Move the cursor to a zero-based column and row."""

        if not 0 <= row < self.rows:
            raise ValueError(f"Row must be 0-{self.rows - 1}, got {row}")
        if not 0 <= column < self.columns:
            raise ValueError(f"Column must be 0-{self.columns - 1}, got {column}")

        self.command(SET_DDRAM_ADDR | (column + ROW_OFFSETS[row]))

    def write(self, text: str) -> None:
        """Write text at the cursor; characters outside ASCII print as '?'."""

        for byte in text.encode("ascii", errors="replace"):
            self.write_byte(byte)

    def message(self, text: str) -> list[str]:
        """
        Clear the display and show up to `rows` lines split on newlines.

        Lines longer than `columns` are cut off at the right edge.

        Returns:
            list[str]: The lines that were written.
        """

        self.clear()
        lines = [line[: self.columns] for line in text.split("\n")[: self.rows]]
        for row, line in enumerate(lines):
            if row:
                self.set_cursor(0, row)
            self.write(line)

        return lines

    def close(self) -> None:
        if self.closed:
            return

        for pin in (self.rs, self.e, *self.data):
            pin.off()
            pin.close()

        self.closed = True
