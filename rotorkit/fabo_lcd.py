"""HD44780 character LCD driven in 4-bit mode through a PCF8574 I2C expander."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable

from rotorkit.i2c import I2CBus

PCF8574_SLAVE_ADDRESS = 0x20

# commands
LCD_CLEARDISPLAY = 0x01
LCD_RETURNHOME = 0x02
LCD_ENTRYMODESET = 0x04
LCD_DISPLAYCONTROL = 0x08
LCD_CURSORSHIFT = 0x10
LCD_FUNCTIONSET = 0x20
LCD_SETCGRAMADDR = 0x40
LCD_SETDDRAMADDR = 0x80

# entry mode flags
LCD_ENTRYRIGHT = 0x00
LCD_ENTRYLEFT = 0x02
LCD_ENTRYSHIFTINCREMENT = 0x01
LCD_ENTRYSHIFTDECREMENT = 0x00

# display on/off control flags
LCD_DISPLAYON = 0x04
LCD_DISPLAYOFF = 0x00
LCD_CURSORON = 0x02
LCD_CURSOROFF = 0x00
LCD_BLINKON = 0x01
LCD_BLINKOFF = 0x00

# display/cursor shift flags
LCD_DISPLAYMOVE = 0x08
LCD_CURSORMOVE = 0x00
LCD_MOVERIGHT = 0x04
LCD_MOVELEFT = 0x00

# function set flags
LCD_8BITMODE = 0x10
LCD_4BITMODE = 0x00
LCD_2LINE = 0x08
LCD_1LINE = 0x00
LCD_5x10DOTS = 0x04
LCD_5x8DOTS = 0x00

# expander port bits
RS = 0b00000001
RW = 0b00000010
EN = 0b00000100
BL = 0b00001000
DB4 = 0b00010000
DB5 = 0b00100000
DB6 = 0b01000000
DB7 = 0b10000000

_MAX_ROWS = 4


class FaBoLCD:
    """A character LCD behind a PCF8574 expander, with the backlight on."""

    def __init__(
        self,
        bus: I2CBus,
        address: int = PCF8574_SLAVE_ADDRESS,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        self._bus = bus
        self.address = address
        self._sleep = sleep
        self._backlight = BL
        self._display_function = LCD_4BITMODE | LCD_1LINE | LCD_5x8DOTS
        self._display_control = 0
        self._display_mode = 0
        self._num_lines = 1
        self._row_offsets = [0, 0, 0, 0]

    def begin(self, columns: int, rows: int, dotsize: int = LCD_5x8DOTS) -> None:
        """Run the HD44780 4-bit initialisation sequence and clear the screen."""
        if rows > 1:
            self._display_function |= LCD_2LINE
        self._num_lines = rows
        self.set_row_offsets(0x00, 0x40, 0x00 + columns, 0x40 + columns)
        if dotsize != LCD_5x8DOTS and rows == 1:
            self._display_function |= LCD_5x10DOTS

        # The controller needs more than 40 ms after power rises.
        self._delay_us(50000)
        self._write_i2c(0x00)

        # Three attempts at 8-bit mode, then switch to 4-bit.
        self._write4bits(DB4 | DB5)
        self._delay_us(4500)
        self._write4bits(DB4 | DB5)
        self._delay_us(4500)
        self._write4bits(DB4 | DB5)
        self._delay_us(150)
        self._write4bits(DB5)

        self.command(LCD_FUNCTIONSET | self._display_function)

        self._display_control = LCD_DISPLAYON | LCD_CURSOROFF | LCD_BLINKOFF
        self.display()
        self.clear()

        self._display_mode = LCD_ENTRYLEFT | LCD_ENTRYSHIFTDECREMENT
        self.command(LCD_ENTRYMODESET | self._display_mode)

    def set_row_offsets(self, row0: int, row1: int, row2: int, row3: int) -> None:
        self._row_offsets = [row0, row1, row2, row3]

    def clear(self) -> None:
        self.command(LCD_CLEARDISPLAY)
        self._delay_us(2000)

    def home(self) -> None:
        self.command(LCD_RETURNHOME)
        self._delay_us(2000)

    def set_cursor(self, column: int, row: int) -> None:
        """Move the cursor, clamping the row to the rows the display has."""
        row = min(row, _MAX_ROWS - 1, self._num_lines - 1)
        row = max(row, 0)
        self.command(LCD_SETDDRAMADDR | (column + self._row_offsets[row]))

    def no_display(self) -> None:
        self._set_control(LCD_DISPLAYON, False)

    def display(self) -> None:
        self._set_control(LCD_DISPLAYON, True)

    def no_cursor(self) -> None:
        self._set_control(LCD_CURSORON, False)

    def cursor(self) -> None:
        self._set_control(LCD_CURSORON, True)

    def no_blink(self) -> None:
        self._set_control(LCD_BLINKON, False)

    def blink(self) -> None:
        self._set_control(LCD_BLINKON, True)

    def scroll_display_left(self) -> None:
        self.command(LCD_CURSORSHIFT | LCD_DISPLAYMOVE | LCD_MOVELEFT)

    def scroll_display_right(self) -> None:
        self.command(LCD_CURSORSHIFT | LCD_DISPLAYMOVE | LCD_MOVERIGHT)

    def left_to_right(self) -> None:
        self._set_mode(LCD_ENTRYLEFT, True)

    def right_to_left(self) -> None:
        self._set_mode(LCD_ENTRYLEFT, False)

    def autoscroll(self) -> None:
        self._set_mode(LCD_ENTRYSHIFTINCREMENT, True)

    def no_autoscroll(self) -> None:
        self._set_mode(LCD_ENTRYSHIFTINCREMENT, False)

    def create_char(self, location: int, charmap: Iterable[int]) -> None:
        """Load a custom glyph into one of the eight CGRAM slots."""
        location &= 0x7
        self.command(LCD_SETCGRAMADDR | (location << 3))
        for row in list(charmap)[:8]:
            self.write(row)

    def command(self, value: int) -> None:
        self._send(value, 0)

    def write(self, value: int) -> int:
        self._send(value, RS)
        return 1

    def print(self, text: str | bytes) -> int:
        """Write text at the cursor; returns the number of characters sent."""
        data = text.encode("ascii", errors="replace") if isinstance(text, str) else bytes(text)
        return sum(self.write(byte) for byte in data)

    def _set_control(self, flag: int, on: bool) -> None:
        if on:
            self._display_control |= flag
        else:
            self._display_control &= ~flag
        self.command(LCD_DISPLAYCONTROL | self._display_control)

    def _set_mode(self, flag: int, on: bool) -> None:
        if on:
            self._display_mode |= flag
        else:
            self._display_mode &= ~flag
        self.command(LCD_ENTRYMODESET | self._display_mode)

    def _send(self, value: int, mode: int) -> None:
        value &= 0xFF
        high = value & 0xF0
        low = (value << 4) & 0xF0
        self._write4bits(high | mode)
        self._write4bits(low | mode)

    def _pulse_enable(self, value: int) -> None:
        self._write_i2c(value & ~EN)
        self._delay_us(1)
        self._write_i2c(value | EN)
        self._delay_us(1)
        self._write_i2c(value & ~EN)
        self._delay_us(100)

    def _write4bits(self, value: int) -> None:
        self._write_i2c(value)
        self._pulse_enable(value)

    def _write_i2c(self, data: int) -> None:
        self._bus.write(self.address, bytes([(data | self._backlight) & 0xFF]))

    def _delay_us(self, microseconds: int) -> None:
        self._sleep(microseconds / 1_000_000)