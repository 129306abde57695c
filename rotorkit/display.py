"""Buffered character-LCD screen with pending updates, blinking text and timed messages."""

from __future__ import annotations

import time
from collections.abc import Callable
from enum import IntFlag
from typing import Protocol

MAX_SCREEN_BUFFER_COLUMNS = 20
MAX_SCREEN_BUFFER_ROWS = 4
MAX_SCREEN_BUFFER_SIZE = MAX_SCREEN_BUFFER_COLUMNS * MAX_SCREEN_BUFFER_ROWS

TEXT_BLINK_MS = 500
WORK_STRING_SIZE = 32


class Attribute(IntFlag):
    """Per-character display attributes."""

    NONE = 0
    BLINK = 0b00000001


class LcdDevice(Protocol):
    """The character LCD operations the screen buffer needs."""

    def begin(self, columns: int, rows: int) -> None: ...

    def clear(self) -> None: ...

    def no_cursor(self) -> None: ...

    def set_cursor(self, column: int, row: int) -> None: ...

    def print(self, text: str) -> object: ...


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


def _terminated(text: str) -> str:
    """The part of ``text`` before any NUL character."""
    return text.split("\0", 1)[0]


class Display:
    """A screen whose changes are staged in a pending buffer and pushed to the LCD.

    ``service`` is meant to be called often; it writes pending changes at most
    once every ``update_time_ms``, blinks text with the BLINK attribute, and
    restores the previous screen when a timed message expires.
    """

    def __init__(
        self,
        lcd: LcdDevice,
        columns: int,
        rows: int,
        update_time_ms: int = 1000,
        clock: Callable[[], float] = _monotonic_ms,
    ) -> None:
        if columns <= 0 or rows <= 0:
            raise ValueError(f"display size must be positive: {columns}x{rows}")
        if columns * rows > MAX_SCREEN_BUFFER_SIZE:
            raise ValueError(
                f"display of {columns}x{rows} exceeds the {MAX_SCREEN_BUFFER_SIZE} character buffer"
            )
        self.lcd = lcd
        self.columns = columns
        self.rows = rows
        self.update_time_ms = update_time_ms
        self._clock = clock

        size = columns * rows
        self._live = [" "] * size
        self._pending = [" "] * size
        self._revert = [" "] * size
        self._live_attr = [0] * size
        self._pending_attr = [0] * size
        self._revert_attr = [0] * size

        self._dirty = False
        self._print_row = 0
        self._print_column = 0
        self._revert_time = 0.0
        self._revert_pending = False
        self._timed_changes_pending = False
        self._last_blink_state = False
        self._blink_state = False

        now = clock()
        self._next_blink_time = now + TEXT_BLINK_MS
        self._last_update_time = now

    @property
    def size(self) -> int:
        return self.columns * self.rows

    def initialize(self) -> None:
        """Start the LCD and clear everything."""
        self.lcd.begin(self.columns, self.rows)
        self.lcd.no_cursor()
        self.clear()

    def service(self, force_update: int = 0) -> None:
        """Push pending changes, expire timed messages and blink text.

        ``force_update`` 1 pushes regardless of the update interval unless a
        timed message is showing; 2 pushes even then, ending the timed message.
        """
        now = self._clock()
        if self._revert_pending:
            if force_update > 1:
                self.update()
                self._last_update_time = now
                self._revert_pending = False
                self._dirty = False
                return
            if now >= self._revert_time:
                self._revert_back_screen()
                self._revert_pending = False
                return
        elif (
            self._dirty and now - self._last_update_time >= self.update_time_ms
        ) or force_update > 0:
            self.update()
            self._last_update_time = now
            self._dirty = False

        if self._timed_changes_pending:
            self.update()
            self._timed_changes_pending = False
            self._dirty = False
            return

        if now >= self._next_blink_time:
            self._blink_state = not self._blink_state
            self._next_blink_time = now + TEXT_BLINK_MS
            self.redraw()

    def clear_pending_buffer(self) -> None:
        self._pending = [" "] * self.size
        self._pending_attr = [0] * self.size
        self._dirty = True

    def clear(self) -> None:
        """Clear every buffer and the LCD immediately."""
        size = self.size
        self._live = [" "] * size
        self._pending = [" "] * size
        self._revert = [" "] * size
        self._live_attr = [0] * size
        self._pending_attr = [0] * size
        self._revert_attr = [0] * size
        self.lcd.clear()
        self.lcd.no_cursor()
        self._print_row = 0
        self._print_column = 0
        self._revert_pending = False

    def clear_row(self, row: int) -> None:
        for x in range(self.columns):
            index = self._index(x, row)
            if not 0 <= index < self.size:
                break
            self._pending[index] = " "
            self._pending_attr[index] = 0
        self._dirty = True

    def update(self) -> None:
        """Write the characters that differ between pending and live to the LCD."""
        wrote_last = False
        self.lcd.no_cursor()
        self.lcd.set_cursor(0, 0)
        for index in range(self.size):
            if self._live[index] != self._pending[index]:
                if not wrote_last:
                    self.lcd.set_cursor(*self._position(index))
                char = self._pending[index]
                if self._pending_attr[index] & Attribute.BLINK and not self._blink_state:
                    char = " "
                self.lcd.print(char)
                self._live[index] = self._pending[index]
                self._live_attr[index] = self._pending_attr[index]
                wrote_last = True
            elif self._last_blink_state != self._blink_state:
                if self._live_attr[index] & Attribute.BLINK:
                    if not wrote_last:
                        self.lcd.set_cursor(*self._position(index))
                    self.lcd.print(self._live[index] if self._blink_state else " ")
                    wrote_last = True
            else:
                wrote_last = False
        self._last_blink_state = self._blink_state

    def redraw(self) -> None:
        """Write the whole live buffer to the LCD."""
        self.lcd.no_cursor()
        self.lcd.set_cursor(0, 0)
        for index, char in enumerate(self._live):
            self.lcd.set_cursor(*self._position(index))
            if self._live_attr[index] & Attribute.BLINK and not self._blink_state:
                char = " "
            self.lcd.print(char)

    def print_at(self, text: str, x: int, y: int, attribute: int = 0) -> None:
        """Place ``text`` at column ``x`` of row ``y``; what falls off the screen is dropped."""
        base = self._index(x, y)
        for offset, char in enumerate(_terminated(text)[: self.size]):
            index = base + offset
            if 0 <= index < self.size:
                self._pending[index] = char
                self._pending_attr[index] = attribute
        self._dirty = True

    def print(self, text: str, attribute: int = 0) -> None:
        """Print at the running cursor, wrapping lines and scrolling at the bottom."""
        for char in _terminated(text)[: self.size]:
            if char == "\n":
                self._print_column = self.columns
                continue
            if self._print_column >= self.columns:
                self._print_column = 0
                self._print_row += 1
                if self._print_row >= self.rows:
                    self.row_scroll()
                    self._print_row -= 1
            index = self._index(self._print_column, self._print_row)
            self._pending[index] = char
            self._pending_attr[index] = attribute
            self._print_column += 1
        self._dirty = True

    def println(self, text: str) -> None:
        work = _terminated(text)[: WORK_STRING_SIZE - 1]
        if len(work) < WORK_STRING_SIZE - 2:
            work += "\n"
        self.print(work, 0)

    def row_scroll(self) -> None:
        """Move every pending row up by one and blank the bottom row."""
        columns = self.columns
        self._pending = self._pending[columns:] + [" "] * columns
        self._pending_attr = self._pending_attr[columns:] + [0] * columns
        self._dirty = True

    def length(self, text: str) -> int:
        """Characters before any NUL, at most the size of the screen."""
        return min(len(_terminated(text)), self.size)

    def prepare_timed_screen(self, ms_to_display: int) -> None:
        """Save the live screen and start a blank pending screen shown for ``ms_to_display``."""
        self._revert = list(self._live)
        self._revert_attr = list(self._live_attr)
        self._pending = [" "] * self.size
        self._pending_attr = [0] * self.size
        self._revert_pending = True
        self._revert_time = self._clock() + ms_to_display
        self._timed_changes_pending = True

    def pending_text(self) -> list[str]:
        """The pending buffer, one string per row."""
        return self._rows(self._pending)

    def live_text(self) -> list[str]:
        """What has been written to the LCD, one string per row."""
        return self._rows(self._live)

    def _revert_back_screen(self) -> None:
        self._pending = list(self._revert)
        self._pending_attr = list(self._revert_attr)
        self.update()

    def _rows(self, buffer: list[str]) -> list[str]:
        return [
            "".join(buffer[row * self.columns : (row + 1) * self.columns])
            for row in range(self.rows)
        ]

    def _index(self, x: int, y: int) -> int:
        return y * self.columns + x

    def _position(self, index: int) -> tuple[int, int]:
        row, column = divmod(index, self.columns)
        return column, row