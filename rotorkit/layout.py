"""Positioned printing on the buffered screen: centred, aligned, padded and timed text."""

from __future__ import annotations

from rotorkit.display import WORK_STRING_SIZE, Display

_WORK_LIMIT = WORK_STRING_SIZE - 1


def _terminated(text: str) -> str:
    """The part of ``text`` before any NUL character."""
    return text.split("\0", 1)[0]


def _spaces(current_length: int, count: int) -> str:
    """Up to ``count`` spaces, without growing a work string past its limit."""
    return " " * max(0, min(count, _WORK_LIMIT - current_length))


def _left_padded(text: str, padding: int) -> str:
    work = _terminated(text)[:_WORK_LIMIT]
    return work + _spaces(len(work), padding)


def _right_padded(text: str, padding: int) -> str:
    work = _spaces(0, padding)
    return (work + _terminated(text))[:_WORK_LIMIT]


def _truncated(text: str, field_size: int) -> str:
    text = _terminated(text)
    return text[:field_size] if field_size >= 0 else text


class LayoutDisplay(Display):
    """A screen that can place text centred, aligned to an edge, padded or for a set time."""

    def print_center(self, text: str, y: int, attribute: int = 0) -> None:
        """Centre ``text`` on row ``y``."""
        x = self.columns // 2 - self.length(text) // 2
        self.print_at(text, x, y, attribute)

    def print_center_padded(self, text: str, y: int, padding: int) -> None:
        """Centre ``text`` with ``padding`` spaces added on each side."""
        work = _right_padded(text, padding)
        work += _spaces(len(work), padding)
        self.print_center(work, y)

    def print_center_fixed_field_size(self, text: str, y: int, field_size: int) -> None:
        """Centre ``text`` in a field of ``field_size`` characters, cutting it if longer."""
        spaces_to_add = field_size - len(_terminated(text))
        half = spaces_to_add // 2 if spaces_to_add > 0 else 0
        work = _spaces(0, half)
        work = (work + _truncated(text, field_size))[:_WORK_LIMIT]
        if spaces_to_add > 0:
            work += _spaces(len(work), half)
            if spaces_to_add % 2:
                work = (work + " ")[:_WORK_LIMIT]
        self.print_center(work, y)

    def print_center_entire_row(self, text: str, y: int, attribute: int = 0) -> None:
        """Blank row ``y`` and centre ``text`` on it."""
        self.clear_row(y)
        self.print_center(text, y, attribute)

    def print_center_screen(self, *args: str, attribute: int = 0) -> None:
        """Centre one to four lines of text vertically and horizontally."""
        if not 1 <= len(args) <= 4:
            raise TypeError(f"print_center_screen takes 1 to 4 lines, got {len(args)}")
        if len(args) == 1:
            rows = [(self.rows - 1) // 2]
        elif len(args) == 2 and self.rows == 2:
            rows = [0, 1]
        elif len(args) >= 3 and self.rows == 4:
            rows = list(range(len(args)))
        else:
            middle = self.rows // 2
            rows = [middle - 1, middle, middle + 1, middle + 3][: len(args)]
        for text, row in zip(args, rows):
            self.print_center(text, row, attribute)

    def print_right(self, text: str, y: int) -> None:
        self.print_at(text, self.columns - self.length(text), y)

    def print_right_padded(self, text: str, y: int, padding: int) -> None:
        """Right-align ``text`` preceded by ``padding`` spaces."""
        self.print_right(_right_padded(text, padding), y)

    def print_right_fixed_field_size(self, text: str, y: int, field_size: int) -> None:
        work = _truncated(text, field_size)
        self.print_right_padded(work, y, field_size - len(_terminated(text)))

    def print_left(self, text: str, y: int) -> None:
        self.print_at(text, 0, y)

    def print_left_padded(self, text: str, y: int, padding: int) -> None:
        """Left-align ``text`` followed by ``padding`` spaces."""
        self.print_left(_left_padded(text, padding), y)

    def print_left_fixed_field_size(self, text: str, y: int, field_size: int) -> None:
        work = _truncated(text, field_size)
        self.print_left_padded(work, y, field_size - len(_terminated(text)))

    def print_top_left(self, text: str) -> None:
        self.print_at(text, 0, 0)

    def print_top_right(self, text: str) -> None:
        self.print_at(text, self.columns - self.length(text), 0)

    def print_bottom_left(self, text: str) -> None:
        self.print_at(text, 0, self.rows - 1)

    def print_bottom_right(self, text: str) -> None:
        self.print_at(text, self.columns - self.length(text), self.rows - 1)

    def print_center_timed_message(
        self, *args: str, ms_to_display: int, attribute: int = 0
    ) -> None:
        """Show one to four centred lines for ``ms_to_display`` ms, then restore the screen."""
        if not 1 <= len(args) <= 4:
            raise TypeError(f"print_center_timed_message takes 1 to 4 lines, got {len(args)}")
        self.prepare_timed_screen(ms_to_display)
        self.print_center_screen(*args, attribute=attribute)