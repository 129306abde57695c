import pytest

from rotorkit.display import Attribute, Display


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class FakeLcd:
    def __init__(self) -> None:
        self.columns = 0
        self.rows = 0
        self.grid: list[list[str]] = []
        self.column = 0
        self.row = 0
        self.cleared = 0

    def begin(self, columns, rows):
        self.columns = columns
        self.rows = rows
        self.grid = [[" "] * columns for _ in range(rows)]

    def clear(self):
        self.grid = [[" "] * self.columns for _ in range(self.rows)]
        self.column = self.row = 0
        self.cleared += 1

    def no_cursor(self):
        pass

    def set_cursor(self, column, row):
        self.column, self.row = column, row

    def print(self, text):
        for char in text:
            if self.column >= self.columns:
                self.column = 0
                self.row += 1
            self.grid[self.row][self.column] = char
            self.column += 1

    def screen(self):
        return ["".join(row) for row in self.grid]


def make(columns=16, rows=2):
    lcd = FakeLcd()
    clock = FakeClock()
    display = Display(lcd, columns, rows, 1000, clock)
    display.initialize()
    return display, lcd, clock


def test_initialize_clears_lcd():
    display, lcd, _ = make()
    assert lcd.cleared == 1
    assert lcd.screen() == [" " * 16, " " * 16]
    assert display.live_text() == [" " * 16, " " * 16]


def test_print_at_only_touches_pending():
    display, lcd, _ = make()
    display.print_at("HELLO", 2, 1)
    assert display.pending_text()[1] == "  HELLO" + " " * 9
    assert display.live_text()[1] == " " * 16
    assert lcd.screen()[1] == " " * 16


def test_forced_service_pushes_to_lcd():
    display, lcd, _ = make()
    display.print_at("HELLO", 2, 1)
    display.service(1)
    assert display.live_text() == display.pending_text()
    assert lcd.screen() == display.live_text()


def test_dirty_buffer_waits_for_update_interval():
    display, lcd, clock = make()
    display.print_at("AZ", 0, 0)
    clock.now = 999
    display.service()
    assert display.live_text()[0].startswith("  ")
    clock.now = 1000
    display.service()
    assert display.live_text()[0].startswith("AZ")
    assert lcd.screen()[0].startswith("AZ")


def test_print_at_clips_past_end_of_screen():
    display, _, _ = make(columns=4, rows=2)
    display.print_at("ABCDEF", 2, 1)
    assert display.pending_text() == ["    ", "  AB"]


def test_print_at_wraps_into_next_row():
    display, _, _ = make(columns=4, rows=2)
    display.print_at("ABCDEF", 2, 0)
    assert display.pending_text() == ["  AB", "CDEF"]


def test_print_at_stops_at_nul():
    display, _, _ = make(columns=4, rows=1)
    display.print_at("AB\0CD", 0, 0)
    assert display.pending_text() == ["AB  "]


def test_length_stops_at_nul_and_screen_size():
    display, _, _ = make(columns=4, rows=1)
    assert display.length("AB\0CD") == 2
    assert display.length("ABCDEFGH") == 4


def test_println_moves_to_next_line():
    display, _, _ = make(columns=4, rows=2)
    display.println("AB")
    display.print("CD")
    assert display.pending_text() == ["AB  ", "CD  "]


def test_row_scroll_blanks_bottom_row():
    display, _, _ = make(columns=3, rows=2)
    display.print_at("ABCDEF", 0, 0)
    display.row_scroll()
    assert display.pending_text() == ["DEF", "   "]


def test_clear_row_only_clears_that_row():
    display, _, _ = make(columns=3, rows=2)
    display.print_at("ABCDEF", 0, 0)
    display.clear_row(0)
    assert display.pending_text() == ["   ", "DEF"]


def test_clear_pending_buffer():
    display, _, _ = make(columns=3, rows=1)
    display.print_at("ABC", 0, 0)
    display.clear_pending_buffer()
    assert display.pending_text() == ["   "]


def test_blinking_text_toggles_on_lcd():
    display, lcd, clock = make(columns=4, rows=1)
    display.print_at("X", 0, 0, Attribute.BLINK)
    display.service(1)
    assert display.live_text() == ["X   "]
    assert lcd.screen() == ["    "]
    clock.now = 500
    display.service()
    assert lcd.screen() == ["X   "]
    clock.now = 1000
    display.service()
    assert lcd.screen() == ["    "]


def test_timed_screen_shows_then_reverts():
    display, lcd, clock = make(columns=8, rows=1)
    display.print_at("HELLO", 0, 0)
    display.service(1)
    display.prepare_timed_screen(2000)
    display.print_at("MSG", 0, 0)
    clock.now = 100
    display.service()
    assert lcd.screen() == ["MSG     "]
    clock.now = 2100
    display.service()
    assert lcd.screen() == ["HELLO   "]
    assert display.live_text() == ["HELLO   "]


def test_force_two_ends_timed_screen():
    display, lcd, clock = make(columns=8, rows=1)
    display.print_at("HELLO", 0, 0)
    display.service(1)
    display.prepare_timed_screen(2000)
    display.print_at("MSG", 0, 0)
    display.service(2)
    clock.now = 2100
    display.service()
    assert lcd.screen() == ["MSG     "]


def test_clear_empties_everything():
    display, lcd, _ = make(columns=4, rows=1)
    display.print_at("ABCD", 0, 0)
    display.service(1)
    display.clear()
    assert display.live_text() == ["    "]
    assert display.pending_text() == ["    "]
    assert lcd.cleared == 2


def test_redraw_rewrites_lcd_from_live_buffer():
    display, lcd, _ = make(columns=4, rows=1)
    display.print_at("ABCD", 0, 0)
    display.service(1)
    lcd.clear()
    display.redraw()
    assert lcd.screen() == ["ABCD"]


@pytest.mark.parametrize("columns, rows", [(0, 2), (16, 0), (21, 4), (41, 2)])
def test_invalid_sizes_rejected(columns, rows):
    with pytest.raises(ValueError):
        Display(FakeLcd(), columns, rows, 1000, FakeClock())