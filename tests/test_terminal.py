"""Tests for ProcessTerminal's cursor tracking through its own writes."""

from __future__ import annotations

import pytest

from console_framework.terminal import ProcessTerminal


@pytest.fixture
def term(monkeypatch):
    monkeypatch.delenv("CONSOLE_FRAMEWORK_WRITE_LOG", raising=False)
    monkeypatch.setattr(ProcessTerminal, "columns", property(lambda self: 10))
    monkeypatch.setattr(ProcessTerminal, "rows", property(lambda self: 5))
    terminal = ProcessTerminal()
    terminal.written = []
    terminal._raw_write = terminal.written.append
    terminal._cursor = (0, 0)
    return terminal


class TestCursorTracking:
    def test_plain_text_advances(self, term):
        term.write("abc")
        assert term._cursor == (3, 0)
        assert term.written == ["abc"]

    def test_full_row_then_newline_moves_one_row(self, term):
        term.write("-" * 10 + "\n")
        assert term._cursor == (0, 1)

    def test_full_row_stays_on_last_column(self, term):
        term.write("-" * 10)
        assert (term.cursor_left, term.cursor_top) == (9, 0)

    def test_next_character_wraps(self, term):
        term.write("-" * 10)
        term.write("x")
        assert term._cursor == (1, 1)

    def test_carriage_return_cancels_wrap(self, term):
        term.write("-" * 10 + "\r")
        assert term._cursor == (0, 0)
        term.write("x")
        assert term._cursor == (1, 0)

    def test_moving_the_cursor_cancels_wrap(self, term):
        term.write("-" * 10)
        term.cursor_left = 3
        term.write("x")
        assert term._cursor == (4, 0)

    def test_wide_glyph_at_last_column_wraps_whole(self, term):
        term._cursor = (9, 0)
        term.write("日")
        assert term._cursor == (2, 1)

    def test_newline_on_bottom_row_stays_there(self, term):
        term._cursor = (0, 4)
        term.write("-" * 10 + "\n")
        assert term._cursor == (0, 4)

    def test_backspace(self, term):
        term.write("ab\b")
        assert term._cursor == (1, 0)

    def test_color_sequences_take_no_columns(self, term):
        term.write("\x1b[31mab\x1b[0m")
        assert term._cursor == (2, 0)
