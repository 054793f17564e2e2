"""Tests for LineBuffer editing and its terminal rendering contract."""

from __future__ import annotations

import random

import pytest

from console_framework.errors import OutOfRangeError
from console_framework.line_buffer import LineBuffer

from .virtual_terminal import VirtualTerminal


class TestLineBufferEdits:
    def test_starts_with_cursor_at_end_of_initial_text(self):
        buf = LineBuffer(4, "abc")
        assert buf.text == "abc"
        assert buf.cursor == 3

    def test_insert_advances_cursor(self):
        buf = LineBuffer(0)
        buf.insert("a")
        buf.insert("b")
        assert buf.text == "ab"
        assert buf.cursor == 2

    def test_insert_in_middle(self):
        buf = LineBuffer(0, "ac")
        buf.cursor = 1
        buf.insert("b")
        assert buf.text == "abc"
        assert buf.cursor == 2

    def test_insert_at_leaves_cursor(self):
        buf = LineBuffer(0, "bc")
        buf.insert_at(0, "a")
        assert buf.text == "abc"
        assert buf.cursor == 2

    def test_insert_at_rejects_out_of_range(self):
        buf = LineBuffer(0, "ab")
        with pytest.raises(OutOfRangeError):
            buf.insert_at(3, "x")
        with pytest.raises(OutOfRangeError):
            buf.insert_at(-1, "x")

    def test_remove_at_rejects_offset_equal_to_length(self):
        buf = LineBuffer(0, "ab")
        with pytest.raises(OutOfRangeError):
            buf.remove_at(2)

    def test_out_of_range_error_is_an_index_error(self):
        with pytest.raises(IndexError):
            LineBuffer(0).remove_at(0)

    def test_negative_start_column_is_a_programmer_error(self):
        with pytest.raises(ValueError):
            LineBuffer(-1)

    def test_backspace_at_field_start_is_noop(self):
        buf = LineBuffer(0, "abc")
        buf.move_home()
        assert buf.delete_backward() is False
        assert buf.text == "abc"
        assert buf.cursor == 0

    def test_delete_at_end_is_noop(self):
        buf = LineBuffer(0, "abc")
        assert buf.delete_forward() is False
        assert buf.text == "abc"

    def test_delete_forward_keeps_cursor(self):
        buf = LineBuffer(0, "abc")
        buf.cursor = 1
        assert buf.delete_forward() is True
        assert buf.text == "ac"
        assert buf.cursor == 1

    def test_cursor_moves_are_clamped(self):
        buf = LineBuffer(0, "ab")
        buf.move_right()
        assert buf.cursor == 2
        buf.cursor = -5
        assert buf.cursor == 0
        buf.move_left()
        assert buf.cursor == 0
        buf.cursor = 99
        assert buf.cursor == 2

    def test_set_text_replaces_content(self):
        buf = LineBuffer(0, "hello")
        buf.cursor = 1
        buf.set_text("hi")
        assert buf.text == "hi"
        assert buf.cursor == 2

    def test_cursor_stays_in_range_for_random_edits(self):
        rng = random.Random(1234)
        buf = LineBuffer(0)
        for _ in range(500):
            op = rng.choice(["insert", "back", "del", "left", "right", "home", "end"])
            if op == "insert":
                buf.insert(rng.choice("abc"))
            elif op == "back":
                buf.delete_backward()
            elif op == "del":
                buf.delete_forward()
            elif op == "left":
                buf.move_left()
            elif op == "right":
                buf.move_right()
            elif op == "home":
                buf.move_home()
            else:
                buf.move_end()
            assert 0 <= buf.cursor <= len(buf)


class TestLineBufferRender:
    def test_render_draws_field_and_restores_cursor(self):
        term = VirtualTerminal()
        term.write("> ")
        buf = LineBuffer(term.cursor_left, "abc")
        buf.cursor = 1
        buf.render(term)
        assert term.line(0) == "> abc"
        assert term.cursor_left == 3

    def test_render_pads_over_removed_character(self):
        term = VirtualTerminal()
        buf = LineBuffer(0, "abc")
        buf.render(term)
        buf.delete_backward()
        buf.render(term)
        assert term.line(0) == "ab"
        assert term.cursor_left == 2

    def test_render_with_transform(self):
        term = VirtualTerminal()
        buf = LineBuffer(2, "secret")
        buf.render(term, lambda ch: "*")
        assert term.line(0) == "  ******"

    def test_partial_render_from_offset(self):
        term = VirtualTerminal()
        term.write("xxxxxx")
        buf = LineBuffer(0, "abcdef")
        buf.render(term, from_offset=4)
        assert term.line(0) == "xxxxef"
        assert term.cursor_left == 6

    def test_render_blanks_every_column_of_removed_wide_character(self):
        term = VirtualTerminal()
        buf = LineBuffer(0, "a日")
        buf.render(term)
        assert buf.drawn_width == 3
        buf.delete_backward()
        buf.render(term)
        assert term.writes[-1] == "a  "
        assert term.line(0) == "a"
        assert buf.drawn_width == 1

    def test_render_blanks_what_replaced_text_no_longer_covers(self):
        term = VirtualTerminal()
        buf = LineBuffer(0, "日本語")
        buf.render(term)
        buf.set_text("abc")
        buf.render(term)
        assert term.writes[-1] == "abc   "

    def test_field_width_counts_display_columns(self):
        buf = LineBuffer(5, "a日")
        assert buf.field_width() == 3
        assert buf.field_width(lambda ch: "*") == 2
