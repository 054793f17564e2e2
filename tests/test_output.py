"""Tests for colored output helpers."""

from __future__ import annotations

import random

from console_framework.boxes import ConsoleTable, LineStyle
from console_framework.colors import Color
from console_framework.output import (
    RAINBOW_COLORS,
    clean_rule_char,
    write_bullet_list,
    write_color,
    write_color_line,
    write_horizontal_rule,
    write_rainbow,
    write_rainbow_line,
    write_framed_text,
    write_table,
)

from .virtual_terminal import VirtualTerminal


class TestWriteColor:
    def test_text_drawn_in_color(self):
        term = VirtualTerminal()
        write_color(term, "hi", Color.RED, Color.BLUE)
        assert term.line(0) == "hi"
        assert term.cell(0, 0).foreground == Color.RED
        assert term.cell(1, 0).background == Color.BLUE

    def test_colors_restored(self):
        term = VirtualTerminal()
        term.foreground = Color.GREEN
        write_color(term, "hi", Color.RED, Color.BLUE)
        assert term.foreground == Color.GREEN
        assert term.background == Color.DEFAULT

    def test_none_keeps_current_color(self):
        term = VirtualTerminal()
        term.foreground = Color.GREEN
        write_color(term, "x")
        assert term.cell(0, 0).foreground == Color.GREEN

    def test_line_break_written_after_restore(self):
        term = VirtualTerminal()
        write_color_line(term, "hi", Color.RED, Color.BLUE)
        assert term.cursor_top == 1
        assert term.cursor_left == 0
        assert term.writes[-1] == "\n"
        assert term.cell(2, 0).background == Color.DEFAULT


class TestRainbow:
    def test_colors_cycle(self):
        term = VirtualTerminal()
        write_rainbow(term, "abcdef")
        drawn = [term.cell(col, 0).foreground for col in range(6)]
        assert drawn == [*RAINBOW_COLORS, RAINBOW_COLORS[0]]

    def test_random_order_uses_rng(self):
        term = VirtualTerminal()
        write_rainbow(term, "rainbow", random_order=True, rng=random.Random(7))
        expected_rng = random.Random(7)
        expected = [expected_rng.choice(RAINBOW_COLORS) for _ in "rainbow"]
        assert [term.cell(col, 0).foreground for col in range(7)] == expected

    def test_colors_restored(self):
        term = VirtualTerminal()
        term.foreground = Color.CYAN
        write_rainbow_line(term, "abc")
        assert term.foreground == Color.CYAN
        assert term.cursor_top == 1


class TestHorizontalRule:
    def test_accepted_chars_kept(self):
        assert clean_rule_char("=") == "="
        assert clean_rule_char("═") == "═"

    def test_other_chars_fall_back_to_dash(self):
        assert clean_rule_char("@") == "-"
        assert clean_rule_char("--") == "-"
        assert clean_rule_char(None) == "-"

    def test_spans_window_by_default(self):
        term = VirtualTerminal(columns=20)
        write_horizontal_rule(term, "=")
        assert term.line(0) == "=" * 20
        # filling the last column does not add an empty row
        assert term.cursor_top == 1
        assert term.line(1) == ""

    def test_length_within_window(self):
        term = VirtualTerminal(columns=20)
        write_horizontal_rule(term, "~", length=5)
        assert term.line(0) == "~~~~~"
        assert term.cursor_top == 1

    def test_out_of_range_length_spans_window(self):
        for length in (0, -3, 21):
            term = VirtualTerminal(columns=20)
            write_horizontal_rule(term, length=length)
            assert term.line(0) == "-" * 20

    def test_rule_color(self):
        term = VirtualTerminal(columns=20)
        write_horizontal_rule(term, "#", Color.DARK_GREEN, 3)
        assert term.cell(0, 0).foreground == Color.DARK_GREEN
        assert term.foreground == Color.DEFAULT


class TestBulletList:
    def test_items_one_per_line(self):
        term = VirtualTerminal(columns=40)
        write_bullet_list(term, ["one", "two"])
        assert term.screen()[:3] == [" - one", " - two", ""]

    def test_long_items_wrap_under_text(self):
        term = VirtualTerminal(columns=30)
        write_bullet_list(term, ["alpha beta gamma delta epsilon zeta"])
        assert term.line(0) == " - alpha beta gamma delta"
        assert term.line(1) == "   epsilon zeta"

    def test_explicit_width(self):
        term = VirtualTerminal(columns=80)
        write_bullet_list(term, ["alpha beta gamma delta epsilon zeta"], width=30)
        assert term.line(1) == "   epsilon zeta"

    def test_wide_bullet_is_measured_in_columns(self):
        term = VirtualTerminal(columns=40)
        write_bullet_list(term, ["item"], bullet=" ∙ ")
        assert term.line(0) == " ∙ item"

    def test_starts_on_fresh_line(self):
        term = VirtualTerminal(columns=40)
        term.write("heading")
        write_bullet_list(term, ["one"])
        assert term.line(0) == "heading"
        assert term.line(1) == " - one"

    def test_bullet_wider_than_quarter_writes_nothing(self):
        term = VirtualTerminal(columns=30)
        write_bullet_list(term, ["item"], bullet="########")
        assert term.writes == []

    def test_narrow_window_writes_nothing(self):
        term = VirtualTerminal(columns=14)
        write_bullet_list(term, ["item"])
        assert term.writes == []

    def test_empty_list_writes_nothing(self):
        term = VirtualTerminal(columns=40)
        write_bullet_list(term, [])
        assert term.writes == []

    def test_bullet_and_item_colors(self):
        term = VirtualTerminal(columns=40)
        write_bullet_list(term, ["one"], bullet_color=Color.YELLOW, item_color=Color.CYAN)
        assert term.cell(1, 0).foreground == Color.YELLOW
        assert term.cell(3, 0).foreground == Color.CYAN
        assert term.foreground == Color.DEFAULT


class TestTable:
    def _table(self) -> ConsoleTable:
        table = ConsoleTable(column_labels=["n", "roman"], outside_border=LineStyle.DOUBLE)
        table.add_row(["4", "IV"])
        return table

    def test_lines_written_in_order(self):
        term = VirtualTerminal(columns=40)
        write_table(term, self._table())
        assert term.screen()[:6] == [
            "╔═══╤═══════╗",
            "║ n │ roman ║",
            "╟───┼───────╢",
            "║ 4 │ IV    ║",
            "╚═══╧═══════╝",
            "",
        ]

    def test_starts_on_fresh_line_and_restores_colors(self):
        term = VirtualTerminal(columns=40)
        term.write("heading")
        write_table(term, self._table(), Color.CYAN, Color.DARK_BLUE)
        assert term.line(1).startswith("╔")
        assert term.cell(0, 1).foreground == Color.CYAN
        assert term.cell(0, 1).background == Color.DARK_BLUE
        assert term.foreground == Color.DEFAULT
        assert term.background == Color.DEFAULT

    def test_empty_table_writes_nothing(self):
        term = VirtualTerminal()
        write_table(term, ConsoleTable())
        assert term.writes == []


class TestFramedText:
    def test_frame_spans_window_by_default(self):
        term = VirtualTerminal(columns=12)
        write_framed_text(term, "one two three")
        assert term.screen()[:4] == ["┌──────────┐", "│one two   │", "│three     │", "└──────────┘"]
        assert term.cursor_top == 4

    def test_explicit_width_double_and_padded(self):
        term = VirtualTerminal(columns=40)
        write_framed_text(term, "hi", width=6, double=True, padded=True, color=Color.YELLOW)
        assert term.screen()[:5] == ["╔════╗", "║    ║", "║ hi ║", "║    ║", "╚════╝"]
        assert term.cell(0, 0).foreground == Color.YELLOW
        assert term.foreground == Color.DEFAULT
