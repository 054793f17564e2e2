"""Tests for Color and color_scope."""

from __future__ import annotations

import pytest

from console_framework.colors import Color, color_scope

from .virtual_terminal import VirtualTerminal


class TestColor:
    @pytest.mark.parametrize("name", ["darkgreen", "Dark Green", "DARK_GREEN", "dark-green"])
    def test_parse_variants(self, name):
        assert Color.parse(name) is Color.DARK_GREEN

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            Color.parse("chartreuse")

    def test_sgr_codes(self):
        assert Color.RED.foreground_sgr == "\x1b[91m"
        assert Color.DARK_BLUE.background_sgr == "\x1b[44m"
        assert Color.DEFAULT.foreground_sgr == "\x1b[39m"


class TestColorScope:
    def test_applies_and_restores(self):
        term = VirtualTerminal()
        term.foreground = Color.GRAY
        with color_scope(term, Color.RED, Color.BLUE):
            assert term.foreground == Color.RED
            assert term.background == Color.BLUE
        assert term.foreground == Color.GRAY
        assert term.background == Color.DEFAULT

    def test_none_leaves_color_alone(self):
        term = VirtualTerminal()
        term.background = Color.BLACK
        with color_scope(term, Color.RED):
            assert term.background == Color.BLACK

    def test_restores_changes_made_inside(self):
        term = VirtualTerminal()
        with color_scope(term):
            term.foreground = Color.YELLOW
        assert term.foreground == Color.DEFAULT

    def test_restores_on_exception(self):
        term = VirtualTerminal()
        with pytest.raises(RuntimeError):
            with color_scope(term, Color.RED, Color.WHITE):
                raise RuntimeError("boom")
        assert term.foreground == Color.DEFAULT
        assert term.background == Color.DEFAULT

    def test_nested_scopes(self):
        term = VirtualTerminal()
        with color_scope(term, Color.RED):
            with color_scope(term, Color.GREEN):
                assert term.foreground == Color.GREEN
            assert term.foreground == Color.RED
        assert term.foreground == Color.DEFAULT
