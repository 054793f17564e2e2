"""Tests for argument re-assembly."""

from __future__ import annotations

from console_framework.args import ArgPair, reparse_args


class TestArgPair:
    def test_named(self):
        assert str(ArgPair("value", "name")) == "name=value"

    def test_unnamed(self):
        assert str(ArgPair("value")) == "value"
        assert str(ArgPair("value", "  ")) == "value"


class TestReparseArgs:
    def test_plain_arguments(self):
        assert reparse_args(["one", "two"]) == [ArgPair("one"), ArgPair("two")]

    def test_quoted_name_and_value(self):
        assert reparse_args(["name=some value"]) == [ArgPair('"some value"', "name")]

    def test_split_by_shell(self):
        assert reparse_args(["name", "=", "some value"]) == [ArgPair('"some value"', "name")]

    def test_trailing_equals(self):
        assert reparse_args(["name=", "value"]) == [ArgPair("value", "name")]

    def test_double_equals_collapse(self):
        assert reparse_args(["name==", "value"]) == [ArgPair("value", "name")]
        assert reparse_args(["name===", "value"]) == [ArgPair("value", "name")]

    def test_name_without_value(self):
        assert reparse_args(["flag", "name="]) == [ArgPair("flag"), ArgPair("", "name")]

    def test_spaced_plain_value_quoted(self):
        assert reparse_args(["a b"]) == [ArgPair('"a b"')]

    def test_empty(self):
        assert reparse_args([]) == []
