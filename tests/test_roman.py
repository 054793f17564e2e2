"""Tests for roman numerals."""

from __future__ import annotations

import pytest

from console_framework.errors import InvalidRomanNumeralError
from console_framework.roman import RomanNumeral, parse_roman, to_roman


class TestToRoman:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1, "I"), (4, "IV"), (9, "IX"), (14, "XIV"), (40, "XL"), (1994, "MCMXCIV"), (4999, "MMMMCMXCIX")],
    )
    def test_subtractive(self, value, expected):
        assert to_roman(value) == expected

    def test_additive(self):
        assert to_roman(4, additive=True) == "IIII"
        assert to_roman(1994, additive=True) == "MDCCCCLXXXXIIII"

    def test_lower_case(self):
        assert to_roman(14, lower=True) == "xiv"

    @pytest.mark.parametrize("value", [0, -1, 5000])
    def test_out_of_range(self, value):
        with pytest.raises(ValueError):
            to_roman(value)


class TestParseRoman:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("MCMXCIV", 1994), ("mcmxciv", 1994), ("IIII", 4), ("MDCCCCX", 1910), (" xl ", 40), ("MMMMCMXCIX", 4999)],
    )
    def test_valid(self, text, expected):
        assert parse_roman(text) == expected

    @pytest.mark.parametrize("text", ["", "ABC", "VV", "LL", "DD", "IIV", "IM", "MMMMM"])
    def test_invalid(self, text):
        with pytest.raises(InvalidRomanNumeralError):
            parse_roman(text)

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_roman("Q")


class TestRomanNumeral:
    def test_default_is_one(self):
        assert RomanNumeral().value == 1

    def test_from_int_and_text_agree(self):
        assert RomanNumeral(1994) == RomanNumeral("MCMXCIV")

    def test_views(self):
        numeral = RomanNumeral(9)
        assert str(numeral) == "IX"
        assert numeral.subtractive == "IX"
        assert numeral.additive == "VIIII"
        assert int(numeral) == 9
        assert repr(numeral) == "RomanNumeral('IX')"

    def test_compares_with_ints(self):
        assert RomanNumeral(5) == 5
        assert RomanNumeral(5) < 6
        assert RomanNumeral(5) >= RomanNumeral(5)
        assert sorted([RomanNumeral(10), RomanNumeral(2)]) == [2, 10]

    def test_bool_is_not_an_int_here(self):
        assert RomanNumeral(1) != True  # noqa: E712

    def test_hash_matches_value(self):
        assert len({RomanNumeral(3), RomanNumeral("III")}) == 1

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            RomanNumeral(0)
