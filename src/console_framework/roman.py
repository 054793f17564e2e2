"""Roman numeral value type, 1 through 4999."""

from __future__ import annotations

import re
from functools import total_ordering

from console_framework.errors import InvalidRomanNumeralError

MIN_VALUE = 1
MAX_VALUE = 4999

_SUBTRACTIVE: tuple[tuple[int, str], ...] = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"),
    (1, "I"),
)

_ADDITIVE: tuple[tuple[int, str], ...] = (
    (1000, "M"), (500, "D"), (100, "C"), (50, "L"), (10, "X"), (5, "V"), (1, "I"),
)

_TOKEN_VALUES: dict[str, int] = {symbol: value for value, symbol in _SUBTRACTIVE}

# Subtractive pairs first so "CM" is read as one token, not "C" then "M".
_TOKEN_RE = re.compile("CM|CD|XC|XL|IX|IV|M|D|C|L|X|V|I")

_SOLITARY = ("D", "L", "V")


def _render(value: int, table: tuple[tuple[int, str], ...], lower: bool) -> str:
    if not MIN_VALUE <= value <= MAX_VALUE:
        raise ValueError(f"{value} cannot be written as a roman numeral ({MIN_VALUE}-{MAX_VALUE})")
    parts: list[str] = []
    for amount, symbol in table:
        count, value = divmod(value, amount)
        parts.append(symbol * count)
    text = "".join(parts)
    return text.lower() if lower else text


def to_roman(value: int, *, additive: bool = False, lower: bool = False) -> str:
    """Write *value* as ``IV`` style (default) or ``IIII`` style numerals."""
    return _render(value, _ADDITIVE if additive else _SUBTRACTIVE, lower)


def parse_roman(text: str) -> int:
    """Read a roman numeral, either notation, any case.

    Raises :class:`InvalidRomanNumeralError` for anything that is not made
    of I, V, X, L, C, D and M in non-increasing order, uses D, L or V more
    than once, or falls outside 1-4999.
    """
    worker = text.strip().upper()
    if not worker or any(ch not in "IVXLCDM" for ch in worker):
        raise InvalidRomanNumeralError(f"not a roman numeral: {text!r}")
    if any(worker.count(ch) > 1 for ch in _SOLITARY):
        raise InvalidRomanNumeralError(f"D, L and V may appear only once: {text!r}")

    values = [_TOKEN_VALUES[token] for token in _TOKEN_RE.findall(worker)]
    if any(later > earlier for earlier, later in zip(values, values[1:])):
        raise InvalidRomanNumeralError(f"numerals out of order: {text!r}")

    total = sum(values)
    if not MIN_VALUE <= total <= MAX_VALUE:
        raise InvalidRomanNumeralError(f"{text!r} is outside {MIN_VALUE}-{MAX_VALUE}")
    return total


@total_ordering
class RomanNumeral:
    """An integer between 1 and 4999 that prints as a roman numeral.

    Compares and hashes like its integer value and equals plain ints.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int | str = MIN_VALUE) -> None:
        if isinstance(value, str):
            self._value = parse_roman(value)
        else:
            if not MIN_VALUE <= value <= MAX_VALUE:
                raise ValueError(f"{value} cannot be written as a roman numeral ({MIN_VALUE}-{MAX_VALUE})")
            self._value = int(value)

    @property
    def value(self) -> int:
        return self._value

    @property
    def subtractive(self) -> str:
        return to_roman(self._value)

    @property
    def additive(self) -> str:
        return to_roman(self._value, additive=True)

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return self.subtractive

    def __repr__(self) -> str:
        return f"RomanNumeral({self.subtractive!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RomanNumeral):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, RomanNumeral):
            return self._value < other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)
