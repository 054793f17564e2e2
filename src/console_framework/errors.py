"""Exception types raised by console-framework.

User-input mistakes never raise; these cover programmer errors and
parsing helpers that are called directly.
"""

from __future__ import annotations


class ConsoleFrameworkError(Exception):
    """Base class for all library errors."""


class OutOfRangeError(ConsoleFrameworkError, IndexError):
    """An edit offset fell outside the buffer it was applied to."""

    def __init__(self, offset: int, length: int, *, inclusive: bool) -> None:
        upper = f"{length}]" if inclusive else f"{length})"
        super().__init__(f"offset {offset} not in [0, {upper}")
        self.offset = offset
        self.length = length


class InvalidRomanNumeralError(ConsoleFrameworkError, ValueError):
    """Text could not be read as a roman numeral."""
