"""Editable single-line character buffer bound to a terminal field."""

from __future__ import annotations

from typing import Callable

from console_framework.errors import OutOfRangeError
from console_framework.terminal import Terminal
from console_framework.utils import visible_width

DisplayTransform = Callable[[str], str]


def _identity(ch: str) -> str:
    return ch


class LineBuffer:
    """Characters being edited plus a cursor offset into them.

    The field starts at ``start_column`` on the terminal, captured once
    when editing begins. The cursor offset always stays within
    ``0 <= cursor <= len(buffer)``; attempts to move it outside are
    clamped.
    """

    def __init__(self, start_column: int, text: str = "") -> None:
        if start_column < 0:
            raise ValueError(f"field start column must not be negative, got {start_column}")
        self._start_column = start_column
        self._chars: list[str] = list(text)
        self._cursor = len(self._chars)
        self._drawn_width = 0

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return self.text

    @property
    def text(self) -> str:
        return "".join(self._chars)

    @property
    def start_column(self) -> int:
        return self._start_column

    @property
    def cursor(self) -> int:
        return self._cursor

    @cursor.setter
    def cursor(self, value: int) -> None:
        self._cursor = max(0, min(value, len(self._chars)))

    @property
    def at_start(self) -> bool:
        return self._cursor == 0

    @property
    def at_end(self) -> bool:
        return self._cursor == len(self._chars)

    # -- primitive edits ------------------------------------------------------

    def insert_at(self, offset: int, ch: str) -> None:
        """Splice *ch* in at *offset*. The cursor is left where it was."""
        if not 0 <= offset <= len(self._chars):
            raise OutOfRangeError(offset, len(self._chars), inclusive=True)
        self._chars.insert(offset, ch)

    def remove_at(self, offset: int) -> str:
        """Remove and return the character at *offset*."""
        if not 0 <= offset < len(self._chars):
            raise OutOfRangeError(offset, len(self._chars), inclusive=False)
        removed = self._chars.pop(offset)
        if self._cursor > len(self._chars):
            self._cursor = len(self._chars)
        return removed

    # -- cursor-relative edits -----------------------------------------------

    def insert(self, ch: str) -> None:
        """Insert at the cursor and move the cursor past the new character."""
        self.insert_at(self._cursor, ch)
        self._cursor += 1

    def delete_backward(self) -> bool:
        """Remove the character left of the cursor. False at field start."""
        if self._cursor == 0:
            return False
        self.remove_at(self._cursor - 1)
        self._cursor -= 1
        return True

    def delete_forward(self) -> bool:
        """Remove the character under the cursor. False at the end."""
        if self._cursor >= len(self._chars):
            return False
        self.remove_at(self._cursor)
        return True

    def move_left(self) -> None:
        self.cursor = self._cursor - 1

    def move_right(self) -> None:
        self.cursor = self._cursor + 1

    def move_home(self) -> None:
        self._cursor = 0

    def move_end(self) -> None:
        self._cursor = len(self._chars)

    def clear(self) -> None:
        self._chars.clear()
        self._cursor = 0

    def set_text(self, text: str) -> None:
        """Replace the whole content; the cursor moves to the end."""
        self._chars = list(text)
        self._cursor = len(self._chars)

    # -- terminal contract ----------------------------------------------------

    def column_of(self, offset: int, transform: DisplayTransform = _identity) -> int:
        """Terminal column at which the character at *offset* is drawn."""
        shown = "".join(transform(ch) for ch in self._chars[:offset])
        return self._start_column + visible_width(shown)

    def place_cursor(self, terminal: Terminal, transform: DisplayTransform = _identity) -> None:
        """Move the terminal cursor to the buffer's cursor."""
        terminal.cursor_left = self.column_of(self._cursor, transform)

    def field_width(self, transform: DisplayTransform = _identity) -> int:
        """Display columns the whole buffer takes when drawn through *transform*."""
        return self.column_of(len(self._chars), transform) - self._start_column

    @property
    def drawn_width(self) -> int:
        """Display columns the field took when it was last rendered."""
        return self._drawn_width

    def render(
        self,
        terminal: Terminal,
        transform: DisplayTransform = _identity,
        *,
        from_offset: int = 0,
    ) -> None:
        """Repaint the field from *from_offset* to the end.

        Characters are drawn through *transform* (a mask function for
        hidden input). When the field is now narrower than it was last
        drawn, blanks cover the columns it no longer reaches. The terminal
        cursor ends up back at the buffer cursor.
        """
        width = self.field_width(transform)
        pad = max(self._drawn_width - width, 0)
        terminal.cursor_left = self.column_of(from_offset, transform)
        shown = "".join(transform(ch) for ch in self._chars[from_offset:])
        terminal.write(shown + " " * pad)
        self._drawn_width = width
        self.place_cursor(terminal, transform)
