"""Terminal abstraction for key-at-a-time interaction.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal``
implementation over ``sys.stdin``/``sys.stdout`` that reads single keys
with echo and line buffering turned off, addresses the cursor absolutely
and sets colors via ANSI escape sequences.

``ProcessTerminal`` asks the terminal for the cursor position once (a
device status report) and from then on tracks it through its own writes.
After a cooked :meth:`ProcessTerminal.read_line` the terminal itself has
moved the cursor, so the position is asked for again on next use.
"""

from __future__ import annotations

import codecs
import logging
import os
import re
import select
import sys
import termios
import tty
from collections import deque
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from typing import Protocol

import grapheme

from console_framework.colors import Color
from console_framework.keys import KeyEvent, parse_key
from console_framework.stdin_buffer import StdinBuffer
from console_framework.utils import strip_ansi, visible_width

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_CURSOR_POSITION_QUERY = "\x1b[6n"
_CURSOR_POSITION_RE = re.compile(r"\x1b\[(\d+);(\d+)R")
_MOVE_TO_FMT = "\x1b[{};{}H"

# Seconds to wait for the rest of an escape sequence before treating a
# lone ESC as the Escape key.
_ESCAPE_TIMEOUT = 0.05
# Seconds to wait for the terminal to answer a cursor position query.
_CURSOR_REPORT_TIMEOUT = 0.5

_CONTROL_SPLIT_RE = re.compile(r"([\r\n\b])")


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for the terminal operations the editors rely on."""

    def read_key(self) -> KeyEvent: ...

    def read_line(self) -> str: ...

    def reading_keys(self) -> AbstractContextManager[None]: ...

    def write(self, data: str) -> None: ...

    def write_line(self, data: str = "") -> None: ...

    def flush(self) -> None: ...

    @property
    def cursor_left(self) -> int: ...

    @cursor_left.setter
    def cursor_left(self, value: int) -> None: ...

    @property
    def cursor_top(self) -> int: ...

    @cursor_top.setter
    def cursor_top(self, value: int) -> None: ...

    @property
    def foreground(self) -> Color: ...

    @foreground.setter
    def foreground(self, value: Color) -> None: ...

    @property
    def background(self) -> Color: ...

    @background.setter
    def background(self, value: Color) -> None: ...

    @property
    def columns(self) -> int: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal implementation backed by ``sys.stdin``/``sys.stdout``.

    Key reads switch the tty out of canonical mode with echo off via
    :mod:`termios`; the previous attributes are always restored.
    """

    def __init__(self) -> None:
        self._stdin_buffer = StdinBuffer()
        self._pending: deque[str] = deque()
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._cursor: tuple[int, int] | None = None
        self._wrap_pending = False
        self._foreground = Color.DEFAULT
        self._background = Color.DEFAULT
        self._key_mode_depth = 0
        self._original_termios: list | None = None
        self._write_log_path: str = os.environ.get("CONSOLE_FRAMEWORK_WRITE_LOG", "")

    # -- properties ---------------------------------------------------------

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(sys.stdout.fileno()).columns
        except (ValueError, OSError):
            return 80

    @property
    def rows(self) -> int:
        try:
            return os.get_terminal_size(sys.stdout.fileno()).lines
        except (ValueError, OSError):
            return 24

    @property
    def cursor_left(self) -> int:
        return self._ensure_cursor()[0]

    @cursor_left.setter
    def cursor_left(self, value: int) -> None:
        _, row = self._ensure_cursor()
        self._move_to(value, row)

    @property
    def cursor_top(self) -> int:
        return self._ensure_cursor()[1]

    @cursor_top.setter
    def cursor_top(self, value: int) -> None:
        col, _ = self._ensure_cursor()
        self._move_to(col, value)

    @property
    def foreground(self) -> Color:
        return self._foreground

    @foreground.setter
    def foreground(self, value: Color) -> None:
        self._foreground = value
        self._raw_write(value.foreground_sgr)

    @property
    def background(self) -> Color:
        return self._background

    @background.setter
    def background(self, value: Color) -> None:
        self._background = value
        self._raw_write(value.background_sgr)

    # -- key mode -----------------------------------------------------------

    @contextmanager
    def reading_keys(self) -> Iterator[None]:
        """Keep echo and line buffering off for a whole editing session.

        Without this, keys typed while the editor is repainting would be
        echoed by the tty driver before the editor reads them.
        """
        self._enter_key_mode()
        try:
            yield
        finally:
            self._leave_key_mode()

    def _enter_key_mode(self) -> None:
        self._key_mode_depth += 1
        if self._key_mode_depth > 1 or not sys.stdin.isatty():
            return

        fd = sys.stdin.fileno()
        self._original_termios = termios.tcgetattr(fd)
        mode = termios.tcgetattr(fd)
        mode[tty.LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN)
        mode[tty.CC][termios.VMIN] = 1
        mode[tty.CC][termios.VTIME] = 0
        termios.tcsetattr(fd, termios.TCSADRAIN, mode)
        logger.debug("Entered key mode on fd %d", fd)

    def _leave_key_mode(self) -> None:
        self._key_mode_depth -= 1
        if self._key_mode_depth > 0 or self._original_termios is None:
            return

        fd = sys.stdin.fileno()
        termios.tcsetattr(fd, termios.TCSADRAIN, self._original_termios)
        self._original_termios = None
        logger.debug("Left key mode on fd %d", fd)

    # -- input --------------------------------------------------------------

    def read_key(self) -> KeyEvent:
        """Block until a recognised key arrives and return it."""
        with self.reading_keys():
            while True:
                while not self._pending:
                    self._fill_pending()
                data = self._pending.popleft()
                event = parse_key(data)
                if event is not None:
                    return event
                logger.debug("Ignoring unrecognised input sequence %r", data)

    def read_line(self) -> str:
        """Read one line with the terminal's own echo and line editing."""
        self.flush()
        line = sys.stdin.readline()
        if not line:
            raise EOFError("stdin closed")
        # The tty echoed the line, so our notion of the cursor is stale.
        self._cursor = None
        self._wrap_pending = False
        return line.rstrip("\r\n")

    def _fill_pending(self) -> None:
        fd = sys.stdin.fileno()
        self.flush()
        self._pending.extend(self._stdin_buffer.process(self._read_chunk(fd, None)))
        while self._stdin_buffer.pending:
            chunk = self._read_chunk(fd, _ESCAPE_TIMEOUT)
            if chunk:
                self._pending.extend(self._stdin_buffer.process(chunk))
            else:
                self._pending.extend(self._stdin_buffer.flush())

    def _read_chunk(self, fd: int, timeout: float | None) -> str:
        if timeout is not None:
            ready, _, _ = select.select([fd], [], [], timeout)
            if not ready:
                return ""
        raw = os.read(fd, 4096)
        if not raw:
            raise EOFError("stdin closed")
        return self._decoder.decode(raw)

    # -- write --------------------------------------------------------------

    def write(self, data: str) -> None:
        """Write data to stdout and optionally to the write log."""
        self._raw_write(data)
        if self._cursor is not None:
            self._advance(data)

        if self._write_log_path:
            try:
                with open(self._write_log_path, "a", encoding="utf-8") as f:
                    f.write(data)
            except OSError:
                logger.debug("Could not append to write log %s", self._write_log_path)

    def write_line(self, data: str = "") -> None:
        self.write(data + "\n")

    def flush(self) -> None:
        sys.stdout.flush()

    # -- private: cursor tracking ------------------------------------------

    def _ensure_cursor(self) -> tuple[int, int]:
        if self._cursor is None:
            self._cursor = self._query_cursor()
        return self._cursor

    def _query_cursor(self) -> tuple[int, int]:
        """Ask the terminal where the cursor is (zero-based column, row)."""
        if not (sys.stdin.isatty() and sys.stdout.isatty()):
            return (0, 0)

        fd = sys.stdin.fileno()
        with self.reading_keys():
            self._raw_write(_CURSOR_POSITION_QUERY)
            received = ""
            while True:
                chunk = self._read_chunk(fd, _CURSOR_REPORT_TIMEOUT)
                if not chunk:
                    logger.warning("Terminal did not report the cursor position")
                    self._pending.extend(self._stdin_buffer.process(received))
                    return (0, 0)
                received += chunk
                match = _CURSOR_POSITION_RE.search(received)
                if match:
                    break

        # Keys typed before the report arrived are still input.
        leftover = received[: match.start()] + received[match.end() :]
        if leftover:
            self._pending.extend(self._stdin_buffer.process(leftover))
        return (int(match.group(2)) - 1, int(match.group(1)) - 1)

    def _advance(self, data: str) -> None:
        """Follow *data* across the screen the way the terminal moves its cursor.

        Filling the last column leaves the cursor on it with a wrap pending;
        the line only wraps once the next printable character arrives, and
        a carriage return or newline cancels the wrap.
        """
        col, row = self._cursor
        columns = self.columns
        last_row = self.rows - 1
        pending = self._wrap_pending
        for part in _CONTROL_SPLIT_RE.split(data):
            if part == "\n":
                col, pending = 0, False
                row = min(row + 1, last_row)
            elif part == "\r":
                col, pending = 0, False
            elif part == "\b":
                col, pending = max(col - 1, 0), False
            elif part:
                for cluster in grapheme.graphemes(strip_ansi(part)):
                    width = visible_width(cluster)
                    if not width:
                        continue
                    # A wide glyph that does not fit wraps whole.
                    if pending or col + width > columns:
                        col, pending = 0, False
                        row = min(row + 1, last_row)
                    col += width
                    if col >= columns:
                        col, pending = columns - 1, True
        self._cursor = (col, row)
        self._wrap_pending = pending

    def _move_to(self, col: int, row: int) -> None:
        col = max(0, min(col, self.columns - 1))
        row = max(0, min(row, self.rows - 1))
        self._raw_write(_MOVE_TO_FMT.format(row + 1, col + 1))
        self._cursor = (col, row)
        self._wrap_pending = False

    # -- private: raw write ------------------------------------------------

    def _raw_write(self, data: str) -> None:
        """Write directly to stdout; stream errors reach the caller."""
        sys.stdout.write(data)
        sys.stdout.flush()
