"""Masked line input for passwords and other secrets.

Two variants share one options object:

* :class:`MaskedLineEditor` / :func:`read_line_masked` reads key by key
  and only ever draws the mask character.
* :func:`read_line_show_then_cover` lets the terminal read the line
  normally, then paints over what was typed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from console_framework.colors import Color, color_scope
from console_framework.keybindings import EditorKeybindingsManager, get_editor_keybindings
from console_framework.keys import KeyEvent
from console_framework.line_buffer import LineBuffer
from console_framework.output import write_color
from console_framework.terminal import Terminal
from console_framework.utils import visible_width

logger = logging.getLogger(__name__)

MASK_CHARACTERS: tuple[str, ...] = ("*", " ", "X", "x", "+", "-", ".", "#", "~", "?", "■", "∙")
DEFAULT_MASK_CHAR = MASK_CHARACTERS[0]

EditorState = Literal["editing", "done", "cancelled"]


def get_mask_char(desired: str | None = None) -> str:
    """Return *desired* if it is an accepted mask character, else ``"*"``."""
    if desired is None or desired not in MASK_CHARACTERS:
        return DEFAULT_MASK_CHAR
    return desired


@dataclass
class MaskedInputOptions:
    """Settings for one masked read.

    ``None`` colors keep whatever the terminal is currently using.
    """

    prompt: str = ""
    prompt_color: Color | None = None
    input_color: Color | None = None
    mask_char: str = DEFAULT_MASK_CHAR

    def __post_init__(self) -> None:
        self.mask_char = get_mask_char(self.mask_char)


class MaskedLineEditor:
    """Line editor that shows one mask character per typed character.

    Supports insert at the cursor, Backspace, Delete and left/right
    movement (up/down act as left/right). Enter finishes with the typed
    text; Escape discards it and finishes with ``""``.
    """

    def __init__(
        self,
        terminal: Terminal,
        options: MaskedInputOptions | None = None,
        keybindings: EditorKeybindingsManager | None = None,
    ) -> None:
        self._terminal = terminal
        self._options = options or MaskedInputOptions()
        self._keybindings = keybindings or get_editor_keybindings()
        self._buffer: LineBuffer | None = None
        self.state: EditorState = "editing"

    @property
    def value(self) -> str:
        if self._buffer is None or self.state == "cancelled":
            return ""
        return self._buffer.text

    def _mask(self, ch: str) -> str:
        return self._options.mask_char

    def run(self) -> str:
        """Show the prompt, read until Enter or Escape and return the text."""
        opts = self._options
        terminal = self._terminal
        logger.debug("Masked input started")

        write_color(terminal, opts.prompt, opts.prompt_color)
        with terminal.reading_keys(), color_scope(terminal, opts.input_color):
            self.begin()
            while self.state == "editing":
                self.handle_key(terminal.read_key())
        terminal.write_line()

        logger.debug("Masked input finished: %s", self.state)
        return self.value

    def begin(self) -> None:
        """Start a fresh session with the field at the current cursor column."""
        self._buffer = LineBuffer(self._terminal.cursor_left)
        self.state = "editing"

    def handle_key(self, event: KeyEvent) -> None:
        if self._buffer is None:
            self.begin()
        buffer = self._buffer
        terminal = self._terminal
        action = self._keybindings.classify(event)

        if action.kind == "enter":
            self.state = "done"
        elif action.kind == "escape":
            buffer.clear()
            self.state = "cancelled"
        elif action.kind == "backspace":
            if buffer.delete_backward():
                buffer.render(terminal, self._mask, from_offset=buffer.cursor)
        elif action.kind == "delete":
            if buffer.delete_forward():
                buffer.render(terminal, self._mask, from_offset=buffer.cursor)
        elif action.kind in ("left", "up"):
            buffer.move_left()
            buffer.place_cursor(terminal, self._mask)
        elif action.kind in ("right", "down"):
            buffer.move_right()
            buffer.place_cursor(terminal, self._mask)
        elif action.char is not None:
            offset = buffer.cursor
            buffer.insert(action.char)
            # Mask glyphs all look alike: redraw only from the insert point.
            buffer.render(terminal, self._mask, from_offset=offset)


def read_line_masked(
    terminal: Terminal,
    prompt: str = "",
    prompt_color: Color | None = None,
    input_color: Color | None = None,
    mask_char: str | None = None,
    keybindings: EditorKeybindingsManager | None = None,
) -> str:
    """Read a line, echoing only *mask_char*. Escape returns ``""``."""
    options = MaskedInputOptions(
        prompt=prompt,
        prompt_color=prompt_color,
        input_color=input_color,
        mask_char=mask_char or DEFAULT_MASK_CHAR,
    )
    return MaskedLineEditor(terminal, options, keybindings).run()


def read_line_show_then_cover(
    terminal: Terminal,
    prompt: str = "",
    prompt_color: Color | None = None,
    input_color: Color | None = None,
    mask_char: str | None = None,
) -> str:
    """Read a line visibly, then overwrite it with mask characters.

    Editing is whatever the terminal's own line discipline offers. After
    the line is read the cursor sits at the start of the next row; the
    typed text on the row above is covered, one mask per display column,
    and the cursor put back.
    """
    options = MaskedInputOptions(
        prompt=prompt,
        prompt_color=prompt_color,
        input_color=input_color,
        mask_char=mask_char or DEFAULT_MASK_CHAR,
    )

    write_color(terminal, options.prompt, options.prompt_color)
    start_column = terminal.cursor_left
    with color_scope(terminal, options.input_color):
        text = terminal.read_line()

    if text:
        row = terminal.cursor_top
        column = terminal.cursor_left
        terminal.cursor_top = row - 1
        terminal.cursor_left = start_column
        write_color(terminal, options.mask_char * visible_width(text), options.input_color)
        terminal.cursor_left = column
        terminal.cursor_top = row

    return text
