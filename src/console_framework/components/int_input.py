"""Integer-only line input."""

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

logger = logging.getLogger(__name__)

EditorState = Literal["editing", "done"]


@dataclass
class IntInputOptions:
    prompt: str = ""
    prompt_color: Color | None = None
    input_color: Color | None = None


class IntegerLineEditor:
    """Line editor that accepts digits and one leading minus sign.

    Every insert or removal repaints the whole field, since shifting
    digits changes what is visible. Enter finishes with the parsed value,
    or ``None`` if the text is not an integer (empty, or a lone ``-``).
    Escape clears the field and finishes with ``None``.
    """

    def __init__(
        self,
        terminal: Terminal,
        options: IntInputOptions | None = None,
        keybindings: EditorKeybindingsManager | None = None,
    ) -> None:
        self._terminal = terminal
        self._options = options or IntInputOptions()
        self._keybindings = keybindings or get_editor_keybindings()
        self._buffer: LineBuffer | None = None
        self.state: EditorState = "editing"

    @property
    def text(self) -> str:
        return "" if self._buffer is None else self._buffer.text

    @property
    def value(self) -> int | None:
        try:
            return int(self.text)
        except ValueError:
            return None

    def run(self) -> int | None:
        opts = self._options
        terminal = self._terminal
        logger.debug("Integer input started")

        write_color(terminal, opts.prompt, opts.prompt_color)
        with terminal.reading_keys(), color_scope(terminal, opts.input_color):
            self.begin()
            while self.state == "editing":
                self.handle_key(terminal.read_key())
        terminal.write_line()

        value = self.value
        logger.debug("Integer input finished: %s", "no value" if value is None else "value")
        return value

    def begin(self) -> None:
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
            self.state = "done"
        elif action.kind == "backspace":
            if buffer.delete_backward():
                buffer.render(terminal)
        elif action.kind == "delete":
            if buffer.delete_forward():
                buffer.render(terminal)
        elif action.kind in ("left", "up"):
            buffer.move_left()
            buffer.place_cursor(terminal)
        elif action.kind in ("right", "down"):
            buffer.move_right()
            buffer.place_cursor(terminal)
        elif action.kind == "minus":
            if buffer.at_start and not buffer.text.startswith("-"):
                buffer.insert("-")
                buffer.render(terminal)
        elif action.kind == "digit":
            # Nothing may go in front of the sign.
            if buffer.at_start and buffer.text.startswith("-"):
                return
            buffer.insert(action.char)
            buffer.render(terminal)


def read_int(
    terminal: Terminal,
    prompt: str = "",
    prompt_color: Color | None = None,
    input_color: Color | None = None,
    keybindings: EditorKeybindingsManager | None = None,
) -> int | None:
    """Read an integer; ``None`` if cancelled or not a number."""
    options = IntInputOptions(prompt=prompt, prompt_color=prompt_color, input_color=input_color)
    return IntegerLineEditor(terminal, options, keybindings).run()
