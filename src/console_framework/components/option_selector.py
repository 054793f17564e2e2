"""OptionSelector: pick one of a fixed list of options with the arrow keys.

The list is written once, below an optional title and instructions line,
followed by an input prompt. Up/down move a highlight through the options
and copy the highlighted option's text into the input field; typing edits
the field freely. Enter accepts the highlighted option.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Generic, Literal, TypeVar

from console_framework.colors import Color, color_scope
from console_framework.keybindings import EditorKeybindingsManager, get_editor_keybindings
from console_framework.keys import KeyEvent
from console_framework.line_buffer import LineBuffer
from console_framework.output import write_color, write_color_line
from console_framework.terminal import Terminal
from console_framework.utils import visible_width

logger = logging.getLogger(__name__)

T = TypeVar("T")

INSTRUCTIONS_TEXT = (
    "type to make a prediction; up and down arrow to select; "
    "enter key to go; escape key to cancel"
)

SelectorState = Literal["browsing", "selected", "cancelled"]


@total_ordering
@dataclass(frozen=True, eq=False)
class OptionItem(Generic[T]):
    """One selectable option.

    Items order by ``sort_key`` and then ``text``. Two items are equal when
    their values are equal and their texts match ignoring case.
    """

    text: str
    value: T
    sort_key: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionItem):
            return NotImplemented
        return self.value == other.value and self.text.casefold() == other.text.casefold()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OptionItem):
            return NotImplemented
        return (self.sort_key, self.text) < (other.sort_key, other.text)

    def __hash__(self) -> int:
        return hash(self.text.casefold())

    def __str__(self) -> str:
        return self.text


@dataclass
class OptionSelectorOptions:
    """Look and feel of an :class:`OptionSelector`.

    Defaults: white title, dark gray instructions, gray options, white on
    dark green for the highlighted option, gray prompt and input, all on
    black.
    """

    title: str = ""
    title_color: Color = Color.WHITE
    title_background: Color = Color.BLACK
    show_instructions: bool = False
    instructions_color: Color = Color.DARK_GRAY
    instructions_background: Color = Color.BLACK
    bullet: str = ""
    option_color: Color = Color.GRAY
    option_background: Color = Color.BLACK
    highlight_color: Color = Color.WHITE
    highlight_background: Color = Color.DARK_GREEN
    input_prompt: str = ""
    input_prompt_color: Color = Color.GRAY
    input_prompt_background: Color = Color.BLACK
    input_color: Color = Color.GRAY
    input_background: Color = Color.BLACK


@dataclass
class _Layout:
    option_rows: list[int] = field(default_factory=list)
    input_row: int = 0

    @property
    def first_option_row(self) -> int:
        return self.option_rows[0] if self.option_rows else self.input_row

    @property
    def last_option_row(self) -> int:
        return self.input_row - 1


class OptionSelector(Generic[T]):
    """Arrow-key option list with a free-text input line.

    ``selected_index`` is -1 while nothing is highlighted. Moving past the
    last option (or above the first) goes through -1 and wraps around.
    """

    def __init__(
        self,
        terminal: Terminal,
        options: Sequence[OptionItem[T]],
        config: OptionSelectorOptions | None = None,
        keybindings: EditorKeybindingsManager | None = None,
    ) -> None:
        self._terminal = terminal
        self._options = list(options)
        self._config = config or OptionSelectorOptions()
        self._keybindings = keybindings or get_editor_keybindings()
        self._layout = _Layout()
        self._buffer: LineBuffer | None = None
        self._selected_index = -1
        self.state: SelectorState = "browsing"

    @property
    def options(self) -> list[OptionItem[T]]:
        return list(self._options)

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def typed_text(self) -> str:
        return "" if self._buffer is None else self._buffer.text

    @property
    def first_option_row(self) -> int:
        return self._layout.first_option_row

    @property
    def last_option_row(self) -> int:
        return self._layout.last_option_row

    @property
    def input_row(self) -> int:
        return self._layout.input_row

    @property
    def selection(self) -> OptionItem[T] | None:
        if self.state != "selected":
            return None
        return self._options[self._selected_index]

    # -- session --------------------------------------------------------------

    def run(self) -> tuple[bool, OptionItem[T] | None]:
        """Draw the list and interact until Enter or Escape.

        Returns ``(True, item)`` when an option was accepted and
        ``(False, None)`` when the user cancelled or pressed Enter with no
        option highlighted.
        """
        terminal = self._terminal
        logger.debug("Option selection started with %d options", len(self._options))

        with terminal.reading_keys(), color_scope(terminal):
            self.begin()
            while self.state == "browsing":
                self.handle_key(terminal.read_key())
        terminal.write_line()

        logger.debug("Option selection finished: %s", self.state)
        item = self.selection
        return item is not None, item

    def begin(self) -> None:
        """Write the title, instructions, options and prompt."""
        cfg = self._config
        terminal = self._terminal

        if terminal.cursor_left != 0:
            terminal.write_line()
        if cfg.title:
            write_color_line(terminal, cfg.title, cfg.title_color, cfg.title_background)
        if cfg.show_instructions:
            write_color_line(
                terminal, INSTRUCTIONS_TEXT, cfg.instructions_color, cfg.instructions_background
            )
        for option in self._options:
            write_color_line(
                terminal, cfg.bullet + option.text, cfg.option_color, cfg.option_background
            )
        write_color(terminal, cfg.input_prompt, cfg.input_prompt_color, cfg.input_prompt_background)

        # Rows are counted back from the prompt so that scrolling while
        # the list was written does not throw them off. An option wider
        # than the window wraps onto as many rows as it needs.
        input_row = terminal.cursor_top
        columns = max(terminal.columns, 1)
        option_rows = []
        row = input_row
        for option in reversed(self._options):
            row -= max(1, -(-visible_width(cfg.bullet + option.text) // columns))
            option_rows.append(row)
        option_rows.reverse()
        self._layout = _Layout(option_rows=option_rows, input_row=input_row)
        self._buffer = LineBuffer(terminal.cursor_left)
        self._selected_index = -1
        self.state = "browsing"

    def handle_key(self, event: KeyEvent) -> None:
        if self._buffer is None:
            self.begin()
        buffer = self._buffer
        action = self._keybindings.classify(event)

        if action.kind == "escape":
            self.state = "cancelled"
        elif action.kind == "enter":
            self.state = "cancelled" if self._selected_index == -1 else "selected"
        elif action.kind == "down":
            index = self._selected_index + 1
            self._select(-1 if index >= len(self._options) else index)
        elif action.kind == "up":
            index = self._selected_index - 1
            self._select(len(self._options) - 1 if index < -1 else index)
        elif action.kind == "backspace":
            if buffer.delete_backward():
                self._after_removal()
        elif action.kind == "delete":
            if buffer.delete_forward():
                self._after_removal()
        elif action.kind == "left":
            buffer.move_left()
            self._place_cursor()
        elif action.kind == "right":
            buffer.move_right()
            self._place_cursor()
        elif action.kind == "home":
            buffer.move_home()
            self._place_cursor()
        elif action.kind == "end":
            buffer.move_end()
            self._place_cursor()
        elif action.kind == "tab":
            pass
        elif action.char is not None:
            buffer.insert(action.char)
            self._render_input()

    # -- drawing ----------------------------------------------------------------

    def _place_cursor(self) -> None:
        self._terminal.cursor_top = self._layout.input_row
        self._buffer.place_cursor(self._terminal)

    def _render_input(self) -> None:
        cfg = self._config
        self._terminal.cursor_top = self._layout.input_row
        with color_scope(self._terminal, cfg.input_color, cfg.input_background):
            self._buffer.render(self._terminal)

    def _paint_option(self, index: int, highlighted: bool) -> None:
        cfg = self._config
        terminal = self._terminal
        if highlighted:
            colors = (cfg.highlight_color, cfg.highlight_background)
        else:
            colors = (cfg.option_color, cfg.option_background)

        row = self._layout.option_rows[index]
        if row < 0:
            # Scrolled off the top of the window.
            return
        terminal.cursor_top = row
        terminal.cursor_left = 0
        write_color(terminal, cfg.bullet + self._options[index].text, *colors)
        self._place_cursor()

    def _select(self, index: int) -> None:
        previous = self._selected_index
        if previous == index:
            return
        if previous >= 0:
            self._paint_option(previous, highlighted=False)
        self._selected_index = index

        if index >= 0:
            self._paint_option(index, highlighted=True)
            self._buffer.set_text(self._options[index].text)
        else:
            self._buffer.clear()
        self._render_input()

    def _after_removal(self) -> None:
        self._render_input()
        if not len(self._buffer) and self._selected_index >= 0:
            self._paint_option(self._selected_index, highlighted=False)
            self._selected_index = -1
