"""Colored output helpers: plain colored writes, rainbows, rules, bullet lists,
tables and framed text.

Every helper leaves the terminal colors as it found them.
"""

from __future__ import annotations

import random
from collections.abc import Iterable

from console_framework.boxes import ConsoleTable, frame_text
from console_framework.colors import Color, color_scope
from console_framework.terminal import Terminal
from console_framework.utils import visible_width, wrap_text

RAINBOW_COLORS: tuple[Color, ...] = (
    Color.RED,
    Color.YELLOW,
    Color.GREEN,
    Color.BLUE,
    Color.DARK_MAGENTA,
)

HORIZONTAL_SINGLE_LINE = "─"
HORIZONTAL_DOUBLE_LINE = "═"

ACCEPTED_RULE_CHARACTERS: tuple[str, ...] = (
    "-", "=", "_", "~", "#", "*", "<", "^", "v", ">",
    ".", ":", "/", "|", "\\", "x", "X", "o", "O",
    HORIZONTAL_SINGLE_LINE, HORIZONTAL_DOUBLE_LINE,
)

DEFAULT_BULLET = " - "


# ---------------------------------------------------------------------------
# Colored text
# ---------------------------------------------------------------------------


def write_color(
    terminal: Terminal,
    text: str,
    foreground: Color | None = None,
    background: Color | None = None,
) -> None:
    with color_scope(terminal, foreground, background):
        terminal.write(text)


def write_color_line(
    terminal: Terminal,
    text: str,
    foreground: Color | None = None,
    background: Color | None = None,
) -> None:
    """Write *text* in color and end the line.

    The line break is written after the colors are restored, so a
    background color only paints behind the text itself.
    """
    write_color(terminal, text, foreground, background)
    terminal.write_line()


def write_rainbow(
    terminal: Terminal,
    text: str,
    random_order: bool = False,
    rng: random.Random | None = None,
) -> None:
    """Write each character in the next rainbow color, or a random one."""
    if random_order and rng is None:
        rng = random.Random()
    with color_scope(terminal):
        for index, ch in enumerate(text):
            if random_order:
                terminal.foreground = rng.choice(RAINBOW_COLORS)
            else:
                terminal.foreground = RAINBOW_COLORS[index % len(RAINBOW_COLORS)]
            terminal.write(ch)


def write_rainbow_line(
    terminal: Terminal,
    text: str,
    random_order: bool = False,
    rng: random.Random | None = None,
) -> None:
    write_rainbow(terminal, text, random_order, rng)
    terminal.write_line()


# ---------------------------------------------------------------------------
# Horizontal rules
# ---------------------------------------------------------------------------


def clean_rule_char(ch: str | None) -> str:
    """Return *ch* if it may be used for a rule, otherwise ``"-"``."""
    if ch is None or ch not in ACCEPTED_RULE_CHARACTERS:
        return ACCEPTED_RULE_CHARACTERS[0]
    return ch


def write_horizontal_rule(
    terminal: Terminal,
    ch: str = "-",
    color: Color | None = None,
    length: int | None = None,
) -> None:
    """Write a full line of *ch*.

    The rule spans the window unless *length* is between 1 and the window
    width, in which case that many characters are written.
    """
    rule_char = clean_rule_char(ch)
    width = terminal.columns
    if length is not None and 0 < length <= width:
        width = length
    write_color_line(terminal, rule_char * width, color)


# ---------------------------------------------------------------------------
# Bullet lists
# ---------------------------------------------------------------------------


def write_bullet_list(
    terminal: Terminal,
    items: Iterable[str],
    bullet: str = DEFAULT_BULLET,
    bullet_color: Color | None = None,
    item_color: Color | None = None,
    width: int | None = None,
) -> None:
    """Write *items* as a bulleted list, wrapping long items.

    Continuation lines are indented to line up under the first line's
    text. Nothing is written if the bullet would take more than a quarter
    of the line or fewer than 12 columns would be left for text.
    """
    items = list(items)
    if not items:
        return

    bullet_width = visible_width(bullet)
    available = (width if width is not None else terminal.columns) - bullet_width
    if bullet_width > available / 4 or available < 12:
        return

    if terminal.cursor_left > 0:
        terminal.write_line()

    indent = " " * bullet_width
    for item in items:
        write_color(terminal, bullet, bullet_color)
        with color_scope(terminal, item_color):
            for index, line in enumerate(wrap_text(item, available)):
                if index:
                    terminal.write(indent)
                terminal.write_line(line)


# ---------------------------------------------------------------------------
# Tables and framed text
# ---------------------------------------------------------------------------


def write_table(
    terminal: Terminal,
    table: ConsoleTable,
    color: Color | None = None,
    background: Color | None = None,
) -> None:
    """Write *table* line by line, starting on a fresh line."""
    lines = table.lines()
    if not lines:
        return
    if terminal.cursor_left > 0:
        terminal.write_line()
    for line in lines:
        write_color_line(terminal, line, color, background)


def write_framed_text(
    terminal: Terminal,
    text: str,
    width: int | None = None,
    double: bool = False,
    padded: bool = False,
    color: Color | None = None,
) -> None:
    """Write *text* word-wrapped inside a box.

    The box spans the window unless *width* is given; it is widened when
    the longest word would not fit.
    """
    if terminal.cursor_left > 0:
        terminal.write_line()
    box_width = width if width is not None else terminal.columns
    for line in frame_text(text, box_width, double, padded):
        write_color_line(terminal, line, color)
