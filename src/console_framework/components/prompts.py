"""Prompted line reads: plain, masked by choice, and a three-step date prompt."""

from __future__ import annotations

import datetime
import logging
from enum import Enum

from console_framework.colors import Color, color_scope
from console_framework.components.masked_input import read_line_masked, read_line_show_then_cover
from console_framework.dates import closest_four_digit_year, days_in_month, parse_month
from console_framework.output import write_color
from console_framework.terminal import Terminal

logger = logging.getLogger(__name__)

MAX_DATE_PROMPT_LENGTH = 12


class MaskType(Enum):
    NONE = 0
    MASK_WHILE_TYPING = 1
    SHOW_WHILE_TYPING = 2


def read_line(
    terminal: Terminal,
    prompt: str = "",
    prompt_color: Color | None = None,
    input_color: Color | None = None,
) -> str:
    """Show *prompt* and read a line with the terminal's own editing."""
    write_color(terminal, prompt, prompt_color)
    with color_scope(terminal, input_color):
        return terminal.read_line()


def read_line_select(
    terminal: Terminal,
    mask_type: MaskType,
    prompt: str = "",
    prompt_color: Color | None = None,
    input_color: Color | None = None,
    mask_char: str | None = None,
) -> str:
    """Read a line, hiding it the way *mask_type* asks."""
    if mask_type is MaskType.MASK_WHILE_TYPING:
        return read_line_masked(terminal, prompt, prompt_color, input_color, mask_char)
    if mask_type is MaskType.SHOW_WHILE_TYPING:
        return read_line_show_then_cover(terminal, prompt, prompt_color, input_color, mask_char)
    return read_line(terminal, prompt, prompt_color, input_color)


def _parse_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


def read_date(
    terminal: Terminal,
    prompt_color: Color | None = None,
    input_color: Color | None = None,
    year_prompt: str | None = None,
    month_prompt: str | None = None,
    day_prompt: str | None = None,
    today: datetime.date | None = None,
) -> datetime.date | None:
    """Ask for a year, a month and a day, one line each.

    Two-digit years are taken as the closest matching four-digit year.
    Months may be numbers or names. The first answer that does not make
    sense ends the prompt with ``None``; later questions are not asked.
    """
    year_prompt = (year_prompt or "year: ")[:MAX_DATE_PROMPT_LENGTH]
    month_prompt = (month_prompt or "month: ")[:MAX_DATE_PROMPT_LENGTH]
    day_prompt = (day_prompt or "day: ")[:MAX_DATE_PROMPT_LENGTH]

    year = _parse_int(read_line(terminal, year_prompt, prompt_color, input_color))
    if year is None or year < 0:
        return None
    if year <= 99:
        year = closest_four_digit_year(year, today)
    if not datetime.MINYEAR <= year <= datetime.MAXYEAR:
        return None

    month_text = read_line(terminal, month_prompt, prompt_color, input_color)
    month = _parse_int(month_text)
    if month is None:
        month = parse_month(month_text)
    if month is None or not 1 <= month <= 12:
        return None

    day = _parse_int(read_line(terminal, day_prompt, prompt_color, input_color))
    if day is None or not 1 <= day <= days_in_month(month, year):
        return None

    logger.debug("Date prompt answered")
    return datetime.date(year, month, day)
