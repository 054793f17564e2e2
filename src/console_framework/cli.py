"""Demo application for console-framework. Uses Click for argument parsing."""

from __future__ import annotations

import datetime
import logging

import click

from console_framework.args import reparse_args
from console_framework.boxes import ConsoleTable, LineStyle
from console_framework.colors import Color
from console_framework.components.int_input import read_int
from console_framework.components.option_selector import OptionItem, OptionSelector, OptionSelectorOptions
from console_framework.components.prompts import MaskType, read_date, read_line, read_line_select
from console_framework.dates import parse_date_range
from console_framework.errors import InvalidRomanNumeralError
from console_framework.output import (
    write_bullet_list,
    write_color_line,
    write_framed_text,
    write_horizontal_rule,
    write_rainbow_line,
    write_table,
)
from console_framework.roman import RomanNumeral
from console_framework.terminal import ProcessTerminal

_MASK_TYPES = {
    "hide": MaskType.MASK_WHILE_TYPING,
    "cover": MaskType.SHOW_WHILE_TYPING,
    "none": MaskType.NONE,
}

_LINE_STYLES = {
    "none": LineStyle.NONE,
    "single": LineStyle.SINGLE,
    "double": LineStyle.DOUBLE,
}


def _color(name: str | None) -> Color | None:
    return None if name is None else Color.parse(name)


@click.group(invoke_without_command=True)
@click.option("--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def main(ctx, verbose):
    """Try out the console-framework input and output helpers."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    if ctx.obj is None:
        ctx.obj = ProcessTerminal()
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

@main.command()
@click.option("--mask", "mask_char", default="*", help="Mask character for the password")
@click.option(
    "--style",
    type=click.Choice(sorted(_MASK_TYPES)),
    default="hide",
    help="hide: mask while typing; cover: show then cover; none: plain",
)
@click.pass_obj
def login(terminal, mask_char, style):
    """Ask for a user name and a masked password."""
    user_name = read_line(terminal, "username: ", Color.DARK_GRAY, Color.WHITE)
    password = read_line_select(
        terminal, _MASK_TYPES[style], "password: ", Color.DARK_GRAY, Color.WHITE, mask_char
    )
    click.echo(f"Got user name [{user_name}] and a password of {len(password)} characters")


@main.command()
@click.option("--count", default=5, show_default=True, help="Number of dates to offer")
@click.option("--step", default=4, show_default=True, help="Days between offered dates")
@click.pass_obj
def options(terminal, count, step):
    """Pick a date from a list with the arrow keys."""
    config = OptionSelectorOptions(
        title="available dates...",
        show_instructions=True,
        bullet=" • ",
        input_prompt="= ",
        input_prompt_color=Color.WHITE,
        option_color=Color.GREEN,
        option_background=Color.DARK_GRAY,
        highlight_color=Color.DARK_GRAY,
        highlight_background=Color.YELLOW,
    )
    day = datetime.date.today()
    items = []
    for _ in range(count):
        day += datetime.timedelta(days=step)
        items.append(OptionItem(day.strftime("%a, %Y-%m-%d"), day))

    found, item = OptionSelector(terminal, items, config).run()
    if found:
        write_color_line(terminal, f"HOORAY!  We got a selection of {item.text}!", Color.YELLOW)
    else:
        write_color_line(terminal, "No selection was made.", Color.RED)


@main.command("int")
@click.option("--prompt", default="number: ", show_default=True)
@click.pass_obj
def int_command(terminal, prompt):
    """Read a whole number, digits and a leading minus only."""
    value = read_int(terminal, prompt, Color.DARK_GRAY, Color.WHITE)
    if value is None:
        write_color_line(terminal, "No number was entered.", Color.RED)
    else:
        write_color_line(terminal, f"You entered {value}.", Color.GREEN)


@main.command()
@click.pass_obj
def date(terminal):
    """Read a date as year, month and day."""
    value = read_date(terminal, Color.DARK_GRAY, Color.WHITE)
    if value is None:
        write_color_line(terminal, "That was not a valid date.", Color.RED)
    else:
        write_color_line(terminal, f"You entered {value:%A, %d %B %Y}.", Color.GREEN)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

@main.command()
@click.option("--char", "rule_char", default="-", show_default=True)
@click.option("--color", default=None, help="Color name, e.g. DarkGreen")
@click.option("--length", type=int, default=None, help="Rule length (defaults to the window width)")
@click.pass_obj
def rule(terminal, rule_char, color, length):
    """Write a horizontal rule."""
    write_horizontal_rule(terminal, rule_char, _color(color), length)


@main.command()
@click.argument("items", nargs=-1, required=True)
@click.option("--bullet", default=" - ", show_default=True)
@click.option("--color", default=None, help="Color name for the items")
@click.pass_obj
def bullets(terminal, items, bullet, color):
    """Write ITEMS as a wrapped bullet list."""
    write_bullet_list(terminal, items, bullet, _color(color), _color(color))


@main.command()
@click.argument("text")
@click.option("--random", "random_order", is_flag=True, help="Pick colors at random")
@click.pass_obj
def rainbow(terminal, text, random_order):
    """Write TEXT in rainbow colors."""
    write_rainbow_line(terminal, text, random_order)


@main.command()
@click.option("--count", type=click.IntRange(1, 4999), default=10, show_default=True, help="Numbers to list")
@click.option("--border", type=click.Choice(sorted(_LINE_STYLES)), default="double", show_default=True)
@click.option("--cells", type=click.Choice(sorted(_LINE_STYLES)), default="single", show_default=True)
@click.option("--color", default=None, help="Color name for the table")
@click.pass_obj
def table(terminal, count, border, cells, color):
    """Write a table of roman numerals."""
    numerals = ConsoleTable(
        column_labels=["n", "subtractive", "additive"],
        outside_border=_LINE_STYLES[border],
        label_separator=_LINE_STYLES[border],
        cell_separator=_LINE_STYLES[cells],
    )
    for value in range(1, count + 1):
        numeral = RomanNumeral(value)
        numerals.add_row([value, numeral.subtractive, numeral.additive])
    write_table(terminal, numerals, _color(color))


@main.command()
@click.argument("text")
@click.option("--width", type=int, default=None, help="Frame width (defaults to the window width)")
@click.option("--double", is_flag=True, help="Draw double lines")
@click.option("--padded", is_flag=True, help="Leave a blank margin inside the frame")
@click.option("--color", default=None, help="Color name, e.g. Yellow")
@click.pass_obj
def frame(terminal, text, width, double, padded, color):
    """Write TEXT word-wrapped inside a frame."""
    write_framed_text(terminal, text, width, double, padded, _color(color))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

@main.command()
@click.argument("args", nargs=-1)
@click.pass_obj
def args(terminal, args):
    """Show how ARGS look after re-quoting."""
    if not args:
        write_color_line(terminal, "no arguments", Color.YELLOW)
        return
    write_color_line(terminal, "Arguments as parsed by the shell...", Color.DARK_GREEN)
    write_bullet_list(terminal, args, " ∙ ", Color.DARK_GREEN, Color.DARK_GREEN)
    terminal.write_line()
    write_color_line(terminal, "Re-parsed arguments...", Color.GREEN)
    for pair in reparse_args(args):
        write_color_line(terminal, f" ∙ name: [{pair.name or ''}] / val: [{pair.value}]", Color.GREEN)


@main.command()
@click.argument("value")
def roman(value):
    """Convert VALUE between integers and roman numerals."""
    try:
        numeral = RomanNumeral(int(value)) if value.isdigit() else RomanNumeral(value)
    except (ValueError, InvalidRomanNumeralError) as exc:
        click.echo(str(exc), err=True)
        raise SystemExit(1)
    click.echo(f"{numeral.value} = {numeral.subtractive} = {numeral.additive}")


@main.command("range")
@click.argument("text", nargs=-1, required=True)
@click.option("--day-first", is_flag=True, help="Read 1/5/2024 as the 1st of May")
@click.pass_obj
def range_command(terminal, text, day_first):
    """Parse TEXT as a date range, e.g. "Jan 5 - Feb 10, 2024"."""
    span = parse_date_range(" ".join(text), month_first=not day_first)
    if span is None:
        write_color_line(terminal, "That is not a date range.", Color.RED)
        raise SystemExit(1)
    write_color_line(terminal, span.smart_str(), Color.GREEN)
    write_color_line(terminal, f"{span.duration} long", Color.DARK_GREEN)
