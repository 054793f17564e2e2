"""Box-drawing characters, framed text and console tables.

Line characters are looked up by the line weight leaving the cell in each
direction (up, right, down, left), where 0 is no line, 1 a single line and
2 a double line. :class:`ConsoleTable` and :func:`frame_text` only build
lines of text; ``output.write_table`` and ``output.write_framed_text`` draw
them in color.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field

from console_framework.utils import visible_width, wrap_text


class LineStyle(enum.IntEnum):
    NONE = 0
    SINGLE = 1
    DOUBLE = 2


def _code(up: int, right: int, down: int, left: int) -> int:
    return up * 1000 + right * 100 + down * 10 + left


LINE_CHARACTERS: dict[int, str] = {
    # single
    _code(1, 0, 1, 0): "│",
    _code(0, 1, 0, 1): "─",
    _code(1, 1, 1, 1): "┼",
    _code(1, 0, 1, 1): "┤",
    _code(1, 1, 1, 0): "├",
    _code(1, 1, 0, 1): "┴",
    _code(0, 1, 1, 1): "┬",
    _code(0, 0, 1, 1): "┐",
    _code(1, 0, 0, 1): "┘",
    _code(0, 1, 1, 0): "┌",
    _code(1, 1, 0, 0): "└",
    # double
    _code(2, 0, 2, 0): "║",
    _code(0, 2, 0, 2): "═",
    _code(2, 2, 2, 2): "╬",
    _code(2, 0, 2, 2): "╣",
    _code(2, 2, 2, 0): "╠",
    _code(2, 2, 0, 2): "╩",
    _code(0, 2, 2, 2): "╦",
    _code(0, 0, 2, 2): "╗",
    _code(2, 0, 0, 2): "╝",
    _code(0, 2, 2, 0): "╔",
    _code(2, 2, 0, 0): "╚",
    # double vertical, single horizontal
    _code(2, 1, 2, 1): "╫",
    _code(2, 0, 2, 1): "╢",
    _code(2, 1, 2, 0): "╟",
    _code(2, 1, 0, 1): "╨",
    _code(0, 1, 2, 1): "╥",
    _code(0, 0, 2, 1): "╖",
    _code(2, 0, 0, 1): "╜",
    _code(2, 1, 0, 0): "╙",
    _code(0, 1, 2, 0): "╓",
    # single vertical, double horizontal
    _code(1, 2, 1, 2): "╪",
    _code(1, 0, 1, 2): "╡",
    _code(1, 2, 1, 0): "╞",
    _code(1, 2, 0, 2): "╧",
    _code(0, 2, 1, 2): "╤",
    _code(0, 0, 1, 2): "╕",
    _code(1, 0, 0, 2): "╛",
    _code(1, 2, 0, 0): "╘",
    _code(0, 2, 1, 0): "╒",
}


def line_char(up: int, right: int, down: int, left: int) -> str | None:
    """Box-drawing character joining lines of the given weights.

    Weights are 0, 1 or 2. At least two directions need a line, and
    opposite directions that both have one must match. Anything else has
    no character and gives ``None``.
    """
    weights = (up, right, down, left)
    if any(w not in (0, 1, 2) for w in weights):
        return None
    if sum(1 for w in weights if w) < 2:
        return None
    if up and down and up != down:
        return None
    if left and right and left != right:
        return None
    return LINE_CHARACTERS.get(_code(*weights))


def _joint(up: int, right: int, down: int, left: int) -> str:
    """Like :func:`line_char` but never fails.

    A lone half line is drawn straight through, and a line changing weight
    across the cell takes the heavier weight. No lines at all is a blank.
    """
    vertical = max(up, down)
    horizontal = max(left, right)
    if not vertical and not horizontal:
        return " "
    if not horizontal:
        return LINE_CHARACTERS[_code(vertical, 0, vertical, 0)]
    if not vertical:
        return LINE_CHARACTERS[_code(0, horizontal, 0, horizontal)]
    return LINE_CHARACTERS[
        _code(
            vertical if up else 0,
            horizontal if right else 0,
            vertical if down else 0,
            horizontal if left else 0,
        )
    ]


def _fit(text: str, width: int) -> str:
    return text + " " * max(width - visible_width(text), 0)


# ---------------------------------------------------------------------------
# Framed text
# ---------------------------------------------------------------------------


def frame_text(text: str, width: int, double: bool = False, padded: bool = False) -> list[str]:
    """Word-wrap *text* inside a box *width* columns wide.

    The box grows when its longest word would not fit. With *padded* a
    blank column separates the text from each side and a blank line sits
    above and below it.
    """
    weight = LineStyle.DOUBLE if double else LineStyle.SINGLE
    margin = 1 if padded else 0
    longest = max((visible_width(word) for word in text.split()), default=0)
    inner = max(width - 2, longest + 2 * margin, 1 + 2 * margin)
    text_width = inner - 2 * margin

    side = _joint(weight, 0, weight, 0)
    blank = side + " " * inner + side
    body = [
        side + " " * margin + _fit(line, text_width) + " " * margin + side
        for line in wrap_text(text, text_width)
    ]
    if padded:
        body = [blank, *body, blank]

    horizontal = _joint(0, weight, 0, weight) * inner
    top = _joint(0, weight, weight, 0) + horizontal + _joint(0, 0, weight, weight)
    bottom = _joint(weight, weight, 0, 0) + horizontal + _joint(weight, 0, 0, weight)
    return [top, *body, bottom]


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


@dataclass
class ConsoleTable:
    """Rows of text cells with optional column and row labels.

    Columns are as wide as their widest cell or label. Missing cells at
    the end of a short row are blank. A line style of ``NONE`` leaves that
    line out: the outside border, the line under the column labels (and
    beside the row labels) or the lines between cells.
    """

    rows: list[list[str]] = field(default_factory=list)
    column_labels: list[str] = field(default_factory=list)
    row_labels: list[str] = field(default_factory=list)
    show_column_labels: bool = True
    show_row_labels: bool = False
    pad_cells: bool = True
    outside_border: LineStyle = LineStyle.SINGLE
    label_separator: LineStyle = LineStyle.SINGLE
    cell_separator: LineStyle = LineStyle.SINGLE

    def add_row(self, cells: Iterable[object]) -> None:
        self.rows.append([str(cell) for cell in cells])

    def insert_row(self, index: int, cells: Iterable[object]) -> None:
        self.rows.insert(index, [str(cell) for cell in cells])

    def remove_row(self, index: int) -> list[str]:
        return self.rows.pop(index)

    def clear(self) -> None:
        self.rows.clear()

    # -- layout -------------------------------------------------------------

    def _label_row(self) -> list[str] | None:
        if self.show_column_labels and self.column_labels:
            return list(self.column_labels)
        return None

    def _has_row_labels(self) -> bool:
        return self.show_row_labels and bool(self.row_labels)

    def _grid(self) -> tuple[list[str] | None, list[list[str]]]:
        """Header and body rows, padded to one column count."""
        header = self._label_row()
        body = [list(row) for row in self.rows]
        if self._has_row_labels():
            labels = list(self.row_labels) + [""] * max(len(body) - len(self.row_labels), 0)
            body = [[labels[index], *row] for index, row in enumerate(body)]
            if header is not None:
                header = ["", *header]

        count = max([len(row) for row in body] + [len(header) if header else 0])
        body = [row + [""] * (count - len(row)) for row in body]
        if header is not None:
            header = header + [""] * (count - len(header))
        return header, body

    def column_widths(self) -> list[int]:
        header, body = self._grid()
        rows = body if header is None else [header, *body]
        if not rows:
            return []
        extra = 2 if self.pad_cells else 0
        return [max(visible_width(row[col]) for row in rows) + extra for col in range(len(rows[0]))]

    def lines(self) -> list[str]:
        """The table as lines of text, top border first."""
        header, body = self._grid()
        widths = self.column_widths()
        if not widths:
            return []

        outer = int(self.outside_border)
        cells = int(self.cell_separator)
        labels = int(self.label_separator)
        row_label_column = self._has_row_labels()

        def vertical_after(col: int) -> int:
            # the line right of a column
            if row_label_column and col == 0:
                return labels
            return cells

        def rule(above: bool, below: bool, weight: int) -> str | None:
            if not weight:
                return None
            up = outer if above else 0
            down = outer if below else 0
            parts = [_joint(up, weight, down, 0)] if outer else []
            for col, width in enumerate(widths):
                parts.append(_joint(0, weight, 0, weight) * width)
                after = vertical_after(col)
                if col < len(widths) - 1:
                    parts.append(_joint(after if above else 0, weight, after if below else 0, weight))
                elif outer:
                    parts.append(_joint(up, 0, down, weight))
            return "".join(parts)

        def content(row: list[str]) -> str:
            pad = " " if self.pad_cells else ""
            edge = _joint(outer, 0, outer, 0) if outer else ""
            parts = [edge]
            for col, width in enumerate(widths):
                parts.append(_fit(pad + row[col], width))
                if col < len(widths) - 1:
                    after = vertical_after(col)
                    parts.append(_joint(after, 0, after, 0))
            parts.append(edge)
            return "".join(parts)

        lines: list[str | None] = [rule(False, True, outer)]
        if header is not None:
            lines.append(content(header))
            if body:
                lines.append(rule(True, True, labels))
        for index, row in enumerate(body):
            if index:
                lines.append(rule(True, True, cells))
            lines.append(content(row))
        lines.append(rule(True, False, outer))
        return [line for line in lines if line is not None]

