"""Console colors and scoped color changes.

Terminal colors are state shared by everything that writes to the
terminal. Code that changes them does so inside :func:`color_scope`, which
puts the previous colors back however the block exits.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from console_framework.terminal import Terminal


class Color(Enum):
    """The sixteen classic console colors plus the terminal default.

    Each value is the ``(foreground, background)`` SGR code pair.
    """

    DEFAULT = (39, 49)
    BLACK = (30, 40)
    DARK_RED = (31, 41)
    DARK_GREEN = (32, 42)
    DARK_YELLOW = (33, 43)
    DARK_BLUE = (34, 44)
    DARK_MAGENTA = (35, 45)
    DARK_CYAN = (36, 46)
    GRAY = (37, 47)
    DARK_GRAY = (90, 100)
    RED = (91, 101)
    GREEN = (92, 102)
    YELLOW = (93, 103)
    BLUE = (94, 104)
    MAGENTA = (95, 105)
    CYAN = (96, 106)
    WHITE = (97, 107)

    @property
    def foreground_sgr(self) -> str:
        return f"\x1b[{self.value[0]}m"

    @property
    def background_sgr(self) -> str:
        return f"\x1b[{self.value[1]}m"

    @classmethod
    def parse(cls, name: str) -> Color:
        """Look a color up by name, ignoring case, spaces and underscores.

        ``"darkgreen"``, ``"Dark Green"`` and ``"DARK_GREEN"`` all match.
        """
        wanted = name.replace("_", "").replace(" ", "").replace("-", "").upper()
        for color in cls:
            if color.name.replace("_", "") == wanted:
                return color
        raise ValueError(f"Unknown color: {name!r}")


@contextmanager
def color_scope(
    terminal: Terminal,
    foreground: Color | None = None,
    background: Color | None = None,
) -> Iterator[None]:
    """Apply colors for the duration of a block, then restore the old ones.

    ``None`` leaves that color as it is. The saved colors are restored on
    normal exit and when the block raises.
    """
    saved_foreground = terminal.foreground
    saved_background = terminal.background
    try:
        if foreground is not None:
            terminal.foreground = foreground
        if background is not None:
            terminal.background = background
        yield
    finally:
        if terminal.foreground != saved_foreground:
            terminal.foreground = saved_foreground
        if terminal.background != saved_background:
            terminal.background = saved_background
