"""Split raw terminal input into one string per key.

A single read can hold several keys (fast typing, pasted text) or stop in
the middle of an escape sequence. :class:`StdinBuffer` holds back an
unfinished sequence until the rest arrives, so ``ESC [`` followed later by
``A`` is read as Up rather than Escape, ``[`` and ``A``.
"""

from __future__ import annotations

import re

ESC = "\x1b"

# ESC [ <parameter and intermediate bytes> <final byte>
_CSI_RE = re.compile(r"\x1b\[[\x20-\x3f]*[\x40-\x7e]")


def _key_length(data: str, start: int) -> int | None:
    """Length of the key starting at *start*, or ``None`` if it is cut short."""
    if data[start] != ESC:
        return 1

    available = len(data) - start
    if available < 2:
        return None

    introducer = data[start + 1]
    if introducer == "O":
        # SS3: one more byte names the key
        return 3 if available >= 3 else None
    if introducer != "[":
        # Meta: ESC plus the key it modifies
        return 2

    if available < 3:
        return None
    if data[start + 2] == "[":
        # Linux console function keys: ESC [ [ <letter>
        return 4 if available >= 4 else None
    match = _CSI_RE.match(data, start)
    return match.end() - start if match else None


class StdinBuffer:
    """Accumulates input and hands back every key it completes."""

    def __init__(self) -> None:
        self._held = ""

    @property
    def pending(self) -> str:
        """Input received but not yet part of a complete key."""
        return self._held

    def process(self, data: str) -> list[str]:
        text = self._held + data
        keys: list[str] = []
        pos = 0
        while pos < len(text):
            length = _key_length(text, pos)
            if length is None:
                break
            keys.append(text[pos : pos + length])
            pos += length
        self._held = text[pos:]
        return keys

    def flush(self) -> list[str]:
        """Stop waiting for the rest of a sequence and return what is held.

        A lone ``ESC`` that nothing followed is the Escape key itself.
        """
        held, self._held = self._held, ""
        return [held] if held else []
