"""Text measurement and wrapping for terminal output.

Widths are display columns, not code points: wide East Asian glyphs and
emoji count two columns, combining marks count none, and ANSI SGR
sequences count nothing at all.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth

# SGR and cursor-movement CSI sequences: ESC[ <params> <final byte>
_ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-HJKSTfmn]")

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


def _grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster."""
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    # Emoji presentation selector, ZWJ sequences, skin tones, flags
    for ch in g:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D) or 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    first = g[0]
    if ord(first) >= 0x1F000:
        return 2
    if unicodedata.category(first).startswith("M") or unicodedata.category(first) == "Cf":
        return 0
    return max(_wcwidth.wcwidth(first), 0)


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from *text*."""
    return _ANSI_RE.sub("", text)


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    * Strips ANSI escape sequences.
    * Uses a fast ASCII path when possible.
    * Caches results for non-ASCII strings.
    """
    if not text:
        return 0

    stripped = strip_ansi(text)
    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = sum(_grapheme_width(g) for g in grapheme.graphemes(stripped))
    return _cache_width(stripped, total)


def _split_to_width(word: str, width: int) -> list[str]:
    """Hard-split a word that is wider than *width* on grapheme boundaries."""
    pieces: list[str] = []
    current = ""
    current_width = 0
    for g in grapheme.graphemes(word):
        w = _grapheme_width(g)
        if current and current_width + w > width:
            pieces.append(current)
            current, current_width = "", 0
        current += g
        current_width += w
    if current:
        pieces.append(current)
    return pieces


def wrap_text(text: str, width: int) -> list[str]:
    """Word-wrap *text* into lines no wider than *width* columns.

    Breaks on spaces and tabs; runs of whitespace collapse to one space.
    Words wider than *width* are split across lines. Embedded newlines
    start a new line. Empty input gives ``[""]``.
    """
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")

    lines: list[str] = []
    for paragraph in text.split("\n"):
        current = ""
        current_width = 0
        for word in paragraph.split():
            word_width = visible_width(word)
            if word_width > width:
                if current:
                    lines.append(current)
                pieces = _split_to_width(word, width)
                lines.extend(pieces[:-1])
                current = pieces[-1]
                current_width = visible_width(current)
                continue
            if not current:
                current, current_width = word, word_width
            elif current_width + 1 + word_width <= width:
                current += " " + word
                current_width += 1 + word_width
            else:
                lines.append(current)
                current, current_width = word, word_width
        lines.append(current)
    return lines
