"""Keyboard input parsing for terminal applications.

Turns one complete raw input sequence (as split off by
:class:`~console_framework.stdin_buffer.StdinBuffer`) into a
:class:`KeyEvent`: a key identifier such as ``"enter"``, ``"left"`` or
``"ctrl+a"`` plus the printable character the key produces, if any.
Legacy xterm, rxvt and linux-console sequences are recognised, as are the
application-keypad (SS3) sequences sent by the numeric keypad.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

ESC = "\x1b"

KeyId = str


# ---------------------------------------------------------------------------
# Key names
# ---------------------------------------------------------------------------


class Key:
    """Names of the keys the editors bind, and modifier combinators."""

    escape = "escape"
    enter = "enter"
    tab = "tab"
    backspace = "backspace"
    delete = "delete"
    home = "home"
    end = "end"
    up = "up"
    down = "down"
    left = "left"
    right = "right"

    @staticmethod
    def ctrl(key: str) -> str:
        return f"ctrl+{key}"

    @staticmethod
    def shift(key: str) -> str:
        return f"shift+{key}"

    @staticmethod
    def alt(key: str) -> str:
        return f"alt+{key}"


# ---------------------------------------------------------------------------
# Sequence tables
# ---------------------------------------------------------------------------

MODIFIERS: dict[str, int] = {
    "shift": 1,
    "alt": 2,
    "ctrl": 4,
}

# xterm, rxvt and linux console sequences
LEGACY_KEY_SEQUENCES: dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1b[2~": "insert",
    "\x1b[3~": "delete",
    "\x1b[5~": "pageUp",
    "\x1b[6~": "pageDown",
    "\x1bOP": "f1",
    "\x1bOQ": "f2",
    "\x1bOR": "f3",
    "\x1bOS": "f4",
    "\x1b[15~": "f5",
    "\x1b[17~": "f6",
    "\x1b[18~": "f7",
    "\x1b[19~": "f8",
    "\x1b[20~": "f9",
    "\x1b[21~": "f10",
    "\x1b[23~": "f11",
    "\x1b[24~": "f12",
    "\x1b[1~": "home",
    "\x1b[4~": "end",
    "\x1b[E": "clear",
    # rxvt
    "\x1b[7~": "home",
    "\x1b[8~": "end",
    "\x1b[11~": "f1",
    "\x1b[12~": "f2",
    "\x1b[13~": "f3",
    "\x1b[14~": "f4",
    # linux console
    "\x1b[[A": "f1",
    "\x1b[[B": "f2",
    "\x1b[[C": "f3",
    "\x1b[[D": "f4",
    "\x1b[[E": "f5",
    "\x1b[Z": "shift+tab",
}

# Application keypad mode (DECKPAM) sequences -> the character the key types.
# Digits are reported as the same character as the main-row digits.
KEYPAD_SEQUENCES: dict[str, str] = {
    "\x1bOp": "0",
    "\x1bOq": "1",
    "\x1bOr": "2",
    "\x1bOs": "3",
    "\x1bOt": "4",
    "\x1bOu": "5",
    "\x1bOv": "6",
    "\x1bOw": "7",
    "\x1bOx": "8",
    "\x1bOy": "9",
    "\x1bOm": "-",
    "\x1bOk": "+",
    "\x1bOj": "*",
    "\x1bOo": "/",
    "\x1bOn": ".",
}

_KEYPAD_ENTER = "\x1bOM"

# CSI 1;<mod> <letter>  e.g. ctrl+left = ESC[1;5D
_MODIFIED_LETTER_RE = re.compile(r"^\x1b\[1;(\d+)([ABCDHFPQRS])$")
# CSI <code>;<mod> ~   e.g. shift+delete = ESC[3;2~
_MODIFIED_TILDE_RE = re.compile(r"^\x1b\[(\d+);(\d+)~$")

_LETTER_KEYS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
    "P": "f1",
    "Q": "f2",
    "R": "f3",
    "S": "f4",
}

_TILDE_KEYS: dict[str, str] = {
    seq[2:-1]: name
    for seq, name in LEGACY_KEY_SEQUENCES.items()
    if seq.startswith("\x1b[") and seq.endswith("~") and seq[2:-1].isdigit()
}


# ---------------------------------------------------------------------------
# KeyEvent
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeyEvent:
    """A single decoded key press.

    ``key`` is the key identifier (``"enter"``, ``"ctrl+a"``, ``"a"``...),
    ``char`` is the printable character typed, or ``None`` for keys that
    do not type anything. ``keypad`` is set for numeric-keypad keys.
    """

    key: KeyId
    char: str | None = None
    keypad: bool = False

    @classmethod
    def of_char(cls, char: str) -> KeyEvent:
        """Build the event a plain printable character produces."""
        return cls(key="space" if char == " " else char, char=char)


def _modifier_prefix(modifier: int) -> str:
    mod = modifier - 1
    prefix = ""
    if mod & MODIFIERS["ctrl"]:
        prefix += "ctrl+"
    if mod & MODIFIERS["shift"]:
        prefix += "shift+"
    if mod & MODIFIERS["alt"]:
        prefix += "alt+"
    return prefix


_SINGLE_BYTE_KEYS: dict[str, str] = {
    "\x1b": "escape",
    "\r": "enter",
    "\n": "enter",
    "\t": "tab",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x00": "ctrl+space",
}


def parse_key(data: str) -> KeyEvent | None:
    """Parse one complete raw input sequence into a :class:`KeyEvent`.

    Returns ``None`` for sequences that are not recognised.
    """
    if not data:
        return None

    if data in KEYPAD_SEQUENCES:
        ch = KEYPAD_SEQUENCES[data]
        return KeyEvent(key=ch, char=ch, keypad=True)
    if data == _KEYPAD_ENTER:
        return KeyEvent(key="enter", keypad=True)

    if data in LEGACY_KEY_SEQUENCES:
        return KeyEvent(key=LEGACY_KEY_SEQUENCES[data])

    match = _MODIFIED_LETTER_RE.match(data)
    if match:
        name = _LETTER_KEYS[match.group(2)]
        return KeyEvent(key=_modifier_prefix(int(match.group(1))) + name)

    match = _MODIFIED_TILDE_RE.match(data)
    if match and match.group(1) in _TILDE_KEYS:
        name = _TILDE_KEYS[match.group(1)]
        return KeyEvent(key=_modifier_prefix(int(match.group(2))) + name)

    if data in _SINGLE_BYTE_KEYS:
        return KeyEvent(key=_SINGLE_BYTE_KEYS[data])

    if len(data) == 1:
        code = ord(data)
        if 1 <= code <= 26:
            return KeyEvent(key=Key.ctrl(chr(code + ord("a") - 1)))
        return KeyEvent.of_char(data) if data.isprintable() else None

    # ESC prefix: the terminal's way of sending Alt
    if len(data) == 2 and data[0] == ESC:
        modified = data[1]
        if _SINGLE_BYTE_KEYS.get(modified) in ("enter", "backspace"):
            return KeyEvent(key=Key.alt(_SINGLE_BYTE_KEYS[modified]))
        if modified.isprintable():
            return KeyEvent(key=Key.alt(modified.lower()))

    return None
