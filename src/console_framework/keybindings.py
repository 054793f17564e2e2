"""Editor keybindings manager and key classification.

Every line editor and the option selector see keys through
:meth:`EditorKeybindingsManager.classify`, which maps a decoded
:class:`~console_framework.keys.KeyEvent` to a :class:`KeyAction`.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Literal

from console_framework.keys import Key, KeyEvent, KeyId

EditorAction = Literal[
    # Cursor movement
    "cursorUp",
    "cursorDown",
    "cursorLeft",
    "cursorRight",
    "cursorLineStart",
    "cursorLineEnd",
    # Deletion
    "deleteCharBackward",
    "deleteCharForward",
    # Text input
    "submit",
    "tab",
    # Cancel
    "cancel",
]

EditorKeybindingsConfig = dict[EditorAction, KeyId | list[KeyId]]

DEFAULT_EDITOR_KEYBINDINGS: dict[EditorAction, KeyId | list[KeyId]] = {
    # Cursor movement
    "cursorUp": Key.up,
    "cursorDown": Key.down,
    "cursorLeft": [Key.left, Key.ctrl("b")],
    "cursorRight": [Key.right, Key.ctrl("f")],
    "cursorLineStart": [Key.home, Key.ctrl("a")],
    "cursorLineEnd": [Key.end, Key.ctrl("e")],
    # Deletion
    "deleteCharBackward": Key.backspace,
    "deleteCharForward": [Key.delete, Key.ctrl("d")],
    # Text input
    "submit": Key.enter,
    "tab": Key.tab,
    # Cancel
    "cancel": [Key.escape, Key.ctrl("c")],
}

# ---------------------------------------------------------------------------
# Key actions
# ---------------------------------------------------------------------------

KeyActionKind = Literal[
    "enter",
    "escape",
    "backspace",
    "delete",
    "left",
    "right",
    "up",
    "down",
    "home",
    "end",
    "tab",
    "printable",
    "digit",
    "minus",
    "ignored",
]

# Checked in this order; the first bound action wins.
_ACTION_KINDS: dict[EditorAction, KeyActionKind] = {
    "submit": "enter",
    "cancel": "escape",
    "deleteCharBackward": "backspace",
    "deleteCharForward": "delete",
    "cursorLeft": "left",
    "cursorRight": "right",
    "cursorUp": "up",
    "cursorDown": "down",
    "cursorLineStart": "home",
    "cursorLineEnd": "end",
    "tab": "tab",
}


@dataclass(frozen=True)
class KeyAction:
    """Semantic meaning of a key press.

    ``char`` is set for ``printable``, ``digit`` and ``minus`` actions.
    """

    kind: KeyActionKind
    char: str | None = None


IGNORED = KeyAction("ignored")


class EditorKeybindingsManager:
    """Manages keybindings for the line editors."""

    def __init__(
        self, config: EditorKeybindingsConfig | None = None
    ) -> None:
        self._action_to_keys: dict[EditorAction, list[KeyId]] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: EditorKeybindingsConfig) -> None:
        self._action_to_keys.clear()

        # Start with defaults
        for action, keys in DEFAULT_EDITOR_KEYBINDINGS.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

        # Override with user config
        for action, keys in config.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

    def matches(self, event: KeyEvent, action: EditorAction) -> bool:
        """Check if a key event is bound to a specific action."""
        return event.key in self._action_to_keys.get(action, ())

    def get_keys(self, action: EditorAction) -> list[KeyId]:
        """Get keys bound to an action."""
        return self._action_to_keys.get(action, [])

    def set_config(self, config: EditorKeybindingsConfig) -> None:
        """Update configuration."""
        self._build_maps(config)

    def classify(self, event: KeyEvent) -> KeyAction:
        """Map a key event to the action an editor should take.

        Pure: the same event always yields the same action. Keypad digits
        classify exactly like main-row digits.
        """
        for action, kind in _ACTION_KINDS.items():
            if self.matches(event, action):
                return KeyAction(kind)

        ch = event.char
        if ch is None or len(ch) != 1 or not ch.isprintable():
            return IGNORED
        if ch in string.digits:
            return KeyAction("digit", ch)
        if ch == "-":
            return KeyAction("minus", ch)
        return KeyAction("printable", ch)


_global_editor_keybindings: EditorKeybindingsManager | None = None


def get_editor_keybindings() -> EditorKeybindingsManager:
    global _global_editor_keybindings
    if _global_editor_keybindings is None:
        _global_editor_keybindings = EditorKeybindingsManager()
    return _global_editor_keybindings


def set_editor_keybindings(manager: EditorKeybindingsManager) -> None:
    global _global_editor_keybindings
    _global_editor_keybindings = manager
