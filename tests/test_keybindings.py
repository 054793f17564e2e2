"""Tests for console_framework.keybindings: key classification."""

from __future__ import annotations

import pytest

from console_framework.keybindings import (
    DEFAULT_EDITOR_KEYBINDINGS,
    IGNORED,
    EditorKeybindingsManager,
    KeyAction,
    get_editor_keybindings,
    set_editor_keybindings,
)
from console_framework.keys import KeyEvent, parse_key


def _classify(data: str, manager: EditorKeybindingsManager | None = None) -> KeyAction:
    return (manager or EditorKeybindingsManager()).classify(parse_key(data))


class TestDefaultEditorKeybindings:
    def test_has_editing_actions(self):
        for action in [
            "cursorUp", "cursorDown", "cursorLeft", "cursorRight",
            "cursorLineStart", "cursorLineEnd",
            "deleteCharBackward", "deleteCharForward",
            "submit", "cancel", "tab",
        ]:
            assert action in DEFAULT_EDITOR_KEYBINDINGS, f"Missing action: {action}"


class TestClassify:
    """Each raw key maps to exactly one semantic action."""

    @pytest.mark.parametrize(
        "data,kind",
        [
            ("\r", "enter"),
            ("\x1b", "escape"),
            ("\x03", "escape"),
            ("\x7f", "backspace"),
            ("\x1b[3~", "delete"),
            ("\x1b[D", "left"),
            ("\x1b[C", "right"),
            ("\x1b[A", "up"),
            ("\x1b[B", "down"),
            ("\x1b[H", "home"),
            ("\x1b[F", "end"),
            ("\t", "tab"),
        ],
    )
    def test_named_keys(self, data, kind):
        assert _classify(data) == KeyAction(kind)

    def test_digit(self):
        assert _classify("7") == KeyAction("digit", "7")

    def test_keypad_digit_normalized(self):
        assert _classify("\x1bOw") == _classify("7")

    def test_minus_from_main_row_and_keypad(self):
        assert _classify("-") == KeyAction("minus", "-")
        assert _classify("\x1bOm") == KeyAction("minus", "-")

    def test_printable(self):
        assert _classify("q") == KeyAction("printable", "q")
        assert _classify(" ") == KeyAction("printable", " ")

    def test_unbound_keys_are_ignored(self):
        assert _classify("\x1b[5~") is IGNORED  # pageUp
        assert _classify("\x1b[15~") is IGNORED  # f5
        assert _classify("\x0b") is IGNORED  # ctrl+k

    def test_pure(self):
        manager = EditorKeybindingsManager()
        event = parse_key("x")
        assert manager.classify(event) == manager.classify(event)


class TestEditorKeybindingsManager:
    def test_user_config_overrides_default(self):
        manager = EditorKeybindingsManager({"cursorLineStart": "ctrl+t"})
        assert _classify("\x14", manager) == KeyAction("home")
        assert _classify("\x1b[H", manager) is IGNORED

    def test_get_keys(self):
        manager = EditorKeybindingsManager()
        assert manager.get_keys("cancel") == ["escape", "ctrl+c"]

    def test_set_config(self):
        manager = EditorKeybindingsManager()
        manager.set_config({"submit": ["enter", "ctrl+j"]})
        assert manager.matches(KeyEvent("ctrl+j"), "submit")

    def test_global_manager_can_be_replaced(self):
        original = get_editor_keybindings()
        replacement = EditorKeybindingsManager({"tab": []})
        try:
            set_editor_keybindings(replacement)
            assert get_editor_keybindings() is replacement
        finally:
            set_editor_keybindings(original)
