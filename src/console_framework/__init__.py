"""console-framework: colored terminal output and interactive line input."""

# Argument re-quoting
from console_framework.args import ArgPair, reparse_args

# Boxes and tables
from console_framework.boxes import ConsoleTable, LineStyle, frame_text, line_char

# Colors
from console_framework.colors import Color, color_scope

# Components (re-exported from components package)
from console_framework.components import (
    MASK_CHARACTERS,
    IntegerLineEditor,
    IntInputOptions,
    MaskedInputOptions,
    MaskedLineEditor,
    MaskType,
    OptionItem,
    OptionSelector,
    OptionSelectorOptions,
    get_mask_char,
    read_date,
    read_int,
    read_line,
    read_line_masked,
    read_line_select,
    read_line_show_then_cover,
)

# Dates
from console_framework.dates import DateRange, parse_date_range

# Errors
from console_framework.errors import ConsoleFrameworkError, InvalidRomanNumeralError, OutOfRangeError

# Keybindings
from console_framework.keybindings import (
    DEFAULT_EDITOR_KEYBINDINGS,
    EditorAction,
    EditorKeybindingsManager,
    KeyAction,
    get_editor_keybindings,
    set_editor_keybindings,
)

# Keyboard input handling
from console_framework.keys import Key, KeyEvent, KeyId, parse_key

# Line buffer
from console_framework.line_buffer import LineBuffer

# Output helpers
from console_framework.output import (
    clean_rule_char,
    write_bullet_list,
    write_color,
    write_color_line,
    write_framed_text,
    write_horizontal_rule,
    write_rainbow,
    write_rainbow_line,
    write_table,
)

# Roman numerals
from console_framework.roman import RomanNumeral, parse_roman, to_roman

# Terminal
from console_framework.terminal import ProcessTerminal, Terminal

# Utilities
from console_framework.utils import visible_width, wrap_text

__all__ = [
    # Args
    "ArgPair",
    "reparse_args",
    # Boxes
    "ConsoleTable",
    "LineStyle",
    "frame_text",
    "line_char",
    # Colors
    "Color",
    "color_scope",
    # Components
    "MASK_CHARACTERS",
    "IntInputOptions",
    "IntegerLineEditor",
    "MaskType",
    "MaskedInputOptions",
    "MaskedLineEditor",
    "OptionItem",
    "OptionSelector",
    "OptionSelectorOptions",
    "get_mask_char",
    "read_date",
    "read_int",
    "read_line",
    "read_line_masked",
    "read_line_select",
    "read_line_show_then_cover",
    # Dates
    "DateRange",
    "parse_date_range",
    # Errors
    "ConsoleFrameworkError",
    "InvalidRomanNumeralError",
    "OutOfRangeError",
    # Keybindings
    "DEFAULT_EDITOR_KEYBINDINGS",
    "EditorAction",
    "EditorKeybindingsManager",
    "KeyAction",
    "get_editor_keybindings",
    "set_editor_keybindings",
    # Keys
    "Key",
    "KeyEvent",
    "KeyId",
    "parse_key",
    # Line buffer
    "LineBuffer",
    # Output
    "clean_rule_char",
    "write_bullet_list",
    "write_color",
    "write_color_line",
    "write_framed_text",
    "write_horizontal_rule",
    "write_rainbow",
    "write_rainbow_line",
    "write_table",
    # Roman numerals
    "RomanNumeral",
    "parse_roman",
    "to_roman",
    # Terminal
    "ProcessTerminal",
    "Terminal",
    # Utils
    "visible_width",
    "wrap_text",
]
