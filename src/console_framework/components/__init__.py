"""Interactive input components."""

from console_framework.components.int_input import IntegerLineEditor, IntInputOptions, read_int
from console_framework.components.masked_input import (
    MASK_CHARACTERS,
    MaskedInputOptions,
    MaskedLineEditor,
    get_mask_char,
    read_line_masked,
    read_line_show_then_cover,
)
from console_framework.components.option_selector import (
    OptionItem,
    OptionSelector,
    OptionSelectorOptions,
)
from console_framework.components.prompts import MaskType, read_date, read_line, read_line_select

__all__ = [
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
]
