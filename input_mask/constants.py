"""Constants used across the input-mask package."""

from __future__ import annotations

# Wildcard symbols; every other mask character is a framework literal.
SYMBOLS = "09#LA?aC&"

DIGITS = "0123456789"

# Control characters consume no output slot.
UPPERCASE_MARKER = ">"
LOWERCASE_MARKER = "<"
RESET_CASE_MARKER = "^"
# Left-to-right fill order. Recognised, never applied.
FILL_ORDER_MARKER = "!"
ESCAPE_CHAR = "\\"
QUOTE_CHAR = '"'

DEFAULT_PLACEHOLDER_CHAR = "_"
DEFAULT_MAX_MASK_LENGTH = 1_000
DEFAULT_MAX_VALUE_LENGTH = 10_000

TOO_LONG_MESSAGE = "Input is too long!"
INVALID_INPUT_MESSAGE = "Invalid input!"
