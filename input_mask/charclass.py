"""Character-class tests for mask wildcard symbols."""

from __future__ import annotations

from .constants import DIGITS, SYMBOLS
from .models import CaseMode


def is_symbol(char: str) -> bool:
    """Return True when `char` is one of the nine wildcard symbols."""
    return len(char) == 1 and char in SYMBOLS


def is_digit(char: str) -> bool:
    """Return True for the ASCII digits ``0`` through ``9`` only."""
    return len(char) == 1 and char in DIGITS


def is_letter(char: str) -> bool:
    """Return True when `char` has distinct upper and lower case forms.

    This covers letters from any cased alphabet (Latin, Greek, Cyrillic, ...)
    without relying on locale or on an ASCII range check.

    Examples:
        is_letter("a")  # True
        is_letter("Ж")  # True
        is_letter("7")  # False
        is_letter("あ")  # False, no case
    """
    return char != "" and char.lower() != char.upper()


def matches_symbol(symbol: str, char: str) -> bool:
    """Check a character against the class of a wildcard symbol.

    `char` is a single character, or the empty string when a value being
    validated is shorter than its mask. Only ``C`` accepts the empty string.

    Args:
        symbol: One of ``0 9 # L ? A a & C``.
        char: Candidate character.

    Returns:
        bool: True when the character satisfies the symbol. Unknown symbols
            never match.

    Examples:
        matches_symbol("0", " ")  # False
        matches_symbol("9", " ")  # True
        matches_symbol("#", "-")  # True
        matches_symbol("C", "")  # True
    """
    if symbol == "0":
        return is_digit(char)
    if symbol == "9":
        return char == " " or is_digit(char)
    if symbol == "#":
        return char in (" ", "+", "-") or is_digit(char)
    if symbol == "L":
        return is_letter(char)
    if symbol == "?":
        return char == " " or is_letter(char)
    if symbol == "A":
        return is_letter(char) or is_digit(char)
    if symbol == "a":
        return char == " " or is_letter(char) or is_digit(char)
    if symbol == "&":
        return char != ""
    if symbol == "C":
        return True
    return False


def apply_case(char: str, mode: CaseMode) -> str:
    """Fold `char` according to the slot's case mode.

    Foldings that would expand to several characters (``"ß".upper()``) keep
    the character as typed so one slot always holds one character.
    """
    if mode is CaseMode.UPPER:
        folded = char.upper()
    elif mode is CaseMode.LOWER:
        folded = char.lower()
    else:
        return char
    return folded if len(folded) == 1 else char
