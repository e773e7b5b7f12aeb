"""Character acceptance and value validation against compiled masks."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .charclass import apply_case, matches_symbol
from .constants import DEFAULT_PLACEHOLDER_CHAR
from .models import (
    AcceptResult,
    Accepted,
    CompiledMask,
    Consumed,
    CursorState,
    Invalid,
    Rejected,
    RejectReason,
    ValidationResult,
)

logger = logging.getLogger(__name__)

_REJECTED = Rejected()


def _fill_literals(compiled: CompiledMask, position: int, text: list[str]) -> int:
    """Append the run of literal slots starting at `position` to `text`.

    Returns:
        int: Index of the next wildcard slot, or the mask length.
    """
    while position < compiled.length and compiled.symbols[position] is None:
        text.append(compiled.literals[position])
        position += 1
    return position


def accept(compiled: CompiledMask, cursor: CursorState, input_char: str) -> AcceptResult:
    """Decide whether a typed character is accepted at the cursor.

    Scans forward from the cursor. Literal slots that differ from the typed
    character are skipped and emitted, so separators are filled in for the
    user; a literal slot equal to the typed character echoes it and stops.
    The first wildcard slot reached must accept the character, otherwise the
    keystroke is rejected. After a wildcard match, the run of literal slots
    that follows is auto-filled.

    Args:
        compiled: Mask to type against.
        cursor: Current write position.
        input_char: The typed character.

    Returns:
        AcceptResult: `Consumed` with the text to append and the advanced
            cursor, or `Rejected` when nothing accepts the character before
            the end of the mask.

    Examples:
        mask = compile_mask("(000) 000-0000")
        accept(mask, CursorState(0), "5")  # Consumed("(5", CursorState(2))
        accept(mask, CursorState(3), "5")  # Consumed("5) ", CursorState(6))
        accept(mask, CursorState(1), "x")  # Rejected()
    """
    if len(input_char) != 1:
        return _REJECTED

    position = cursor.position
    text: list[str] = []

    while position < compiled.length:
        symbol = compiled.symbols[position]

        if symbol is not None:
            if not matches_symbol(symbol, input_char):
                logger.debug(
                    "Rejected %r at slot %d of %r (wildcard %r)",
                    input_char,
                    position,
                    compiled.mask,
                    symbol,
                )
                return _REJECTED
            text.append(apply_case(input_char, compiled.cases[position]))
            position = _fill_literals(compiled, position + 1, text)
            return Consumed("".join(text), CursorState(position))

        literal = compiled.literals[position]
        text.append(literal)
        position += 1
        if literal == input_char:
            return Consumed("".join(text), CursorState(position))

    logger.debug("Rejected %r past the end of %r", input_char, compiled.mask)
    return _REJECTED


def _run_batch(
    compiled: CompiledMask, cursor: CursorState, text: Iterable[str]
) -> tuple[str, CursorState]:
    produced: list[str] = []
    for char in text:
        result = accept(compiled, cursor, char)
        if isinstance(result, Consumed):
            produced.append(result.text)
            cursor = result.cursor
    return "".join(produced), cursor


def accept_batch(compiled: CompiledMask, cursor: CursorState, text: Iterable[str]) -> str:
    """Run several characters through `accept`, threading the cursor.

    Rejected characters are dropped without advancing the cursor.

    Args:
        compiled: Mask to type against.
        cursor: Write position of the first character.
        text: Characters to accept, in order.

    Returns:
        str: Concatenated text of every accepted character.

    Examples:
        accept_batch(compile_mask("(000) 000-0000"), CursorState(), "555x1234567")
        # "(555) 123-4567"
    """
    produced, _ = _run_batch(compiled, cursor, text)
    return produced


def paste(
    compiled: CompiledMask, value: str, start: int, end: int, text: str
) -> tuple[str, CursorState]:
    """Replace a selection of `value` with pasted text.

    The pasted text is accepted from `start`; the content that followed the
    selection is then accepted again from wherever the pasted text left the
    cursor, so characters that no longer fit their shifted slots are dropped.
    Selection bounds are clamped to the value.

    Args:
        compiled: Mask of the field.
        value: Current field value.
        start: Selection start (caret position when nothing is selected).
        end: Selection end.
        text: Pasted text.

    Returns:
        tuple[str, CursorState]: The new value and the caret position just
            after the pasted text.

    Examples:
        mask = compile_mask("(000) 000-0000")
        paste(mask, "(555) 123-4567", 6, 9, "999")
        # ("(555) 999-4567", CursorState(10))
    """
    start = max(0, min(start, len(value)))
    end = max(start, min(end, len(value)))

    pasted, caret = _run_batch(compiled, CursorState(start), text)
    trailing, _ = _run_batch(compiled, caret, value[end:])
    return value[:start] + pasted + trailing, caret


def validate(compiled: CompiledMask, value: str) -> ValidationResult:
    """Check a complete value against a mask.

    Unlike `accept`, literals are not filled in: the value must already hold
    every literal character in place. Positions past the end of a short value
    are tested as the empty string.

    Args:
        compiled: Mask to validate against.
        value: Complete field value.

    Returns:
        ValidationResult: `Accepted` for an empty or conforming value,
            otherwise `Invalid` with ``TOO_LONG`` or ``INVALID_CHARACTER`` and
            the first failing position.

    Examples:
        mask = compile_mask("(000) 000-0000")
        validate(mask, "")  # Accepted("")
        validate(mask, "(555) 123-4567")  # Accepted("(555) 123-4567")
        validate(mask, "5551234567")  # Invalid(INVALID_CHARACTER, position=0)
    """
    if not value:
        return Accepted("")

    length = compiled.length
    if len(value) > length:
        logger.debug("Value of %d characters is too long for %r", len(value), compiled.mask)
        return Invalid(RejectReason.TOO_LONG, length=len(value), limit=length)

    for index in range(length):
        char = value[index] if index < len(value) else ""
        symbol = compiled.symbols[index]
        if symbol is not None:
            passed = matches_symbol(symbol, char)
        else:
            passed = char == compiled.literals[index]

        if not passed:
            logger.debug("Value %r fails %r at position %d", value, compiled.mask, index)
            return Invalid(
                RejectReason.INVALID_CHARACTER,
                position=index,
                character=char,
                length=len(value),
                limit=length,
            )

    return Accepted(value)


def placeholder(compiled: CompiledMask, fill: str = DEFAULT_PLACEHOLDER_CHAR) -> str:
    """Render the mask as a display template.

    Examples:
        placeholder(compile_mask("(000) 000-0000"))  # "(___) ___-____"
    """
    return "".join(
        fill if symbol is not None else literal
        for symbol, literal in zip(compiled.symbols, compiled.literals)
    )
