"""Data models for input-mask."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

from .constants import INVALID_INPUT_MESSAGE, TOO_LONG_MESSAGE
from .exceptions import InvalidCharacterError, ValueTooLongError


class CaseMode(Enum):
    """Case conversion applied to input matched at a slot.

    Attributes:
        NONE: Keep the character as typed.
        UPPER: Fold to uppercase (``>`` in a mask).
        LOWER: Fold to lowercase (``<`` in a mask).
    """

    NONE = auto()
    UPPER = auto()
    LOWER = auto()


@dataclass(frozen=True)
class CompiledMask:
    """A mask split into three aligned positional layers.

    Every slot is either a wildcard slot (``symbols[i]`` set) or a literal slot
    (``literals[i]`` set), never both and never neither.

    Attributes:
        mask: Raw mask string the layers were compiled from.
        symbols: Wildcard code per slot, or None for literal slots.
        literals: Fixed character per slot, or None for wildcard slots.
        cases: Case conversion active at each slot.
    """

    mask: str
    symbols: tuple[str | None, ...]
    literals: tuple[str | None, ...]
    cases: tuple[CaseMode, ...]

    def __post_init__(self) -> None:
        if not len(self.symbols) == len(self.literals) == len(self.cases):
            raise ValueError("mask layers must have identical lengths")
        for index, (symbol, literal) in enumerate(zip(self.symbols, self.literals)):
            if (symbol is None) == (literal is None):
                raise ValueError(f"slot {index} must be exactly one of wildcard or literal")

    def __len__(self) -> int:
        return len(self.symbols)

    @property
    def length(self) -> int:
        return len(self.symbols)

    def is_symbol_slot(self, index: int) -> bool:
        return self.symbols[index] is not None


@dataclass(frozen=True)
class CursorState:
    """Write position within a compiled mask, ``0 <= position <= len(mask)``."""

    position: int = 0

    def __post_init__(self) -> None:
        if self.position < 0:
            raise ValueError("cursor position must not be negative")

    def advance(self, count: int = 1) -> CursorState:
        return CursorState(self.position + count)


@dataclass(frozen=True)
class Consumed:
    """A keystroke that was accepted.

    Attributes:
        text: Characters to append to the value: any skipped or auto-filled
            literals plus the (case-converted) input character.
        cursor: Cursor positioned after everything in `text`.
    """

    text: str
    cursor: CursorState

    accepted = True

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    """A keystroke that no slot accepted; the host should suppress it."""

    accepted = False

    def __bool__(self) -> bool:
        return False


AcceptResult = Union[Consumed, Rejected]


class RejectReason(Enum):
    """Why a complete value failed validation.

    Attributes:
        TOO_LONG: The value has more characters than the mask has slots.
        INVALID_CHARACTER: A character does not satisfy its slot.
    """

    TOO_LONG = auto()
    INVALID_CHARACTER = auto()


@dataclass(frozen=True)
class Accepted:
    """A complete value that satisfies its mask."""

    value: str

    accepted = True

    def __bool__(self) -> bool:
        return True

    def raise_for_status(self) -> None:
        return None


@dataclass(frozen=True)
class Invalid:
    """A complete value that does not satisfy its mask.

    Attributes:
        reason: Category of the failure.
        position: First failing index for ``INVALID_CHARACTER``, else None.
        character: Character found at `position`; empty when the value is
            shorter than the mask.
        length: Length of the rejected value.
        limit: Number of slots in the mask.
    """

    reason: RejectReason
    position: int | None = None
    character: str = ""
    length: int = 0
    limit: int = 0

    accepted = False

    def __bool__(self) -> bool:
        return False

    @property
    def message(self) -> str:
        if self.reason is RejectReason.TOO_LONG:
            return TOO_LONG_MESSAGE
        return INVALID_INPUT_MESSAGE

    def raise_for_status(self) -> None:
        """Raise the exception matching this failure.

        Raises:
            ValueTooLongError: For ``RejectReason.TOO_LONG``.
            InvalidCharacterError: For ``RejectReason.INVALID_CHARACTER``.
        """
        if self.reason is RejectReason.TOO_LONG:
            raise ValueTooLongError(self.length, self.limit)
        raise InvalidCharacterError(self.position or 0, self.character)


ValidationResult = Union[Accepted, Invalid]
