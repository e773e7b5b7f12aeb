"""Package-specific exception types.

The compiler and engine never raise for malformed masks or input; these types
back `ValidationResult.raise_for_status` and the CLI.
"""

from __future__ import annotations

from .constants import INVALID_INPUT_MESSAGE, TOO_LONG_MESSAGE


class MaskError(ValueError):
    """Base class for input-mask errors."""


class MaskValidationError(MaskError):
    """Base class for a complete value that does not satisfy its mask.

    Attributes:
        position: Zero-based index of the first failing character, or None when
            the failure is not tied to a single position.
    """

    position: int | None = None


class ValueTooLongError(MaskValidationError):
    """Raised when a value has more characters than the mask has slots.

    Args:
        length: Length of the rejected value.
        limit: Number of slots in the compiled mask.
    """

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(TOO_LONG_MESSAGE)

    def __str__(self) -> str:
        return f"{TOO_LONG_MESSAGE} ({self.length} characters, mask allows {self.limit})"


class InvalidCharacterError(MaskValidationError):
    """Raised when a character of a value fails its slot.

    Args:
        position: Zero-based index of the offending character.
        character: The offending character; empty when the value ends early.
    """

    def __init__(self, position: int, character: str):
        self.position = position
        self.character = character
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if not self.character:
            return f"{INVALID_INPUT_MESSAGE} (value ends at position {self.position})"
        return f"{INVALID_INPUT_MESSAGE} ({self.character!r} at position {self.position})"
