"""
input-mask: MS Access style input masks for text fields.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    input-mask format "(000) 000-0000" 5551234567

Library Usage:
    from input_mask import CursorState, accept, compile_mask, validate

    mask = compile_mask("(000) 000-0000")
    result = accept(mask, CursorState(0), "5")  # Consumed("(5", CursorState(2))
    validate(mask, "(555) 123-4567")  # Accepted("(555) 123-4567")
"""

from .charclass import is_letter, matches_symbol
from .compiler import clear_cache, compile_mask, mask_length
from .engine import accept, accept_batch, paste, placeholder, validate
from .exceptions import (
    InvalidCharacterError,
    MaskError,
    MaskValidationError,
    ValueTooLongError,
)
from .models import (
    AcceptResult,
    Accepted,
    CaseMode,
    CompiledMask,
    Consumed,
    CursorState,
    Invalid,
    Rejected,
    RejectReason,
    ValidationResult,
)

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "compile_mask",
    "accept",
    "accept_batch",
    "paste",
    "validate",
    # Data models
    "AcceptResult",
    "Accepted",
    "CaseMode",
    "CompiledMask",
    "Consumed",
    "CursorState",
    "Invalid",
    "Rejected",
    "RejectReason",
    "ValidationResult",
    # Utilities
    "clear_cache",
    "is_letter",
    "mask_length",
    "matches_symbol",
    "placeholder",
    # Exceptions
    "InvalidCharacterError",
    "MaskError",
    "MaskValidationError",
    "ValueTooLongError",
    # Version
    "__version__",
]
