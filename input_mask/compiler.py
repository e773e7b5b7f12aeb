"""Mask compilation: raw mask strings into positional layers."""

from __future__ import annotations

import logging
from functools import lru_cache

from .charclass import is_symbol
from .constants import (
    ESCAPE_CHAR,
    FILL_ORDER_MARKER,
    LOWERCASE_MARKER,
    QUOTE_CHAR,
    RESET_CASE_MARKER,
    UPPERCASE_MARKER,
)
from .models import CaseMode, CompiledMask

logger = logging.getLogger(__name__)

_CASE_MARKERS = {
    UPPERCASE_MARKER: CaseMode.UPPER,
    LOWERCASE_MARKER: CaseMode.LOWER,
    RESET_CASE_MARKER: CaseMode.NONE,
}


class _LayerBuilder:
    """Append-only buffers for the three mask layers."""

    def __init__(self) -> None:
        self.symbols: list[str | None] = []
        self.literals: list[str | None] = []
        self.cases: list[CaseMode] = []

    def add_symbol(self, symbol: str, case: CaseMode) -> None:
        self.symbols.append(symbol)
        self.literals.append(None)
        self.cases.append(case)

    def add_literal(self, literal: str, case: CaseMode) -> None:
        self.symbols.append(None)
        self.literals.append(literal)
        self.cases.append(case)

    def build(self, raw_mask: str) -> CompiledMask:
        return CompiledMask(
            mask=raw_mask,
            symbols=tuple(self.symbols),
            literals=tuple(self.literals),
            cases=tuple(self.cases),
        )


def _read_quoted_span(raw_mask: str, pos: int) -> tuple[str, int]:
    """Read a quoted literal span starting just after an opening quote.

    Args:
        raw_mask: Mask being compiled.
        pos: Index of the first character after the opening quote.

    Returns:
        tuple[str, int]: The literal text and the index just past the closing
            quote. An unterminated span runs to the end of the mask.

    Examples:
        _read_quoted_span('"No."000', 1)  # ("No.", 5)
        _read_quoted_span('"abc', 1)  # ("abc", 4)
    """
    end = raw_mask.find(QUOTE_CHAR, pos)
    if end == -1:
        return raw_mask[pos:], len(raw_mask)
    return raw_mask[pos:end], end + 1


def _compile(raw_mask: str) -> CompiledMask:
    builder = _LayerBuilder()
    active_case = CaseMode.NONE
    i = 0

    while i < len(raw_mask):
        char = raw_mask[i]

        if char in _CASE_MARKERS:
            active_case = _CASE_MARKERS[char]
            i += 1
        elif char == FILL_ORDER_MARKER:
            i += 1
        elif char == ESCAPE_CHAR:
            # A trailing backslash has nothing to escape and stays literal
            if i + 1 < len(raw_mask):
                builder.add_literal(raw_mask[i + 1], active_case)
                i += 2
            else:
                builder.add_literal(char, active_case)
                i += 1
        elif char == QUOTE_CHAR:
            span, i = _read_quoted_span(raw_mask, i + 1)
            for literal in span:
                builder.add_literal(literal, active_case)
        elif is_symbol(char):
            builder.add_symbol(char, active_case)
            i += 1
        else:
            builder.add_literal(char, active_case)
            i += 1

    return builder.build(raw_mask)


@lru_cache(maxsize=256)
def compile_mask(raw_mask: str) -> CompiledMask:
    """Compile a raw MS-Access style mask into aligned positional layers.

    Case markers (``>``, ``<``, ``^``) and the fill-order flag (``!``) consume
    no slot. A backslash makes the next character literal, and text between
    double quotes is literal. Wildcard symbols become wildcard slots and any
    other character becomes a literal slot. Malformed masks never fail: an
    unterminated quote runs to the end of the mask and a trailing backslash
    is kept as a literal backslash.

    Results are cached by mask string; compiled masks are immutable and safe
    to share.

    Args:
        raw_mask: Mask source text.

    Returns:
        CompiledMask: Layers for the mask.

    Examples:
        compile_mask("(000) 000-0000").length  # 14
        compile_mask(">LL<LL").cases  # (UPPER, UPPER, LOWER, LOWER)
        compile_mask("\\\\A00").literals[0]  # "A"
    """
    compiled = _compile(raw_mask)
    logger.debug("Compiled mask %r into %d slots", raw_mask, compiled.length)
    return compiled


def clear_cache() -> None:
    """Discard all memoised compiled masks."""
    compile_mask.cache_clear()


def mask_length(raw_mask: str) -> int:
    """Return the number of slots a raw mask compiles to."""
    return compile_mask(raw_mask).length
