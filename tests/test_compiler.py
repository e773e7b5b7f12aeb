from __future__ import annotations

import logging

import pytest

from input_mask.compiler import clear_cache, compile_mask, mask_length
from input_mask.models import CaseMode, CompiledMask

NONE, UPPER, LOWER = CaseMode.NONE, CaseMode.UPPER, CaseMode.LOWER


def test_compiles_phone_mask_layers():
    compiled = compile_mask("(000) 000-0000")

    assert compiled.length == 14
    assert compiled.symbols == (
        None, "0", "0", "0", None, None, "0", "0", "0", None, "0", "0", "0", "0"
    )
    assert compiled.literals == (
        "(", None, None, None, ")", " ", None, None, None, "-", None, None, None, None
    )
    assert compiled.cases == (NONE,) * 14
    assert compiled.mask == "(000) 000-0000"


def test_case_markers_consume_no_slots():
    compiled = compile_mask(">LL<LL")

    assert compiled.length == 4
    assert compiled.symbols == ("L", "L", "L", "L")
    assert compiled.cases == (UPPER, UPPER, LOWER, LOWER)


def test_reset_marker_clears_case():
    compiled = compile_mask(">L^L")

    assert compiled.cases == (UPPER, NONE)


def test_case_applies_to_literal_slots_too():
    compiled = compile_mask(">-L")

    assert compiled.literals == ("-", None)
    assert compiled.cases == (UPPER, UPPER)


def test_fill_order_flag_is_ignored():
    assert compile_mask("!000") == CompiledMask(
        mask="!000",
        symbols=("0", "0", "0"),
        literals=(None, None, None),
        cases=(NONE, NONE, NONE),
    )


def test_backslash_escapes_a_wildcard():
    compiled = compile_mask("\\A00")

    assert compiled.length == 3
    assert compiled.literals == ("A", None, None)
    assert compiled.symbols == (None, "0", "0")


@pytest.mark.parametrize(
    ("raw_mask", "literal"),
    [
        ('\\"0', '"'),
        ("\\>0", ">"),
        ("\\!0", "!"),
        ("\\\\0", "\\"),
    ],
)
def test_backslash_escapes_control_characters(raw_mask: str, literal: str):
    compiled = compile_mask(raw_mask)

    assert compiled.literals == (literal, None)
    assert compiled.symbols == (None, "0")


def test_trailing_backslash_stays_literal():
    compiled = compile_mask("00\\")

    assert compiled.length == 3
    assert compiled.literals[2] == "\\"


def test_quoted_span_is_literal():
    compiled = compile_mask('"No."000')

    assert compiled.length == 6
    assert compiled.literals[:3] == ("N", "o", ".")
    assert compiled.symbols[3:] == ("0", "0", "0")


def test_quoted_span_hides_wildcards():
    compiled = compile_mask('"0L&"0')

    assert compiled.literals == ("0", "L", "&", None)
    assert compiled.symbols == (None, None, None, "0")


def test_unterminated_quote_runs_to_end_of_mask():
    compiled = compile_mask('0"ab0')

    assert compiled.symbols == ("0", None, None, None)
    assert compiled.literals == (None, "a", "b", "0")


def test_empty_quotes_produce_no_slots():
    assert compile_mask('""0').length == 1


def test_empty_mask_has_no_slots():
    compiled = compile_mask("")

    assert compiled.length == 0
    assert compiled.symbols == compiled.literals == compiled.cases == ()


def test_mask_length_matches_stripped_mask():
    assert mask_length('>L<L"-x"\\0!0') == 6


def test_compile_is_deterministic(fresh_cache):
    first = compile_mask("(000) 000-0000")
    clear_cache()
    second = compile_mask("(000) 000-0000")

    assert first == second


def test_compile_is_cached():
    assert compile_mask(">LL-00") is compile_mask(">LL-00")


def test_compile_logs_once_per_mask(fresh_cache, caplog):
    caplog.set_level(logging.DEBUG, logger="input_mask.compiler")

    compile_mask("LL00")
    compile_mask("LL00")

    records = [record for record in caplog.records if "Compiled mask" in record.getMessage()]
    assert len(records) == 1
    assert "4 slots" in records[0].getMessage()
