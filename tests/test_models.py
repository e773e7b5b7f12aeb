import pytest

from input_mask.models import (
    Accepted,
    CaseMode,
    CompiledMask,
    Consumed,
    CursorState,
    Invalid,
    Rejected,
    RejectReason,
)


def test_case_mode_members():
    assert list(CaseMode) == [CaseMode.NONE, CaseMode.UPPER, CaseMode.LOWER]


def test_cursor_state_defaults_and_advance():
    cursor = CursorState()

    assert cursor.position == 0
    assert cursor.advance().position == 1
    assert cursor.advance(3) == CursorState(3)
    assert cursor.position == 0


def test_cursor_state_rejects_negative_position():
    with pytest.raises(ValueError):
        CursorState(-1)


def test_compiled_mask_requires_aligned_layers():
    with pytest.raises(ValueError):
        CompiledMask(mask="00", symbols=("0", "0"), literals=(None,), cases=(CaseMode.NONE,) * 2)


@pytest.mark.parametrize(
    ("symbols", "literals"),
    [
        (("0",), ("-",)),
        ((None,), (None,)),
    ],
)
def test_compiled_mask_requires_exactly_one_kind_per_slot(symbols, literals):
    with pytest.raises(ValueError):
        CompiledMask(mask="?", symbols=symbols, literals=literals, cases=(CaseMode.NONE,))


def test_compiled_mask_length_and_slot_kind():
    compiled = CompiledMask(
        mask="0-",
        symbols=("0", None),
        literals=(None, "-"),
        cases=(CaseMode.NONE, CaseMode.NONE),
    )

    assert len(compiled) == compiled.length == 2
    assert compiled.is_symbol_slot(0) is True
    assert compiled.is_symbol_slot(1) is False


def test_accept_results_truthiness():
    assert Consumed("a", CursorState(1))
    assert Consumed("a", CursorState(1)).accepted is True
    assert not Rejected()
    assert Rejected().accepted is False
    assert Rejected() == Rejected()


def test_validation_results_truthiness_and_messages():
    too_long = Invalid(RejectReason.TOO_LONG, length=5, limit=3)
    bad_char = Invalid(RejectReason.INVALID_CHARACTER, position=2, character="x")

    assert Accepted("12")
    assert not too_long
    assert not bad_char
    assert too_long.message == "Input is too long!"
    assert bad_char.message == "Invalid input!"
