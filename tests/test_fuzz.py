from __future__ import annotations

import os

import pytest
from input_mask import CursorState, accept_batch, compile_mask, validate

atheris = pytest.importorskip("atheris")


def test_compile_and_type_with_fuzzed_input():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    compiled_any = False

    for _ in range(128):
        if provider.remaining_bytes() == 0:
            break
        raw_mask = provider.ConsumeUnicodeNoSurrogates(32)
        text = provider.ConsumeUnicodeNoSurrogates(32)
        compiled = compile_mask(raw_mask)
        produced = accept_batch(compiled, CursorState(), text)
        assert len(produced) <= compiled.length
        validate(compiled, produced)
        compiled_any = True

    assert compiled_any  # ensure we exercised the loop
