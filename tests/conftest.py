import pytest
from click.testing import CliRunner

from input_mask.compiler import clear_cache


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def fresh_cache():
    """Empties the compiled-mask cache around a test."""
    clear_cache()
    yield
    clear_cache()
