"""Shared pytest fixtures."""
import pytest

from audiofilters.dsp.registry import list_designs


@pytest.fixture
def sample_rate() -> float:
    return 48000.0


@pytest.fixture(params=list_designs(), ids=lambda meta: meta.key)
def design(request):
    """Every registered crossover design."""
    return request.param
