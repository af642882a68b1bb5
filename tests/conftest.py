"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pydense.core.config import LENIENT, set_error_policy
from pydense.dense import float_new, complex_new


@pytest.fixture(autouse=True)
def lenient_policy():
    """Every test starts from the library default error policy."""
    previous = set_error_policy(LENIENT)
    yield
    set_error_policy(previous)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def a23():
    """2x3 real matrix [[1, 2, 3], [4, 5, 6]]."""
    return float_new(2, 3, [1.0, 4.0, 2.0, 5.0, 3.0, 6.0])


@pytest.fixture
def c22():
    """2x2 complex matrix [[1+1j, 2], [3, 4-2j]]."""
    return complex_new(2, 2, [1 + 1j, 3, 2, 4 - 2j])
