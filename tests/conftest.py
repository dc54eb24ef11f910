"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def grid_4x3():
    """4x3 integer grid used across arithmetic tests."""
    return [[1, 2, 3], [4, 5, 6], [7, 8, 9], [10, 11, 12]]


@pytest.fixture
def random_int_pair(rng):
    """Two same-shape random int32 grids with small values (no overflow)."""
    a = rng.integers(-100, 100, size=(5, 4)).astype(np.int32)
    b = rng.integers(-100, 100, size=(5, 4)).astype(np.int32)
    return a, b
