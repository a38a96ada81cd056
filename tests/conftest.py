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
def collinear_2d():
    """Three multiples of (1, 2): rank 1."""
    return np.array([[1.0, 2.0], [2.0, 4.0], [3.0, 6.0]])


@pytest.fixture
def identity_3d():
    return np.eye(3)


@pytest.fixture
def low_rank_factory(rng):
    """Build an integer matrix (n x d) of rank at most k as B @ C."""
    def make(n, d, k):
        B = rng.integers(-3, 4, size=(n, k)).astype(np.float64)
        C = rng.integers(-3, 4, size=(k, d)).astype(np.float64)
        return B @ C
    return make
