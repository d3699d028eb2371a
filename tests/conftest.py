"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from pystatguard import IgnorePolicy, Slot


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def ignore():
    """Record-and-continue policy returning NaN."""
    return IgnorePolicy()


@pytest.fixture
def slot():
    """Fresh fallback slot with a recognisable initial value."""
    return Slot(-1.0)


@pytest.fixture
def cov_matrix(rng):
    """Random symmetric positive definite 3x3 matrix."""
    A = rng.standard_normal((3, 3))
    return A @ A.T + 3 * np.eye(3)
