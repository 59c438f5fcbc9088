"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyalgebra import Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def basis3():
    """Standard basis of R^3."""
    return [
        Vector([1.0, 0.0, 0.0]),
        Vector([0.0, 1.0, 0.0]),
        Vector([0.0, 0.0, 1.0]),
    ]


@pytest.fixture
def random_pair(rng):
    """Two random float vectors of equal size."""
    n = 7
    return (
        Vector(rng.standard_normal(n).tolist()),
        Vector(rng.standard_normal(n).tolist()),
    )
