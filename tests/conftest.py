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
def collinear_points():
    """Points exactly on y = 2x."""
    return [[1, 2], [2, 4], [3, 6], [4, 8]]


@pytest.fixture
def points_with_gaps():
    """Points on y = x + 1 with two missing y values."""
    return [[1, 2], [2, None], [3, 4], [4, None], [5, 6]]


@pytest.fixture
def noisy_points(rng):
    """Noisy points around y = 0.5x + 3."""
    x = np.linspace(0.0, 10.0, 50)
    y = 0.5 * x + 3.0 + rng.standard_normal(50) * 0.2
    return [[float(a), float(b)] for a, b in zip(x, y)]
