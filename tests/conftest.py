"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_matrix(rng):
    """
    Factory for random integer-valued matrices.

    Integer values keep sums and products exact in float64, so algebraic
    laws can be checked with == rather than a tolerance.
    """
    def make(rows: int, columns: int, max_element: int = 9) -> Matrix:
        values = rng.integers(-max_element, max_element + 1, size=rows * columns)
        return Matrix(rows, columns, values.astype(np.float64))
    return make


@pytest.fixture
def well_conditioned(rng):
    """Factory for random square matrices that are safely invertible."""
    def make(size: int) -> Matrix:
        values = rng.standard_normal((size, size)) + size * np.eye(size)
        return Matrix.from_array(values)
    return make


@pytest.fixture
def a_2x2():
    """[[1, 2], [3, 4]]"""
    return Matrix(2, 2, [1, 2, 3, 4])


@pytest.fixture
def b_2x2():
    """[[3, 5], [6, 7]]"""
    return Matrix(2, 2, [3, 5, 6, 7])


@pytest.fixture
def singular_3x3():
    """Second row is twice the first; elimination hits an exact zero pivot."""
    return Matrix(3, 3, [1, 2, 3, 2, 4, 6, 1, 1, 1])
