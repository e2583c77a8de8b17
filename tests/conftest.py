"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg.algebra.matrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned(rng):
    """Random 6x6 real matrix, diagonally dominant so LU needs no pivoting."""
    n = 6
    A = rng.standard_normal((n, n))
    A += np.diag(np.abs(A).sum(axis=1) + 1.0)
    return A


@pytest.fixture
def complex_well_conditioned(rng):
    """Random 5x5 complex matrix, diagonally dominant."""
    n = 5
    A = rng.standard_normal((n, n)) + 1j * rng.standard_normal((n, n))
    A += np.diag(np.abs(A).sum(axis=1) + 1.0)
    return A


@pytest.fixture
def tridiagonal_3x3():
    """[[2,1,0],[1,2,1],[0,1,2]]: det(A - λI) = -λ³ + 6λ² - 10λ + 4."""
    return Matrix.from_rows([[2, 1, 0], [1, 2, 1], [0, 1, 2]])
