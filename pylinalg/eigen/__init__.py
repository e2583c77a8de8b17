"""
Characteristic polynomials of tridiagonal matrices.

Public API:
    charpoly(A, exact=True) -> CharPolySolution

Example:
    >>> from pylinalg.eigen import charpoly
    >>> result = charpoly(A)
    >>> print(result.coefficients)
    >>> print(result.roots())
"""

from pylinalg.eigen.solution import CharPolyParams, CharPolySolution
from pylinalg.eigen.solvers import charpoly

__all__ = [
    "charpoly",
    "CharPolySolution",
    "CharPolyParams",
]
