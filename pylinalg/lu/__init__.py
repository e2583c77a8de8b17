"""
LU decomposition.

Unpivoted Doolittle factorization A = L·U over any scalar kind, and
linear-system solves against the factors.

Public API:
    decompose(A) -> LUSolution
    solve(A, b) -> LinearSystemSolution
    solve_from_factors(L, U, b) -> LinearSystemSolution

Example:
    >>> from pylinalg import lu
    >>> result = lu.decompose(A)
    >>> x = result.solve(b).x
    >>> print(result.summary())
"""

from pylinalg.lu.solution import (
    LinearSystemParams,
    LinearSystemSolution,
    LUParams,
    LUSolution,
)
from pylinalg.lu.solvers import decompose, solve, solve_from_factors

__all__ = [
    "decompose",
    "solve",
    "solve_from_factors",
    "LUSolution",
    "LUParams",
    "LinearSystemSolution",
    "LinearSystemParams",
]
