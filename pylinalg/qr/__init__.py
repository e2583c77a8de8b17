"""
QR decomposition.

Three factorizations A = Q·R (Householder, Givens, Gram-Schmidt) over
any scalar kind the method supports, and linear-system solves against
the factors.

Public API:
    decompose(A, method=None) -> QRSolution
    solve(A, b, method=None) -> LinearSystemSolution
    solve_from_factors(Q, R, b) -> LinearSystemSolution

Example:
    >>> from pylinalg import qr
    >>> result = qr.decompose(A, method='givens')
    >>> x = result.solve(b).x
    >>> print(result.summary())
"""

from pylinalg.qr.solution import QRParams, QRSolution
from pylinalg.qr.solvers import decompose, solve, solve_from_factors

__all__ = [
    "decompose",
    "solve",
    "solve_from_factors",
    "QRSolution",
    "QRParams",
]
