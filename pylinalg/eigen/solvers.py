"""
Solver dispatch for the characteristic polynomial.

This module provides the charpoly() function (public API).
"""

from numpy.typing import ArrayLike

from pylinalg.algebra.matrix import Matrix
from pylinalg.core.compute.linalg.charpoly import check_tridiagonal
from pylinalg.core.compute.tolerances import TRIDIAGONAL_ZERO_TOLERANCE
from pylinalg.core.design import MatrixDesign
from pylinalg.eigen.backends.cpu import TridiagonalRecurrenceBackend
from pylinalg.eigen.solution import CharPolySolution
from pylinalg.numbers.contract import is_real_kind
from pylinalg.numbers.longint import LongInt


def charpoly(
    A: Matrix | ArrayLike,
    *,
    exact: bool = True,
    tolerance: float = TRIDIAGONAL_ZERO_TOLERANCE,
) -> CharPolySolution:
    """
    Characteristic polynomial det(A − λI) of a tridiagonal matrix.

    With ``exact=True`` real entries are converted to LongInt first
    (truncating toward zero), so the recurrence runs without rounding.
    Matrices of other scalar kinds (Complex, Fraction, LongInt) run over
    their own kind either way.

    Args:
        A: Square tridiagonal matrix, or an array-like of one
        exact: Convert real entries to LongInt before the recurrence
        tolerance: Squared-norm threshold below which off-band entries
            count as zero

    Returns:
        CharPolySolution with the ascending coefficients

    Raises:
        ValidationError: If the input is not numeric or not finite
        NotSquareError: If A is not square
        NotTridiagonalError: If an off-band entry is not (close to) zero

    Example:
        >>> from pylinalg.eigen import charpoly
        >>> result = charpoly([[2, 1, 0], [1, 2, 1], [0, 1, 2]])
        >>> [int(c) for c in result.coefficients]
        [4, -10, 6, -1]
    """
    # === Input Validation ===
    design = MatrixDesign.from_input(A)
    # band check on the original entries; truncation could hide them
    check_tridiagonal(design.matrix, tolerance)

    if exact and is_real_kind(design.kind):
        design = MatrixDesign.from_matrix(design.matrix.convert(LongInt))

    # === Solve ===
    result = TridiagonalRecurrenceBackend(tolerance).solve(design)

    # === Wrap and Return ===
    return CharPolySolution(_result=result, _design=design)
