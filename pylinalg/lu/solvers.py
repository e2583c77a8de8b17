"""
Solver dispatch for LU.

This module provides the decompose() and solve() functions (public API).
"""

from typing import Literal

from numpy.typing import ArrayLike

from pylinalg.algebra.matrix import Matrix
from pylinalg.core.design import MatrixDesign, as_right_hand_side
from pylinalg.core.validation import check_square
from pylinalg.lu.backends.cpu import DoolittleBackend, LUSubstitutionBackend
from pylinalg.lu.solution import LinearSystemSolution, LUSolution


BackendChoice = Literal['auto', 'doolittle']


def decompose(
    A: Matrix | ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> LUSolution:
    """
    LU-decompose a square matrix without pivoting.

    Computes unit-lower-triangular L and upper-triangular U with
    A = L·U. No row exchange is attempted, so a zero pivot fails even
    when a permuted factorization exists.

    Args:
        A: Square matrix. A Matrix of any scalar kind, or a real or
            complex array-like.
        backend: Computational backend; only 'doolittle' exists

    Returns:
        LUSolution with L, U, the reconstruction error and solve()

    Raises:
        ValidationError: If the input is not numeric or not finite
        NotSquareError: If A is not square
        SingularMatrixError: If a pivot is exactly zero

    Example:
        >>> from pylinalg import lu
        >>> result = lu.decompose([[4, 3], [6, 3]])
        >>> print(result.U)
        | 4.0 3.0 |
        | 0.0 -1.5 |
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    design = MatrixDesign.from_input(A)
    check_square(design.matrix, 'A')

    # === Select Backend ===
    backend_impl = _get_backend(backend)

    # === Solve ===
    result = backend_impl.solve(design)

    # === Wrap and Return ===
    return LUSolution(_result=result, _design=design)


def solve(
    A: Matrix | ArrayLike,
    b: Matrix | ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> LinearSystemSolution:
    """
    Solve A·x = b through an LU decomposition of A.

    Args:
        A: Square matrix
        b: Right-hand side column vector (or 1-D array-like)
        backend: Computational backend for the factorization

    Returns:
        LinearSystemSolution with x and ‖A·x − b‖

    Raises:
        NotSquareError: If A is not square
        SingularMatrixError: If a pivot is exactly zero
        SizeMismatchError: If b does not match A
    """
    return decompose(A, backend=backend).solve(b)


def solve_from_factors(
    L: Matrix,
    U: Matrix,
    b: Matrix | ArrayLike,
) -> LinearSystemSolution:
    """
    Solve L·U·x = b for already computed factors.

    Raises:
        SizeMismatchError: If the factors and b do not match
        SingularMatrixError: If U has a zero on its diagonal
    """
    rhs = as_right_hand_side(b, L.kind, L.height)
    result = LUSubstitutionBackend(L, U).solve(MatrixDesign.from_matrix(rhs))
    return LinearSystemSolution(_result=result)


def _get_backend(choice: BackendChoice) -> DoolittleBackend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'doolittle'):
        return DoolittleBackend()
    raise ValueError(f"Unknown backend: {choice!r}")
