"""
Solver dispatch for QR.

This module provides the decompose() and solve() functions (public API)
and method selection.
"""

from numpy.typing import ArrayLike

from pylinalg.algebra.matrix import Matrix
from pylinalg.core.compute.tolerances import GRAM_SCHMIDT_EPSILON, GRAM_SCHMIDT_MAX_PASSES
from pylinalg.core.design import MatrixDesign, QRMethod, as_right_hand_side
from pylinalg.core.validation import check_square
from pylinalg.lu.solution import LinearSystemSolution
from pylinalg.qr.backends.cpu import (
    GivensBackend,
    GramSchmidtBackend,
    HouseholderBackend,
    QRSubstitutionBackend,
)
from pylinalg.qr.solution import QRSolution


# Method used when decompose() is called without one
DEFAULT_DECOMPOSE_METHOD = 'gram_schmidt'

# Method used when solve() has to factor A itself
DEFAULT_SOLVE_METHOD = 'householder'


def decompose(
    A: Matrix | ArrayLike,
    method: QRMethod | None = None,
    *,
    reortho_epsilon: float = GRAM_SCHMIDT_EPSILON,
    max_passes: int = GRAM_SCHMIDT_MAX_PASSES,
) -> QRSolution:
    """
    QR-decompose a square matrix.

    Computes Q with orthonormal (unitary for complex input) columns and
    upper-triangular R with A = Q·R.

    Args:
        A: Square matrix. A Matrix of any scalar kind, or a real or
            complex array-like.
        method: Factorization method:
            - 'householder': reflections; real and complex
            - 'givens': plane rotations; real only
            - 'gram_schmidt': projections with re-orthogonalization
            - None: 'gram_schmidt'
        reortho_epsilon: Gram-Schmidt stop threshold (squared change per pass)
        max_passes: Gram-Schmidt pass limit per column

    Returns:
        QRSolution with Q, R, error measures and solve()

    Raises:
        ValidationError: If the input is invalid or the method unknown
        NotSquareError: If A is not square
        UnsupportedOperationError: If Givens is requested for a non-real A
        SingularMatrixError: If Gram-Schmidt meets a dependent column

    Example:
        >>> from pylinalg import qr
        >>> result = qr.decompose(A, method='householder')
        >>> print(result.residual_norm, result.orthogonality_error)
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    design = MatrixDesign.from_input(A, method)
    check_square(design.matrix, 'A')

    # === Select Backend ===
    backend_impl = _get_backend(
        design.method or DEFAULT_DECOMPOSE_METHOD,
        reortho_epsilon=reortho_epsilon,
        max_passes=max_passes,
    )

    # === Solve ===
    result = backend_impl.solve(design)

    # === Wrap and Return ===
    return QRSolution(_result=result, _design=design)


def solve(
    A: Matrix | ArrayLike,
    b: Matrix | ArrayLike,
    method: QRMethod | None = None,
) -> LinearSystemSolution:
    """
    Solve A·x = b through a QR decomposition of A.

    Args:
        A: Square matrix
        b: Right-hand side column vector (or 1-D array-like)
        method: Factorization method; None means 'householder'

    Returns:
        LinearSystemSolution with x and ‖A·x − b‖

    Raises:
        NotSquareError: If A is not square
        SizeMismatchError: If b does not match A
        SingularMatrixError: If R has a zero on its diagonal
    """
    return decompose(A, method or DEFAULT_SOLVE_METHOD).solve(b)


def solve_from_factors(
    Q: Matrix,
    R: Matrix,
    b: Matrix | ArrayLike,
    method: str | None = None,
) -> LinearSystemSolution:
    """
    Solve Q·R·x = b for already computed factors.

    Raises:
        SizeMismatchError: If the factors and b do not match
        SingularMatrixError: If R has a zero on its diagonal
    """
    rhs = as_right_hand_side(b, Q.kind, Q.height)
    result = QRSubstitutionBackend(Q, R, method).solve(MatrixDesign.from_matrix(rhs))
    return LinearSystemSolution(_result=result)


def _get_backend(
    method: str,
    *,
    reortho_epsilon: float = GRAM_SCHMIDT_EPSILON,
    max_passes: int = GRAM_SCHMIDT_MAX_PASSES,
):
    """
    Select and instantiate the backend for a QR method.

    Raises:
        ValueError: If unknown method specified
    """
    if method == 'householder':
        return HouseholderBackend()

    elif method == 'givens':
        return GivensBackend()

    elif method == 'gram_schmidt':
        return GramSchmidtBackend(reortho_epsilon=reortho_epsilon, max_passes=max_passes)

    else:
        raise ValueError(f"Unknown QR method: {method!r}")
