"""
LU decomposition kernels.

Unpivoted Doolittle factorization into a unit-lower-triangular L and an
upper-triangular U, and the forward/back substitution that solves
A·x = b from those factors.

No row exchange is ever attempted: a zero pivot is a hard failure
(SingularMatrixError), even when a permuted factorization would exist.
"""

from dataclasses import dataclass

from pylinalg.algebra.matrix import Matrix
from pylinalg.core.exceptions import NotSquareError, SingularMatrixError, SizeMismatchError
from pylinalg.core.compute.linalg.triangular import back_substitute, forward_substitute_unit
from pylinalg.numbers.contract import one, zero


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU decomposition.

    Attributes:
        L: Unit-lower-triangular factor (n x n)
        U: Upper-triangular factor (n x n)
    """
    L: Matrix
    U: Matrix


def lu_decomposition(A: Matrix) -> LUResult:
    """
    Doolittle LU decomposition without pivoting.

    For each layer k the pivot a = d[k, k] must be non-zero; then
    L[i, k] = d[i, k] / a, U[k, i] = d[k, i] and the trailing block is
    updated with d[i, j] -= d[k, j] * d[i, k] / a.

    Args:
        A: Square matrix of any scalar kind

    Returns:
        LUResult with L·U == A (up to rounding for inexact kinds)

    Raises:
        NotSquareError: If A is not square
        SingularMatrixError: If a pivot is exactly zero
    """
    if not A.is_square():
        raise NotSquareError(
            f"LU decomposition needs a square matrix, got {A.height}x{A.width}",
            shape=A.shape,
        )

    kind = A.kind
    n = A.width
    z = zero(kind)
    unit = one(kind)

    l = [z] * (n * n)
    u = [z] * (n * n)
    d = list(A.elems)

    for layer in range(n):
        a = d[layer * n + layer]
        if a == z:
            raise SingularMatrixError(
                f"zero pivot at layer {layer}; LU without pivoting cannot proceed",
                matrix_name='A',
                pivot_index=layer,
            )

        l[layer * n + layer] = unit
        u[layer * n + layer] = a

        # rows below the pivot are independent of each other
        for i in range(layer + 1, n):
            l[i * n + layer] = d[i * n + layer] / a
            u[layer * n + i] = d[layer * n + i]

            for j in range(layer + 1, n):
                d[i * n + j] = d[i * n + j] - (d[layer * n + j] * d[i * n + layer]) / a

    return LUResult(
        L=Matrix.from_list(l, n, kind),
        U=Matrix.from_list(u, n, kind),
    )


def gauss_from_lu(L: Matrix, U: Matrix, b: Matrix) -> Matrix:
    """
    Solve A·x = b given A = L·U.

    Forward-substitutes against L, then back-substitutes against U.

    Args:
        L: Unit-lower-triangular factor (n x n)
        U: Upper-triangular factor (n x n)
        b: Right-hand side column vector (n x 1)

    Returns:
        Solution column vector x (n x 1)

    Raises:
        SizeMismatchError: If L and U are not square of equal size or b
            is not a matching column vector
        SingularMatrixError: If U has a zero on its diagonal
    """
    if (
        not L.is_square()
        or not U.is_square()
        or b.width != 1
        or b.height != L.height
        or L.width != U.width
    ):
        raise SizeMismatchError(
            f"LU solve needs square L, U of equal size and a matching column vector; "
            f"got L {L.shape}, U {U.shape}, b {b.shape}",
            operation='gauss_from_lu',
            left_shape=L.shape,
            right_shape=b.shape,
        )

    v = forward_substitute_unit(L, b)
    return back_substitute(U, v)
