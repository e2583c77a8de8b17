"""
Triangular solves shared by the LU and QR solvers.

Both functions take square triangular matrices and a column vector,
assume shapes were checked by the caller, and return a new column
vector of the same scalar kind.
"""

from pylinalg.algebra.matrix import Matrix
from pylinalg.core.exceptions import SingularMatrixError
from pylinalg.numbers.contract import zero


def forward_substitute_unit(L: Matrix, b: Matrix) -> Matrix:
    """
    Solve L·x = b for unit-lower-triangular L.

    The diagonal of L is taken to be 1 and never read.
    """
    n = L.width
    x = Matrix(1, n, b.kind)
    for i in range(n):
        xi = b.get(i, 0)
        for j in range(i):
            xi = xi - L.get(i, j) * x.get(j, 0)
        x.set(i, 0, xi)
    return x


def back_substitute(U: Matrix, b: Matrix) -> Matrix:
    """
    Solve U·x = b for upper-triangular U.

    Raises:
        SingularMatrixError: If a diagonal entry of U is exactly zero
    """
    n = U.width
    x = Matrix(1, n, b.kind)
    for i in range(n - 1, -1, -1):
        pivot = U.get(i, i)
        if pivot == zero(U.kind):
            raise SingularMatrixError(
                f"zero on the diagonal of the triangular factor at {i}",
                matrix_name='U',
                pivot_index=i,
            )
        xi = b.get(i, 0)
        for j in range(i + 1, n):
            xi = xi - U.get(i, j) * x.get(j, 0)
        x.set(i, 0, xi / pivot)
    return x
