"""
QR decomposition kernels.

Three factorizations of a square matrix A into Q (orthonormal/unitary)
and upper-triangular R:

    qr_householder: reflections, real and complex
    qr_givens: plane rotations, real only
    qr_gram_schmidt: Gram-Schmidt with re-orthogonalization passes

and the solve of A·x = b from Q, R (x = R⁻¹·Qᴴ·b).
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass, field

from pylinalg.algebra.matrix import Matrix
from pylinalg.core.compute.linalg.triangular import back_substitute
from pylinalg.core.compute.tolerances import GRAM_SCHMIDT_EPSILON, GRAM_SCHMIDT_MAX_PASSES
from pylinalg.core.exceptions import (
    NotSquareError,
    SingularMatrixError,
    SizeMismatchError,
    UnsupportedOperationError,
)
from pylinalg.numbers.contract import (
    conjugate,
    from_real,
    is_real_kind,
    kind_name,
    norm,
    norm_squared,
    zero,
)


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Orthonormal (unitary for complex input) factor (n x n)
        R: Upper-triangular factor (n x n)
        passes: Gram-Schmidt projection passes per column; empty for
            the other methods
        warnings: Non-fatal issues (e.g. a column hit the pass limit)
    """
    Q: Matrix
    R: Matrix
    passes: tuple[int, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)


def _require_square(A: Matrix, method: str) -> None:
    if not A.is_square():
        raise NotSquareError(
            f"{method} QR needs a square matrix, got {A.height}x{A.width}",
            shape=A.shape,
        )


# ═══════════════════════════════════════════════════════════════════════
# Householder
# ═══════════════════════════════════════════════════════════════════════


def _reflect(vecs: Matrix, v: Matrix) -> None:
    """
    Apply the reflection I - 2·v·vᴴ to every column of ``vecs`` in place.

    ``v`` must be a unit column vector.
    """
    kind = vecs.kind
    minus_two = from_real(kind, -2.0)
    for i in range(vecs.width):
        dot = zero(kind)
        for j in range(vecs.height):
            dot = dot + conjugate(v.get(j, 0)) * vecs.get(j, i)

        for j in range(vecs.height):
            vecs.set(j, i, v.get(j, 0) * dot * minus_two + vecs.get(j, i))


def qr_householder(A: Matrix) -> QRResult:
    """
    QR decomposition by Householder reflections.

    For each pivot column the reflection vector is the column from the
    pivot row down, with ``(a/|a|)·‖column‖`` added to the pivot entry
    a (nothing is added when |a| == 0). The normalized vector reflects
    both the running R and an accumulated Q in lock-step.

    Works for real and complex matrices; the inner product conjugates.
    A column whose sub-pivot entries are already zero is left alone, so
    an upper-triangular input comes back as Q = I, R = A.

    Raises:
        NotSquareError: If A is not square
    """
    _require_square(A, 'Householder')
    kind = A.kind
    n = A.width

    r = A.copy()
    q = Matrix.identity(n, kind)

    for layer in range(n):
        z = zero(kind)
        if all(r.get(i, layer) == z for i in range(layer + 1, n)):
            # already upper-triangular in this column
            continue

        column_norm = 0.0
        for i in range(layer, n):
            column_norm += norm_squared(r.get(i, layer))

        v = Matrix(1, n, kind)
        a = r.get(layer, layer)
        a_norm = norm(a)
        if a_norm != 0.0:
            v.set(
                layer,
                0,
                a + a / from_real(kind, a_norm) * from_real(kind, math.sqrt(column_norm)),
            )
        for i in range(layer + 1, n):
            v.set(i, 0, r.get(i, layer))

        v = v / from_real(kind, v.norm())

        _reflect(r, v)
        _reflect(q, v)

    return QRResult(Q=q.hermitian_transpose(), R=r)


# ═══════════════════════════════════════════════════════════════════════
# Givens
# ═══════════════════════════════════════════════════════════════════════


def _rotate(q: Matrix, r: Matrix, row: int, column: int) -> None:
    """Zero r[row, column] by rotating rows ``column`` and ``row``."""
    a = r.get(column, column)
    b = r.get(row, column)
    if b == 0.0:
        return
    hyp = math.sqrt(a * a + b * b)
    cos = a / hyp
    sin = -b / hyp

    for i in range(r.width):
        x = r.get(column, i)
        y = r.get(row, i)
        r.set(column, i, x * cos - y * sin)
        r.set(row, i, x * sin + y * cos)

        x = q.get(column, i)
        y = q.get(row, i)
        q.set(column, i, x * cos - y * sin)
        q.set(row, i, x * sin + y * cos)


def qr_givens(A: Matrix) -> QRResult:
    """
    QR decomposition by Givens rotations.

    For i in 1..n-1 and every j < i, rotates rows j and i of R (and of
    the accumulated Q) so that R[i, j] becomes zero.

    Raises:
        NotSquareError: If A is not square
        UnsupportedOperationError: If A is not a real matrix
    """
    if not is_real_kind(A.kind):
        raise UnsupportedOperationError(
            f"Givens QR is only defined for real matrices, got {kind_name(A.kind)}",
            operation='givens',
            scalar_type=kind_name(A.kind),
        )
    _require_square(A, 'Givens')
    n = A.width

    r = A.copy()
    q = Matrix.identity(n)

    for i in range(1, n):
        for j in range(i):
            _rotate(q, r, i, j)

    return QRResult(Q=q.transpose(), R=r)


# ═══════════════════════════════════════════════════════════════════════
# Gram-Schmidt
# ═══════════════════════════════════════════════════════════════════════


def qr_gram_schmidt(
    A: Matrix,
    reortho_epsilon: float = GRAM_SCHMIDT_EPSILON,
    max_passes: int = GRAM_SCHMIDT_MAX_PASSES,
) -> QRResult:
    """
    QR decomposition by Gram-Schmidt with re-orthogonalization.

    Each column is projected against every finished column of Q, pass
    after pass, until the total squared change over a pass drops below
    ``reortho_epsilon``. The result is normalized into Q, and R records
    the inner products of the finished Q columns with the column of A.

    Args:
        A: Square matrix
        reortho_epsilon: Stop threshold for the projection passes
        max_passes: Pass limit per column; hitting it emits a
            RuntimeWarning and keeps the last pass

    Raises:
        NotSquareError: If A is not square
        SingularMatrixError: If a column is linearly dependent on the
            previous ones (nothing is left to normalize)
    """
    _require_square(A, 'Gram-Schmidt')
    kind = A.kind
    n = A.width

    q = Matrix(n, n, kind)
    r = Matrix(n, n, kind)
    passes = []
    issues = []

    for j in range(n):
        p = A.column(j)

        count = 0
        while True:
            count += 1
            delta = 0.0
            for i in range(j):
                dot = zero(kind)
                for k in range(n):
                    dot = dot + conjugate(q.get(k, i)) * p.get(k, 0)

                for k in range(n):
                    projected = p.get(k, 0) - q.get(k, i) * dot
                    delta += norm_squared(projected - p.get(k, 0))
                    p.set(k, 0, projected)

            if delta < reortho_epsilon:
                break
            if count >= max_passes:
                message = (
                    f"column {j}: re-orthogonalization did not settle below "
                    f"{reortho_epsilon} in {max_passes} passes (last change {delta:.3g})"
                )
                warnings.warn(message, RuntimeWarning, stacklevel=2)
                issues.append(message)
                break
        passes.append(count)

        p_norm = p.norm()
        if p_norm == 0.0:
            raise SingularMatrixError(
                f"column {j} is linearly dependent on the previous columns",
                matrix_name='A',
                pivot_index=j,
            )
        scale = from_real(kind, p_norm)
        for i in range(n):
            q.set(i, j, p.get(i, 0) / scale)

        for i in range(j + 1):
            dot = zero(kind)
            for k in range(n):
                dot = dot + conjugate(q.get(k, i)) * A.get(k, j)
            r.set(i, j, dot)

    return QRResult(Q=q, R=r, passes=tuple(passes), warnings=tuple(issues))


# ═══════════════════════════════════════════════════════════════════════
# Solve
# ═══════════════════════════════════════════════════════════════════════


def gauss_from_qr(Q: Matrix, R: Matrix, b: Matrix) -> Matrix:
    """
    Solve A·x = b given A = Q·R.

    Computes Qᴴ·b and back-substitutes against R.

    Raises:
        SizeMismatchError: If Q and R are not square of equal size or b
            is not a matching column vector
        SingularMatrixError: If R has a zero on its diagonal
    """
    if (
        not Q.is_square()
        or not R.is_square()
        or b.width != 1
        or b.height != Q.height
        or R.width != Q.width
    ):
        raise SizeMismatchError(
            f"QR solve needs square Q, R of equal size and a matching column vector; "
            f"got Q {Q.shape}, R {R.shape}, b {b.shape}",
            operation='gauss_from_qr',
            left_shape=Q.shape,
            right_shape=b.shape,
        )

    v = Q.hermitian_transpose() @ b
    return back_substitute(R, v)
