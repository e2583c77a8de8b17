"""
Characteristic polynomial of a tridiagonal matrix.

Uses the three-term recurrence over leading principal minors

    D₁(λ) = a₀₀ − λ
    D₂(λ) = (a₀₀·a₁₁ − a₁₀·a₀₁) − (a₀₀ + a₁₁)·λ + λ²
    Dᵢ(λ) = (aᵢᵢ − λ)·Dᵢ₋₁(λ) − (aᵢ,ᵢ₋₁·aᵢ₋₁,ᵢ)·Dᵢ₋₂(λ)

Over floats the recurrence accumulates rounding error step after step;
over LongInt or Fraction it is exact.
"""

from __future__ import annotations

from pylinalg.algebra.matrix import Matrix
from pylinalg.algebra.polynome import Polynome
from pylinalg.core.compute.tolerances import TRIDIAGONAL_ZERO_TOLERANCE
from pylinalg.core.exceptions import NotSquareError, NotTridiagonalError
from pylinalg.numbers.contract import from_real, norm_squared, one, zero


def first_off_band_entry(
    A: Matrix,
    tolerance: float = TRIDIAGONAL_ZERO_TOLERANCE,
) -> tuple[int, int, float] | None:
    """
    First entry outside the three central diagonals that is not zero.

    An entry counts as zero when its squared norm is at most
    ``tolerance``.

    Returns:
        (row, column, squared norm) of the entry, or None if A is
        tridiagonal
    """
    for i in range(A.height):
        for j in range(A.width):
            if abs(i - j) <= 1:
                continue
            magnitude = norm_squared(A.get(i, j))
            if magnitude > tolerance:
                return i, j, magnitude
    return None


def is_tridiagonal(A: Matrix, tolerance: float = TRIDIAGONAL_ZERO_TOLERANCE) -> bool:
    return first_off_band_entry(A, tolerance) is None


def check_tridiagonal(A: Matrix, tolerance: float = TRIDIAGONAL_ZERO_TOLERANCE) -> None:
    """
    Verify A is square and tridiagonal.

    Raises:
        NotSquareError: If A is not square
        NotTridiagonalError: If an off-band entry is not (close to) zero
    """
    if not A.is_square():
        raise NotSquareError(
            f"characteristic polynomial needs a square matrix, got {A.height}x{A.width}",
            shape=A.shape,
        )

    offending = first_off_band_entry(A, tolerance)
    if offending is not None:
        row, column, magnitude = offending
        raise NotTridiagonalError(
            f"entry ({row}, {column}) is off the tridiagonal band "
            f"(squared norm {magnitude:.3g} > {tolerance})",
            row=row,
            column=column,
            magnitude=magnitude,
        )


def characteristic_polynomial(
    A: Matrix,
    tolerance: float = TRIDIAGONAL_ZERO_TOLERANCE,
) -> Polynome:
    """
    det(A − λI) of a square tridiagonal matrix.

    Args:
        A: Square tridiagonal matrix of any scalar kind
        tolerance: Squared-norm threshold below which off-band entries
            count as zero

    Returns:
        Polynome with ascending coefficients; the zero polynomial for a
        0 x 0 matrix

    Raises:
        NotSquareError: If A is not square
        NotTridiagonalError: If an off-band entry is not (close to) zero
    """
    check_tridiagonal(A, tolerance)

    kind = A.kind
    minus_one = from_real(kind, -1.0)
    n = A.width

    if n == 0:
        return Polynome([zero(kind)], kind)

    first = Polynome([A.get(0, 0), minus_one], kind)
    if n == 1:
        return first

    a, b = A.get(0, 0), A.get(0, 1)
    c, d = A.get(1, 0), A.get(1, 1)
    second = Polynome([a * d - c * b, (d + a) * minus_one, one(kind)], kind)

    previous, current = first, second
    for i in range(2, n):
        diagonal = Polynome([A.get(i, i), minus_one], kind)
        coupling = A.get(i, i - 1) * A.get(i - 1, i)
        previous, current = current, current * diagonal - previous * coupling

    return current
