"""
Matrix design.

MatrixDesign is the input boundary of the solvers: it turns whatever the
caller hands in (numpy arrays, a real/imaginary pair, or a ready Matrix)
into a validated Matrix plus the optional QR method selector.

Solvers validate once here and trust the design everywhere else.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import numpy as np
from numpy.typing import ArrayLike

from pylinalg.algebra.matrix import Matrix
from pylinalg.core.exceptions import ValidationError
from pylinalg.core.validation import (
    check_2d,
    check_array,
    check_column_vector,
    check_finite,
    check_same_shape,
)
from pylinalg.numbers.contract import from_real, is_real_kind

QRMethod = Literal['householder', 'givens', 'gram_schmidt']

QR_METHODS: tuple[str, ...] = ('householder', 'givens', 'gram_schmidt')

# Codes used by the "Method=<n>" header of matrix files
METHOD_CODES: dict[int, str] = {
    1: 'householder',
    2: 'givens',
    3: 'gram_schmidt',
}


def check_method(method: str | None) -> None:
    """
    Verify ``method`` names a QR method (or is None).

    Raises:
        ValidationError: If the method is unknown
    """
    if method is not None and method not in QR_METHODS:
        raise ValidationError(
            f"method: unknown QR method {method!r}, expected one of {QR_METHODS}"
        )


@dataclass(frozen=True)
class MatrixDesign:
    """
    Validated input matrix with its QR method selector.

    Immutable after construction; the wrapped Matrix is a private copy.

    Construction:
        MatrixDesign.from_arrays(A)                  # real matrix
        MatrixDesign.from_arrays(re, imag=im)        # Complex matrix
        MatrixDesign.from_matrix(matrix)             # any scalar kind
        MatrixDesign.from_matrix(m, method='givens')
    """
    matrix: Matrix
    method: QRMethod | None = None

    @classmethod
    def from_arrays(
        cls,
        real: ArrayLike,
        imag: ArrayLike | None = None,
        method: QRMethod | None = None,
    ) -> MatrixDesign:
        """
        Build from a numeric array, optionally with imaginary parts.

        A 1-D array is read as a column vector.

        Raises:
            ValidationError: If an array is non-numeric or non-finite
            DimensionError: If an array is not 1-D or 2-D
            SizeMismatchError: If ``real`` and ``imag`` shapes differ
        """
        re = check_array(real, 'real')
        if re.ndim == 1:
            re = re.reshape(-1, 1)
        check_2d(re, 'real')
        check_finite(re, 'real')

        if imag is None:
            return cls._build(Matrix.from_array(re), method)

        if np.iscomplexobj(re):
            raise ValidationError("real: must be real when imag is given")
        im = check_array(imag, 'imag')
        if im.ndim == 1:
            im = im.reshape(-1, 1)
        check_2d(im, 'imag')
        check_finite(im, 'imag')

        left, right = Matrix.from_array(re), Matrix.from_array(im)
        check_same_shape(left, right, ('real', 'imag'))
        return cls._build(Matrix.from_array(re + 1j * im), method)

    @classmethod
    def from_matrix(cls, matrix: Matrix, method: QRMethod | None = None) -> MatrixDesign:
        """Build from an existing Matrix of any scalar kind."""
        return cls._build(matrix.copy(), method)

    @classmethod
    def from_input(
        cls,
        A: Matrix | ArrayLike,
        method: QRMethod | None = None,
    ) -> MatrixDesign:
        """Dispatch on the input type: Matrix or array-like."""
        if isinstance(A, Matrix):
            return cls.from_matrix(A, method)
        return cls.from_arrays(A, method=method)

    @classmethod
    def _build(cls, matrix: Matrix, method: QRMethod | None) -> MatrixDesign:
        check_method(method)
        return cls(matrix=matrix, method=method)

    @property
    def kind(self) -> type:
        return self.matrix.kind

    @property
    def n(self) -> int:
        """Number of rows."""
        return self.matrix.height

    @property
    def shape(self) -> tuple[int, int]:
        return self.matrix.shape


def as_right_hand_side(
    b: Matrix | ArrayLike,
    kind: type,
    height: int,
    name: str = 'b',
) -> Matrix:
    """
    Validate a right-hand side and express it in the factors' scalar kind.

    Array-likes go through ``MatrixDesign.from_arrays``; a 1-D input is a
    column vector. Real entries are lifted with ``from_real`` when the
    factors use another kind (e.g. a real b against Complex factors).

    Raises:
        SizeMismatchError: If b is not a ``height`` x 1 column vector
        ValidationError: If b is complex but the factors are real
    """
    vector = b if isinstance(b, Matrix) else MatrixDesign.from_arrays(b).matrix
    check_column_vector(vector, height, name)

    if vector.kind is kind:
        return vector
    if is_real_kind(vector.kind):
        return vector.map(lambda x: from_real(kind, float(x)), kind=kind)
    if is_real_kind(kind):
        raise ValidationError(
            f"{name}: {vector.kind.__name__} right-hand side needs factors of the same kind"
        )
    return vector
