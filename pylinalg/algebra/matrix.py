"""
Dense matrix container generic over the scalar type.

Matrix stores a row-major flat list of scalars together with its width
and height, and knows its scalar *kind* (the type of its entries) so
algorithms can build literals such as 0 and 1 of the right type.

Operators:
    A + B, A - B    elementwise; shapes must be equal
    A @ B           matrix product; A.width must equal B.height
    A * x, A / x    scalar multiply / divide
    -A              negation

Every shape-sensitive operation raises SizeMismatchError instead of
producing garbage. Each operator returns a new matrix; ``set`` is the
only mutating call and algorithms use it on matrices they own.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Iterable, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import SizeMismatchError
from pylinalg.numbers.complex import Complex
from pylinalg.numbers.contract import (
    conjugate,
    from_real,
    is_real_kind,
    kind_of,
    norm_squared,
    one,
    zero,
)


def _to_complex(x: Any) -> Complex:
    if isinstance(x, Complex):
        return x
    z = complex(x)
    return Complex(z.real, z.imag)


class Matrix:
    """
    Dense row-major matrix.

    Invariant: ``len(elems) == width * height``.

    Construction:
        Matrix(width, height)                    # zero matrix of floats
        Matrix(width, height, kind=LongInt)      # zero matrix of LongInt
        Matrix.from_rows([[4, 3], [6, 3]])       # from nested rows
        Matrix.from_list(elems, width)           # from a flat row-major list
        Matrix.from_array(np_array)              # from numpy (real or complex)
        Matrix.identity(n)
    """

    __slots__ = ('_elems', '_width', '_height', '_kind')

    def __init__(self, width: int, height: int, kind: type = float):
        if width < 0 or height < 0:
            raise ValueError(f"matrix dimensions must be non-negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._kind = kind
        self._elems = [zero(kind)] * (width * height)

    @classmethod
    def _wrap(cls, elems: list[Any], width: int, height: int, kind: type) -> Matrix:
        m = cls.__new__(cls)
        m._elems = elems
        m._width = width
        m._height = height
        m._kind = kind
        return m

    # === Construction ===

    @classmethod
    def from_list(
        cls,
        elems: Sequence[Any],
        width: int,
        kind: type | None = None,
    ) -> Matrix:
        """
        Build from a flat row-major list.

        Raises:
            SizeMismatchError: If ``len(elems)`` is not a multiple of ``width``
        """
        elems = list(elems)
        if width <= 0:
            if elems:
                raise SizeMismatchError(
                    f"cannot lay out {len(elems)} elements with width {width}",
                    operation='from_list',
                )
            return cls(0, 0, kind or float)
        if len(elems) % width != 0:
            raise SizeMismatchError(
                f"{len(elems)} elements do not fill rows of width {width}",
                operation='from_list',
            )
        if kind is None:
            if any(isinstance(x, (complex, np.complexfloating)) for x in elems):
                kind = Complex
            else:
                kind = kind_of(elems[0]) if elems else float
        if kind is Complex:
            elems = [_to_complex(x) for x in elems]
        elif is_real_kind(kind):
            elems = [float(x) for x in elems]
        return cls._wrap(elems, width, len(elems) // width, kind)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Any]], kind: type | None = None) -> Matrix:
        """
        Build from nested rows.

        Raises:
            SizeMismatchError: If the rows have different lengths
        """
        rows = [list(r) for r in rows]
        if not rows:
            return cls(0, 0, kind or float)
        width = len(rows[0])
        for i, r in enumerate(rows):
            if len(r) != width:
                raise SizeMismatchError(
                    f"row {i} has {len(r)} entries, expected {width}",
                    operation='from_rows',
                )
        return cls.from_list([x for r in rows for x in r], width, kind)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build from a 2-D numpy array.

        Real dtypes give a float matrix, complex dtypes a Complex matrix,
        and object arrays keep their entries as they are.
        """
        arr = np.asarray(array)
        if arr.ndim == 1:
            arr = arr.reshape(-1, 1)
        if arr.ndim != 2:
            raise SizeMismatchError(
                f"expected a 2D array, got {arr.ndim}D with shape {arr.shape}",
                operation='from_array',
            )
        height, width = arr.shape
        if np.iscomplexobj(arr):
            elems = [Complex(float(z.real), float(z.imag)) for z in arr.ravel()]
            return cls._wrap(elems, width, height, Complex)
        if arr.dtype == object:
            elems = list(arr.ravel())
            kind = kind_of(elems[0]) if elems else float
            return cls._wrap(elems, width, height, kind)
        elems = [float(x) for x in arr.astype(np.float64).ravel()]
        return cls._wrap(elems, width, height, float)

    @classmethod
    def identity(cls, n: int, kind: type = float) -> Matrix:
        m = cls(n, n, kind)
        unit = one(kind)
        for i in range(n):
            m._elems[i * n + i] = unit
        return m

    @classmethod
    def scalar(cls, x: Any, n: int) -> Matrix:
        """
        n x n matrix with **every** cell set to ``x``.

        Despite the name this is not a constant-diagonal matrix; use
        ``Matrix.diagonal`` for x*I.
        """
        return cls._wrap([x] * (n * n), n, n, kind_of(x))

    @classmethod
    def diagonal(cls, x: Any, n: int) -> Matrix:
        """n x n matrix with ``x`` on the main diagonal, zero elsewhere."""
        kind = kind_of(x)
        m = cls(n, n, kind)
        for i in range(n):
            m._elems[i * n + i] = x
        return m

    # === Accessors ===

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> tuple[int, int]:
        """(height, width), matching numpy's row-major convention."""
        return (self._height, self._width)

    @property
    def kind(self) -> type:
        """Scalar type of the entries."""
        return self._kind

    @property
    def elems(self) -> tuple[Any, ...]:
        """Row-major entries."""
        return tuple(self._elems)

    def is_square(self) -> bool:
        return self._width == self._height

    def get(self, row: int, column: int) -> Any:
        return self._elems[row * self._width + column]

    def set(self, row: int, column: int, value: Any) -> None:
        self._elems[row * self._width + column] = value

    def __getitem__(self, index: tuple[int, int]) -> Any:
        row, column = index
        return self.get(row, column)

    def __setitem__(self, index: tuple[int, int], value: Any) -> None:
        row, column = index
        self.set(row, column, value)

    def rows(self) -> Iterator[list[Any]]:
        for i in range(self._height):
            yield self._elems[i * self._width:(i + 1) * self._width]

    def copy(self) -> Matrix:
        return Matrix._wrap(list(self._elems), self._width, self._height, self._kind)

    def map(self, func: Callable[[Any], Any], kind: type | None = None) -> Matrix:
        """Apply ``func`` to every entry."""
        elems = [func(x) for x in self._elems]
        if kind is None:
            kind = kind_of(elems[0]) if elems else self._kind
        return Matrix._wrap(elems, self._width, self._height, kind)

    def convert(self, kind: type) -> Matrix:
        """
        Re-express a real matrix in another scalar kind.

        Each entry goes through ``from_real(kind, float(entry))``, so
        LongInt truncates toward zero and Fraction is exact.
        """
        return self.map(lambda x: from_real(kind, float(x)), kind=kind)

    def to_array(self) -> NDArray[Any]:
        """
        numpy view of the matrix.

        float64 for real matrices, complex128 for Complex matrices and
        object dtype for every other kind.
        """
        if is_real_kind(self._kind):
            return np.array(self._elems, dtype=np.float64).reshape(self._height, self._width)
        if self._kind is Complex:
            return np.array(
                [complex(z.re, z.im) for z in self._elems], dtype=np.complex128
            ).reshape(self._height, self._width)
        arr = np.empty(self._width * self._height, dtype=object)
        arr[:] = self._elems
        return arr.reshape(self._height, self._width)

    # === Structure ===

    def transpose(self) -> Matrix:
        w, h = self._width, self._height
        elems = [self._elems[i * w + j] for j in range(w) for i in range(h)]
        return Matrix._wrap(elems, h, w, self._kind)

    def hermitian_transpose(self) -> Matrix:
        """Conjugate transpose."""
        w, h = self._width, self._height
        elems = [conjugate(self._elems[i * w + j]) for j in range(w) for i in range(h)]
        return Matrix._wrap(elems, h, w, self._kind)

    @property
    def T(self) -> Matrix:
        return self.transpose()

    @property
    def H(self) -> Matrix:
        return self.hermitian_transpose()

    def row(self, row: int) -> Matrix:
        """Row ``row`` as a 1 x width matrix."""
        start = row * self._width
        return Matrix._wrap(self._elems[start:start + self._width], self._width, 1, self._kind)

    def column(self, column: int) -> Matrix:
        """Column ``column`` as a height x 1 matrix."""
        elems = self._elems[column::self._width] if self._width else []
        return Matrix._wrap(list(elems), 1, self._height, self._kind)

    # === Norms ===

    def norm_squared(self) -> float:
        """Squared Frobenius norm: sum of the entries' squared norms."""
        return sum(norm_squared(x) for x in self._elems)

    def norm(self) -> float:
        """Frobenius norm."""
        return math.sqrt(self.norm_squared())

    # === Arithmetic ===

    def _check_same_shape(self, other: Matrix, operation: str) -> None:
        if self.shape != other.shape:
            raise SizeMismatchError(
                f"{operation}: shapes {self.shape} and {other.shape} differ",
                operation=operation,
                left_shape=self.shape,
                right_shape=other.shape,
            )

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, 'add')
        elems = [a + b for a, b in zip(self._elems, other._elems)]
        return Matrix._wrap(elems, self._width, self._height, self._kind)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, 'sub')
        elems = [a - b for a, b in zip(self._elems, other._elems)]
        return Matrix._wrap(elems, self._width, self._height, self._kind)

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._width != other._height:
            raise SizeMismatchError(
                f"matmul: inner dimensions differ, {self.shape} @ {other.shape}",
                operation='matmul',
                left_shape=self.shape,
                right_shape=other.shape,
            )
        a, b = self._elems, other._elems
        n, m, inner = self._height, other._width, self._width
        elems = []
        for i in range(n):
            for j in range(m):
                acc = zero(self._kind)
                for k in range(inner):
                    acc = acc + a[i * inner + k] * b[k * m + j]
                elems.append(acc)
        return Matrix._wrap(elems, m, n, self._kind)

    def __mul__(self, scalar: Any) -> Matrix:
        if isinstance(scalar, Matrix):
            return NotImplemented
        elems = [scalar * x for x in self._elems]
        return Matrix._wrap(elems, self._width, self._height, self._kind)

    def __rmul__(self, scalar: Any) -> Matrix:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Any) -> Matrix:
        if isinstance(scalar, Matrix):
            return NotImplemented
        elems = [x / scalar for x in self._elems]
        return Matrix._wrap(elems, self._width, self._height, self._kind)

    def __neg__(self) -> Matrix:
        return Matrix._wrap([-x for x in self._elems], self._width, self._height, self._kind)

    # === Comparison and formatting ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._elems == other._elems

    __hash__ = None  # mutable through set()

    def __str__(self) -> str:
        if self._width == 0 or self._height == 0:
            return '[ ]'
        lines = []
        for r in self.rows():
            lines.append('| ' + ''.join(f"{x} " for x in r) + '|')
        return '\n'.join(lines) + '\n'

    def __repr__(self) -> str:
        return f"Matrix({self._height}x{self._width}, kind={self._kind.__name__})"
