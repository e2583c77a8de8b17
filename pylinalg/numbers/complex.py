"""
Complex numbers as a pair of real scalars.

A dedicated type rather than Python's ``complex`` so it carries the
Numeric contract (``from_real``, ``norm_squared``, ``absolute``) and
formats the way the matrix file format expects (``3-2i``).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from pylinalg.core.exceptions import DivisionByZeroError
from pylinalg.numbers.contract import REAL_KINDS


def format_real(x: float) -> str:
    """Shortest round-tripping text, without a trailing '.0'."""
    if float(x).is_integer():
        return str(int(x))
    return repr(float(x))


@dataclass(frozen=True)
class Complex:
    """
    The complex number re + im*i.

    Real scalars on either side of an operator are promoted to
    ``Complex(x, 0)``.

    Attributes:
        re: Real part
        im: Imaginary part
    """
    re: float = 0.0
    im: float = 0.0

    @classmethod
    def from_real(cls, x: float) -> Complex:
        return cls(float(x), 0.0)

    @classmethod
    def from_builtin(cls, z: complex) -> Complex:
        return cls(z.real, z.imag)

    def to_builtin(self) -> complex:
        return complex(self.re, self.im)

    # === Numeric contract ===

    def abs_squared(self) -> float:
        return self.re * self.re + self.im * self.im

    def abs(self) -> float:
        return math.sqrt(self.abs_squared())

    def norm_squared(self) -> float:
        return self.abs_squared()

    def norm(self) -> float:
        return self.abs()

    def conjugate(self) -> Complex:
        return Complex(self.re, -self.im)

    def absolute(self) -> Complex:
        return Complex(self.abs(), 0.0)

    # === Arithmetic ===

    @staticmethod
    def _coerce(other) -> Complex | None:
        if isinstance(other, Complex):
            return other
        if isinstance(other, REAL_KINDS):
            return Complex(float(other), 0.0)
        if isinstance(other, complex):
            return Complex(other.real, other.imag)
        return None

    def __neg__(self) -> Complex:
        return Complex(-self.re, -self.im)

    def __add__(self, other) -> Complex:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Complex(self.re + other.re, self.im + other.im)

    def __sub__(self, other) -> Complex:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Complex(self.re - other.re, self.im - other.im)

    def __mul__(self, other) -> Complex:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        # (a + ib)(c + id) = (ac - bd) + i(ad + bc)
        return Complex(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    def __truediv__(self, other) -> Complex:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        denominator = other.abs_squared()
        if denominator == 0.0:
            raise DivisionByZeroError(f"complex division of {self} by zero")
        # (a + ib) / (c + id) = (a + ib)(c - id) / (c² + d²)
        product = self * other.conjugate()
        return Complex(product.re / denominator, product.im / denominator)

    def __radd__(self, other) -> Complex:
        return self.__add__(other)

    def __rsub__(self, other) -> Complex:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __rmul__(self, other) -> Complex:
        return self.__mul__(other)

    def __rtruediv__(self, other) -> Complex:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    def __eq__(self, other) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.re == other.re and self.im == other.im

    def __hash__(self) -> int:
        return hash((self.re, self.im))

    def __complex__(self) -> complex:
        return self.to_builtin()

    def __str__(self) -> str:
        if self.re == 0.0:
            if self.im == 0.0:
                return '0'
            return f"{format_real(self.im)}i"
        if self.im == 0.0:
            return format_real(self.re)
        if self.im > 0.0:
            return f"{format_real(self.re)}+{format_real(self.im)}i"
        return f"{format_real(self.re)}{format_real(self.im)}i"
