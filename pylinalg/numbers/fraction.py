"""
Exact rational numbers over an integer-like type.

A Fraction is (numerator, denominator) over any integer kind that
supports ``+ - * / %``, ordering and equality: Python ``int`` and
``LongInt`` both qualify.

Invariants (re-established by every construction):
    - The denominator is non-negative; the sign lives in the numerator.
    - gcd(numerator, denominator) == 1.

Matrices pick their scalar kind from the type of their entries, so the
integer kind is bound to the class: ``Fraction.over(LongInt)`` returns
the Fraction class whose ``from_real`` builds LongInt parts. Plain
``Fraction`` works over ``int``.
"""

from __future__ import annotations

import math
from functools import total_ordering
from numbers import Integral
from typing import Any, ClassVar

from pylinalg.core.exceptions import DivisionByZeroError
from pylinalg.numbers.contract import absolute


def _is_integer_literal(x) -> bool:
    return isinstance(x, Integral) and not isinstance(x, bool)


@total_ordering
class Fraction:
    """
    Fully reduced fraction with the sign carried by the numerator.

    Note the argument order: the denominator comes first.

    Examples:
        >>> f = Fraction(4, 6)
        >>> (f.numerator, f.denominator)
        (3, 2)
        >>> Fraction(3, 1) + Fraction(6, 1)
        Fraction(2, 1)
    """

    integer_kind: ClassVar[type] = int
    _specializations: ClassVar[dict[type, type]] = {}

    __slots__ = ('_num', '_den')

    def __init__(self, denominator: Any, numerator: Any):
        zero = self.integer_kind(0)
        den = self._to_integer(denominator)
        num = self._to_integer(numerator)
        if den == zero:
            raise DivisionByZeroError(f"fraction {numerator}/{denominator} has a zero denominator")

        same_sign = (den >= zero) == (num >= zero)
        den = absolute(den)
        num = absolute(num)

        divisor = self.gcd(num, den)
        num = self._exact_div(num, divisor)
        self._den = self._exact_div(den, divisor)
        self._num = num if same_sign else -num

    @classmethod
    def over(cls, integer_kind: type) -> type[Fraction]:
        """
        Fraction class bound to ``integer_kind``.

        Classes are cached, so ``Fraction.over(LongInt)`` always returns
        the same type and matrices of such fractions share one kind.
        """
        if integer_kind is int:
            return Fraction
        if integer_kind not in cls._specializations:
            cls._specializations[integer_kind] = type(
                f"Fraction[{integer_kind.__name__}]",
                (Fraction,),
                {'integer_kind': integer_kind, '__slots__': ()},
            )
        return cls._specializations[integer_kind]

    @classmethod
    def _to_integer(cls, value: Any) -> Any:
        if isinstance(value, cls.integer_kind):
            return value
        if _is_integer_literal(value):
            return cls.integer_kind(value)
        raise TypeError(
            f"{cls.__name__} parts must be {cls.integer_kind.__name__} or int, "
            f"got {type(value).__name__}"
        )

    @classmethod
    def _from_parts(cls, denominator: Any, numerator: Any) -> Fraction:
        return cls(denominator, numerator)

    @classmethod
    def _exact_div(cls, a: Any, b: Any) -> Any:
        # LongInt division already truncates; int needs floor division
        if cls.integer_kind is int:
            return a // b
        return a / b

    @classmethod
    def from_real(cls, x: float) -> Fraction:
        """Exact fraction equal to the binary value of ``x``."""
        num, den = float(x).as_integer_ratio()
        return cls(den, num)

    @staticmethod
    def gcd(a: Any, b: Any) -> Any:
        """Euclidean gcd via repeated ``a, b = b, a % b``."""
        zero = a - a
        while b != zero:
            a, b = b, a % b
        return absolute(a)

    # === Accessors ===

    @property
    def numerator(self) -> Any:
        return self._num

    @property
    def denominator(self) -> Any:
        return self._den

    # === Numeric contract ===

    def norm_squared(self) -> float:
        value = float(self)
        return value * value

    def norm(self) -> float:
        return math.sqrt(self.norm_squared())

    def conjugate(self) -> Fraction:
        return self

    def absolute(self) -> Fraction:
        return self._from_parts(self._den, absolute(self._num))

    def __abs__(self) -> Fraction:
        return self.absolute()

    # === Arithmetic ===

    def _coerce(self, other) -> Fraction | None:
        if isinstance(other, Fraction):
            return other
        if isinstance(other, self.integer_kind) or _is_integer_literal(other):
            return self._from_parts(1, other)
        return None

    def __neg__(self) -> Fraction:
        return self._from_parts(self._den, -self._num)

    def __add__(self, other) -> Fraction:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._from_parts(
            self._den * other._den,
            self._num * other._den + other._num * self._den,
        )

    def __sub__(self, other) -> Fraction:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._from_parts(
            self._den * other._den,
            self._num * other._den - other._num * self._den,
        )

    def __mul__(self, other) -> Fraction:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._from_parts(self._den * other._den, self._num * other._num)

    def __truediv__(self, other) -> Fraction:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._from_parts(self._den * other._num, self._num * other._den)

    def __radd__(self, other) -> Fraction:
        return self.__add__(other)

    def __rsub__(self, other) -> Fraction:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __rmul__(self, other) -> Fraction:
        return self.__mul__(other)

    def __rtruediv__(self, other) -> Fraction:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    # === Comparison ===

    def __eq__(self, other) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._num == other._num and self._den == other._den

    def __lt__(self, other) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        # denominators are positive, so cross-multiplying keeps the order
        return self._num * other._den < other._num * self._den

    def __hash__(self) -> int:
        return hash((int(self._num), int(self._den)))

    # === Conversion and formatting ===

    def __float__(self) -> float:
        return int(self._num) / int(self._den)

    def __str__(self) -> str:
        if self._den == self.integer_kind(1):
            return str(self._num)
        return f"{self._num}/{self._den}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._den}, {self._num})"
