"""
Arbitrary-precision signed integer.

LongInt stores a sign flag and a little-endian sequence of base-256
digits. It exists so the tridiagonal characteristic-polynomial
recurrence can run exactly: over floats the recurrence loses precision
to cancellation after a handful of steps.

Invariants:
    - No trailing (most significant) zero digit.
    - Zero is the empty digit sequence with a positive sign; -0 cannot
      be constructed.

Arithmetic works on the digit sequences directly: magnitude helpers do
the digit work and the signed operators dispatch on the operand signs.
Python ints are accepted at the boundary (construction, ``int()``,
mixed-mode operators) only.
"""

from __future__ import annotations

import math
from functools import total_ordering
from typing import Sequence

from pylinalg.core.exceptions import DivisionByZeroError, ValidationError


_BASE = 256
_MASK = 0xFF
_HEX = '0123456789ABCDEF'


# ═══════════════════════════════════════════════════════════════════════
# Magnitude helpers (digit lists, least significant first)
# ═══════════════════════════════════════════════════════════════════════


def _trim(digits: list[int]) -> list[int]:
    """Drop most-significant zero digits in place and return the list."""
    while digits and digits[-1] == 0:
        digits.pop()
    return digits


def _compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """Compare |a| and |b|; returns -1, 0 or 1."""
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


def _add_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    length = max(len(a), len(b))
    result = []
    carry = 0
    for i in range(length):
        total = (a[i] if i < len(a) else 0) + (b[i] if i < len(b) else 0) + carry
        result.append(total & _MASK)
        carry = total >> 8
    if carry:
        result.append(carry)
    return _trim(result)


def _sub_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """|a| - |b| for |a| >= |b|."""
    result = []
    borrow = 0
    for i in range(len(a)):
        diff = a[i] - (b[i] if i < len(b) else 0) - borrow
        if diff < 0:
            diff += _BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)
    return _trim(result)


def _mul_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Schoolbook multiplication; every partial product fits in 16 bits."""
    if not a or not b:
        return []
    result = [0] * (len(a) + len(b))
    for i, digit in enumerate(b):
        carry = 0
        for j, other in enumerate(a):
            acc = result[i + j] + other * digit + carry
            result[i + j] = acc & _MASK
            carry = acc >> 8
        result[i + len(a)] = carry
    return _trim(result)


def _get_bit(digits: Sequence[int], bit: int) -> int:
    index = bit >> 3
    if index >= len(digits):
        return 0
    return (digits[index] >> (bit & 7)) & 1


def _set_bit(digits: list[int], bit: int) -> None:
    index = bit >> 3
    if index >= len(digits):
        digits.extend([0] * (index + 1 - len(digits)))
    digits[index] |= 1 << (bit & 7)


def _shift_left_one_bit(digits: list[int], low_bit: int) -> list[int]:
    """Shift left by one bit and inject ``low_bit`` at position 0."""
    result = []
    carry = low_bit
    for digit in digits:
        shifted = (digit << 1) | carry
        result.append(shifted & _MASK)
        carry = shifted >> 8
    if carry:
        result.append(carry)
    return _trim(result)


def _divmod_magnitudes(
    n: Sequence[int],
    d: Sequence[int],
) -> tuple[list[int], list[int]]:
    """
    Binary long division of magnitudes.

    Scans the dividend from its most significant bit, shifting each bit
    into a running remainder and subtracting the divisor whenever the
    remainder reaches it.
    """
    if not d:
        raise DivisionByZeroError("LongInt division by zero")
    if _compare_magnitudes(n, d) < 0:
        return [], list(n)

    quotient: list[int] = []
    remainder: list[int] = []
    for bit in range(len(n) * 8 - 1, -1, -1):
        remainder = _shift_left_one_bit(remainder, _get_bit(n, bit))
        if _compare_magnitudes(remainder, d) >= 0:
            remainder = _sub_magnitudes(remainder, d)
            _set_bit(quotient, bit)
    return _trim(quotient), remainder


# ═══════════════════════════════════════════════════════════════════════
# LongInt
# ═══════════════════════════════════════════════════════════════════════


@total_ordering
class LongInt:
    """
    Arbitrary-precision signed integer over base-256 digits.

    Division (``/``) truncates toward zero and ``%`` returns the matching
    remainder, so ``a == (a / b) * b + a % b`` for every non-zero ``b``.

    Examples:
        >>> str(LongInt(300) * LongInt(300))
        '90000'
        >>> LongInt.from_decimal('-12345678901234567890').to_decimal()
        '-12345678901234567890'
    """

    __slots__ = ('_digits', '_positive')

    def __init__(self, value: int = 0):
        if isinstance(value, LongInt):
            self._digits = list(value._digits)
            self._positive = value._positive
            return
        value = int(value)
        magnitude = abs(value)
        self._digits = list(magnitude.to_bytes((magnitude.bit_length() + 7) // 8, 'little'))
        self._positive = value >= 0

    @classmethod
    def _make(cls, digits: list[int], positive: bool) -> LongInt:
        result = cls.__new__(cls)
        result._digits = _trim(digits)
        # zero always carries the positive sign
        result._positive = positive or not result._digits
        return result

    @classmethod
    def from_real(cls, x: float) -> LongInt:
        """Build from a real literal, truncating toward zero."""
        return cls(int(x))

    @classmethod
    def from_decimal(cls, text: str) -> LongInt:
        """
        Parse a decimal string such as ``'-90000'``.

        Raises:
            ValidationError: If the text is not an optionally signed
                run of decimal digits
        """
        text = text.strip()
        negative = text.startswith('-')
        body = text[1:] if text[:1] in '+-' else text
        if not body or any(char not in '0123456789' for char in body):
            raise ValidationError(f"not a decimal integer: {text!r}")

        digits: list[int] = []
        for char in body:
            digits = _add_magnitudes(_mul_magnitudes(digits, [10]), _trim([int(char)]))
        return cls._make(digits, not negative)

    # === Accessors ===

    @property
    def digits(self) -> tuple[int, ...]:
        """Base-256 digits, least significant first."""
        return tuple(self._digits)

    @property
    def positive(self) -> bool:
        return self._positive

    def digit(self, index: int) -> int:
        """Digit at ``index``; 0 beyond the stored length."""
        return self._digits[index] if index < len(self._digits) else 0

    def is_zero(self) -> bool:
        return not self._digits

    def bit_length(self) -> int:
        if not self._digits:
            return 0
        return (len(self._digits) - 1) * 8 + self._digits[-1].bit_length()

    # === Numeric contract ===

    def norm_squared(self) -> float:
        try:
            value = float(self)
        except OverflowError:
            return math.inf
        return value * value

    def norm(self) -> float:
        return math.sqrt(self.norm_squared())

    def conjugate(self) -> LongInt:
        return self

    def absolute(self) -> LongInt:
        return LongInt._make(list(self._digits), True)

    def __abs__(self) -> LongInt:
        return self.absolute()

    # === Arithmetic ===

    @staticmethod
    def _coerce(other) -> LongInt | None:
        if isinstance(other, LongInt):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return LongInt(other)
        return None

    def _signed_difference(self, other: LongInt, positive: bool) -> LongInt:
        """sign * (|self| - |other|), with ``positive`` giving the sign."""
        order = _compare_magnitudes(self._digits, other._digits)
        if order == 0:
            return LongInt()
        if order > 0:
            return LongInt._make(_sub_magnitudes(self._digits, other._digits), positive)
        return LongInt._make(_sub_magnitudes(other._digits, self._digits), not positive)

    def __neg__(self) -> LongInt:
        return LongInt._make(list(self._digits), not self._positive)

    def __add__(self, other) -> LongInt:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if self._positive and other._positive:
            return LongInt._make(_add_magnitudes(self._digits, other._digits), True)
        if self._positive and not other._positive:
            return self._signed_difference(other, True)
        if not self._positive and other._positive:
            return self._signed_difference(other, False)
        return LongInt._make(_add_magnitudes(self._digits, other._digits), False)

    def __sub__(self, other) -> LongInt:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if self._positive and other._positive:
            return self._signed_difference(other, True)
        if self._positive and not other._positive:
            return LongInt._make(_add_magnitudes(self._digits, other._digits), True)
        if not self._positive and other._positive:
            return LongInt._make(_add_magnitudes(self._digits, other._digits), False)
        return self._signed_difference(other, False)

    def __mul__(self, other) -> LongInt:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return LongInt._make(
            _mul_magnitudes(self._digits, other._digits),
            self._positive == other._positive,
        )

    def __divmod__(self, other) -> tuple[LongInt, LongInt]:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        quotient, remainder = _divmod_magnitudes(self._digits, other._digits)
        return (
            LongInt._make(quotient, self._positive == other._positive),
            LongInt._make(remainder, self._positive),
        )

    def __truediv__(self, other) -> LongInt:
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[0]

    def __mod__(self, other) -> LongInt:
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[1]

    def __radd__(self, other) -> LongInt:
        return self.__add__(other)

    def __rsub__(self, other) -> LongInt:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __rmul__(self, other) -> LongInt:
        return self.__mul__(other)

    def __rtruediv__(self, other) -> LongInt:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    def __rmod__(self, other) -> LongInt:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other % self

    # === Comparison ===

    def __eq__(self, other) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._positive == other._positive and self._digits == other._digits

    def __lt__(self, other) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if self._positive != other._positive:
            return not self._positive
        order = _compare_magnitudes(self._digits, other._digits)
        return order < 0 if self._positive else order > 0

    def __hash__(self) -> int:
        return hash((self._positive, tuple(self._digits)))

    def __bool__(self) -> bool:
        return bool(self._digits)

    # === Conversion and formatting ===

    def __int__(self) -> int:
        magnitude = int.from_bytes(bytes(self._digits), 'little')
        return magnitude if self._positive else -magnitude

    def __float__(self) -> float:
        return float(int(self))

    def to_decimal(self) -> str:
        """Decimal string, built by repeated division by ten."""
        if not self._digits:
            return '0'
        chars = []
        magnitude = list(self._digits)
        while magnitude:
            magnitude, digit = _divmod_magnitudes(magnitude, [10])
            chars.append(str(digit[0] if digit else 0))
        if not self._positive:
            chars.append('-')
        return ''.join(reversed(chars))

    def to_hex(self) -> str:
        """
        Pipe-delimited hex dump of the digits, least significant first.

        Zero formats as ``'|00|'``; negative values get a leading ``'-'``.
        """
        if not self._digits:
            return '|00|'
        parts = ['|' if self._positive else '-|']
        for digit in self._digits:
            parts.append(_HEX[digit >> 4] + _HEX[digit & 0xF] + '|')
        return ''.join(parts)

    def __str__(self) -> str:
        return self.to_decimal()

    def __repr__(self) -> str:
        return f"LongInt({self.to_decimal()})"
