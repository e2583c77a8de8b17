"""
Generic dispatch over numeric types.

Every algorithm in PyLinalg is written once against the functions in
this module. Objects implementing the Numeric protocol answer through
their own methods; real scalars (``float``, ``int``, numpy floating and
integer scalars) are registered here since they cannot carry methods.

The scalar *kind* of a matrix is the Python type of its entries. It is
what ``from_real`` uses to build literals such as 0, 1 and -2 inside
the algorithms.
"""

from __future__ import annotations

import math
from functools import singledispatch
from numbers import Real
from typing import Any

import numpy as np


REAL_KINDS: tuple[type, ...] = (float, int, np.floating, np.integer)


@singledispatch
def norm_squared(x: Any) -> float:
    """Squared magnitude as a float approximation."""
    return x.norm_squared()


@norm_squared.register(float)
@norm_squared.register(int)
@norm_squared.register(np.floating)
@norm_squared.register(np.integer)
def _(x) -> float:
    x = float(x)
    return x * x


def norm(x: Any) -> float:
    """Magnitude, sqrt of the squared norm."""
    return math.sqrt(norm_squared(x))


@singledispatch
def conjugate(x: Any) -> Any:
    """Complex conjugate; identity for real-like types."""
    return x.conjugate()


@conjugate.register(float)
@conjugate.register(int)
@conjugate.register(np.floating)
@conjugate.register(np.integer)
def _(x):
    return x


@singledispatch
def absolute(x: Any) -> Any:
    """Absolute value in the same type as x."""
    return x.absolute()


@absolute.register(float)
@absolute.register(int)
@absolute.register(np.floating)
@absolute.register(np.integer)
def _(x):
    return abs(x)


def is_real_kind(kind: type) -> bool:
    """True for the built-in real scalar types."""
    return issubclass(kind, REAL_KINDS) or issubclass(kind, Real)


def from_real(kind: type, x: float) -> Any:
    """
    Build a value of the given scalar kind from a real literal.

    Args:
        kind: Scalar type (float, Complex, LongInt, Fraction, ...)
        x: Real literal

    Returns:
        The literal expressed in ``kind``
    """
    if is_real_kind(kind):
        return float(x)
    return kind.from_real(x)


def zero(kind: type) -> Any:
    """Additive identity of ``kind``."""
    return from_real(kind, 0.0)


def one(kind: type) -> Any:
    """Multiplicative identity of ``kind``."""
    return from_real(kind, 1.0)


def kind_of(x: Any) -> type:
    """
    Scalar kind of a value.

    Real scalars of any flavor collapse to ``float`` so matrices built
    from ints, numpy scalars and floats share one kind.
    """
    if isinstance(x, REAL_KINDS) and not isinstance(x, bool):
        return float
    return type(x)


def kind_name(kind: type) -> str:
    """Human-readable name of a scalar kind, for messages and metadata."""
    if is_real_kind(kind):
        return 'real'
    return kind.__name__
