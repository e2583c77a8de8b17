"""
Scalar types for PyLinalg.

Every algorithm runs over any type satisfying the Numeric contract
(see ``pylinalg.core.protocols``). This package provides the concrete
types plus the generic dispatch functions algorithms use.

Types:
    Complex: re + im*i over floats
    LongInt: arbitrary-precision integer over base-256 digits
    Fraction: exact rational over int or LongInt (``Fraction.over``)

Real scalars are plain Python floats.
"""

from pylinalg.numbers.contract import (
    absolute,
    conjugate,
    from_real,
    is_real_kind,
    kind_name,
    kind_of,
    norm,
    norm_squared,
    one,
    zero,
)
from pylinalg.numbers.complex import Complex
from pylinalg.numbers.longint import LongInt
from pylinalg.numbers.fraction import Fraction

__all__ = [
    # Types
    "Complex",
    "LongInt",
    "Fraction",
    # Generic dispatch
    "absolute",
    "conjugate",
    "from_real",
    "is_real_kind",
    "kind_name",
    "kind_of",
    "norm",
    "norm_squared",
    "one",
    "zero",
]
