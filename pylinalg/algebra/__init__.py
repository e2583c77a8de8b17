"""
Algebraic containers: dense matrices and polynomials.

Both are generic over the scalar type of their entries (float, Complex,
LongInt, Fraction, ...).
"""

from pylinalg.algebra.matrix import Matrix
from pylinalg.algebra.polynome import Polynome

__all__ = [
    "Matrix",
    "Polynome",
]
