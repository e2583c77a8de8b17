"""
PyLinalg: generic linear algebra over pluggable number types.

Matrix factorizations written once against a small numeric contract and
run unchanged over floats, complex numbers, arbitrary-precision integers
and exact fractions.

Submodules:
    numbers: Complex, LongInt, Fraction and the generic dispatch functions
    algebra: Matrix and Polynome containers
    lu: Unpivoted LU decomposition and solves
    qr: Householder, Givens and Gram-Schmidt QR and solves
    eigen: Characteristic polynomial of tridiagonal matrices
    io: Reader/writer for the textual .m matrix format
"""

__version__ = "0.1.0"

from pylinalg import lu
from pylinalg import qr
from pylinalg import eigen
from pylinalg.algebra import Matrix, Polynome
from pylinalg.numbers import Complex, Fraction, LongInt

__all__ = [
    "__version__",
    "lu",
    "qr",
    "eigen",
    "Matrix",
    "Polynome",
    "Complex",
    "Fraction",
    "LongInt",
]
