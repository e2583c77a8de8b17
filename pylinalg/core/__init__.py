"""
Core infrastructure for PyLinalg.

This module provides shared abstractions and utilities used by all
domain-specific submodules (lu, qr, eigen).

Key components:
    protocols: Numeric, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators (imported on demand)
    design: MatrixDesign input boundary (imported on demand)
    compute: Timing, tolerances, linear algebra kernels
"""

from pylinalg.core.protocols import Numeric, Backend
from pylinalg.core.result import Result
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    SizeMismatchError,
    NotSquareError,
    NotTridiagonalError,
    UnsupportedOperationError,
    NumericalError,
    SingularMatrixError,
    DivisionByZeroError,
    EmptyPolynomialError,
)

__all__ = [
    # Protocols
    "Numeric",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "SizeMismatchError",
    "NotSquareError",
    "NotTridiagonalError",
    "UnsupportedOperationError",
    "NumericalError",
    "SingularMatrixError",
    "DivisionByZeroError",
    "EmptyPolynomialError",
]
