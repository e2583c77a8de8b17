"""
Exception hierarchy for PyLinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Every shape- or precondition-sensitive operation
raises one of the typed failures below; nothing is silently substituted
or retried.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinalgError(Exception):
    """Base exception for all PyLinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Base class for every shape-related failure.
    """
    pass


class SizeMismatchError(DimensionError):
    """
    Two operands have incompatible dimensions.

    Raised by elementwise add/sub (shapes must be equal), matrix multiply
    (inner dimensions must match) and the triangular solves.

    Attributes:
        operation: Name of the operation that failed
        left_shape: (height, width) of the left operand, if known
        right_shape: (height, width) of the right operand, if known
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(DimensionError):
    """
    A square matrix was required.

    Attributes:
        shape: (height, width) of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class NotTridiagonalError(DimensionError):
    """
    A tridiagonal matrix was required.

    Attributes:
        row: Row of the first off-band entry that is not (close to) zero
        column: Column of that entry
        magnitude: Squared norm of that entry
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        column: int | None = None,
        magnitude: float | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.column = column
        self.magnitude = magnitude


class UnsupportedOperationError(ValidationError):
    """
    The requested algorithm is not defined for the given scalar type.

    Raised, for example, when Givens QR is requested on a complex matrix.

    Attributes:
        operation: The requested operation
        scalar_type: Name of the scalar type it was requested for
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        scalar_type: str | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.scalar_type = scalar_type


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular with respect to the factorization or solve.

    LU performs no row exchange, so a zero pivot is a hard failure even
    when a permuted factorization would exist. Gram-Schmidt raises it for
    a dependent column and the triangular solves for a zero diagonal.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Layer, column or diagonal index of the zero pivot
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index


class DivisionByZeroError(NumericalError, ZeroDivisionError):
    """
    Division by the zero value of a numeric type.

    Also a ZeroDivisionError, so generic arithmetic code keeps working.
    """
    pass


class EmptyPolynomialError(NumericalError, IndexError):
    """
    The leading coefficient of a polynomial without coefficients was read.
    """
    pass
