"""
Input validation utilities for PyLinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinalg.algebra.matrix import Matrix
from pylinalg.core.exceptions import (
    DimensionError,
    NotSquareError,
    SizeMismatchError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[Any]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    Complex input stays complex; every other numeric dtype becomes float64.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 or complex128 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.iscomplexobj(result):
        return result.astype(np.complex128)
    return result.astype(np.float64)


def check_finite(array: NDArray[Any], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_square(matrix: Matrix, name: str) -> None:
    """
    Verify matrix is square.

    Args:
        matrix: Matrix to check
        name: Parameter name for error messages

    Raises:
        NotSquareError: If height != width
    """
    if not matrix.is_square():
        raise NotSquareError(
            f"{name}: expected a square matrix, got {matrix.height}x{matrix.width}",
            shape=matrix.shape,
        )


def check_same_shape(left: Matrix, right: Matrix, names: tuple[str, str]) -> None:
    """
    Verify two matrices have identical shapes.

    Raises:
        SizeMismatchError: If the shapes differ
    """
    if left.shape != right.shape:
        raise SizeMismatchError(
            f"{names[0]} has shape {left.shape} but {names[1]} has shape {right.shape}",
            operation='check_same_shape',
            left_shape=left.shape,
            right_shape=right.shape,
        )


def check_column_vector(vector: Matrix, height: int, name: str) -> None:
    """
    Verify ``vector`` is a column vector of the given height.

    Args:
        vector: Matrix to check
        height: Required number of rows
        name: Parameter name for error messages

    Raises:
        SizeMismatchError: If vector is not height x 1
    """
    if vector.width != 1 or vector.height != height:
        raise SizeMismatchError(
            f"{name}: expected a {height}x1 column vector, got {vector.height}x{vector.width}",
            operation='check_column_vector',
            left_shape=(height, 1),
            right_shape=vector.shape,
        )
