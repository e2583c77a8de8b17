"""
Tests for input validation utilities.
"""

import numpy as np
import pytest

from pylinalg.algebra.matrix import Matrix
from pylinalg.core.exceptions import (
    DimensionError,
    NotSquareError,
    SizeMismatchError,
    ValidationError,
)
from pylinalg.core.validation import (
    check_2d,
    check_array,
    check_column_vector,
    check_finite,
    check_ndim,
    check_same_shape,
    check_square,
)


class TestCheckArray:

    def test_list_becomes_float64(self):
        result = check_array([[1, 2], [3, 4]], 'A')
        assert result.dtype == np.float64

    def test_complex_stays_complex(self):
        result = check_array([[1 + 2j, 0], [0, 1]], 'A')
        assert result.dtype == np.complex128

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError, match="A:"):
            check_array([1, "a", None], 'A')

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(np.array(["a", "b"]), 'A')


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), 'x')

    def test_nan_reported(self):
        with pytest.raises(ValidationError, match="1 NaN, 0 Inf"):
            check_finite(np.array([1.0, np.nan]), 'x')

    def test_inf_reported(self):
        with pytest.raises(ValidationError, match="0 NaN, 1 Inf"):
            check_finite(np.array([np.inf, 1.0]), 'x')


class TestCheckNdim:

    def test_wrong_ndim(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_ndim(np.zeros(3), 2, 'A')

    def test_check_2d(self):
        check_2d(np.zeros((2, 2)), 'A')
        with pytest.raises(DimensionError):
            check_2d(np.zeros((2, 2, 2)), 'A')


class TestMatrixChecks:

    def test_square_passes(self):
        check_square(Matrix(3, 3), 'A')

    def test_not_square(self):
        with pytest.raises(NotSquareError) as exc_info:
            check_square(Matrix(3, 2), 'A')
        assert exc_info.value.shape == (2, 3)

    def test_same_shape(self):
        check_same_shape(Matrix(2, 3), Matrix(2, 3), ('A', 'B'))
        with pytest.raises(SizeMismatchError):
            check_same_shape(Matrix(2, 3), Matrix(3, 2), ('A', 'B'))

    def test_column_vector(self):
        check_column_vector(Matrix(1, 4), 4, 'b')

    @pytest.mark.parametrize("width,height", [(2, 4), (1, 3)])
    def test_column_vector_mismatch(self, width, height):
        with pytest.raises(SizeMismatchError, match="b:"):
            check_column_vector(Matrix(width, height), 4, 'b')
