"""
Tests for the generic Matrix container.

Validates:
    - Construction paths and the width * height invariant
    - Shape checks on every binary operator
    - Products and transposes against numpy
    - Scalar-kind bookkeeping
"""

import numpy as np
import pytest

from pylinalg.algebra.matrix import Matrix
from pylinalg.core.exceptions import SizeMismatchError
from pylinalg.numbers import Complex, Fraction, LongInt


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_zero_matrix(self):
        m = Matrix(3, 2)
        assert m.shape == (2, 3)
        assert m.elems == (0.0,) * 6
        assert m.kind is float

    def test_zero_matrix_of_kind(self):
        m = Matrix(2, 2, LongInt)
        assert m.get(1, 1) == LongInt(0)

    def test_from_list(self):
        m = Matrix.from_list([1, 2, 3, 4, 5, 6], 3)
        assert (m.height, m.width) == (2, 3)
        assert m.get(1, 0) == 4.0

    def test_from_list_bad_width(self):
        with pytest.raises(SizeMismatchError):
            Matrix.from_list([1, 2, 3], 2)

    def test_from_rows_ragged(self):
        with pytest.raises(SizeMismatchError):
            Matrix.from_rows([[1, 2], [3]])

    def test_from_rows_infers_kind(self):
        m = Matrix.from_rows([[LongInt(1), LongInt(2)]])
        assert m.kind is LongInt

    def test_from_rows_builtin_complex(self):
        m = Matrix.from_rows([[1j, 0], [0, 1]])
        assert m.kind is Complex
        assert m.get(0, 0) == Complex(0.0, 1.0)
        assert m.get(1, 1) == Complex(1.0, 0.0)

    def test_from_list_complex_after_real(self):
        m = Matrix.from_list([2.0, 1 - 1j], 2)
        assert m.kind is Complex
        assert m.get(0, 1) == Complex(1.0, -1.0)
        np.testing.assert_array_equal(m.to_array(), [[2.0, 1 - 1j]])

    def test_negative_dimensions(self):
        with pytest.raises(ValueError):
            Matrix(-1, 2)

    def test_identity(self):
        np.testing.assert_array_equal(Matrix.identity(3).to_array(), np.eye(3))

    def test_scalar_fills_every_cell(self):
        m = Matrix.scalar(2.0, 2)
        assert m.elems == (2.0, 2.0, 2.0, 2.0)

    def test_diagonal(self):
        m = Matrix.diagonal(LongInt(5), 2)
        assert m.kind is LongInt
        assert m.elems == (LongInt(5), LongInt(0), LongInt(0), LongInt(5))

    def test_from_array_complex(self):
        m = Matrix.from_array(np.array([[1 + 2j, 3]]))
        assert m.kind is Complex
        assert m.get(0, 0) == Complex(1.0, 2.0)

    def test_from_array_one_dimensional(self):
        assert Matrix.from_array(np.array([1.0, 2.0])).shape == (2, 1)

    def test_round_trip_numpy(self, rng):
        a = rng.standard_normal((3, 4))
        np.testing.assert_array_equal(Matrix.from_array(a).to_array(), a)

    def test_to_array_complex(self):
        m = Matrix.from_list([Complex(1, 1), Complex(0, -1)], 2)
        np.testing.assert_array_equal(m.to_array(), np.array([[1 + 1j, -1j]]))


# ═══════════════════════════════════════════════════════════════════════
# Access and structure
# ═══════════════════════════════════════════════════════════════════════


class TestAccess:

    def test_indexing(self):
        m = Matrix(2, 2)
        m[0, 1] = 7.0
        assert m[0, 1] == 7.0
        assert m.get(0, 1) == 7.0

    def test_copy_is_independent(self):
        m = Matrix.identity(2)
        c = m.copy()
        c.set(0, 0, 9.0)
        assert m.get(0, 0) == 1.0

    def test_row_and_column(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        assert m.row(1).shape == (1, 3)
        assert m.row(1).elems == (4.0, 5.0, 6.0)
        assert m.column(2).shape == (2, 1)
        assert m.column(2).elems == (3.0, 6.0)

    def test_transpose(self, rng):
        a = rng.standard_normal((2, 5))
        np.testing.assert_array_equal(Matrix.from_array(a).T.to_array(), a.T)

    def test_hermitian_transpose(self):
        a = np.array([[1 + 2j, 3 - 1j], [0, 1j]])
        np.testing.assert_array_equal(Matrix.from_array(a).H.to_array(), a.conj().T)

    def test_convert_to_longint_truncates(self):
        m = Matrix.from_rows([[1.9, -2.7]]).convert(LongInt)
        assert m.kind is LongInt
        assert m.elems == (LongInt(1), LongInt(-2))

    def test_convert_to_fraction(self):
        m = Matrix.from_rows([[0.5]]).convert(Fraction)
        assert m.get(0, 0) == Fraction(2, 1)


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add_sub(self, rng):
        a, b = rng.standard_normal((3, 3)), rng.standard_normal((3, 3))
        A, B = Matrix.from_array(a), Matrix.from_array(b)
        np.testing.assert_allclose((A + B).to_array(), a + b)
        np.testing.assert_allclose((A - B).to_array(), a - b)

    def test_add_shape_mismatch(self):
        with pytest.raises(SizeMismatchError) as exc_info:
            Matrix(2, 2) + Matrix(3, 2)
        assert exc_info.value.left_shape == (2, 2)
        assert exc_info.value.right_shape == (2, 3)

    def test_sub_shape_mismatch(self):
        with pytest.raises(SizeMismatchError):
            Matrix(2, 2) - Matrix(2, 3)

    def test_matmul(self, rng):
        a, b = rng.standard_normal((2, 3)), rng.standard_normal((3, 4))
        product = Matrix.from_array(a) @ Matrix.from_array(b)
        assert product.shape == (2, 4)
        np.testing.assert_allclose(product.to_array(), a @ b)

    def test_matmul_complex(self, rng):
        a = rng.standard_normal((3, 3)) + 1j * rng.standard_normal((3, 3))
        b = rng.standard_normal((3, 1)) + 1j * rng.standard_normal((3, 1))
        product = Matrix.from_array(a) @ Matrix.from_array(b)
        np.testing.assert_allclose(product.to_array(), a @ b)

    def test_matmul_mismatch(self):
        with pytest.raises(SizeMismatchError):
            Matrix(3, 2) @ Matrix(3, 2)

    def test_scalar_ops(self):
        m = Matrix.from_rows([[1, 2]])
        assert (m * 2.0).elems == (2.0, 4.0)
        assert (2.0 * m).elems == (2.0, 4.0)
        assert (m / 2.0).elems == (0.5, 1.0)
        assert (-m).elems == (-1.0, -2.0)

    def test_exact_product(self):
        A = Matrix.from_rows([[LongInt(2**40), LongInt(1)], [LongInt(0), LongInt(-1)]])
        P = A @ A
        assert P.get(0, 0) == LongInt(2**80)
        assert P.get(0, 1) == LongInt(2**40 - 1)


class TestNormsAndEquality:

    def test_frobenius(self):
        m = Matrix.from_rows([[3, 0], [0, 4]])
        assert m.norm_squared() == 25.0
        assert m.norm() == 5.0

    def test_complex_norm(self):
        m = Matrix.from_list([Complex(3, 4)], 1)
        assert m.norm() == 5.0

    def test_equality(self):
        assert Matrix.identity(2) == Matrix.from_rows([[1, 0], [0, 1]])
        assert Matrix(2, 1) != Matrix(1, 2)


class TestFormatting:

    def test_str(self):
        assert str(Matrix.from_rows([[1, 2], [3, 4]])) == "| 1.0 2.0 |\n| 3.0 4.0 |\n"

    def test_str_empty(self):
        assert str(Matrix(0, 0)) == "[ ]"

    def test_repr(self):
        assert repr(Matrix(2, 3, LongInt)) == "Matrix(3x2, kind=LongInt)"
