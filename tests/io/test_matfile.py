"""
Tests for the ``.m`` matrix file reader and writer.
"""

import numpy as np
import pytest

from pylinalg.algebra.matrix import Matrix
from pylinalg.algebra.polynome import Polynome
from pylinalg.core.exceptions import SizeMismatchError, ValidationError
from pylinalg.io import (
    MatrixFormatError,
    format_matrix,
    format_polynomial,
    parse_matrix,
    problem_file,
    read_matrix,
    write_matrix,
    write_polynomial,
)
from pylinalg.numbers import Complex, LongInt


# ═══════════════════════════════════════════════════════════════════════
# Parsing
# ═══════════════════════════════════════════════════════════════════════


class TestParse:

    def test_real(self):
        m, method = parse_matrix("A = ...\n[1 2;\n3 4];")
        assert m == Matrix.from_rows([[1, 2], [3, 4]])
        assert method is None

    def test_numbers(self):
        m, _ = parse_matrix("[-1.5 2e-3 4 0.25]")
        np.testing.assert_array_equal(m.to_array(), [[-1.5, 2e-3, 4.0, 0.25]])

    @pytest.mark.parametrize("code, method", [
        (1, 'householder'),
        (2, 'givens'),
        (3, 'gram_schmidt'),
    ])
    def test_method_header(self, code, method):
        m, found = parse_matrix(f"Method={code}\nA = ...\n[1 0;\n0 1];")
        assert found == method
        assert m == Matrix.identity(2)

    def test_unknown_method_code_ignored(self):
        m, method = parse_matrix("Method=9\n[5]")
        assert method is None
        assert m == Matrix.from_rows([[5]])

    def test_short_rows_zero_padded(self):
        m, _ = parse_matrix("[1 2 3;\n4]")
        assert m == Matrix.from_rows([[1, 2, 3], [4, 0, 0]])

    def test_continuation_dots(self):
        m, _ = parse_matrix("[1 2 ...\n 3 4]")
        assert m == Matrix.from_rows([[1, 2, 3, 4]])

    def test_whitespace_before_separators(self):
        m, _ = parse_matrix("[ 1 2 ;\n 3 4 ]")
        assert m == Matrix.from_rows([[1, 2], [3, 4]])

    def test_empty_literal(self):
        m, _ = parse_matrix("A = ...\n[];")
        assert m.shape == (0, 0)

    def test_complex(self):
        m, _ = parse_matrix("A = complex([1 2;\n3 4],[0 1;\n-1 0]);")
        assert m.kind is Complex
        assert m.get(0, 1) == Complex(2, 1)
        assert m.get(1, 0) == Complex(3, -1)

    def test_complex_shape_mismatch(self):
        with pytest.raises(SizeMismatchError):
            parse_matrix("A = complex([1 2;\n3 4],[0 1]);")

    @pytest.mark.parametrize("text", [
        "A = 1 2",
        "[1 x]",
        "[1 2",
        "[1 2;",
        "[1 1.2.3]",
    ])
    def test_malformed(self, text):
        with pytest.raises(MatrixFormatError):
            parse_matrix(text)

    def test_error_position(self):
        with pytest.raises(MatrixFormatError) as exc_info:
            parse_matrix("[1 x]")
        assert exc_info.value.position == 3

    def test_format_error_is_validation_error(self):
        assert issubclass(MatrixFormatError, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Writing
# ═══════════════════════════════════════════════════════════════════════


class TestFormat:

    def test_real(self):
        text = format_matrix(Matrix.from_rows([[1, 2.5], [-3, 4]]))
        assert text == "A = ...\n[1 2.5;\n-3 4];"

    def test_complex(self):
        m = Matrix.from_list([Complex(1, 0), Complex(2, -1)], 2)
        assert format_matrix(m) == "A = complex([1 2],[0 -1]);"

    def test_empty(self):
        assert format_matrix(Matrix(0, 0)) == "A = ...\n[];"

    def test_polynomial_highest_power_first(self):
        p = Polynome([LongInt(4), LongInt(-10), LongInt(6), LongInt(-1)])
        assert format_polynomial(p) == "cvec = ...\n[-1; 6; -10; 4];"

    def test_float_polynomial(self):
        assert format_polynomial(Polynome([0.5, -2.0])) == "cvec = ...\n[-2; 0.5];"

    def test_empty_polynomial(self):
        assert format_polynomial(Polynome()) == "cvec = ...\n[];"


class TestFiles:

    def test_problem_file(self, tmp_path):
        assert problem_file(tmp_path, 'Amat', 3) == tmp_path / 'Amat3.m'

    def test_real_roundtrip(self, tmp_path, rng):
        m = Matrix.from_array(rng.standard_normal((4, 4)))
        path = tmp_path / 'Amat1.m'
        write_matrix(m, path)
        read, method = read_matrix(path)
        assert read == m
        assert method is None

    def test_complex_roundtrip(self, tmp_path, rng):
        m = Matrix.from_array(rng.standard_normal((3, 3)) + 1j * rng.standard_normal((3, 3)))
        path = tmp_path / 'Amat2.m'
        write_matrix(m, path)
        read, _ = read_matrix(path)
        assert read == m

    def test_polynomial_file_reads_back(self, tmp_path):
        path = tmp_path / 'cvec1.m'
        write_polynomial(Polynome([4.0, -10.0, 6.0, -1.0]), path)
        column, _ = read_matrix(path)
        np.testing.assert_array_equal(column.to_array().ravel(), [-1, 6, -10, 4])

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            read_matrix(tmp_path / 'nope.m')
