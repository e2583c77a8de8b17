"""
Matrix file input/output.

Reads and writes the textual ``.m`` format: real and complex matrix
literals with an optional ``Method=<n>`` QR selector, and polynomial
coefficient vectors.
"""

from pylinalg.io.matfile import (
    MATRIX_STEM,
    L_STEM,
    U_STEM,
    Q_STEM,
    R_STEM,
    RHS_STEM,
    SOLUTION_STEM,
    POLYNOMIAL_STEM,
    MatrixFormatError,
    format_matrix,
    format_polynomial,
    parse_matrix,
    problem_file,
    read_matrix,
    write_matrix,
    write_polynomial,
)

__all__ = [
    "MatrixFormatError",
    "parse_matrix",
    "read_matrix",
    "format_matrix",
    "write_matrix",
    "format_polynomial",
    "write_polynomial",
    "problem_file",
    "MATRIX_STEM",
    "L_STEM",
    "U_STEM",
    "Q_STEM",
    "R_STEM",
    "RHS_STEM",
    "SOLUTION_STEM",
    "POLYNOMIAL_STEM",
]
