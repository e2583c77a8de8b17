"""
Reader and writer for the textual ``.m`` matrix format.

Grammar of a matrix file::

    [Method=<1|2|3>] <anything up to the first '['> <literal> [',' <literal>]

    literal := '[' row (';' row)* ']'
    row     := number (whitespace number)*

Dots and whitespace between numbers are skipped, so MATLAB-style
``...`` continuations are accepted. Short rows are zero-padded to the
widest row. A second literal after a comma holds the imaginary parts
and makes the result a Complex matrix.

Written files look like::

    A = ...
    [1 2;
    3 4];

    A = complex([1 2;
    3 4],[0 1;
    1 0]);

    cvec = ...
    [c_n; ...; c_1; c_0];
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Any

from pylinalg.algebra.matrix import Matrix
from pylinalg.algebra.polynome import Polynome
from pylinalg.core.design import METHOD_CODES
from pylinalg.core.exceptions import SizeMismatchError, ValidationError
from pylinalg.numbers.complex import Complex, format_real

_METHOD_PREFIX = 'Method='

# File stems of the problem-numbered files, e.g. Amat3.m
MATRIX_STEM = 'Amat'
L_STEM = 'Lmat'
U_STEM = 'Umat'
Q_STEM = 'Qmat'
R_STEM = 'Rmat'
RHS_STEM = 'bvec'
SOLUTION_STEM = 'xvec'
POLYNOMIAL_STEM = 'cvec'


class MatrixFormatError(ValidationError):
    """
    A matrix file does not follow the ``.m`` grammar.

    Attributes:
        position: Character offset at which parsing failed, if known
    """

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position


def problem_file(directory: str | PathLike, stem: str, problem: int) -> Path:
    """Path of a problem-numbered file, e.g. ``problem_file(d, 'Amat', 3)``."""
    return Path(directory) / f"{stem}{problem}.m"


# ═══════════════════════════════════════════════════════════════════════
# Reading
# ═══════════════════════════════════════════════════════════════════════


class _Cursor:
    """Position in the text being parsed."""

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self.pos = pos

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ''

    def skip(self, chars: str) -> None:
        while self.pos < len(self.text) and (
            self.text[self.pos] in chars or self.text[self.pos].isspace()
        ):
            self.pos += 1

    def fail(self, message: str) -> MatrixFormatError:
        return MatrixFormatError(f"{message} at offset {self.pos}", position=self.pos)


def _read_method(text: str) -> tuple[str | None, int]:
    """Optional ``Method=<n>`` header; returns the method and where to go on."""
    stripped = text.lstrip()
    offset = len(text) - len(stripped)
    if stripped.startswith(_METHOD_PREFIX):
        code = stripped[len(_METHOD_PREFIX):len(_METHOD_PREFIX) + 1]
        if code.isdigit() and int(code) in METHOD_CODES:
            return METHOD_CODES[int(code)], offset + len(_METHOD_PREFIX) + 1
    return None, 0


def _read_number(cursor: _Cursor) -> float:
    start = cursor.pos
    first = cursor.peek()
    if not (first.isdigit() or first == '-'):
        raise cursor.fail(f"expected a number, found {first or 'end of input'!r}")

    text = cursor.text
    while cursor.pos < len(text) and not (
        text[cursor.pos].isspace() or text[cursor.pos] in ';],'
    ):
        cursor.pos += 1

    token = text[start:cursor.pos]
    try:
        return float(token)
    except ValueError as e:
        raise MatrixFormatError(
            f"invalid number {token!r} at offset {start}", position=start
        ) from e


def _read_literal(cursor: _Cursor) -> Matrix:
    if cursor.peek() != '[':
        raise cursor.fail("expected '['")
    cursor.pos += 1

    rows: list[list[float]] = []
    row: list[float] = []

    cursor.skip('.')
    if cursor.peek() == ']':
        cursor.pos += 1
        return Matrix(0, 0)

    while True:
        cursor.skip('.')
        row.append(_read_number(cursor))
        cursor.skip('.')

        c = cursor.peek()
        if c == ';':
            cursor.pos += 1
            rows.append(row)
            row = []
        elif c == ']':
            cursor.pos += 1
            rows.append(row)
            break
        elif not c:
            raise cursor.fail("unterminated matrix literal")

    width = max(len(r) for r in rows)
    elems = [x for r in rows for x in r + [0.0] * (width - len(r))]
    return Matrix.from_list(elems, width, float)


def parse_matrix(text: str) -> tuple[Matrix, str | None]:
    """
    Parse the contents of a matrix file.

    Returns:
        (matrix, method) where method is 'householder', 'givens',
        'gram_schmidt' or None when the file has no header

    Raises:
        MatrixFormatError: If the text is malformed
        SizeMismatchError: If real and imaginary parts differ in shape
    """
    method, start = _read_method(text)

    bracket = text.find('[', start)
    if bracket < 0:
        raise MatrixFormatError("no matrix literal found", position=len(text))

    cursor = _Cursor(text, bracket)
    real = _read_literal(cursor)

    if cursor.peek() != ',':
        return real, method

    cursor.pos += 1
    cursor.skip('')
    imag = _read_literal(cursor)
    if real.shape != imag.shape:
        raise SizeMismatchError(
            f"real part is {real.height}x{real.width} but imaginary part is "
            f"{imag.height}x{imag.width}",
            operation='parse_matrix',
            left_shape=real.shape,
            right_shape=imag.shape,
        )

    if real.width == 0:
        return Matrix(0, 0, Complex), method
    elems = [Complex(re, im) for re, im in zip(real.elems, imag.elems)]
    return Matrix.from_list(elems, real.width, Complex), method


def read_matrix(path: str | PathLike) -> tuple[Matrix, str | None]:
    """
    Read a matrix file.

    Raises:
        OSError: If the file cannot be read
        MatrixFormatError: If the contents are malformed
    """
    with open(path, encoding='utf-8') as f:
        return parse_matrix(f.read())


# ═══════════════════════════════════════════════════════════════════════
# Writing
# ═══════════════════════════════════════════════════════════════════════


def _format_value(x: Any) -> str:
    if isinstance(x, float):
        return format_real(x)
    return str(x)


def _format_literal(matrix: Matrix) -> str:
    if matrix.width == 0 or matrix.height == 0:
        return '[]'
    rows = [' '.join(_format_value(x) for x in r) for r in matrix.rows()]
    return '[' + ';\n'.join(rows) + ']'


def format_matrix(matrix: Matrix) -> str:
    """
    Text of a matrix file.

    Complex matrices are written as ``A = complex([re],[im]);``; every
    other kind as ``A = ...\\n[rows];``.
    """
    if matrix.kind is Complex:
        re = matrix.map(lambda z: z.re, kind=float)
        im = matrix.map(lambda z: z.im, kind=float)
        return f"A = complex({_format_literal(re)},{_format_literal(im)});"
    return f"A = ...\n{_format_literal(matrix)};"


def write_matrix(matrix: Matrix, path: str | PathLike) -> None:
    with open(path, 'w', encoding='utf-8') as f:
        f.write(format_matrix(matrix))


def format_polynomial(polynomial: Polynome) -> str:
    """
    Text of a polynomial file: coefficients from the highest power down.

    The empty polynomial is written as ``cvec = ...\\n[];``.
    """
    coefs = polynomial.coefficients
    body = '; '.join(_format_value(c) for c in reversed(coefs))
    return f"cvec = ...\n[{body}];"


def write_polynomial(polynomial: Polynome, path: str | PathLike) -> None:
    with open(path, 'w', encoding='utf-8') as f:
        f.write(format_polynomial(polynomial))
