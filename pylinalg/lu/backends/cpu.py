"""
CPU backends for LU.

Pure-Python generic kernels: the same code runs over floats, Complex,
LongInt and Fraction matrices.
"""

from typing import Any

from pylinalg.algebra.matrix import Matrix
from pylinalg.core.compute.linalg.lu import gauss_from_lu, lu_decomposition
from pylinalg.core.compute.timing import Timer
from pylinalg.core.design import MatrixDesign
from pylinalg.core.result import Result
from pylinalg.lu.solution import LinearSystemParams, LUParams
from pylinalg.numbers.contract import kind_name


class DoolittleBackend:
    """
    Unpivoted Doolittle factorization.

    Implements the Backend protocol for MatrixDesign -> LUParams.
    """

    @property
    def name(self) -> str:
        return 'doolittle'

    def solve(self, design: MatrixDesign) -> Result[LUParams]:
        """
        Factor A = L·U.

        Raises:
            NotSquareError: If A is not square
            SingularMatrixError: If a pivot is zero
        """
        timer = Timer()
        timer.start()

        A = design.matrix

        with timer.section('factorization'):
            lu = lu_decomposition(A)

        with timer.section('residual'):
            residual_norm = (lu.L @ lu.U - A).norm()

        timer.stop()

        info: dict[str, Any] = {
            'method': 'doolittle',
            'n': design.n,
            'scalar_type': kind_name(design.kind),
        }

        return Result(
            params=LUParams(L=lu.L, U=lu.U, residual_norm=residual_norm),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
        )


class LUSubstitutionBackend:
    """
    Forward/back substitution against stored L, U.

    The factors are fixed at construction; the design carries b.
    """

    def __init__(self, L: Matrix, U: Matrix):
        self._L = L
        self._U = U

    @property
    def name(self) -> str:
        return 'lu_substitution'

    def solve(self, design: MatrixDesign) -> Result[LinearSystemParams]:
        """
        Solve L·U·x = b.

        Raises:
            SizeMismatchError: If b does not match the factors
        """
        timer = Timer()
        timer.start()

        b = design.matrix

        with timer.section('substitution'):
            x = gauss_from_lu(self._L, self._U, b)

        with timer.section('residual'):
            residual_norm = (self._L @ (self._U @ x) - b).norm()

        timer.stop()

        return Result(
            params=LinearSystemParams(x=x, residual_norm=residual_norm),
            info={'method': 'lu', 'n': b.height},
            timing=timer.result(),
            backend_name=self.name,
        )
