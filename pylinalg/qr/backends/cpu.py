"""
CPU backends for QR decomposition.

One backend per factorization method. Each computes Q and R with the
generic kernel, then measures how well the factors reproduce A and how
far Q is from unitary.
"""

from typing import Any, Callable

from pylinalg.algebra.matrix import Matrix
from pylinalg.core.compute.linalg.qr import (
    QRResult,
    gauss_from_qr,
    qr_givens,
    qr_gram_schmidt,
    qr_householder,
)
from pylinalg.core.compute.timing import Timer
from pylinalg.core.compute.tolerances import GRAM_SCHMIDT_EPSILON, GRAM_SCHMIDT_MAX_PASSES
from pylinalg.core.design import MatrixDesign
from pylinalg.core.result import Result
from pylinalg.lu.solution import LinearSystemParams
from pylinalg.numbers.contract import kind_name
from pylinalg.qr.solution import QRParams


def _factor(
    kernel: Callable[[Matrix], QRResult],
    design: MatrixDesign,
    method: str,
    backend_name: str,
) -> Result[QRParams]:
    timer = Timer()
    timer.start()

    A = design.matrix

    with timer.section('factorization'):
        qr = kernel(A)

    with timer.section('residual'):
        residual_norm = (qr.Q @ qr.R - A).norm()
        identity = Matrix.identity(A.width, A.kind)
        orthogonality_error = (qr.Q.hermitian_transpose() @ qr.Q - identity).norm()

    timer.stop()

    params = QRParams(
        Q=qr.Q,
        R=qr.R,
        residual_norm=residual_norm,
        orthogonality_error=orthogonality_error,
        passes=qr.passes,
    )

    info: dict[str, Any] = {
        'method': method,
        'n': design.n,
        'scalar_type': kind_name(design.kind),
    }
    if qr.passes:
        info['passes'] = qr.passes

    return Result(
        params=params,
        info=info,
        timing=timer.result(),
        backend_name=backend_name,
        warnings=qr.warnings,
    )


class HouseholderBackend:
    """
    QR by Householder reflections; real and complex matrices.

    Implements the Backend protocol for MatrixDesign -> QRParams.
    """

    @property
    def name(self) -> str:
        return 'householder'

    def solve(self, design: MatrixDesign) -> Result[QRParams]:
        """
        Raises:
            NotSquareError: If A is not square
        """
        return _factor(qr_householder, design, 'householder', self.name)


class GivensBackend:
    """QR by Givens rotations; real matrices only."""

    @property
    def name(self) -> str:
        return 'givens'

    def solve(self, design: MatrixDesign) -> Result[QRParams]:
        """
        Raises:
            NotSquareError: If A is not square
            UnsupportedOperationError: If A is not real
        """
        return _factor(qr_givens, design, 'givens', self.name)


class GramSchmidtBackend:
    """
    QR by Gram-Schmidt with re-orthogonalization.

    Args:
        reortho_epsilon: Stop threshold for the projection passes
        max_passes: Pass limit per column
    """

    def __init__(
        self,
        reortho_epsilon: float = GRAM_SCHMIDT_EPSILON,
        max_passes: int = GRAM_SCHMIDT_MAX_PASSES,
    ):
        self.reortho_epsilon = reortho_epsilon
        self.max_passes = max_passes

    @property
    def name(self) -> str:
        return 'gram_schmidt'

    def solve(self, design: MatrixDesign) -> Result[QRParams]:
        """
        Raises:
            NotSquareError: If A is not square
            SingularMatrixError: If the columns are linearly dependent
        """
        def kernel(A: Matrix) -> QRResult:
            return qr_gram_schmidt(A, self.reortho_epsilon, self.max_passes)

        return _factor(kernel, design, 'gram_schmidt', self.name)


class QRSubstitutionBackend:
    """
    Solve against stored Q, R: x = R⁻¹·Qᴴ·b.

    The factors are fixed at construction; the design carries b.
    """

    def __init__(self, Q: Matrix, R: Matrix, method: str | None = None):
        self._Q = Q
        self._R = R
        self._method = method

    @property
    def name(self) -> str:
        return 'qr_substitution'

    def solve(self, design: MatrixDesign) -> Result[LinearSystemParams]:
        """
        Raises:
            SizeMismatchError: If b does not match the factors
        """
        timer = Timer()
        timer.start()

        b = design.matrix

        with timer.section('substitution'):
            x = gauss_from_qr(self._Q, self._R, b)

        with timer.section('residual'):
            residual_norm = (self._Q @ (self._R @ x) - b).norm()

        timer.stop()

        return Result(
            params=LinearSystemParams(x=x, residual_norm=residual_norm),
            info={'method': self._method or 'qr', 'n': b.height},
            timing=timer.result(),
            backend_name=self.name,
        )
