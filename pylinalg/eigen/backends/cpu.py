"""
CPU backend for the characteristic polynomial.

Runs the tridiagonal three-term recurrence over the design's own scalar
kind.
"""

from typing import Any

from pylinalg.core.compute.linalg.charpoly import characteristic_polynomial
from pylinalg.core.compute.timing import Timer
from pylinalg.core.compute.tolerances import TRIDIAGONAL_ZERO_TOLERANCE
from pylinalg.core.design import MatrixDesign
from pylinalg.core.result import Result
from pylinalg.eigen.solution import CharPolyParams
from pylinalg.numbers.contract import kind_name


class TridiagonalRecurrenceBackend:
    """
    det(A − λI) of a tridiagonal matrix by the minor recurrence.

    Args:
        tolerance: Squared-norm threshold for off-band entries
    """

    def __init__(self, tolerance: float = TRIDIAGONAL_ZERO_TOLERANCE):
        self.tolerance = tolerance

    @property
    def name(self) -> str:
        return 'tridiagonal_recurrence'

    def solve(self, design: MatrixDesign) -> Result[CharPolyParams]:
        """
        Raises:
            NotSquareError: If A is not square
            NotTridiagonalError: If an off-band entry is not (close to) zero
        """
        timer = Timer()
        timer.start()

        with timer.section('recurrence'):
            polynomial = characteristic_polynomial(design.matrix, self.tolerance)

        timer.stop()

        info: dict[str, Any] = {
            'method': 'tridiagonal_recurrence',
            'n': design.n,
            'scalar_type': kind_name(design.kind),
            'tolerance': self.tolerance,
        }

        return Result(
            params=CharPolyParams(polynomial=polynomial),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
        )
