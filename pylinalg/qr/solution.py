"""
QR solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from numpy.typing import ArrayLike

from pylinalg.algebra.matrix import Matrix
from pylinalg.core.compute.tolerances import ToleranceTier, select_tolerance
from pylinalg.core.result import Result
from pylinalg.lu.solution import LinearSystemSolution
from pylinalg.numbers.contract import kind_name

if TYPE_CHECKING:
    from pylinalg.core.design import MatrixDesign


@dataclass(frozen=True)
class QRParams:
    """
    Parameter payload for QR decomposition.

    This is the immutable data computed by backends.
    """
    Q: Matrix
    R: Matrix
    residual_norm: float
    orthogonality_error: float
    passes: tuple[int, ...] = ()


@dataclass
class QRSolution:
    """
    User-facing QR decomposition results.

    Wraps the backend Result and provides accessors for the factors and
    two quality measures: the reconstruction error ‖Q·R − A‖ and the
    orthogonality error ‖Qᴴ·Q − I‖.
    """
    _result: Result[QRParams]
    _design: 'MatrixDesign'

    @property
    def Q(self) -> Matrix:
        return self._result.params.Q

    @property
    def R(self) -> Matrix:
        return self._result.params.R

    @property
    def method(self) -> str:
        return self._result.info['method']

    @property
    def residual_norm(self) -> float:
        return self._result.params.residual_norm

    @property
    def orthogonality_error(self) -> float:
        return self._result.params.orthogonality_error

    @property
    def passes(self) -> tuple[int, ...]:
        """Gram-Schmidt projection passes per column; empty otherwise."""
        return self._result.params.passes

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def solve(self, b: Matrix | ArrayLike) -> LinearSystemSolution:
        """
        Solve A·x = b against the stored factors (x = R⁻¹·Qᴴ·b).

        Raises:
            SizeMismatchError: If b does not match the factors
        """
        from pylinalg.qr.solvers import solve_from_factors
        return solve_from_factors(self.Q, self.R, b, method=self.method)

    def within_tolerance(self, tier: ToleranceTier | None = None) -> bool:
        """
        True if both error measures pass ``tier``.

        ‖QR − A‖ is scaled by ‖A‖ and ‖QᴴQ − I‖ by ‖I‖ = √n. The tier
        defaults to the one for the scalar type (exact kinds must be exact).
        """
        tier = tier or select_tolerance(kind_name(self._design.kind))
        n = self._design.n
        return (
            tier.accepts(self.residual_norm, scale=self._design.matrix.norm())
            and tier.accepts(self.orthogonality_error, scale=n ** 0.5)
        )

    def summary(self) -> str:
        lines = [
            "QR Decomposition Results",
            "=" * 60,
            f"Size: {self._design.n}x{self._design.n}",
            f"Scalar type: {kind_name(self._design.kind)}",
            f"Method: {self.method}",
            f"∥QR - A∥: {self.residual_norm:.6g}",
            f"∥QᴴQ - I∥: {self.orthogonality_error:.6g}",
            f"Within tolerance: {self.within_tolerance()}",
        ]
        if self.passes:
            lines.append(f"Passes per column: {list(self.passes)}")
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0) * 1e6:.0f}μs")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"QRSolution(n={self._design.n}, method={self.method!r}, "
            f"residual_norm={self.residual_norm:.3g})"
        )
