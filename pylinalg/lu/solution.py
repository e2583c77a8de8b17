"""
LU solution types.

Contains the parameter payloads and user-facing solution wrappers for
the LU factorization and for linear-system solves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from numpy.typing import ArrayLike

from pylinalg.algebra.matrix import Matrix
from pylinalg.core.compute.tolerances import ToleranceTier, select_tolerance
from pylinalg.core.result import Result
from pylinalg.numbers.contract import kind_name

if TYPE_CHECKING:
    from pylinalg.core.design import MatrixDesign


@dataclass(frozen=True)
class LUParams:
    """
    Parameter payload for LU decomposition.

    This is the immutable data computed by backends.
    """
    L: Matrix
    U: Matrix
    residual_norm: float


@dataclass(frozen=True)
class LinearSystemParams:
    """Parameter payload for a solve of A·x = b."""
    x: Matrix
    residual_norm: float


@dataclass
class LinearSystemSolution:
    """
    User-facing result of a linear-system solve.

    ``residual_norm`` is ‖A·x − b‖ with A rebuilt from the factors
    (L·U or Q·R) that produced x.
    """
    _result: Result[LinearSystemParams]

    @property
    def x(self) -> Matrix:
        return self._result.params.x

    @property
    def residual_norm(self) -> float:
        return self._result.params.residual_norm

    @property
    def method(self) -> str:
        return self._result.info['method']

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

    def to_array(self):
        """Solution vector as a numpy array of shape (n,)."""
        return self.x.to_array().ravel()

    def __repr__(self) -> str:
        return (
            f"LinearSystemSolution(n={self.x.height}, method={self.method!r}, "
            f"residual_norm={self.residual_norm:.3g})"
        )


@dataclass
class LUSolution:
    """
    User-facing LU decomposition results.

    Wraps the backend Result and provides accessors for the factors, the
    reconstruction error ‖L·U − A‖ and solves against the factors.
    """
    _result: Result[LUParams]
    _design: 'MatrixDesign'

    @property
    def L(self) -> Matrix:
        return self._result.params.L

    @property
    def U(self) -> Matrix:
        return self._result.params.U

    @property
    def residual_norm(self) -> float:
        return self._result.params.residual_norm

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
        Solve A·x = b against the stored factors.

        Args:
            b: Right-hand side, a Matrix column vector or a 1-D array-like

        Raises:
            SizeMismatchError: If b does not match the factors
        """
        from pylinalg.lu.solvers import solve_from_factors
        return solve_from_factors(self.L, self.U, b)

    def within_tolerance(self, tier: ToleranceTier | None = None) -> bool:
        """
        True if ‖LU − A‖ passes ``tier``, scaled by ‖A‖.

        The tier defaults to the one for the scalar type, so exact kinds
        must reproduce A exactly.
        """
        tier = tier or select_tolerance(kind_name(self._design.kind))
        return tier.accepts(self.residual_norm, scale=self._design.matrix.norm())

    def summary(self) -> str:
        lines = [
            "LU Decomposition Results",
            "=" * 60,
            f"Size: {self._design.n}x{self._design.n}",
            f"Scalar type: {kind_name(self._design.kind)}",
            f"∥LU - A∥: {self.residual_norm:.6g}",
            f"Within tolerance: {self.within_tolerance()}",
            "-" * 60,
            f"Backend: {self.backend_name}",
        ]
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0) * 1e6:.0f}μs")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"LUSolution(n={self._design.n}, residual_norm={self.residual_norm:.3g})"
