"""
Characteristic polynomial solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pylinalg.algebra.polynome import Polynome
from pylinalg.core.result import Result
from pylinalg.numbers.complex import Complex
from pylinalg.numbers.contract import kind_name

if TYPE_CHECKING:
    from pylinalg.core.design import MatrixDesign


@dataclass(frozen=True)
class CharPolyParams:
    """Parameter payload for the characteristic polynomial."""
    polynomial: Polynome


@dataclass
class CharPolySolution:
    """
    User-facing characteristic polynomial det(A − λI).

    Coefficients are ascending: ``coefficients[i]`` multiplies λ^i.
    """
    _result: Result[CharPolyParams]
    _design: 'MatrixDesign'

    @property
    def polynomial(self) -> Polynome:
        return self._result.params.polynomial

    @property
    def coefficients(self) -> tuple[Any, ...]:
        return self.polynomial.coefficients

    @property
    def degree(self) -> int:
        return self.polynomial.degree

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

    def roots(self) -> NDArray[np.complexfloating[Any, Any]]:
        """
        Eigenvalues as the polynomial's roots.

        Computed in floating point by numpy's companion-matrix method,
        whatever the scalar kind of the coefficients.
        """
        coefs = self.polynomial.trimmed().coefficients
        if self.polynomial.kind is Complex:
            descending = [complex(c) for c in reversed(coefs)]
        else:
            descending = [float(c) for c in reversed(coefs)]
        return np.roots(descending)

    def summary(self) -> str:
        lines = [
            "Characteristic Polynomial",
            "=" * 60,
            f"Size: {self._design.n}x{self._design.n}",
            f"Scalar type: {kind_name(self.polynomial.kind)}",
            f"Degree: {self.degree}",
            f"p(λ) = {self.polynomial}",
            "-" * 60,
            f"Backend: {self.backend_name}",
        ]
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0) * 1e6:.0f}μs")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"CharPolySolution(degree={self.degree}, polynomial={self.polynomial!r})"
