"""
Dense polynomial over a numeric type.

Coefficients are stored in ascending order of degree: ``coefficients[i]``
multiplies λ^i.

Storage rule:
    ``set`` grows the backing list only when a non-zero value is assigned
    past its end, and nothing ever shrinks it. A coefficient that cancels
    to zero stays in storage, so ``degree`` is the degree of the storage,
    not necessarily of the mathematical polynomial. ``trimmed()`` returns
    a copy without trailing zeros when the mathematical degree is needed.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from pylinalg.core.exceptions import EmptyPolynomialError
from pylinalg.numbers.contract import kind_of, zero


class Polynome:
    """
    Polynomial with ascending coefficients.

    Examples:
        >>> p = Polynome([4.0, -10.0, 6.0, -1.0])   # -λ³ + 6λ² - 10λ + 4
        >>> p.degree
        3
        >>> p.get(7)
        0.0
    """

    __slots__ = ('_coefs', '_kind')

    def __init__(self, coefficients: Iterable[Any] = (), kind: type | None = None):
        self._coefs = list(coefficients)
        if kind is None:
            kind = kind_of(self._coefs[0]) if self._coefs else float
        self._kind = kind

    @classmethod
    def from_coefs(cls, coefficients: Sequence[Any]) -> Polynome:
        return cls(coefficients)

    # === Accessors ===

    @property
    def kind(self) -> type:
        return self._kind

    @property
    def coefficients(self) -> tuple[Any, ...]:
        """Stored coefficients, ascending by degree."""
        return tuple(self._coefs)

    @property
    def degree(self) -> int:
        """Degree of the backing storage; -1 when it is empty."""
        return len(self._coefs) - 1

    def __len__(self) -> int:
        return len(self._coefs)

    def get(self, power: int) -> Any:
        """Coefficient of λ^power; the additive identity out of range."""
        if 0 <= power < len(self._coefs):
            return self._coefs[power]
        return zero(self._kind)

    def set(self, power: int, value: Any) -> None:
        if power < len(self._coefs):
            self._coefs[power] = value
        elif value != zero(self._kind):
            self._coefs.extend([zero(self._kind)] * (power + 1 - len(self._coefs)))
            self._coefs[power] = value

    def leading(self) -> Any:
        """
        Highest stored coefficient.

        Raises:
            EmptyPolynomialError: If no coefficient is stored
        """
        if not self._coefs:
            raise EmptyPolynomialError("leading coefficient of an empty polynomial")
        return self._coefs[-1]

    def trimmed(self) -> Polynome:
        """Copy without trailing zero coefficients."""
        coefs = list(self._coefs)
        z = zero(self._kind)
        while coefs and coefs[-1] == z:
            coefs.pop()
        return Polynome(coefs, self._kind)

    def normalize(self) -> Polynome:
        """Monic copy: every coefficient divided by the leading one."""
        return self / self.leading()

    def __call__(self, x: Any) -> Any:
        """Evaluate at ``x`` by Horner's rule."""
        acc = zero(self._kind)
        for c in reversed(self._coefs):
            acc = acc * x + c
        return acc

    # === Arithmetic ===

    def __add__(self, other: Polynome) -> Polynome:
        if not isinstance(other, Polynome):
            return NotImplemented
        result = Polynome(kind=self._kind)
        for i in range(max(len(self._coefs), len(other._coefs))):
            result.set(i, self.get(i) + other.get(i))
        return result

    def __sub__(self, other: Polynome) -> Polynome:
        if not isinstance(other, Polynome):
            return NotImplemented
        result = Polynome(kind=self._kind)
        for i in range(max(len(self._coefs), len(other._coefs))):
            result.set(i, self.get(i) - other.get(i))
        return result

    def __mul__(self, other: Any) -> Polynome:
        if isinstance(other, Polynome):
            result = Polynome(kind=self._kind)
            for i in range(len(self._coefs) - 1, -1, -1):
                for j in range(len(other._coefs) - 1, -1, -1):
                    result.set(i + j, result.get(i + j) + self._coefs[i] * other._coefs[j])
            return result
        return Polynome([c * other for c in self._coefs], self._kind)

    def __rmul__(self, other: Any) -> Polynome:
        if isinstance(other, Polynome):
            return NotImplemented
        return Polynome([other * c for c in self._coefs], self._kind)

    def __truediv__(self, scalar: Any) -> Polynome:
        if isinstance(scalar, Polynome):
            return NotImplemented
        return Polynome([c / scalar for c in self._coefs], self._kind)

    def __neg__(self) -> Polynome:
        return Polynome([-c for c in self._coefs], self._kind)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynome):
            return NotImplemented
        return self._coefs == other._coefs

    __hash__ = None

    # === Formatting ===

    def __str__(self) -> str:
        if not self._coefs:
            return '0'
        terms = [str(self._coefs[0])]
        for i in range(1, len(self._coefs)):
            if self._coefs[i] != zero(self._kind):
                power = 'λ' if i == 1 else f'λ^{i}'
                terms.append(f"{self._coefs[i]}{power}")
        return ' + '.join(terms)

    def __repr__(self) -> str:
        return f"Polynome({[str(c) for c in self._coefs]})"
