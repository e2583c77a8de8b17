"""
Core protocols for PyLinalg.

These define structural interfaces that scalar types and computational
backends must satisfy. We use Protocol (structural typing) rather than
ABC (nominal typing) so that third-party scalar types can join without
inheriting from anything in this package.

Design Principles:
    - Minimal contracts: prescribe only what the algorithms actually use
    - Algorithms are written once against Numeric
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, runtime_checkable

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type
N = TypeVar('N', bound='Numeric')


@runtime_checkable
class Numeric(Protocol):
    """
    The numeric-value contract every scalar type must satisfy.

    Required capabilities are the four field operations, negation,
    equality, construction from a real literal, human-readable formatting
    (``__str__``), and the four magnitude helpers below.

    Python's built-in ``float`` cannot grow methods, so algorithms go
    through the generic functions in ``pylinalg.numbers.contract``, which
    dispatch to these methods for Numeric objects and supply the real
    scalar behavior for floats.
    """

    def __add__(self: N, other: N) -> N: ...

    def __sub__(self: N, other: N) -> N: ...

    def __mul__(self: N, other: N) -> N: ...

    def __truediv__(self: N, other: N) -> N: ...

    def __neg__(self: N) -> N: ...

    def __eq__(self, other: object) -> bool: ...

    @classmethod
    def from_real(cls: type[N], x: float) -> N:
        """Build a value from a real-scalar literal."""
        ...

    def norm_squared(self) -> float:
        """
        Squared magnitude as a floating approximation.

        Used only for stopping heuristics and error-norm reporting,
        never for algebraic correctness.
        """
        ...

    def norm(self) -> float:
        """Magnitude, sqrt(norm_squared())."""
        ...

    def conjugate(self: N) -> N:
        """Complex conjugate; identity for real-like types."""
        ...

    def absolute(self: N) -> N:
        """Absolute value expressed in the same type."""
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a MatrixDesign and produce a
    domain-specific payload wrapped in a Result.

    Backends are stateless: all configuration is passed via the design
    or at construction time. This makes them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Examples: 'doolittle', 'householder', 'givens', 'gram_schmidt',
        'tridiagonal_recurrence'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            DimensionError: If the matrix shape violates a precondition
            NumericalError: If the computation hits a zero pivot etc.
        """
        ...
