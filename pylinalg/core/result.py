"""
Generic result container for all PyLinalg computations.

The Result class provides a standardized envelope that all domain-specific
results use. This enables shared tooling for timing, reporting and
serialization while allowing domains to define their own payloads.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, passes, residuals)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for linear-algebra computations.

    Type Parameters:
        P: The domain-specific payload type

    Attributes:
        params: Domain-specific payload (factor matrices, polynomial, ...)
        info: Structured metadata (method, scalar type, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=LUParams(L=L, U=U, residual_norm=0.0),
        ...     info={'method': 'doolittle', 'n': 3},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='doolittle'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
