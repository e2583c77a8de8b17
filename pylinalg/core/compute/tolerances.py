"""
Tolerance tiers and algorithm constants.

Defines precision expectations for the residual checks
(‖LU − A‖, ‖QR − A‖, ‖QᴴQ − I‖, ‖Ax − b‖) and the thresholds the
algorithms themselves use.

Used by the solution wrappers, the test suite and the command line.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str

    def accepts(self, error: float, scale: float = 1.0) -> bool:
        """True if ``error`` is within atol + rtol * scale."""
        return error <= self.atol + self.rtol * scale


# Well-conditioned float64 problems
FLOAT64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='float64',
    description='double precision, well-conditioned',
)

# float64, ill-conditioned problems (cond > 1e4)
FLOAT64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='float64_ill_conditioned',
    description='double precision, ill-conditioned (cond > 1e4)',
)

# Exact scalar types (LongInt, Fraction): residuals must vanish
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='exact arithmetic',
)

# Off-band entries whose squared norm is below this count as zero when
# testing a matrix for tridiagonality.
TRIDIAGONAL_ZERO_TOLERANCE = 1e-4

# Gram-Schmidt repeats a projection pass until the total squared change
# of the working vector drops below this.
GRAM_SCHMIDT_EPSILON = 0.1

# Upper bound on Gram-Schmidt passes per column.
GRAM_SCHMIDT_MAX_PASSES = 100


def select_tolerance(kind_name: str, is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select the tolerance tier for a scalar kind ('real', 'Complex', ...)."""
    if kind_name in ('LongInt',) or kind_name.startswith('Fraction'):
        return EXACT
    if is_ill_conditioned:
        return FLOAT64_ILL_CONDITIONED
    return FLOAT64
