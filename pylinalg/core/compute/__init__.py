"""
Shared compute infrastructure for PyLinalg.

This module provides timing utilities, tolerance tiers and the linear
algebra kernels shared by the domain solvers.

IMPORTANT: This is NOT where the public solvers live. Those go in
{lu,qr,eigen}/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers and algorithm constants
    linalg: Linear algebra kernels (LU, QR, characteristic polynomial)
"""

from pylinalg.core.compute.timing import Timer

__all__ = [
    # Timing
    "Timer",
]
