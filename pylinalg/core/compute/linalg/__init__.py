"""
Linear algebra kernels for PyLinalg.

Every kernel is written once against the Numeric contract and runs over
any scalar kind a Matrix can hold.

All functions follow these conventions:
    - Inputs are Matrix objects; inputs are never mutated
    - Factorizations return a structured result dataclass
    - Preconditions are checked up front and raise typed errors

Submodules:
    lu: unpivoted Doolittle LU and the LU solve
    qr: Householder, Givens and Gram-Schmidt QR and the QR solve
    charpoly: tridiagonal characteristic polynomial
    triangular: forward/back substitution
"""

from pylinalg.core.compute.linalg.lu import (
    LUResult,
    gauss_from_lu,
    lu_decomposition,
)
from pylinalg.core.compute.linalg.qr import (
    QRResult,
    gauss_from_qr,
    qr_givens,
    qr_gram_schmidt,
    qr_householder,
)
from pylinalg.core.compute.linalg.charpoly import (
    characteristic_polynomial,
    check_tridiagonal,
    first_off_band_entry,
    is_tridiagonal,
)

__all__ = [
    # LU decomposition
    "LUResult",
    "lu_decomposition",
    "gauss_from_lu",
    # QR decomposition
    "QRResult",
    "qr_householder",
    "qr_givens",
    "qr_gram_schmidt",
    "gauss_from_qr",
    # Characteristic polynomial
    "characteristic_polynomial",
    "check_tridiagonal",
    "first_off_band_entry",
    "is_tridiagonal",
]
