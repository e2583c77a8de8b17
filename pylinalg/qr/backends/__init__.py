"""QR backends, one per factorization method."""

from pylinalg.qr.backends.cpu import (
    GivensBackend,
    GramSchmidtBackend,
    HouseholderBackend,
    QRSubstitutionBackend,
)

__all__ = [
    "HouseholderBackend",
    "GivensBackend",
    "GramSchmidtBackend",
    "QRSubstitutionBackend",
]
