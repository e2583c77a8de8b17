"""LU backends."""

from pylinalg.lu.backends.cpu import DoolittleBackend, LUSubstitutionBackend

__all__ = ["DoolittleBackend", "LUSubstitutionBackend"]
