"""Characteristic polynomial backends."""

from pylinalg.eigen.backends.cpu import TridiagonalRecurrenceBackend

__all__ = ["TridiagonalRecurrenceBackend"]
