"""Extended Euclidean algorithm module."""

from .EuclidResult import EuclidResult
from .ExtendedEuclid import ExtendedEuclid

__all__ = ["EuclidResult", "ExtendedEuclid"]
