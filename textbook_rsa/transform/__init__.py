"""Encryption and decryption module."""

from .Transform import Transform
from .abstract.ITransform import ITransform

__all__ = ["Transform", "ITransform"]
