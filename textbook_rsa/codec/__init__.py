"""Text to number conversion module."""

from .Codec import Codec

__all__ = ["Codec"]
