"""Converters for reporting results."""

from .rsa_result_converter import RSAResultConverter

__all__ = ["RSAResultConverter"]
