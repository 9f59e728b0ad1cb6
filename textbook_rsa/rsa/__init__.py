"""RSA key generation module."""

from .KeyPair import KeyPair, PublicKey, PrivateKey
from .KeyGenerator import KeyGenerator
from .RSAResult import RSAResult
from .abstract.IKeyGenerator import IKeyGenerator

__all__ = [
    "KeyPair",
    "PublicKey",
    "PrivateKey",
    "KeyGenerator",
    "RSAResult",
    "IKeyGenerator",
]
