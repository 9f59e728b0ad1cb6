"""Prime number testing and generation module."""

from .Primes import Primes
from .abstract.IPrimes import IPrimes

__all__ = ["Primes", "IPrimes"]
