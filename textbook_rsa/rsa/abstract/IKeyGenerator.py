from abc import ABC, abstractmethod
from ...mpc.types import MPZ, RandomState
from ..KeyPair import KeyPair


class IKeyGenerator(ABC):
    """Abstract base class defining the interface for RSA key generation."""

    @staticmethod
    @abstractmethod
    def generate_keys(
        n_bit: int,
        e_override: MPZ | None = None,
        state: RandomState | None = None,
        max_attempts: int | None = None,
        max_prime_attempts: int | None = None,
    ) -> KeyPair:
        """Generate an RSA key pair.

        Args:
            n_bit (int): Key length in bits. Must be even.
            e_override (MPZ | None): Fixed encryption exponent used for every attempt.
                Drawn at random per attempt when omitted.
            state (RandomState | None): Random state to draw from. A fresh one is
                created when omitted.
            max_attempts (int | None): Maximum number of key attempts. Unbounded when omitted.
            max_prime_attempts (int | None): Maximum number of candidates tested per
                prime. Unbounded when omitted.

        Returns:
            KeyPair: The generated public and private key
        """
