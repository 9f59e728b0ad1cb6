from abc import ABC, abstractmethod
from ...mpc.types import MPZ, RandomState


class IPrimes(ABC):
    """Abstract base class defining the interface for prime number testing and generation."""

    @staticmethod
    @abstractmethod
    def is_prime(x: MPZ) -> bool:
        """Decide whether x is a prime number.

        Args:
            x (MPZ): Number to be tested. Must be at least 2.

        Returns:
            bool: Whether x is prime
        """

    @staticmethod
    @abstractmethod
    def get_n_bit_prime(
        n_bit: int, state: RandomState, max_attempts: int | None = None
    ) -> MPZ:
        """Get a random prime number that is exactly n_bit bits long.

        Args:
            n_bit (int): Number of bits for the prime number. Must be at least 2.
            state (RandomState): Random state to draw candidates from
            max_attempts (int | None): Maximum number of candidates to test.
                Unbounded when omitted.

        Returns:
            MPZ: A random prime number
        """
