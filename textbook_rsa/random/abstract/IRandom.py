from abc import ABC, abstractmethod
from ...mpc.types import MPZ, RandomState


class IRandom(ABC):
    """Abstract base class defining the interface for random number generation."""

    @staticmethod
    @abstractmethod
    def get_random(seed: int | None = None) -> RandomState:
        """Get a random state, reproducible when a seed is given.

        Args:
            seed (int | None): Seed for the state. A fresh seed is drawn when omitted.

        Returns:
            RandomState: A seeded random state
        """

    @staticmethod
    @abstractmethod
    def get_n_bit_number(state: RandomState, n_bit: int) -> MPZ:
        """Get a random number that is exactly n_bit bits long.

        Args:
            state (RandomState): Random state to draw from
            n_bit (int): Length of the number in bits

        Returns:
            MPZ: A number with its most significant bit set
        """

    @staticmethod
    @abstractmethod
    def get_below(state: RandomState, bound: MPZ) -> MPZ:
        """Get a uniformly random number in [0, bound).

        Args:
            state (RandomState): Random state to draw from
            bound (MPZ): Exclusive upper bound

        Returns:
            MPZ: A random number below bound
        """
