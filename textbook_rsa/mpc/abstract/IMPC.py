from abc import ABC, abstractmethod
from ..types import MPZ, RandomState


class IMPC(ABC):
    """Abstract base class defining the interface for multi-precision computing operations."""

    @staticmethod
    @abstractmethod
    def mpz(value: int) -> MPZ:
        """Convert a Python integer to an mpz.

        Args:
            value (int): Integer value to convert

        Returns:
            mpz: Multi-precision integer
        """

    @staticmethod
    @abstractmethod
    def random_state(seed: int) -> RandomState:
        """Create a random state from a seed.

        Args:
            seed (int): Seed value for random state

        Returns:
            RandomState: Random state object
        """

    @staticmethod
    @abstractmethod
    def mpz_urandomb(state: RandomState, bit_count: int) -> MPZ:
        """Generate a uniformly random integer in [0, 2**bit_count).

        Args:
            state (RandomState): Random state to use
            bit_count (int): Number of bits in result

        Returns:
            mpz: Random integer
        """

    @staticmethod
    @abstractmethod
    def mpz_random(state: RandomState, bound: MPZ) -> MPZ:
        """Generate a uniformly random integer in [0, bound).

        Args:
            state (RandomState): Random state to use
            bound (mpz): Exclusive upper bound

        Returns:
            mpz: Random integer
        """

    @staticmethod
    @abstractmethod
    def bit_set(value: MPZ, index: int) -> MPZ:
        """Return value with the bit at index set to 1.

        Args:
            value (mpz): Value to modify
            index (int): Bit position, 0 being the least significant bit

        Returns:
            mpz: The modified value
        """

    @staticmethod
    @abstractmethod
    def isqrt(value: MPZ) -> MPZ:
        """Compute the integer square root floor(sqrt(value)).

        Args:
            value (mpz): Non-negative value

        Returns:
            mpz: Integer square root
        """

    @staticmethod
    @abstractmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        """Compute (base ** exp) % mod efficiently.

        Args:
            base (mpz): Base value
            exp (mpz): Exponent value
            mod (mpz): Modulus value

        Returns:
            mpz: Result of modular exponentiation
        """

    @staticmethod
    @abstractmethod
    def mod(value: MPZ, modulus: MPZ) -> MPZ:
        """Compute value % modulus.

        Args:
            value (mpz): Value to reduce
            modulus (mpz): Modulus to reduce by

        Returns:
            mpz: Result of modular reduction
        """

    @staticmethod
    @abstractmethod
    def floor_div(value: MPZ, divisor: MPZ) -> MPZ:
        """Compute value // divisor rounding towards negative infinity.

        Args:
            value (mpz): Dividend
            divisor (mpz): Non-zero divisor

        Returns:
            mpz: The floor quotient
        """
