from ..exceptions import RetryBudgetExceededError
from ..mpc import MPC
from ..mpc.types import MPZ, RandomState
from ..random import Random
from .abstract.IPrimes import IPrimes


class Primes(IPrimes):
    """Implementation of prime number testing and generation."""

    @staticmethod
    def is_prime(x: MPZ) -> bool:
        """Trial division by every i in [2, isqrt(x)].

        Values below 2 are not rejected, the caller must never pass them.
        Cost grows with sqrt(x), which limits keys to tens of bits.
        """
        limit = int(MPC.isqrt(x))
        for i in range(2, limit + 1):
            if MPC.mod(x, i) == 0:
                return False
        return True

    @staticmethod
    def get_n_bit_prime(
        n_bit: int, state: RandomState, max_attempts: int | None = None
    ) -> MPZ:
        attempts = 0
        while max_attempts is None or attempts < max_attempts:
            attempts += 1
            candidate = Random.get_n_bit_number(state, n_bit)
            if Primes.is_prime(candidate):
                return candidate
        raise RetryBudgetExceededError("Prime search", max_attempts)
