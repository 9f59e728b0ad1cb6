from ..euclid import ExtendedEuclid
from ..exceptions import RetryBudgetExceededError
from ..mpc import MPC
from ..mpc.types import MPZ, RandomState
from ..primes import Primes
from ..random import Random
from .KeyPair import KeyPair, PrivateKey, PublicKey
from .abstract.IKeyGenerator import IKeyGenerator


class KeyGenerator(IKeyGenerator):
    """Textbook RSA key generation by trial and error.

    Every attempt draws fresh primes p, q and an exponent e, and is discarded
    unless p != q, gcd(e, phi) == 1, 0 < e < phi and d >= 1. With a fixed
    e_override that shares a factor with every reachable phi the loop never
    terminates unless max_attempts is set.
    """

    @staticmethod
    def generate_keys(
        n_bit: int,
        e_override: MPZ | None = None,
        state: RandomState | None = None,
        max_attempts: int | None = None,
        max_prime_attempts: int | None = None,
    ) -> KeyPair:
        if n_bit % 2 != 0:
            raise ValueError("Key length has to be divisible by 2.")

        if state is None:
            state = Random.get_random()
        if e_override is not None:
            e_override = MPC.mpz(e_override)

        attempts = 0
        while max_attempts is None or attempts < max_attempts:
            attempts += 1
            key_pair = KeyGenerator._attempt(
                n_bit, e_override, state, max_prime_attempts
            )
            if key_pair is not None:
                return key_pair
        raise RetryBudgetExceededError("Key generation", max_attempts)

    # Private Methods
    # ------------------------------------------------------------------------------

    @staticmethod
    def _attempt(
        n_bit: int,
        e_override: MPZ | None,
        state: RandomState,
        max_prime_attempts: int | None,
    ) -> KeyPair | None:
        """Run a single key generation attempt, returning None if it is rejected."""
        # Primes, each half the key length
        p = Primes.get_n_bit_prime(n_bit // 2, state, max_prime_attempts)
        q = Primes.get_n_bit_prime(n_bit // 2, state, max_prime_attempts)

        # Modulus (n_bit long) and Euler's totient
        N = MPC.mpz(p * q)
        phi = MPC.mpz((p - 1) * (q - 1))

        e = e_override if e_override is not None else Random.get_below(state, phi)

        result = ExtendedEuclid.solve(e, phi)

        # Decryption exponent, reduced into [0, phi)
        d = MPC.mod(result.get_s(), phi)

        is_valid_e = result.get_a() == 1 and 0 < e < phi
        if p == q or d < 1 or not is_valid_e:
            return None
        return KeyPair(PublicKey(e, N), PrivateKey(d, N))
