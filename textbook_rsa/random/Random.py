import secrets
from ..mpc import MPC
from ..mpc.types import MPZ, RandomState
from .abstract.IRandom import IRandom


SEED_BITS = 64


class Random(IRandom):
    """Implementation of random number generation on top of a gmpy2 random state.

    Not cryptographically secure: the state is a plain PRNG, only its seed
    comes from the secrets module.
    """

    @staticmethod
    def get_random(seed: int | None = None) -> RandomState:
        if seed is None:
            seed = secrets.randbits(SEED_BITS)
        return MPC.random_state(seed)

    @staticmethod
    def get_n_bit_number(state: RandomState, n_bit: int) -> MPZ:
        # Low bits are uniform (even values included), the top bit fixes the length
        low_bits = MPC.mpz_urandomb(state, n_bit - 1)
        return MPC.bit_set(low_bits, n_bit - 1)

    @staticmethod
    def get_below(state: RandomState, bound: MPZ) -> MPZ:
        return MPC.mpz_random(state, bound)
