import gmpy2
from .abstract.IMPC import IMPC
from .types import MPZ, RandomState


class MPC(IMPC):
    """Implementation of multi-precision computing operations."""

    @staticmethod
    def mpz(value: int) -> MPZ:
        return gmpy2.mpz(value)

    @staticmethod
    def random_state(seed: int) -> RandomState:
        return gmpy2.random_state(seed)

    @staticmethod
    def mpz_urandomb(state: RandomState, bit_count: int) -> MPZ:
        return gmpy2.mpz_urandomb(state, bit_count)

    @staticmethod
    def mpz_random(state: RandomState, bound: MPZ) -> MPZ:
        return gmpy2.mpz_random(state, bound)

    @staticmethod
    def bit_set(value: MPZ, index: int) -> MPZ:
        return gmpy2.bit_set(value, index)

    @staticmethod
    def isqrt(value: MPZ) -> MPZ:
        return gmpy2.isqrt(value)

    @staticmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        return gmpy2.powmod(base, exp, mod)

    @staticmethod
    def mod(value: MPZ, modulus: MPZ) -> MPZ:
        return value % modulus  # floor semantics, result takes the sign of modulus

    @staticmethod
    def floor_div(value: MPZ, divisor: MPZ) -> MPZ:
        return gmpy2.f_div(value, divisor)
