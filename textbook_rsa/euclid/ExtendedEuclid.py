from ..mpc import MPC
from ..mpc.types import MPZ
from .EuclidResult import EuclidResult


class ExtendedEuclid:
    """Iterative extended Euclidean algorithm."""

    @staticmethod
    def solve(x: MPZ, y: MPZ) -> EuclidResult:
        """Compute gcd(x, y) and the Bezout coefficients of x and y.

        Args:
            x (MPZ): First number
            y (MPZ): Second number

        Returns:
            EuclidResult: a, s and t so that s*x + t*y = a = gcd(x, y)
        """
        a, b = MPC.mpz(x), MPC.mpz(y)
        s, u = MPC.mpz(1), MPC.mpz(0)
        t, v = MPC.mpz(0), MPC.mpz(1)
        while b != 0:
            q = MPC.floor_div(a, b)
            a, b = b, a - q * b
            s, u = u, s - q * u
            t, v = v, t - q * v
        return EuclidResult(a, s, t)
