from ..mpc.types import MPZ


class EuclidResult:
    """Greatest common divisor a of two numbers x, y with Bezout coefficients s, t.

    s * x + t * y = a
    """

    def __init__(self, a: MPZ, s: MPZ, t: MPZ) -> None:
        self._a = a
        self._s = s
        self._t = t

    def get_a(self) -> MPZ:
        return self._a

    def get_s(self) -> MPZ:
        return self._s

    def get_t(self) -> MPZ:
        return self._t

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EuclidResult):
            return NotImplemented
        return (self._a, self._s, self._t) == (other._a, other._s, other._t)

    def __repr__(self):
        return f"<EuclidResult(a={self._a}, s={self._s}, t={self._t})>"
