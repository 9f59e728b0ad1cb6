from ..mpc.types import MPZ


class PublicKey:
    """Encryption exponent e and modulus N."""

    def __init__(self, e: MPZ, N: MPZ) -> None:
        self._e = e
        self._N = N

    def get_e(self) -> MPZ:
        return self._e

    def get_N(self) -> MPZ:
        return self._N

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self._e == other._e and self._N == other._N

    def __repr__(self):
        return f"<PublicKey(e={self._e}, N={self._N})>"


class PrivateKey:
    """Decryption exponent d and modulus N."""

    def __init__(self, d: MPZ, N: MPZ) -> None:
        self._d = d
        self._N = N

    def get_d(self) -> MPZ:
        return self._d

    def get_N(self) -> MPZ:
        return self._N

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrivateKey):
            return NotImplemented
        return self._d == other._d and self._N == other._N

    def __repr__(self):
        return f"<PrivateKey(d={self._d}, N={self._N})>"


class KeyPair:
    """A public key and the private key sharing its modulus."""

    def __init__(self, public: PublicKey, private: PrivateKey) -> None:
        """Initialize a key pair.

        Args:
            public (PublicKey): The key used for encryption
            private (PrivateKey): The key used for decryption
        """
        self._public = public
        self._private = private

    def get_public(self) -> PublicKey:
        return self._public

    def get_private(self) -> PrivateKey:
        return self._private

    def __repr__(self):
        return f"<KeyPair(public={self._public!r}, private={self._private!r})>"
