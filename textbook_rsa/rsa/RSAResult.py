from typing import List

from ..mpc.types import MPZ
from .KeyPair import KeyPair


class RSAResult:
    """Outcome of encrypting and decrypting a message with one key pair."""

    def __init__(
        self,
        message: str,
        cipher: List[MPZ],
        decrypted: str,
        key_pair: KeyPair | None = None,
        key_length: int | None = None,
    ) -> None:
        """Initialize a result.

        Args:
            message (str): The clear text message
            cipher (List[MPZ]): The encrypted value of every character
            decrypted (str): The decrypted text
            key_pair (KeyPair | None): The key pair, if it should be reported
            key_length (int | None): The key length in bits, if it should be reported
        """
        self._message = message
        self._cipher = list(cipher)
        self._decrypted = decrypted
        self._equal = message == decrypted
        self._key_pair = key_pair
        self._key_length = key_length

    def get_message(self) -> str:
        return self._message

    def get_cipher(self) -> List[MPZ]:
        return list(self._cipher)

    def get_decrypted(self) -> str:
        return self._decrypted

    def is_equal(self) -> bool:
        return self._equal

    def get_key_pair(self) -> KeyPair | None:
        return self._key_pair

    def get_key_length(self) -> int | None:
        return self._key_length
