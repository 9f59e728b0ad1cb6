from abc import ABC, abstractmethod
from typing import List

from ...mpc.types import MPZ
from ...rsa.KeyPair import PrivateKey, PublicKey


class ITransform(ABC):
    """Abstract base class defining the interface for RSA encryption and decryption."""

    @staticmethod
    @abstractmethod
    def mod_exp(x: MPZ, exponent: MPZ, modulus: MPZ) -> MPZ:
        """Compute x^exponent mod modulus.

        Args:
            x (MPZ): Base value
            exponent (MPZ): Exponent value
            modulus (MPZ): Modulus value

        Returns:
            MPZ: Result of modular exponentiation
        """

    @staticmethod
    @abstractmethod
    def encrypt(value: MPZ, public_key: PublicKey) -> MPZ:
        """Encrypt a single number.

        Args:
            value (MPZ): The number to be encrypted, 0 <= value < N
            public_key (PublicKey): The public key

        Returns:
            MPZ: The encrypted number
        """

    @staticmethod
    @abstractmethod
    def decrypt(value: MPZ, private_key: PrivateKey) -> MPZ:
        """Decrypt a single number.

        Args:
            value (MPZ): The number to be decrypted
            private_key (PrivateKey): The private key

        Returns:
            MPZ: The decrypted number
        """

    @staticmethod
    @abstractmethod
    def encrypt_message(
        message: str, public_key: PublicKey, validate_range: bool = True
    ) -> List[MPZ]:
        """Encrypt a string message character by character.

        Args:
            message (str): The message to be encrypted
            public_key (PublicKey): The public key
            validate_range (bool): Reject characters whose code point is not below N

        Returns:
            List[MPZ]: The encrypted code point of every character
        """

    @staticmethod
    @abstractmethod
    def decrypt_message(cipher: List[MPZ], private_key: PrivateKey) -> str:
        """Decrypt a cipher produced by encrypt_message.

        Args:
            cipher (List[MPZ]): The encrypted code point of every character
            private_key (PrivateKey): The private key

        Returns:
            str: The decrypted message
        """
