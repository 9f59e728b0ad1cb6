"""Converter for RSA results."""

from typing import Any, Dict

from textbook_rsa.codec import Codec
from textbook_rsa.rsa.RSAResult import RSAResult


class RSAResultConverter:
    """Converter for reporting an RSA result on the console."""

    @staticmethod
    def to_dict(result: RSAResult) -> Dict[str, Any]:
        """Convert an RSAResult to a JSON serializable dictionary.

        Args:
            result (RSAResult): The result to convert

        Returns:
            Dict[str, Any]: Plain values only, key material and length included if present
        """
        cipher = [int(value) for value in result.get_cipher()]
        data: Dict[str, Any] = {
            "message": result.get_message(),
            "encrypted": Codec.to_display(cipher),
            "cipher": cipher,
            "decrypted": result.get_decrypted(),
            "equal": result.is_equal(),
        }

        key_pair = result.get_key_pair()
        if key_pair is not None:
            private = key_pair.get_private()
            public = key_pair.get_public()
            data["private"] = {"d": int(private.get_d()), "N": int(private.get_N())}
            data["public"] = {"e": int(public.get_e()), "N": int(public.get_N())}

        if result.get_key_length():
            data["length"] = f"{result.get_key_length()} Bit"

        return data
