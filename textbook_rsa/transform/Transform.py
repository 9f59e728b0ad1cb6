from typing import List

from ..codec import Codec
from ..exceptions import MessageRangeError
from ..mpc import MPC
from ..mpc.types import MPZ
from ..rsa.KeyPair import PrivateKey, PublicKey
from .abstract.ITransform import ITransform


class Transform(ITransform):
    """Raw textbook RSA applied to each character independently.

    No padding, no chaining. A value is only recovered by decryption when
    0 <= value < N.
    """

    @staticmethod
    def mod_exp(x: MPZ, exponent: MPZ, modulus: MPZ) -> MPZ:
        return MPC.powmod(MPC.mpz(x), MPC.mpz(exponent), MPC.mpz(modulus))

    @staticmethod
    def encrypt(value: MPZ, public_key: PublicKey) -> MPZ:
        return Transform.mod_exp(value, public_key.get_e(), public_key.get_N())

    @staticmethod
    def decrypt(value: MPZ, private_key: PrivateKey) -> MPZ:
        return Transform.mod_exp(value, private_key.get_d(), private_key.get_N())

    @staticmethod
    def encrypt_message(
        message: str, public_key: PublicKey, validate_range: bool = True
    ) -> List[MPZ]:
        code_points = Codec.to_code_points(message)
        if validate_range:
            N = public_key.get_N()
            for code_point in code_points:
                if code_point >= N:
                    raise MessageRangeError(code_point, int(N))
        return [Transform.encrypt(code_point, public_key) for code_point in code_points]

    @staticmethod
    def decrypt_message(cipher: List[MPZ], private_key: PrivateKey) -> str:
        return Codec.from_code_points(
            Transform.decrypt(value, private_key) for value in cipher
        )
