"""Main script for generating an RSA key pair and round-tripping a message."""

import argparse
import json
import sys
import time
from typing import List, Sequence

from textbook_rsa.converters import RSAResultConverter
from textbook_rsa.exceptions import MessageRangeError, RetryBudgetExceededError
from textbook_rsa.mpc.types import MPZ
from textbook_rsa.protocol_constants import MIN_KEY_LENGTH
from textbook_rsa.random import Random
from textbook_rsa.rsa import KeyGenerator, KeyPair, RSAResult
from textbook_rsa.rsa.KeyPair import PrivateKey, PublicKey
from textbook_rsa.transform import Transform
from textbook_rsa.utils import EnvironmentManager, EnvironmentVariables


class RSAService:
    """Service class running key generation, encryption and decryption with timings."""

    def __init__(
        self,
        key_length: int,
        e_override: int | None = None,
        seed: int | None = None,
        max_attempts: int | None = None,
        max_prime_attempts: int | None = None,
    ):
        """
        Initialize the service.

        Args:
            key_length: Key length in bits, must be even
            e_override: Fixed public exponent
            seed: Seed for the random state
            max_attempts: Retry budget for key attempts
            max_prime_attempts: Retry budget for the candidates of each prime
        """
        if key_length % 2 != 0:
            raise ValueError("Key length has to be divisible by 2.")
        self.key_length = key_length
        self.e_override = e_override
        self.max_attempts = max_attempts
        self.max_prime_attempts = max_prime_attempts
        self.state = Random.get_random(seed)

    def generate_keys(self) -> KeyPair:
        print(f"Generating {self.key_length} bit key pair...")
        start_time = time.time()
        key_pair = KeyGenerator.generate_keys(
            self.key_length,
            self.e_override,
            self.state,
            self.max_attempts,
            self.max_prime_attempts,
        )
        total_time = time.time() - start_time
        print(f"Key generation took {total_time:.4f} seconds")
        return key_pair

    def encrypt(
        self, message: str, public_key: PublicKey, validate_range: bool = True
    ) -> List[MPZ]:
        start_time = time.time()
        cipher = Transform.encrypt_message(message, public_key, validate_range)
        total_time = time.time() - start_time
        print(f"Encryption took {total_time:.4f} seconds")
        return cipher

    def decrypt(self, cipher: List[MPZ], private_key: PrivateKey) -> str:
        start_time = time.time()
        decrypted = Transform.decrypt_message(cipher, private_key)
        total_time = time.time() - start_time
        print(f"Decryption took {total_time:.4f} seconds")
        return decrypted

    def run(
        self, message: str, validate_range: bool = True, show_keys: bool = True
    ) -> RSAResult:
        """
        Generate a key pair, then encrypt and decrypt the message with it.

        Args:
            message: Clear text message
            validate_range: Reject characters whose code point is not below N
            show_keys: Include the key material in the result

        Returns:
            The result of the round trip
        """
        key_pair = self.generate_keys()
        cipher = self.encrypt(message, key_pair.get_public(), validate_range)
        decrypted = self.decrypt(cipher, key_pair.get_private())
        return RSAResult(
            message,
            cipher,
            decrypted,
            key_pair if show_keys else None,
            self.key_length,
        )


def log_results(result: RSAResult) -> None:
    """Print the result once as JSON."""
    print(json.dumps(RSAResultConverter.to_dict(result), indent=2, ensure_ascii=False))


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments, falling back to environment variables."""
    parser = argparse.ArgumentParser(
        description="Generate a textbook RSA key pair and round-trip a message."
    )
    parser.add_argument(
        "--length",
        type=int,
        default=EnvironmentManager.get_int(EnvironmentVariables.KEY_LENGTH),
        help="Key length in bit, must be divisible by 2 (default: 16)",
    )
    parser.add_argument(
        "--e",
        type=int,
        default=EnvironmentManager.get_int(EnvironmentVariables.PUBLIC_EXPONENT),
        help="Fixed public exponent e",
    )
    parser.add_argument(
        "--message",
        type=str,
        default=EnvironmentManager.get_string(EnvironmentVariables.MESSAGE),
        help="Message to be encrypted (default: 'Hello World!')",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=EnvironmentManager.get_int(EnvironmentVariables.MAX_ATTEMPTS),
        help="Give up after this many key attempts instead of retrying forever",
    )
    parser.add_argument(
        "--max-prime-attempts",
        type=int,
        default=EnvironmentManager.get_int(EnvironmentVariables.MAX_PRIME_ATTEMPTS),
        help="Give up after this many prime candidates instead of retrying forever",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=EnvironmentManager.get_int(EnvironmentVariables.SEED),
        help="Seed for the random state",
    )
    parser.add_argument(
        "--no-validate-range",
        dest="validate_range",
        action="store_false",
        default=EnvironmentManager.get_bool(EnvironmentVariables.VALIDATE_RANGE),
        help="Encrypt characters whose code point is not below N anyway",
    )
    parser.add_argument(
        "--hide-keys",
        action="store_true",
        help="Leave the key material out of the output",
    )
    args = parser.parse_args(argv)

    # Validate key length
    if args.length % 2 != 0:
        parser.error("Key length has to be divisible by 2.")
    if args.length < MIN_KEY_LENGTH:
        parser.error(f"Key length has to be at least {MIN_KEY_LENGTH}.")

    # Validate public exponent
    if args.e is not None and args.e <= 0:
        parser.error("Public exponent e has to be positive.")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a key pair, encrypt and decrypt the message and print the result."""
    args = parse_args(argv)

    service = RSAService(
        args.length, args.e, args.seed, args.max_attempts, args.max_prime_attempts
    )

    try:
        result = service.run(args.message, args.validate_range, not args.hide_keys)
    except (RetryBudgetExceededError, MessageRangeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log_results(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
