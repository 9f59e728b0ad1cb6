"""Conversion between text and per-character numeric values."""

from typing import Iterable, List


MAX_CODE_POINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)
REPLACEMENT_CHARACTER = "\ufffd"


class Codec:
    """Maps a message to its Unicode code points and back."""

    @staticmethod
    def to_code_points(message: str) -> List[int]:
        return [ord(char) for char in message]

    @staticmethod
    def from_code_points(values: Iterable[int]) -> str:
        return "".join(chr(int(value)) for value in values)

    @staticmethod
    def to_display(values: Iterable[int]) -> str:
        """Render arbitrary numbers as characters, replacing unprintable ones.

        Lossy, only meant for showing a ciphertext.
        """
        chars = []
        for value in values:
            value = int(value)
            if 0 <= value <= MAX_CODE_POINT and value not in SURROGATES:
                chars.append(chr(value))
            else:
                chars.append(REPLACEMENT_CHARACTER)
        return "".join(chars)
