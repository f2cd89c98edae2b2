"""URL-safe 64 character alphabet used for encoded polylines.

Each character carries 6 bits: 5 payload bits and the continuation bit 0x20.
"""

from __future__ import annotations

from typing import Optional

ENCODING_TABLE = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"

DECODING_TABLE: dict[str, int] = {char: index for index, char in enumerate(ENCODING_TABLE)}

CONTINUATION_BIT = 0x20
PAYLOAD_MASK = 0x1F
PAYLOAD_BITS = 5


def encode_char(value: int) -> str:
    """Return the alphabet character for a 6-bit value.

    Raises:
        ValueError: If value is outside 0-63
    """
    if value < 0 or value > 63:
        raise ValueError(f"Alphabet index must be 0-63, got {value}")
    return ENCODING_TABLE[value]


def decode_char(char: str) -> Optional[int]:
    """Return the 6-bit value of an alphabet character, or None if it is not in the alphabet."""
    return DECODING_TABLE.get(char)


def is_valid(encoded: str) -> bool:
    """Check that every character of a string belongs to the alphabet."""
    return all(char in DECODING_TABLE for char in encoded)
