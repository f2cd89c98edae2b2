"""Variable-length unsigned integers over the URL-safe alphabet.

An integer is written least-significant chunk first, 5 payload bits per
character. Every character except the last has the continuation bit (0x20) set.
"""

from __future__ import annotations

from typing import Optional

from ..exceptions import CorruptEncodingError
from .alphabet import CONTINUATION_BIT, PAYLOAD_BITS, PAYLOAD_MASK, decode_char, encode_char


def encode_unsigned_varint(value: int) -> str:
    """Encode a non-negative integer as one or more alphabet characters.

    At least one character is produced, even for 0.

    Args:
        value: Unsigned integer to encode

    Returns:
        Encoded characters

    Raises:
        ValueError: If value is negative

    Example:
        >>> encode_unsigned_varint(1)
        'B'
        >>> encode_unsigned_varint(37)
        'lB'
    """
    if value < 0:
        raise ValueError(f"encode_unsigned_varint requires non-negative value, got {value}")

    chars = []
    while value > PAYLOAD_MASK:
        chars.append(encode_char((value & PAYLOAD_MASK) | CONTINUATION_BIT))
        value >>= PAYLOAD_BITS
    chars.append(encode_char(value))
    return "".join(chars)


def decode_unsigned_varint(encoded: str, position: int) -> Optional[tuple[int, int]]:
    """Decode one unsigned integer starting at ``position``.

    Args:
        encoded: Encoded string
        position: Index of the first character to read

    Returns:
        ``(value, next_position)``, or None if ``position`` is already at the end
        of the input (the stream ended cleanly)

    Raises:
        CorruptEncodingError: If a character is outside the alphabet or the input
            ends while the continuation bit is set
    """
    if position >= len(encoded):
        return None

    result = 0
    shift = 0
    while position < len(encoded):
        char = encoded[position]
        value = decode_char(char)
        if value is None:
            raise CorruptEncodingError(f"Invalid character {char!r}", position)
        position += 1
        result |= (value & PAYLOAD_MASK) << shift
        if not value & CONTINUATION_BIT:
            return result, position
        shift += PAYLOAD_BITS

    raise CorruptEncodingError("Input ended inside a variable-length integer", position)


class VarintWriter:
    """Accumulates encoded integers into an output string.

    Example:
        >>> writer = VarintWriter()
        >>> writer.write_uvarint(1)
        >>> writer.write_uvarint(5)
        >>> writer.to_str()
        'BF'
    """

    def __init__(self) -> None:
        """Initialize an empty writer."""
        self._chunks: list[str] = []
        self._length = 0

    def write_uvarint(self, value: int) -> None:
        """Append an unsigned integer.

        Args:
            value: Unsigned integer value to write (must be >= 0)

        Raises:
            ValueError: If value is negative
        """
        chunk = encode_unsigned_varint(value)
        self._chunks.append(chunk)
        self._length += len(chunk)

    def char_length(self) -> int:
        """Return the number of characters written so far."""
        return self._length

    def to_str(self) -> str:
        """Return everything written as a single string."""
        return "".join(self._chunks)


class VarintReader:
    """Reads encoded integers sequentially from a string.

    Example:
        >>> reader = VarintReader("BF")
        >>> reader.read_uvarint()
        1
        >>> reader.read_uvarint()
        5
        >>> reader.read_uvarint() is None
        True
    """

    def __init__(self, encoded: str, position: int = 0) -> None:
        """Initialize a reader over ``encoded`` starting at ``position``."""
        self._encoded = encoded
        self._position = position

    def read_uvarint(self) -> Optional[int]:
        """Read the next unsigned integer.

        Returns:
            The decoded value, or None if the input is exhausted

        Raises:
            CorruptEncodingError: If the next integer is malformed or truncated
        """
        decoded = decode_unsigned_varint(self._encoded, self._position)
        if decoded is None:
            return None
        value, self._position = decoded
        return value

    def at_end(self) -> bool:
        """Return True if every character has been consumed."""
        return self._position >= len(self._encoded)

    def chars_remaining(self) -> int:
        """Return the number of unread characters."""
        return len(self._encoded) - self._position

    def position(self) -> int:
        """Return the current read position in characters."""
        return self._position
