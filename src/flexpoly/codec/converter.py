"""Per-axis delta converter.

A Converter turns one axis (latitude, longitude or third dimension) of a
coordinate sequence into zig-zag encoded deltas of scaled integers, and back.
One instance exists per axis for the duration of a single encode or decode call.
"""

from __future__ import annotations

import math
from typing import Optional

from ..exceptions import CorruptEncodingError, InvalidArgumentError
from .varint import VarintReader, VarintWriter


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, breaking ties away from zero.

    Example:
        >>> [round_half_away_from_zero(v) for v in (-1.4, -1.5, -2.5, 2.5)]
        [-1, -2, -3, 3]
    """
    magnitude = abs(value)
    rounded = math.floor(magnitude)
    if magnitude - rounded >= 0.5:
        rounded += 1
    return -rounded if value < 0 else rounded


def zigzag_encode(delta: int) -> int:
    """Map a signed delta to an unsigned integer (0, -1, 1, -2, ... -> 0, 1, 2, 3, ...)."""
    shifted = delta << 1
    return ~shifted if delta < 0 else shifted


def zigzag_decode(value: int) -> int:
    """Inverse of zigzag_encode."""
    if value & 1:
        value = ~value
    return value >> 1


class Converter:
    """Delta encoder/decoder for a single coordinate axis.

    Attributes:
        precision: Number of decimal digits kept
        multiplier: ``10 ** precision``
        last_value: Scaled integer value of the previous coordinate on this axis

    Example:
        >>> writer = VarintWriter()
        >>> converter = Converter(5)
        >>> converter.encode_value(38.5, writer)
        >>> converter.last_value
        3850000
    """

    def __init__(self, precision: int) -> None:
        self.precision = precision
        self.multiplier = 10**precision
        self.last_value = 0

    def encode_value(self, value: float, writer: VarintWriter) -> None:
        """Scale, delta and zig-zag encode one value and append it to ``writer``.

        Raises:
            InvalidArgumentError: If value is NaN or infinite, or too large once
                scaled to the precision
        """
        if not math.isfinite(value):
            raise InvalidArgumentError(f"Cannot encode non-finite coordinate value {value}")

        product = value * self.multiplier
        if not math.isfinite(product):
            raise InvalidArgumentError(
                f"Coordinate value {value} is out of range at precision {self.precision}"
            )
        scaled = round_half_away_from_zero(product)
        delta = scaled - self.last_value
        self.last_value = scaled
        writer.write_uvarint(zigzag_encode(delta))

    def decode_value(self, reader: VarintReader) -> Optional[float]:
        """Read the next delta from ``reader`` and return the restored value.

        Returns:
            The decoded value, or None if the reader is exhausted

        Raises:
            CorruptEncodingError: If the underlying integer is malformed or the
                restored value does not fit in a float
        """
        encoded = reader.read_uvarint()
        if encoded is None:
            return None
        self.last_value += zigzag_decode(encoded)
        try:
            return self.last_value / self.multiplier
        except OverflowError as err:
            raise CorruptEncodingError("Decoded value out of range", reader.position()) from err
