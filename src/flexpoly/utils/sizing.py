"""Polyline size calculation utilities.

This module provides functions to measure encoded polylines and compare them
with a plain JSON representation of the same coordinates.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from ..codec.decoder import decode
from ..codec.encoder import encode
from ..codec.header import check_encoded, decode_header
from ..codec.varint import VarintReader
from ..models.third_dimension import ThirdDimension


def encoded_length(
    coordinates: Iterable[Any],
    precision: int = 5,
    third_dimension: ThirdDimension | int | str = ThirdDimension.ABSENT,
    third_dimension_precision: int = 0,
) -> int:
    """Calculate the number of characters encode() produces for the given input.

    Raises:
        InvalidArgumentError: Under the same conditions as encode()

    Example:
        >>> encoded_length([(38.5, -120.2), (40.7, -120.95)])
        20
    """
    return len(encode(coordinates, precision, third_dimension, third_dimension_precision))


def header_length(encoded: str) -> int:
    """Return the number of characters taken by the header of an encoded polyline.

    Raises:
        InvalidArgumentError: If encoded is empty or blank
        UnsupportedFormatVersionError: If the header version is not supported
        CorruptEncodingError: If the header is malformed
    """
    reader = VarintReader(check_encoded(encoded))
    decode_header(reader)
    return reader.position()


def value_lengths(encoded: str) -> list[int]:
    """Get the width in characters of each encoded value after the header.

    Values are listed in stream order: lat, lng[, z] for each coordinate.

    Raises:
        InvalidArgumentError: If encoded is empty or blank
        UnsupportedFormatVersionError: If the header version is not supported
        CorruptEncodingError: If the polyline is malformed

    Example:
        >>> value_lengths("BFoz5xJ67i1B1B7PzIhaxL7Y")
        [5, 5, 2, 2, 2, 2, 2, 2]
    """
    # Full decode first so a truncated coordinate is reported like decode() does
    decode(encoded)

    reader = VarintReader(encoded)
    decode_header(reader)

    lengths = []
    start = reader.position()
    while reader.read_uvarint() is not None:
        lengths.append(reader.position() - start)
        start = reader.position()
    return lengths


def compression_ratio(encoded: str) -> float:
    """Compare the decoded coordinates as a JSON array with the encoded string.

    The JSON form lists ``[lat, lng]`` per coordinate, or ``[lat, lng, z]`` when
    the polyline has a third dimension.

    Returns:
        JSON length divided by encoded length (greater than 1 means smaller)

    Raises:
        InvalidArgumentError: If encoded is empty or blank
        UnsupportedFormatVersionError: If the header version is not supported
        CorruptEncodingError: If the polyline is malformed
    """
    points = decode(encoded)
    reader = VarintReader(encoded)
    header = decode_header(reader)

    if header.has_third_dimension:
        rows = [[p.lat, p.lng, p.z] for p in points]
    else:
        rows = [[p.lat, p.lng] for p in points]

    json_length = len(json.dumps(rows, separators=(",", ":")))
    return json_length / len(encoded)
