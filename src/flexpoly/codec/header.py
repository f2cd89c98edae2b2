"""Header encoding and decoding.

The header is two variable-length integers: the format version, then the
packed precision / third dimension value (see PolylineHeader.packed).
"""

from __future__ import annotations

from typing import Any

from ..exceptions import CorruptEncodingError, InvalidArgumentError, UnsupportedFormatVersionError
from ..models.header import PolylineHeader
from ..models.third_dimension import ThirdDimension
from .varint import VarintReader, VarintWriter

FORMAT_VERSION = PolylineHeader.FORMAT_VERSION


def encode_header(
    writer: VarintWriter,
    precision: Any,
    third_dimension: Any,
    third_dimension_precision: Any,
) -> PolylineHeader:
    """Validate the encoding parameters and write the header to ``writer``.

    Returns:
        The validated header, for the caller to build its converters from

    Raises:
        InvalidArgumentError: If a precision is outside 0-15 or the third
            dimension is unknown. Nothing is written in that case.
    """
    header = PolylineHeader.create(precision, third_dimension, third_dimension_precision)
    writer.write_uvarint(FORMAT_VERSION)
    writer.write_uvarint(header.packed)
    return header


def decode_header(reader: VarintReader) -> PolylineHeader:
    """Read and validate the header at the reader's current position.

    Raises:
        UnsupportedFormatVersionError: If the version is not FORMAT_VERSION
        CorruptEncodingError: If the header is truncated or malformed
    """
    version = reader.read_uvarint()
    if version is None:
        raise CorruptEncodingError("Missing format version", reader.position())
    if version != FORMAT_VERSION:
        raise UnsupportedFormatVersionError(version, FORMAT_VERSION)

    packed = reader.read_uvarint()
    if packed is None:
        raise CorruptEncodingError("Missing header", reader.position())
    return PolylineHeader.unpack(packed)


def check_encoded(encoded: Any) -> str:
    """Reject values that cannot be an encoded polyline.

    Raises:
        InvalidArgumentError: If encoded is not a string or is empty/blank
    """
    if not isinstance(encoded, str) or not encoded.strip():
        raise InvalidArgumentError(f"Invalid encoded polyline: {encoded!r}")
    return encoded


def peek_header(encoded: str) -> PolylineHeader:
    """Decode only the header of an encoded polyline.

    Raises:
        InvalidArgumentError: If encoded is empty or blank
        UnsupportedFormatVersionError: If the version is not supported
        CorruptEncodingError: If the header is malformed
    """
    return decode_header(VarintReader(check_encoded(encoded)))


def peek_third_dimension(encoded: str) -> ThirdDimension:
    """Return the third dimension kind of an encoded polyline without decoding coordinates.

    Example:
        >>> peek_third_dimension("BFoz5xJ67i1B1B7PzIhaxL7Y")
        <ThirdDimension.ABSENT: 0>
    """
    return peek_header(encoded).third_dimension
