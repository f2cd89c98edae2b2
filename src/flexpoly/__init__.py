"""flexpoly: Flexible Polyline Codec

A Python library for encoding sequences of geographic coordinates into compact,
URL-safe strings and back. Each coordinate is a latitude/longitude pair with an
optional third dimension (level, altitude, elevation or a custom value).

Key Features:
- Configurable decimal precision (0-15 digits) per axis
- Delta + zig-zag + variable-length integer packing
- Self-describing header (format version, precisions, third dimension kind)
- URL-safe 64 character alphabet

Quick Start:
    >>> from flexpoly import LatLngZ, ThirdDimension, decode, encode, peek_third_dimension
    >>>
    >>> encoded = encode([(38.5, -120.2), (40.7, -120.95)], precision=5)
    >>> encoded
    'BFgx_qH_x09Wg2tNvvyE'
    >>> decode(encoded)
    [LatLngZ(lat=38.5, lng=-120.2, z=0.0), LatLngZ(lat=40.7, lng=-120.95, z=0.0)]
    >>>
    >>> track = [LatLngZ(50.1022829, 8.6982122, 112.5)]
    >>> peek_third_dimension(encode(track, 7, ThirdDimension.ALTITUDE, 1))
    <ThirdDimension.ALTITUDE: 2>
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import FORMAT_VERSION, decode, encode, peek_header, peek_third_dimension
from .config import EncodingOptions
from .exceptions import (
    CorruptEncodingError,
    DecodeError,
    FlexpolyError,
    InvalidArgumentError,
    UnsupportedFormatVersionError,
)
from .models import LatLngZ, PolylineHeader, ThirdDimension
from .utils import compression_ratio, encoded_length, header_length, value_lengths


def format_version() -> int:
    """Return the polyline format version this library reads and writes."""
    return FORMAT_VERSION


__all__ = [
    # Core API
    "encode",
    "decode",
    "peek_third_dimension",
    "peek_header",
    "format_version",
    "FORMAT_VERSION",
    # Types
    "LatLngZ",
    "ThirdDimension",
    "PolylineHeader",
    "EncodingOptions",
    # Exceptions
    "FlexpolyError",
    "InvalidArgumentError",
    "DecodeError",
    "UnsupportedFormatVersionError",
    "CorruptEncodingError",
    # Sizing
    "encoded_length",
    "header_length",
    "value_lengths",
    "compression_ratio",
    # Version
    "__version__",
]
