"""Polyline encoder.

This module provides the encode() function that converts a sequence of
coordinate triples to a compact URL-safe string.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Optional

from ..config import EncodingOptions
from ..exceptions import InvalidArgumentError
from ..models.coordinates import LatLngZ
from ..models.third_dimension import ThirdDimension
from .converter import Converter
from .header import encode_header
from .varint import VarintWriter


def encode(
    coordinates: Iterable[Any],
    precision: int = 5,
    third_dimension: ThirdDimension | int | str = ThirdDimension.ABSENT,
    third_dimension_precision: int = 0,
    *,
    options: Optional[EncodingOptions] = None,
) -> str:
    """Encode coordinates to a polyline string.

    Each coordinate is written as the delta of latitude, longitude and, unless
    the third dimension is ABSENT, the third value, relative to the previous
    coordinate. Values are rounded half away from zero to the given precision,
    so encoding is lossy.

    Args:
        coordinates: LatLngZ instances or ``(lat, lng[, z])`` sequences
        precision: Decimal digits kept for latitude/longitude (0-15)
        third_dimension: Meaning of the third value; ABSENT encodes lat/lng only
        third_dimension_precision: Decimal digits kept for the third value (0-15)
        options: Encoding preset; when given it replaces the three parameters above

    Returns:
        Encoded polyline using only URL-safe characters

    Raises:
        InvalidArgumentError: If coordinates is empty, a coordinate is malformed
            or not finite, or an encoding parameter is out of range

    Examples:
        ```python
        from flexpoly import encode

        encode([(38.5, -120.2), (40.7, -120.95)])
        # 'BFgx_qH_x09Wg2tNvvyE'
        ```
    """
    if options is not None:
        precision = options.precision
        third_dimension = options.third_dimension
        third_dimension_precision = options.third_dimension_precision

    if coordinates is None:
        raise InvalidArgumentError("Invalid coordinates: None")

    # Coerce everything up front so a bad coordinate never yields partial output
    points = [LatLngZ.coerce(point) for point in coordinates]
    if not points:
        raise InvalidArgumentError("Invalid coordinates: at least one coordinate is required")

    writer = VarintWriter()
    header = encode_header(writer, precision, third_dimension, third_dimension_precision)

    lat_converter = Converter(header.precision)
    lng_converter = Converter(header.precision)
    z_converter = Converter(header.third_dimension_precision)

    for point in points:
        lat_converter.encode_value(point.lat, writer)
        lng_converter.encode_value(point.lng, writer)
        if header.has_third_dimension:
            z_converter.encode_value(point.z, writer)

    return writer.to_str()
