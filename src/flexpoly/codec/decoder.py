"""Polyline decoder.

This module provides the decode() function that converts an encoded polyline
string back to a list of coordinate triples.
"""

from __future__ import annotations

from typing import Optional

from ..exceptions import CorruptEncodingError
from ..models.coordinates import LatLngZ
from ..models.header import PolylineHeader
from .converter import Converter
from .header import check_encoded, decode_header
from .varint import VarintReader


class _PolylineReader:
    """Reads coordinate triples following an already decoded header."""

    def __init__(self, reader: VarintReader, header: PolylineHeader) -> None:
        self._reader = reader
        self._header = header
        self._lat = Converter(header.precision)
        self._lng = Converter(header.precision)
        self._z = Converter(header.third_dimension_precision)

    def read_one(self) -> Optional[LatLngZ]:
        """Read the next coordinate.

        Returns:
            The next coordinate, or None if the stream ended cleanly before it

        Raises:
            CorruptEncodingError: If the coordinate is malformed or truncated
        """
        lat = self._lat.decode_value(self._reader)
        if lat is None:
            return None

        lng = self._lng.decode_value(self._reader)
        if lng is None:
            raise CorruptEncodingError("Missing longitude", self._reader.position())

        z = 0.0
        if self._header.has_third_dimension:
            decoded_z = self._z.decode_value(self._reader)
            if decoded_z is None:
                raise CorruptEncodingError(
                    f"Missing {self._header.third_dimension.name.lower()} value",
                    self._reader.position(),
                )
            z = decoded_z

        return LatLngZ(lat, lng, z)


def decode(encoded: str) -> list[LatLngZ]:
    """Decode a polyline string to coordinate triples.

    The third value of each coordinate is 0 when the header declares no third
    dimension. Decoding is all-or-nothing: any malformed or truncated input
    raises and no coordinates are returned.

    Args:
        encoded: Encoded polyline

    Returns:
        Coordinates in input order (empty if the input holds only a header)

    Raises:
        InvalidArgumentError: If encoded is empty or blank
        UnsupportedFormatVersionError: If the header version is not supported
        CorruptEncodingError: If the input contains a character outside the
            alphabet, ends inside a value, or ends inside a coordinate

    Examples:
        ```python
        from flexpoly import decode

        decode("BFgx_qH_x09Wg2tNvvyE")
        # [LatLngZ(lat=38.5, lng=-120.2, z=0.0), LatLngZ(lat=40.7, lng=-120.95, z=0.0)]
        ```
    """
    reader = VarintReader(check_encoded(encoded))
    header = decode_header(reader)
    polyline = _PolylineReader(reader, header)

    result: list[LatLngZ] = []
    while True:
        point = polyline.read_one()
        if point is None:
            return result
        result.append(point)
