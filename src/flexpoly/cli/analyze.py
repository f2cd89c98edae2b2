"""Polyline analysis CLI command."""

from __future__ import annotations

from ..codec.decoder import decode
from ..codec.header import FORMAT_VERSION, peek_header
from ..utils.sizing import compression_ratio, header_length, value_lengths


def analyze_polyline(encoded: str) -> None:
    """Print a breakdown of an encoded polyline.

    Args:
        encoded: Encoded polyline to analyze

    Raises:
        FlexpolyError: If the polyline cannot be decoded
    """
    header = peek_header(encoded)
    points = decode(encoded)
    lengths = value_lengths(encoded)
    head_chars = header_length(encoded)

    values_per_point = 3 if header.has_third_dimension else 2

    print("|" * 7, "flexpoly: Flexible Polyline Codec", "|" * 7)
    print(f"{len(points)} coordinate{'s' if len(points) != 1 else ''} decoded.")
    print("Sizes are in characters unless otherwise noted.")
    print()

    print(f"{'-' * 27} Header {'-' * 27}")
    print(f"format version{'.' * 40}{FORMAT_VERSION}")
    print(f"precision{'.' * 45}{header.precision}")
    print(f"third dimension{'.' * 39}{header.third_dimension.name}")
    if header.has_third_dimension:
        print(f"third dimension precision{'.' * 29}{header.third_dimension_precision}")
    print(f"header size{'.' * 43}{head_chars}")
    print()

    print(f"{'-' * 28} Body {'-' * 28}")
    print(f"values{'.' * 48}{len(lengths)} ({values_per_point} per coordinate)")
    print(f"body size{'.' * 45}{sum(lengths)}")
    if lengths:
        print(f"widest value{'.' * 42}{max(lengths)}")
        average = sum(lengths) / len(points)
        print(f"average per coordinate{'.' * 32}{average:.1f}")
    print()

    print(f"{'=' * 24} Summary {'=' * 24}")
    print(f"Total size: {len(encoded)} characters / {len(encoded) * 6} bits")
    print(f"Compression vs JSON: {compression_ratio(encoded):.1f}x smaller")
    print()
