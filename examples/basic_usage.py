#!/usr/bin/env python3
"""Basic usage example for flexpoly.

This example demonstrates:
1. Encoding a route to a polyline string
2. Inspecting the header without decoding
3. Decoding back to coordinates
4. Comparing sizes with JSON
"""

from __future__ import annotations

import json

from flexpoly import ThirdDimension, decode, encode, peek_header, value_lengths


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("flexpoly Basic Usage Example")
    print("=" * 60)
    print()

    route = [
        (50.1022829, 8.6982122),
        (50.1020076, 8.6956695),
        (50.1006313, 8.6914960),
        (50.0987800, 8.6875156),
    ]

    # Encode the route
    print("1. Encoding a 4-point route at precision 5...")
    encoded = encode(route, precision=5, third_dimension=ThirdDimension.ABSENT)
    print(f"   Polyline: {encoded}")
    print(f"   Length: {len(encoded)} characters")
    print()

    # Read the header only
    print("2. Reading the header...")
    header = peek_header(encoded)
    print(f"   Precision: {header.precision}")
    print(f"   Third dimension: {header.third_dimension.name}")
    print(f"   Value widths: {value_lengths(encoded)}")
    print()

    # Decode the polyline
    print("3. Decoding...")
    decoded = decode(encoded)
    for point in decoded:
        print(f"   lat={point.lat:.5f}  lng={point.lng:.5f}")
    print()

    # Compare to naive encoding
    print("4. Comparing to naive JSON encoding...")
    json_str = json.dumps(route)
    print(f"   flexpoly size: {len(encoded)} characters")
    print(f"   JSON size: {len(json_str)} characters")
    print(f"   Compression ratio: {len(json_str) / len(encoded):.1f}x")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
