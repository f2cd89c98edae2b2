#!/usr/bin/env python3
"""Elevation profile example for flexpoly.

Encodes a hiking track with elevations, shows how precision affects size and
accuracy, and branches on the third dimension before decoding.
"""

from __future__ import annotations

import math

from flexpoly import (
    DecodeError,
    EncodingOptions,
    LatLngZ,
    ThirdDimension,
    decode,
    encode,
    peek_third_dimension,
)


def make_track(count: int = 120) -> list[LatLngZ]:
    """Build a synthetic climb with a point roughly every 15 m."""
    track = []
    for i in range(count):
        lat = 46.5475 + 0.00012 * i
        lng = 7.9853 + 0.00008 * i + 0.0002 * math.sin(i / 10.0)
        elevation = 1950.0 + 2.4 * i + 6.0 * math.sin(i / 7.0)
        track.append(LatLngZ(lat, lng, elevation))
    return track


def describe(encoded: str) -> None:
    """Print a track summary, branching on whether elevations are present."""
    kind = peek_third_dimension(encoded)
    points = decode(encoded)
    if kind is ThirdDimension.ELEVATION:
        climb = points[-1].z - points[0].z
        print(f"   {len(points)} points, climb {climb:.1f} m")
    else:
        print(f"   {len(points)} points, no elevation data ({kind.name})")


def main() -> None:
    """Run the elevation profile example."""
    print("=" * 60)
    print("flexpoly Elevation Profile Example")
    print("=" * 60)
    print()

    track = make_track()

    print("1. Precision versus size...")
    for precision in (4, 5, 6, 7):
        options = EncodingOptions(
            precision=precision,
            third_dimension=ThirdDimension.ELEVATION,
            third_dimension_precision=1,
        )
        encoded = encode(track, options=options)
        worst = max(
            max(abs(a.lat - b.lat), abs(a.lng - b.lng)) for a, b in zip(track, decode(encoded))
        )
        print(f"   precision {precision}: {len(encoded):5d} chars, max error {worst:.1e} deg")
    print()

    print("2. Branching on the third dimension...")
    describe(encode(track, 6, ThirdDimension.ELEVATION, 1))
    describe(encode(track, 6))
    print()

    print("3. Rejecting a damaged polyline...")
    damaged = encode(track, 6, ThirdDimension.ELEVATION, 1)[:-1]
    try:
        decode(damaged)
    except DecodeError as e:
        print(f"   {type(e).__name__}: {e}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
