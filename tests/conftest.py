"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from flexpoly import LatLngZ


@pytest.fixture
def reference_coordinates() -> list[tuple[float, float]]:
    """Published example route for the flexible polyline format (precision 5)."""
    return [
        (50.1022829, 8.6982122),
        (50.1020076, 8.6956695),
        (50.1006313, 8.6914960),
        (50.0987800, 8.6875156),
    ]


@pytest.fixture
def reference_polyline() -> str:
    """Encoding of reference_coordinates at precision 5 without a third dimension."""
    return "BFoz5xJ67i1B1B7PzIhaxL7Y"


@pytest.fixture
def altitude_track() -> list[LatLngZ]:
    """Short track with altitudes in metres."""
    return [
        LatLngZ(50.1022829, 8.6982122, 112.5),
        LatLngZ(50.1020076, 8.6956695, 113.0),
        LatLngZ(50.1006313, 8.6914960, 110.2),
        LatLngZ(50.0987800, 8.6875156, -4.7),
    ]
