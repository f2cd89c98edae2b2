"""Value types for flexpoly.

This module provides the coordinate triple, the third dimension kinds and the
validated polyline header.
"""

from __future__ import annotations

from .coordinates import LatLngZ
from .fields import MAX_PRECISION, Precision
from .header import PolylineHeader
from .third_dimension import ThirdDimension

__all__ = [
    "LatLngZ",
    "MAX_PRECISION",
    "Precision",
    "PolylineHeader",
    "ThirdDimension",
]
