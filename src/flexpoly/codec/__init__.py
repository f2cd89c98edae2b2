"""Polyline codec for flexpoly.

This module provides encoding and decoding of coordinate sequences to and from
compact URL-safe strings.
"""

from __future__ import annotations

from .decoder import decode
from .encoder import encode
from .header import FORMAT_VERSION, peek_header, peek_third_dimension

__all__ = [
    "encode",
    "decode",
    "peek_header",
    "peek_third_dimension",
    "FORMAT_VERSION",
]
