"""Utility functions for flexpoly.

This module provides size and compression measurements for encoded polylines.
"""

from __future__ import annotations

from .sizing import compression_ratio, encoded_length, header_length, value_lengths

__all__ = [
    "compression_ratio",
    "encoded_length",
    "header_length",
    "value_lengths",
]
