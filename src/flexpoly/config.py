"""Encoding presets.

This module provides a small configuration dataclass so an application can
keep one set of encoding parameters and reuse it across encode() calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .exceptions import InvalidArgumentError
from .models.fields import MAX_PRECISION
from .models.third_dimension import ThirdDimension


@dataclass(frozen=True)
class EncodingOptions:
    """Parameters controlling how coordinates are encoded.

    Attributes:
        precision: Decimal digits kept for latitude and longitude (default 5).
            Typical values:
            - 5: about 1 m resolution, the usual web map choice
            - 6: about 10 cm resolution
            - 7 and above: survey grade data

        third_dimension: Meaning of the third value of each coordinate
            (default ABSENT, which encodes latitude/longitude only). Accepts a
            ThirdDimension, its integer code or its name.

        third_dimension_precision: Decimal digits kept for the third value
            (default 0). Ignored when third_dimension is ABSENT.

    Examples:
        ```python
        from flexpoly import EncodingOptions, ThirdDimension, encode

        # Route with altitude in centimetres
        options = EncodingOptions(
            precision=6,
            third_dimension=ThirdDimension.ALTITUDE,
            third_dimension_precision=2,
        )
        encoded = encode(points, options=options)
        ```
    """

    precision: int = 5
    third_dimension: Union[ThirdDimension, int, str] = ThirdDimension.ABSENT
    third_dimension_precision: int = 0

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        object.__setattr__(self, "third_dimension", ThirdDimension.parse(self.third_dimension))

        if not _is_precision(self.precision):
            raise InvalidArgumentError(
                f"precision must be 0-{MAX_PRECISION}, got {self.precision!r}"
            )

        if not _is_precision(self.third_dimension_precision):
            raise InvalidArgumentError(
                f"third_dimension_precision must be 0-{MAX_PRECISION}, "
                f"got {self.third_dimension_precision!r}"
            )


def _is_precision(value: object) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 <= value <= MAX_PRECISION
    )
