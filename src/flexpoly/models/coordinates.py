"""Coordinate triple value type."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from pydantic import ConfigDict, ValidationError
from pydantic.dataclasses import dataclass

from ..exceptions import InvalidArgumentError


# Strict so numeric strings are rejected; ints are still accepted as floats
@dataclass(frozen=True, config=ConfigDict(strict=True))
class LatLngZ:
    """A latitude/longitude pair with an optional third dimension value.

    The third value defaults to 0 when no third dimension is in use. Values are
    treated as opaque doubles; no spatial reference system is implied.

    Example:
        >>> point = LatLngZ(38.5, -120.2)
        >>> lat, lng, z = point
        >>> z
        0.0
    """

    lat: float
    lng: float
    z: float = 0.0

    def __post_init__(self) -> None:
        for name in ("lat", "lng", "z"):
            object.__setattr__(self, name, float(getattr(self, name)))

    def __iter__(self) -> Iterator[float]:
        return iter((self.lat, self.lng, self.z))

    @classmethod
    def coerce(cls, value: Any) -> LatLngZ:
        """Build a LatLngZ from an instance or a ``(lat, lng[, z])`` sequence.

        Raises:
            InvalidArgumentError: If the value cannot be read as a coordinate
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            if len(value) not in (2, 3):
                raise InvalidArgumentError(
                    f"Invalid LatLngZ tuple: expected 2 or 3 values, got {len(value)}"
                )
            try:
                return cls(*value)
            except ValidationError as err:
                raise InvalidArgumentError(f"Invalid LatLngZ tuple: {value!r}") from err
        raise InvalidArgumentError(f"Invalid LatLngZ tuple: {value!r}")
