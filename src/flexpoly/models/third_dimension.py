"""Third dimension kinds carried alongside latitude/longitude."""

from __future__ import annotations

import enum
from typing import Union

from ..exceptions import CorruptEncodingError, InvalidArgumentError


class ThirdDimension(enum.IntEnum):
    """Meaning of the optional third value of each coordinate.

    The integer value of each member is its 3-bit code in the polyline header.
    ABSENT means only latitude and longitude are encoded.
    """

    ABSENT = 0
    LEVEL = 1
    ALTITUDE = 2
    ELEVATION = 3
    RESERVED1 = 4
    RESERVED2 = 5
    CUSTOM1 = 6
    CUSTOM2 = 7

    @property
    def code(self) -> int:
        return int(self)

    @classmethod
    def from_code(cls, code: int) -> ThirdDimension:
        """Map a header code back to its kind.

        Raises:
            CorruptEncodingError: If the code does not name a kind
        """
        try:
            return cls(code)
        except ValueError as err:
            raise CorruptEncodingError(f"Unknown third dimension code {code}") from err

    @classmethod
    def parse(cls, value: Union[ThirdDimension, int, str]) -> ThirdDimension:
        """Accept a member, an integer code or a case-insensitive member name.

        Raises:
            InvalidArgumentError: If the value does not name a kind
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidArgumentError(f"Invalid third dimension: {value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError as err:
                raise InvalidArgumentError(f"Invalid third dimension code: {value}") from err
        if isinstance(value, str):
            name = value.strip().upper()
            if name.isdigit():
                return cls.parse(int(name))
            try:
                return cls[name]
            except KeyError as err:
                raise InvalidArgumentError(f"Invalid third dimension: {value!r}") from err
        raise InvalidArgumentError(f"Invalid third dimension: {value!r}")
