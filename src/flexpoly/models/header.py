"""Polyline header model.

Every encoded polyline starts with a header recording the format version, the
decimal precision of latitude/longitude and the kind and precision of the
optional third dimension.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, ValidationError

from ..exceptions import InvalidArgumentError
from .fields import Precision
from .third_dimension import ThirdDimension


class PolylineHeader(BaseModel):
    """Header fields of an encoded polyline.

    The three fields are packed into a single integer as
    ``(third_dimension_precision << 7) | (third_dimension << 4) | precision``
    and written after the format version.

    Example:
        >>> header = PolylineHeader(precision=5)
        >>> header.packed
        5
        >>> PolylineHeader.unpack(header.packed) == header
        True
    """

    model_config = ConfigDict(
        # Reject bools and numeric strings for precisions
        strict=True,
        frozen=True,
        extra="forbid",
    )

    FORMAT_VERSION: ClassVar[int] = 1

    precision: int = Precision(default=5)
    third_dimension: ThirdDimension = ThirdDimension.ABSENT
    third_dimension_precision: int = Precision(default=0)

    @classmethod
    def create(
        cls,
        precision: Any = 5,
        third_dimension: Any = ThirdDimension.ABSENT,
        third_dimension_precision: Any = 0,
    ) -> PolylineHeader:
        """Build a validated header from caller-supplied encoding parameters.

        Raises:
            InvalidArgumentError: If a precision is outside 0-15 or the third
                dimension is not a known kind
        """
        kind = ThirdDimension.parse(third_dimension)
        try:
            return cls(
                precision=precision,
                third_dimension=kind,
                third_dimension_precision=third_dimension_precision,
            )
        except ValidationError as err:
            problems = "; ".join(
                f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}" for e in err.errors()
            )
            raise InvalidArgumentError(f"Invalid polyline header: {problems}") from err

    @property
    def has_third_dimension(self) -> bool:
        return self.third_dimension != ThirdDimension.ABSENT

    @property
    def packed(self) -> int:
        """Header fields combined into the integer written to the stream."""
        return (
            (self.third_dimension_precision << 7)
            | (self.third_dimension.code << 4)
            | self.precision
        )

    @classmethod
    def unpack(cls, value: int) -> PolylineHeader:
        """Split a packed header integer back into its fields.

        Raises:
            CorruptEncodingError: If the third dimension code is unknown
        """
        precision = value & 0x0F
        kind = ThirdDimension.from_code((value >> 4) & 0x07)
        third_dimension_precision = (value >> 7) & 0x0F
        return cls(
            precision=precision,
            third_dimension=kind,
            third_dimension_precision=third_dimension_precision,
        )
