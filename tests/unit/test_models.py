"""Unit tests for value types."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from flexpoly import LatLngZ, PolylineHeader, ThirdDimension
from flexpoly.exceptions import CorruptEncodingError, InvalidArgumentError


class TestLatLngZ:
    """Test the coordinate triple."""

    def test_defaults_z(self) -> None:
        """Test z defaults to zero."""
        point = LatLngZ(38.5, -120.2)
        assert point.z == 0.0

    def test_equality(self) -> None:
        """Test exact field equality and hashing."""
        assert LatLngZ(1.0, 2.0, 3.0) == LatLngZ(1.0, 2.0, 3.0)
        assert LatLngZ(1.0, 2.0, 3.0) != LatLngZ(1.0, 2.0, 3.0000001)
        assert len({LatLngZ(1.0, 2.0), LatLngZ(1.0, 2.0, 0.0)}) == 1

    def test_immutable(self) -> None:
        """Test fields cannot be reassigned."""
        point = LatLngZ(1.0, 2.0)
        with pytest.raises(Exception):
            point.lat = 5.0  # type: ignore[misc]

    def test_unpacks_like_tuple(self) -> None:
        """Test iteration yields lat, lng, z."""
        lat, lng, z = LatLngZ(1.0, 2.0, 3.0)
        assert (lat, lng, z) == (1.0, 2.0, 3.0)

    def test_repr(self) -> None:
        """Test the readable representation."""
        assert repr(LatLngZ(38.5, -120.2)) == "LatLngZ(lat=38.5, lng=-120.2, z=0.0)"

    def test_int_coerced_to_float(self) -> None:
        """Test integers are accepted as coordinates."""
        point = LatLngZ(38, -120)
        assert point.lat == 38.0
        assert isinstance(point.lat, float)

    def test_invalid_value(self) -> None:
        """Test non-numeric values are rejected."""
        with pytest.raises(ValidationError):
            LatLngZ("north", 2.0)  # type: ignore[arg-type]

    @pytest.mark.parametrize("args", [("38.5", 2.0), (1.0, "2"), (1.0, 2.0, "3"), (True, 2.0)])
    def test_strict_types(self, args: tuple) -> None:
        """Test strings and booleans are not converted to coordinates."""
        with pytest.raises(ValidationError):
            LatLngZ(*args)


class TestCoerce:
    """Test building coordinates from plain sequences."""

    def test_numeric_strings_rejected(self) -> None:
        """Test a sequence of numeric strings is not read as a coordinate."""
        with pytest.raises(InvalidArgumentError):
            LatLngZ.coerce(["38.5", "1"])

    def test_from_pair(self) -> None:
        """Test a (lat, lng) tuple."""
        assert LatLngZ.coerce((1.0, 2.0)) == LatLngZ(1.0, 2.0, 0.0)

    def test_from_triple_list(self) -> None:
        """Test a [lat, lng, z] list."""
        assert LatLngZ.coerce([1.0, 2.0, 3.0]) == LatLngZ(1.0, 2.0, 3.0)

    def test_instance_passthrough(self) -> None:
        """Test instances are returned unchanged."""
        point = LatLngZ(1.0, 2.0)
        assert LatLngZ.coerce(point) is point

    @pytest.mark.parametrize("value", [None, (1.0,), (1.0, 2.0, 3.0, 4.0), "12", 5, ("a", "b")])
    def test_invalid(self, value: object) -> None:
        """Test values that are not coordinates."""
        with pytest.raises(InvalidArgumentError, match="Invalid LatLngZ tuple"):
            LatLngZ.coerce(value)


class TestThirdDimension:
    """Test the third dimension enum."""

    def test_codes(self) -> None:
        """Test the fixed kind/code bijection."""
        assert [(kind.name, kind.code) for kind in ThirdDimension] == [
            ("ABSENT", 0),
            ("LEVEL", 1),
            ("ALTITUDE", 2),
            ("ELEVATION", 3),
            ("RESERVED1", 4),
            ("RESERVED2", 5),
            ("CUSTOM1", 6),
            ("CUSTOM2", 7),
        ]

    def test_from_code(self) -> None:
        """Test every code maps back to its kind."""
        for kind in ThirdDimension:
            assert ThirdDimension.from_code(kind.code) is kind

    def test_from_unknown_code(self) -> None:
        """Test unmapped codes are a decode error."""
        with pytest.raises(CorruptEncodingError, match="Unknown third dimension code 8"):
            ThirdDimension.from_code(8)

    @pytest.mark.parametrize(
        "value, expected",
        [
            (ThirdDimension.LEVEL, ThirdDimension.LEVEL),
            (3, ThirdDimension.ELEVATION),
            ("altitude", ThirdDimension.ALTITUDE),
            (" Custom1 ", ThirdDimension.CUSTOM1),
            ("7", ThirdDimension.CUSTOM2),
        ],
    )
    def test_parse(self, value: object, expected: ThirdDimension) -> None:
        """Test accepted spellings."""
        assert ThirdDimension.parse(value) is expected  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [8, -1, "height", None, True, 2.0])
    def test_parse_invalid(self, value: object) -> None:
        """Test rejected spellings."""
        with pytest.raises(InvalidArgumentError):
            ThirdDimension.parse(value)  # type: ignore[arg-type]


class TestPolylineHeader:
    """Test the header model."""

    def test_defaults(self) -> None:
        """Test default field values."""
        header = PolylineHeader()
        assert header.precision == 5
        assert header.third_dimension == ThirdDimension.ABSENT
        assert header.third_dimension_precision == 0
        assert header.packed == 5

    def test_unpack_inverts_packed(self) -> None:
        """Test packing and unpacking every kind."""
        for kind in ThirdDimension:
            header = PolylineHeader(precision=9, third_dimension=kind, third_dimension_precision=4)
            assert PolylineHeader.unpack(header.packed) == header

    def test_unpack_fields(self) -> None:
        """Test the bit positions of each field."""
        header = PolylineHeader.unpack(295)
        assert header.precision == 7
        assert header.third_dimension == ThirdDimension.ALTITUDE
        assert header.third_dimension_precision == 2
        assert header.has_third_dimension

    def test_constraints(self) -> None:
        """Test pydantic enforces the 4-bit precision range."""
        with pytest.raises(ValidationError):
            PolylineHeader(precision=16)
        with pytest.raises(ValidationError):
            PolylineHeader(third_dimension_precision=-1)

    def test_create_translates_errors(self) -> None:
        """Test create() raises the package error type."""
        with pytest.raises(InvalidArgumentError, match="precision"):
            PolylineHeader.create(precision=99)

    def test_frozen(self) -> None:
        """Test headers are immutable."""
        header = PolylineHeader()
        with pytest.raises(ValidationError):
            header.precision = 6  # type: ignore[misc]
