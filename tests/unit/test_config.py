"""Unit tests for encoding presets."""

from __future__ import annotations

import dataclasses

import pytest

from flexpoly import EncodingOptions, InvalidArgumentError, ThirdDimension


class TestEncodingOptions:
    """Test EncodingOptions validation."""

    def test_defaults(self) -> None:
        """Test default values."""
        options = EncodingOptions()
        assert options.precision == 5
        assert options.third_dimension is ThirdDimension.ABSENT
        assert options.third_dimension_precision == 0

    def test_third_dimension_normalized(self) -> None:
        """Test names and codes are turned into ThirdDimension members."""
        assert EncodingOptions(third_dimension="Elevation").third_dimension is ThirdDimension.ELEVATION
        assert EncodingOptions(third_dimension=1).third_dimension is ThirdDimension.LEVEL

    @pytest.mark.parametrize("precision", [-1, 16, True, 5.0, "5"])
    def test_invalid_precision(self, precision: object) -> None:
        """Test precision outside 0-15 or not an integer."""
        with pytest.raises(InvalidArgumentError, match="precision must be 0-15"):
            EncodingOptions(precision=precision)  # type: ignore[arg-type]

    def test_invalid_third_dimension_precision(self) -> None:
        """Test third dimension precision outside 0-15."""
        with pytest.raises(InvalidArgumentError, match="third_dimension_precision"):
            EncodingOptions(third_dimension_precision=20)

    def test_invalid_third_dimension(self) -> None:
        """Test unknown third dimension kinds."""
        with pytest.raises(InvalidArgumentError):
            EncodingOptions(third_dimension="depth")

    def test_frozen(self) -> None:
        """Test presets cannot be modified after creation."""
        options = EncodingOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.precision = 7  # type: ignore[misc]
