"""Exception hierarchy for flexpoly.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from FlexpolyError for easy catching of any flexpoly-specific error.
"""

from __future__ import annotations

from typing import Optional


class FlexpolyError(Exception):
    """Base exception for all flexpoly errors."""

    pass


class InvalidArgumentError(FlexpolyError, ValueError):
    """Raised when a caller passes an argument the codec cannot work with.

    Always raised before any output is produced.

    Examples:
        - Empty coordinate list passed to encode()
        - Precision or third dimension precision outside 0-15
        - Unknown third dimension kind
        - Empty or blank string passed to decode()
    """

    pass


class DecodeError(FlexpolyError):
    """Raised when an encoded polyline cannot be decoded.

    Decoding is all-or-nothing: no partial coordinate list is ever returned.
    """

    pass


class UnsupportedFormatVersionError(DecodeError):
    """Raised when the header declares a format version other than the supported one."""

    def __init__(self, version: int, supported: int = 1) -> None:
        super().__init__(f"Unsupported format version {version} (supported: {supported})")
        self.version = version
        self.supported = supported


class CorruptEncodingError(DecodeError):
    """Raised when the encoded character stream is malformed.

    Examples:
        - Character outside the URL-safe alphabet
        - Input ends in the middle of a variable-length integer
        - Truncated coordinate (longitude or third dimension missing)
        - Unknown third dimension code in the header
    """

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)
        self.position = position
