"""Field type helpers for header models."""

from __future__ import annotations

from typing import Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

# Precisions are packed into 4 header bits
MAX_PRECISION = 15


def Precision(**kwargs: Any) -> FieldInfo:
    """Create a decimal precision field bounded to what the header can hold.

    This is a convenience wrapper around Pydantic's Field() with ge=0 and
    le=MAX_PRECISION.

    Args:
        **kwargs: Additional Field() arguments (description, default, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class Options(BaseModel):
        ...     precision: int = Precision(default=5)
    """
    return cast(FieldInfo, Field(ge=0, le=MAX_PRECISION, **kwargs))
