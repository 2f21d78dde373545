"""Composite prop type builders."""

from .lib import (
    ShapePropType,
    array_of,
    custom,
    instance_of,
    object_of,
    one_of,
    one_of_type,
    shape,
)

__all__ = [
    "ShapePropType",
    "custom",
    "one_of",
    "instance_of",
    "array_of",
    "object_of",
    "shape",
    "one_of_type",
]
