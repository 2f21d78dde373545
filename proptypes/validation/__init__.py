"""Prop value validation utilities."""

from .lib import (
    get_native_type,
    get_type,
    is_integer,
    is_list,
    is_plain_dict,
    validate,
    validate_type,
)

__all__ = [
    "validate_type",
    "validate",
    "get_type",
    "get_native_type",
    "is_list",
    "is_plain_dict",
    "is_integer",
]
