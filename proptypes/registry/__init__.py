"""Prop types namespace and extension registry.

Example usage:
    >>> from proptypes.registry import prop_types
    >>> prop_types.extend({"name": "adult", "type": int, "getter": True,
    ...                    "validator": lambda prop, v: v >= 18})
    >>> prop_types.adult.validator(21)
    True
"""

from .lib import (
    SENSIBLE_DEFAULTS,
    Extension,
    ExtensionSpec,
    PropTypes,
    noop,
    prop_types,
)

__all__ = [
    "SENSIBLE_DEFAULTS",
    "Extension",
    "ExtensionSpec",
    "PropTypes",
    "prop_types",
    "noop",
]
