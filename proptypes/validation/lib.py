"""Prop value validation engine.

Checks a value against a prop type descriptor in two stages:

1. Native type check against ``prop.type`` (skipped when the type is None)
2. Custom validator check against ``prop.validator`` (when present)

`validate_type()` has two reporting modes. Loud mode emits diagnostics and
returns a boolean. Silent mode returns ``True`` or the failure message, which
lets composite types embed nested failures in their own diagnostics.

Native type rules:
    - ``list`` and ``dict`` are structural checks (isinstance)
    - ``str``, ``int``, ``float`` and ``bool`` compare the exact type name,
      so ``True`` is not an ``int`` and ``str`` subclasses are not ``str``
    - ``collections.abc.Callable`` accepts any callable
    - any other class is an isinstance check
    - a list of types passes when any member passes
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from typing import Any, NamedTuple

from proptypes.core.log import warn
from proptypes.descriptor import MISSING, PropType, run_validator

# Types compared by the name of the value's own class
NAMED_TYPES = (str, int, float, bool)


class _Target(NamedTuple):
    """Normalized view of whatever was passed as a prop type."""

    name: str
    type: Any
    required: bool
    validator: Any


# =============================================================================
# Type Helpers
# =============================================================================


def get_type(spec: Any) -> str | None:
    """Display name of a type, or of a prop type's native type.

    Args:
        spec: A class, a list of classes, a PropType or a mapping descriptor.

    Returns:
        The type name, union members joined with " or ", or None when
        the type is unconstrained.
    """
    if isinstance(spec, PropType):
        spec = spec.type
    elif isinstance(spec, Mapping):
        spec = spec.get("type")
    if spec is None:
        return None
    if isinstance(spec, list):
        return " or ".join(str(get_type(t)) for t in spec)
    return getattr(spec, "__name__", None) or repr(spec)


def get_native_type(value: Any) -> str | None:
    """Name of the value's own class, None for None and MISSING."""
    if value is None or value is MISSING:
        return None
    return type(value).__name__


def is_list(value: Any) -> bool:
    return isinstance(value, list)


def is_plain_dict(value: Any) -> bool:
    return isinstance(value, dict)


def is_integer(value: Any) -> bool:
    """Check for an integral number (finite integral floats included)."""
    if type(value) is int:
        return True
    return type(value) is float and math.isfinite(value) and value.is_integer()


def _resolve(prop: Any) -> _Target:
    if isinstance(prop, PropType):
        return _Target(prop.name, prop.type, prop.required, prop.validator)
    if isinstance(prop, Mapping):
        return _Target(
            "",
            prop.get("type"),
            bool(prop.get("required", False)),
            prop.get("validator"),
        )
    return _Target("", prop, False, None)


def _matches(expected: Any, value: Any) -> bool:
    if expected is list:
        return is_list(value)
    if expected is dict:
        return is_plain_dict(value)
    if any(expected is named for named in NAMED_TYPES):
        return get_native_type(value) == expected.__name__
    if expected is Callable:
        return callable(value)
    if isinstance(expected, type):
        return isinstance(value, expected)
    return False


# =============================================================================
# Main Interface
# =============================================================================


def validate_type(prop: Any, value: Any, silent: bool = False) -> bool | str:
    """Validate a value against a prop type.

    Args:
        prop: A PropType, a mapping with ``type``/``required``/``validator``
            keys, or a bare type (class, list of classes or None).
        value: Value to check. MISSING stands for a prop that was not passed.
        silent: Return failure messages instead of emitting them.

    Returns:
        True when the value passes. On failure, False in loud mode or the
        failure message (possibly empty) in silent mode.
    """
    target = _resolve(prop)
    prefix = f"{target.name} - " if target.name else ""

    if not target.required and value is MISSING:
        return True

    if target.type is not None:
        if isinstance(target.type, list):
            # members are checked as optional props
            valid = value is not MISSING and any(
                validate_type(member, value, silent=True) is True
                for member in target.type
            )
        else:
            valid = _matches(target.type, value)

        if not valid:
            message = (
                f'{prefix}value "{value}" should be of type '
                f'"{get_type(target.type)}"'
            )
            if silent:
                return message
            warn(message)
            return False

    if callable(target.validator):
        verdict = run_validator(target.validator, value)
        if not verdict.passed:
            message = "* " + "\n * ".join(verdict.messages) if verdict.messages else ""
            if silent:
                return message
            if message:
                warn(message)
            return False

    return True


def validate(value: Any, prop: Any) -> bool:
    """Check a value against a prop type without emitting diagnostics.

    Example:
        >>> validate("hello", prop_types.string)
        True
    """
    return validate_type(prop, value, silent=True) is True


__all__ = [
    "NAMED_TYPES",
    "get_type",
    "get_native_type",
    "is_list",
    "is_plain_dict",
    "is_integer",
    "validate_type",
    "validate",
]
