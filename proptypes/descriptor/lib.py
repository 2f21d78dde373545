"""Prop type descriptors.

A descriptor (`PropType`) is the record a host component framework reads for
each declared prop: its native `type`, the `required` flag, an optional
`default` and an optional `validator`. This module provides the primitive
factory `to_type()` and the fluent modifiers every descriptor carries:

- ``prop.is_required`` marks the prop as required and returns the same object
- ``prop.with_default(value)`` sets a validated default value
- ``prop.validate(fn)`` attaches a custom validator (validatable types only)

Validators are bound to their owning descriptor: a raw validator function is
always called as ``fn(prop, value)`` so diagnostics can read ``prop.name``.

Example:
    >>> from proptypes.descriptor import to_type
    >>> adult = to_type("adult", {"type": int, "validator": lambda p, v: v >= 18})
    >>> adult.is_required.validator(21)
    True
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NamedTuple

from proptypes.core.log import warn

# Accepted keys for to_type() base fields
FIELDS = ("type", "required", "default", "validator")


# =============================================================================
# Sentinels and Errors
# =============================================================================


class _Missing:
    """Marker for an absent value (a prop that was not passed)."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class PropTypeError(TypeError):
    """Raised when a prop type is built or registered incorrectly.

    These are programmer errors: they abort the offending construction and
    are never raised while validating values.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"[proptypes error]: {message}")


# =============================================================================
# Validator Binding
# =============================================================================


class Verdict(NamedTuple):
    """Outcome of a validator call.

    Attributes:
        passed: Whether the value was accepted.
        messages: Diagnostics collected while checking, oldest first.
    """

    passed: bool
    messages: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return self.passed

    @classmethod
    def of(cls, result: Any) -> Verdict:
        """Normalize a validator return value into a Verdict."""
        if isinstance(result, Verdict):
            return result
        return cls(bool(result))

    @classmethod
    def fail(cls, *messages: str) -> Verdict:
        return cls(False, tuple(m for m in messages if m))


class BoundValidator:
    """A validator function bound to its owning descriptor.

    Calling the bound validator runs ``func(prop, *args, value)``. Extra
    ``args`` come from parameterized extension types.

    Attributes:
        func: The raw validator function.
        prop: The descriptor passed as first argument.
        args: Call-time arguments placed before the value.
    """

    __slots__ = ("func", "prop", "args")

    def __init__(self, func: Callable[..., Any], prop: PropType, *args: Any):
        self.func = func
        self.prop = prop
        self.args = args

    def check(self, value: Any) -> Verdict:
        """Run the validator without emitting diagnostics."""
        return Verdict.of(self.func(self.prop, *self.args, value))

    def __call__(self, value: Any) -> bool:
        verdict = self.check(value)
        for message in verdict.messages:
            warn(message)
        return verdict.passed

    def __repr__(self) -> str:
        name = getattr(self.func, "__name__", repr(self.func))
        return f"<BoundValidator {name} of {self.prop.name!r}>"


def run_validator(validator: Callable[[Any], Any], value: Any) -> Verdict:
    """Invoke any validator and collect its diagnostics.

    Bound validators report their messages through the Verdict; plain
    callables (e.g. assigned by a host framework) only report pass/fail.
    """
    if isinstance(validator, BoundValidator):
        return validator.check(value)
    return Verdict.of(validator(value))


# =============================================================================
# Descriptor
# =============================================================================


def _copying_factory(value: list | dict) -> Callable[[], list | dict]:
    def factory():
        return value.copy()

    return factory


class PropType:
    """Descriptor for a single component prop.

    Attributes:
        type: Native type constraint (None for unconstrained, a class, or a
            list of classes for a union).
        required: Whether the prop must be passed.
        default: Default value or zero-argument factory, MISSING if unset.
        validator: Callable ``(value) -> bool`` or None.
    """

    def __init__(
        self,
        name: str,
        type: Any = None,
        required: bool = False,
        default: Any = MISSING,
        validator: Callable[..., Any] | None = None,
        validatable: bool = False,
    ):
        self._name = name
        self._validatable = validatable
        self.type = type
        self.required = required
        if isinstance(default, (list, dict)):
            default = _copying_factory(default)
        self.default = default
        if callable(validator) and not isinstance(validator, BoundValidator):
            validator = BoundValidator(validator, self)
        self.validator = validator

    @property
    def name(self) -> str:
        return self._name

    @property
    def validatable(self) -> bool:
        return self._validatable

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    @property
    def is_required(self) -> PropType:
        """Mark the prop as required. Returns the same descriptor."""
        self.required = True
        return self

    def with_default(self, value: Any = MISSING) -> PropType:
        """Set the default value.

        Callables are stored verbatim as default factories. Other values
        must validate against this descriptor, otherwise a diagnostic is
        emitted and the default is left untouched. Lists and dicts are
        stored as factories returning a fresh shallow copy.

        Args:
            value: Default value or factory. MISSING clears the default.

        Returns:
            This descriptor.
        """
        if value is MISSING:
            self.default = MISSING
            return self

        if not callable(value):
            from proptypes.validation import validate_type

            if validate_type(self, value) is not True:
                warn(f'{self.name} - invalid default value: "{value}"')
                return self

        if isinstance(value, (list, dict)):
            self.default = _copying_factory(value)
        else:
            self.default = value
        return self

    def validate(self, func: Callable[..., Any]) -> PropType:
        """Attach a custom validator called as ``func(prop, value)``.

        Only supported on validatable descriptors. On others a diagnostic is
        emitted and the descriptor is returned unchanged.
        """
        if not self._validatable:
            warn(f'{self.name} - "validate" method not supported on this type')
            return self
        self.validator = BoundValidator(func, self)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Host-facing record of the descriptor.

        Returns:
            Dict with ``type`` and ``required``, plus ``default`` and
            ``validator`` when set.
        """
        record: dict[str, Any] = {"type": self.type, "required": self.required}
        if self.default is not MISSING:
            record["default"] = self.default
        if self.validator is not None:
            record["validator"] = self.validator
        return record

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} {self.to_dict()!r}>"


def to_type(
    name: str,
    base_fields: dict[str, Any] | None = None,
    validatable: bool = False,
) -> PropType:
    """Build a descriptor from a mapping of base fields.

    Args:
        name: Type name used in diagnostics.
        base_fields: Any of ``type``, ``required``, ``default``, ``validator``.
            The mapping is copied, never mutated.
        validatable: Whether the descriptor supports ``validate()``.

    Returns:
        A new PropType.

    Raises:
        PropTypeError: If base_fields contains unknown keys.
    """
    fields = dict(base_fields or {})
    unknown = sorted(set(fields) - set(FIELDS))
    if unknown:
        raise PropTypeError(
            f'Unknown prop type field(s) "{", ".join(unknown)}" for type "{name}"'
        )
    return PropType(name, validatable=validatable, **fields)


__all__ = [
    "MISSING",
    "PropTypeError",
    "Verdict",
    "BoundValidator",
    "run_validator",
    "PropType",
    "to_type",
]
