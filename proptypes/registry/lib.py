"""Prop types namespace and extension registry.

`PropTypes` is the public namespace host components draw their prop
definitions from. It exposes:

- Primitive accessors (`any`, `func`, `bool`, `string`, `number`, `array`,
  `object`, `integer`, `symbol`), each building a fresh descriptor per read
- The composite builders (`custom`, `one_of`, `instance_of`, `array_of`,
  `object_of`, `shape`, `one_of_type`)
- `extend()`, to register new named types, optionally derived from an
  existing descriptor
- `sensible_defaults`, selecting which primitives carry a built-in default

Example:
    >>> from proptypes import prop_types
    >>> props = {
    ...     "name": prop_types.string.is_required,
    ...     "tags": prop_types.array_of(str).with_default(["new"]),
    ... }
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import SimpleNamespace
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from proptypes import builders
from proptypes.config import EnvVar, get_environment
from proptypes.core.log import get_logger
from proptypes.descriptor import (
    MISSING,
    BoundValidator,
    PropType,
    PropTypeError,
    Verdict,
    run_validator,
    to_type,
)
from proptypes.validation import is_integer, validate

logger = get_logger(__name__)

# Descriptor fields an extension may set
OPTION_KEYS = ("type", "required", "default", "validator")


def noop(*args: Any, **kwargs: Any) -> None:
    """Default value for function props."""


SENSIBLE_DEFAULTS: dict[str, Any] = {
    "func": noop,
    "bool": True,
    "string": "",
    "number": 0,
    "array": list,
    "object": dict,
    "integer": 0,
}


# =============================================================================
# Extension Specs
# =============================================================================


class ExtensionSpec(BaseModel):
    """Definition of a named type added through `PropTypes.extend()`.

    Attributes:
        name: Attribute name of the new type on the namespace.
        type: Native type, or a descriptor to inherit from.
        getter: Expose as a property (True) or as a factory function (False).
        validatable: Whether the built descriptors support ``validate()``.
            Accepted as ``validate`` in mappings.
        validator: Validator called as ``validator(prop, *args, value)``.
        required: Initial required flag.
        default: Initial default value.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        extra="forbid",
        populate_by_name=True,
    )

    name: str = Field(min_length=1)
    type: Any = None
    getter: bool = False
    validatable: bool = Field(default=False, alias="validate")
    validator: Optional[Callable[..., Any]] = None
    required: bool = False
    default: Any = None

    def options(self) -> dict[str, Any]:
        """Descriptor fields that were explicitly provided."""
        provided = self.model_fields_set
        return {key: getattr(self, key) for key in OPTION_KEYS if key in provided}


def _parse_spec(spec: ExtensionSpec | Mapping[str, Any]) -> ExtensionSpec:
    if isinstance(spec, ExtensionSpec):
        return spec
    if not isinstance(spec, Mapping):
        raise PropTypeError("Extension spec must be a mapping or an ExtensionSpec")
    try:
        return ExtensionSpec.model_validate(dict(spec))
    except ValidationError as exc:
        raise PropTypeError(f"Invalid extension spec: {exc}") from exc


def _chain_validators(
    parent: PropType,
    child: Callable[..., Any] | None,
) -> Callable[..., Verdict]:
    """Validator requiring both the parent's and the child's validator to pass."""

    def validator(prop: PropType, *args: Any) -> Verdict:
        verdict = run_validator(parent.validator, args[-1])
        if not verdict.passed or child is None:
            return verdict
        return Verdict.of(child(prop, *args))

    return validator


@dataclass(frozen=True)
class Extension:
    """A registered extension type.

    Attributes:
        name: Attribute name on the namespace.
        factory: Builds a fresh descriptor.
        getter: Call the factory on attribute access.
    """

    name: str
    factory: Callable[..., PropType]
    getter: bool


# =============================================================================
# Built-in Validators
# =============================================================================


def _integer(prop: PropType, value: Any) -> Verdict:
    if is_integer(value):
        return Verdict(True)
    return Verdict.fail(f'{prop.name} - "{value}" is not an integer')


def _symbol(prop: PropType, value: Any) -> Verdict:
    if isinstance(value, Enum):
        return Verdict(True)
    return Verdict.fail(f'{prop.name} - "{value}" is not an enum member')


# =============================================================================
# Namespace
# =============================================================================


class PropTypes:
    """Namespace of named prop types.

    Every attribute read of a named type builds a new descriptor, so
    modifiers like ``is_required`` never leak between props.

    Subclasses may add their own types as properties returning `to_type()`
    descriptors.
    """

    custom = staticmethod(builders.custom)
    one_of = staticmethod(builders.one_of)
    instance_of = staticmethod(builders.instance_of)
    array_of = staticmethod(builders.array_of)
    object_of = staticmethod(builders.object_of)
    shape = staticmethod(builders.shape)
    one_of_type = staticmethod(builders.one_of_type)

    def __init__(self, sensible_defaults: bool | Mapping[str, Any] | None = None):
        self._extensions: dict[str, Extension] = {}
        self._sensible_defaults: dict[str, Any] = {}
        if sensible_defaults is None:
            sensible_defaults = get_environment(EnvVar.PROPTYPES_SENSIBLE_DEFAULTS)
        self.sensible_defaults = sensible_defaults
        self.utils = SimpleNamespace(validate=validate, to_type=to_type)

    def __getattr__(self, name: str) -> Any:
        extensions = self.__dict__.get("_extensions", {})
        if name in extensions:
            extension = extensions[name]
            return extension.factory() if extension.getter else extension.factory
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute {name!r}"
        )

    # -------------------------------------------------------------------------
    # Sensible Defaults
    # -------------------------------------------------------------------------

    @property
    def sensible_defaults(self) -> dict[str, Any]:
        """Defaults given to primitive types, keyed by accessor name."""
        return dict(self._sensible_defaults)

    @sensible_defaults.setter
    def sensible_defaults(self, value: bool | Mapping[str, Any]) -> None:
        if value is True:
            self._sensible_defaults = dict(SENSIBLE_DEFAULTS)
        elif value is False:
            self._sensible_defaults = {}
        elif isinstance(value, Mapping):
            self._sensible_defaults = dict(value)
        else:
            raise PropTypeError("sensible_defaults must be True, False or a mapping")

    def _default(self, name: str) -> Any:
        return self._sensible_defaults.get(name, MISSING)

    # -------------------------------------------------------------------------
    # Extension
    # -------------------------------------------------------------------------

    def is_defined(self, name: str) -> bool:
        """Check whether a name is taken by a built-in or extension type."""
        return (
            name in self._extensions
            or name in self.__dict__
            or hasattr(type(self), name)
        )

    def extend(
        self,
        spec: ExtensionSpec | Mapping[str, Any] | list[Any] | tuple[Any, ...],
    ) -> PropTypes:
        """Register one or more named types.

        When ``type`` is an existing descriptor the new type inherits its
        type, required flag and default, and its validator is chained so
        the parent's validator must pass before the new one runs.

        Args:
            spec: Extension spec, or a list of them.

        Returns:
            This namespace.

        Raises:
            PropTypeError: If the spec is malformed or the name is taken.
        """
        if isinstance(spec, (list, tuple)):
            for item in spec:
                self.extend(item)
            return self

        spec = _parse_spec(spec)
        name = spec.name
        if self.is_defined(name):
            raise PropTypeError(f'Type "{name}" already defined')

        options = spec.options()
        validatable = spec.validatable
        parent = options.get("type")

        if isinstance(parent, PropType):
            options["type"] = parent.type
            if parent.required:
                options["required"] = True
            if parent.has_default:
                options["default"] = parent.default
            validatable = False
            if callable(parent.validator):
                options["validator"] = _chain_validators(
                    parent, options.get("validator")
                )

        if spec.getter:

            def factory() -> PropType:
                return to_type(name, options, validatable)

        else:
            validator = options.get("validator")

            def factory(*args: Any) -> PropType:
                prop = to_type(name, options, validatable)
                if validator is not None:
                    prop.validator = BoundValidator(validator, prop, *args)
                return prop

        self._extensions[name] = Extension(name, factory, spec.getter)
        logger.debug("Registered prop type %r (getter=%s)", name, spec.getter)
        return self

    # -------------------------------------------------------------------------
    # Primitive Types
    # -------------------------------------------------------------------------

    @property
    def any(self) -> PropType:
        return to_type("any", {"type": None}, True)

    @property
    def func(self) -> PropType:
        return to_type("func", {"type": Callable}, True).with_default(
            self._default("func")
        )

    @property
    def bool(self) -> PropType:
        return to_type("bool", {"type": bool}, True).with_default(
            self._default("bool")
        )

    @property
    def string(self) -> PropType:
        return to_type("string", {"type": str}, True).with_default(
            self._default("string")
        )

    @property
    def number(self) -> PropType:
        return to_type("number", {"type": [int, float]}, True).with_default(
            self._default("number")
        )

    @property
    def array(self) -> PropType:
        return to_type("array", {"type": list}, True).with_default(
            self._default("array")
        )

    @property
    def object(self) -> PropType:
        return to_type("object", {"type": dict}, True).with_default(
            self._default("object")
        )

    @property
    def integer(self) -> PropType:
        return to_type(
            "integer",
            {"type": [int, float], "validator": _integer},
        ).with_default(self._default("integer"))

    @property
    def symbol(self) -> PropType:
        return to_type("symbol", {"type": None, "validator": _symbol}, True)


prop_types = PropTypes()


__all__ = [
    "SENSIBLE_DEFAULTS",
    "ExtensionSpec",
    "Extension",
    "PropTypes",
    "prop_types",
    "noop",
]
