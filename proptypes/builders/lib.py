"""Composite prop type builders.

Higher-order constructors producing descriptors out of other descriptors
or plain Python types:

- `custom`: a single predicate
- `one_of`: an enumerated set of literal values
- `instance_of`: instances of a class
- `array_of`: lists whose items share a type
- `object_of`: dicts whose values share a type
- `shape`: dicts with a fixed set of keys, optionally `loose`
- `one_of_type`: a union of types and descriptors

Nested checks run in silent mode, so a failing item surfaces as part of the
composite's own diagnostic instead of being emitted on its own.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from proptypes.descriptor import MISSING, PropType, PropTypeError, Verdict, to_type
from proptypes.validation import get_type, is_list, is_plain_dict, validate_type

ANONYMOUS = "<<anonymous function>>"


class ShapePropType(PropType):
    """Descriptor for dicts with a fixed set of keys.

    Attributes:
        is_loose: Accept keys that are not declared in the shape.
    """

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.is_loose = False

    @property
    def loose(self) -> ShapePropType:
        """Tolerate undeclared keys. Returns the same descriptor."""
        self.is_loose = True
        return self


def _quoted(values: Any) -> str:
    return '", "'.join(str(v) for v in values)


def _strictly_in(value: Any, choices: list[Any]) -> bool:
    return any(
        value is choice or (type(value) is type(choice) and value == choice)
        for choice in choices
    )


def _is_required(field: Any) -> bool:
    if isinstance(field, PropType):
        return field.required is True
    if isinstance(field, Mapping):
        return field.get("required") is True
    return False


def _require_sequence(values: Any) -> list[Any]:
    if not isinstance(values, (list, tuple)):
        raise PropTypeError("You must provide a list as argument")
    return list(values)


# =============================================================================
# Builders
# =============================================================================


def custom(
    predicate: Callable[[Any], Any],
    message: str = "custom validation failed",
) -> PropType:
    """Prop type validated by a single predicate.

    Args:
        predicate: Called with the value, truthy means valid.
        message: Diagnostic emitted on failure.

    Raises:
        PropTypeError: If predicate is not callable.
    """
    if not callable(predicate):
        raise PropTypeError("You must provide a function as argument")

    name = getattr(predicate, "__name__", "")
    if not name or name == "<lambda>":
        name = ANONYMOUS

    def validator(prop: PropType, value: Any) -> Verdict:
        if predicate(value):
            return Verdict(True)
        return Verdict.fail(f"{prop.name} - {message}")

    return to_type(name, {"validator": validator})


def one_of(values: list[Any] | tuple[Any, ...]) -> PropType:
    """Prop type accepting only the listed literal values.

    The native ``type`` lists the classes of the non-None values in order
    of first appearance, or None if there are none.

    Raises:
        PropTypeError: If values is not a list or tuple.
    """
    choices = _require_sequence(values)
    message = f'value should be one of "{_quoted(choices)}"'

    allowed: list[type] = []
    for choice in choices:
        if choice is None or choice is MISSING:
            continue
        if not any(type(choice) is t for t in allowed):
            allowed.append(type(choice))

    def validator(prop: PropType, value: Any) -> Verdict:
        if _strictly_in(value, choices):
            return Verdict(True)
        return Verdict.fail(f"{prop.name} - {message}")

    return to_type(
        "one_of",
        {"type": allowed or None, "validator": validator},
    )


def instance_of(cls: type) -> PropType:
    """Prop type accepting instances of a class.

    Raises:
        PropTypeError: If cls is not a class.
    """
    if not isinstance(cls, type):
        raise PropTypeError("You must provide a class as argument")
    return to_type("instance_of", {"type": cls})


def array_of(member: Any) -> PropType:
    """Prop type accepting lists whose items all validate against member."""

    def validator(prop: PropType, values: Any) -> Verdict:
        if not is_list(values):
            return Verdict.fail(f'{prop.name} - value "{values}" is not a list')
        for item in values:
            result = validate_type(member, item, silent=True)
            if result is not True:
                return Verdict.fail(
                    result,
                    f'{prop.name} - value must be a list of "{get_type(member)}"',
                )
        return Verdict(True)

    return to_type("array_of", {"type": list, "validator": validator})


def object_of(member: Any) -> PropType:
    """Prop type accepting dicts whose values all validate against member."""

    def validator(prop: PropType, mapping: Any) -> Verdict:
        if not is_plain_dict(mapping):
            return Verdict.fail(f'{prop.name} - value "{mapping}" is not a dict')
        for value in mapping.values():
            result = validate_type(member, value, silent=True)
            if result is not True:
                return Verdict.fail(
                    result,
                    f'{prop.name} - value must be a dict of "{get_type(member)}"',
                )
        return Verdict(True)

    return to_type("object_of", {"type": dict, "validator": validator})


def shape(fields: Mapping[str, Any]) -> ShapePropType:
    """Prop type accepting dicts with a fixed set of keys.

    Every key present on the value is validated against its field. Fields
    marked required must be present. Undeclared keys are rejected unless
    the descriptor is made `loose`.

    Args:
        fields: Mapping of key to type or prop type. A component's prop
            definitions can be passed as-is.

    Raises:
        PropTypeError: If fields is not a mapping.
    """
    if not isinstance(fields, Mapping):
        raise PropTypeError("You must provide a mapping as argument")

    fields = dict(fields)
    keys = list(fields)
    required_keys = [key for key in keys if _is_required(fields[key])]

    def validator(prop: ShapePropType, value: Any) -> Verdict:
        if not is_plain_dict(value):
            return Verdict.fail(f'{prop.name} - value "{value}" is not a dict')

        missing = [key for key in required_keys if key not in value]
        if len(missing) == 1:
            return Verdict.fail(
                f'{prop.name} - required property "{missing[0]}" is not defined.'
            )
        if missing:
            return Verdict.fail(
                f'{prop.name} - required properties "{_quoted(missing)}" '
                "are not defined."
            )

        for key, item in value.items():
            if key not in fields:
                if prop.is_loose:
                    continue
                return Verdict.fail(
                    f'{prop.name} - shape definition does not include a "{key}" '
                    f'property. Allowed keys: "{_quoted(keys)}".'
                )
            result = validate_type(fields[key], item, silent=True)
            if isinstance(result, str):
                return Verdict.fail(
                    f'{prop.name} - "{key}" property validation error:\n * {result}'
                )
            if result is not True:
                return Verdict(False)
        return Verdict(True)

    return ShapePropType("shape", type=dict, validator=validator)


def one_of_type(candidates: list[Any] | tuple[Any, ...]) -> PropType:
    """Prop type accepting a value matching any of the candidates.

    The native ``type`` is the flattened, de-duplicated union of the
    candidates' types. When no candidate carries a validator the result is
    a plain native union. Otherwise each candidate is tried in order with
    its full validation, and the value passes if any candidate passes.

    Raises:
        PropTypeError: If candidates is not a list or tuple.
    """
    candidates = _require_sequence(candidates)

    has_validators = False
    native: list[Any] = []
    for candidate in candidates:
        if isinstance(candidate, PropType):
            candidate_type = candidate.type
            if candidate.name == "one_of" and candidate_type is None:
                candidate_type = []
            has_validators = has_validators or callable(candidate.validator)
        elif isinstance(candidate, Mapping):
            candidate_type = candidate.get("type", MISSING)
            has_validators = has_validators or callable(candidate.get("validator"))
            if candidate_type is MISSING:
                continue
        else:
            candidate_type = candidate

        if isinstance(candidate_type, list):
            native.extend(candidate_type)
        else:
            native.append(candidate_type)

    union: list[Any] = []
    for item in native:
        if not any(item is seen for seen in union):
            union.append(item)

    if not has_validators:
        return to_type("one_of_type", {"type": union})

    def validator(prop: PropType, value: Any) -> Verdict:
        for candidate in candidates:
            if validate_type(candidate, value, silent=True) is True:
                return Verdict(True)
        return Verdict.fail(
            f'{prop.name} - value "{value}" does not match any of the '
            "passed-in validators."
        )

    return to_type("one_of_type", {"type": union, "validator": validator})


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
