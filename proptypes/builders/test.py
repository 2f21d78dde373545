"""Unit tests for the composite prop type builders."""

import pytest

from proptypes.builders import (
    ShapePropType,
    array_of,
    custom,
    instance_of,
    object_of,
    one_of,
    one_of_type,
    shape,
)
from proptypes.descriptor import MISSING, PropTypeError
from proptypes.validation import validate, validate_type


class MyClass:
    def __init__(self, name="john"):
        self.name = name


@pytest.fixture
def person(types):
    """Field definitions for a simple person shape."""
    return {"id": int, "name": str, "age": types.integer}


class TestCustom:
    """Tests for custom()."""

    @pytest.mark.unit
    def test_validator(self):
        """The predicate decides validity."""
        prop = custom(lambda value: isinstance(value, str))
        assert prop.validator("mytest") is True
        assert prop.validator(0) is False

    @pytest.mark.unit
    def test_name_from_function(self):
        """Named predicates name the type, lambdas are anonymous."""

        def is_even(value):
            return value % 2 == 0

        assert custom(is_even).name == "is_even"
        assert custom(lambda v: True).name == "<<anonymous function>>"

    @pytest.mark.unit
    def test_failure_message(self, diagnostics):
        """The failure message is prefixed with the type name."""

        def is_even(value):
            return value % 2 == 0

        prop = custom(is_even, "value must be even")
        assert validate_type(prop, 3, silent=True) == "* is_even - value must be even"
        assert prop.validator(3) is False
        assert diagnostics() == ["[proptypes warn]: is_even - value must be even"]

    @pytest.mark.unit
    def test_required_and_default(self):
        """Custom types support the common modifiers."""
        prop = custom(lambda v: isinstance(v, str))
        assert prop.is_required.required is True
        assert prop.with_default("test").default == "test"

    @pytest.mark.unit
    def test_requires_callable(self):
        """A non-callable predicate is a configuration error."""
        with pytest.raises(PropTypeError):
            custom("not a function")


class TestOneOf:
    """Tests for one_of()."""

    @pytest.mark.unit
    def test_type_from_values(self):
        """The native type lists the classes of the values in order."""
        assert one_of([0, 1, "string"]).type == [int, str]

    @pytest.mark.unit
    def test_none_values_filtered(self):
        """None and MISSING do not contribute types."""
        assert one_of([None, MISSING, "string", 2]).type == [str, int]
        assert one_of([None]).type is None

    @pytest.mark.unit
    def test_strict_membership(self):
        """Values must match by type and equality."""
        prop = one_of([0, 1, "string"])
        assert prop.validator(0) is True
        assert prop.validator("string") is True
        assert prop.validator(5) is False
        assert prop.validator(False) is False
        assert prop.validator(1.0) is False

    @pytest.mark.unit
    def test_default_must_be_listed(self):
        """Only listed values are accepted as default."""
        prop = one_of([0, 1, "string"])
        assert prop.with_default(1).default == 1
        assert prop.with_default("not this").default == 1
        assert one_of([0, 1]).with_default("not this").default is MISSING

    @pytest.mark.unit
    def test_failure_message(self):
        """The message lists the allowed values."""
        prop = one_of(["a", "b"])
        assert validate_type(prop, "c", silent=True) == (
            '* one_of - value should be one of "a", "b"'
        )

    @pytest.mark.unit
    def test_requires_sequence(self):
        """A non-sequence argument is a configuration error."""
        with pytest.raises(PropTypeError):
            one_of("abc")


class TestInstanceOf:
    """Tests for instance_of()."""

    @pytest.mark.unit
    def test_type(self):
        """The class becomes the native type with no validator."""
        prop = instance_of(MyClass)
        assert prop.type is MyClass
        assert prop.validator is None

    @pytest.mark.unit
    def test_default(self):
        """Defaults must be instances."""
        obj = MyClass()
        assert instance_of(MyClass).with_default(obj).default is obj
        assert instance_of(MyClass).with_default(object()).default is MISSING

    @pytest.mark.unit
    def test_requires_class(self):
        """A non-class argument is a configuration error."""
        with pytest.raises(PropTypeError):
            instance_of(MyClass())


class TestArrayOf:
    """Tests for array_of()."""

    @pytest.mark.unit
    def test_type(self):
        """Native type is list."""
        assert array_of(int).type is list

    @pytest.mark.unit
    def test_non_list_reported(self, diagnostics):
        """Calling the validator on a non-list explains the failure."""
        assert array_of(int).validator("abc") is False
        assert object_of(int).validator([1]) is False
        assert diagnostics() == [
            '[proptypes warn]: array_of - value "abc" is not a list',
            '[proptypes warn]: object_of - value "[1]" is not a dict',
        ]

    @pytest.mark.unit
    def test_same_type_values(self):
        """Lists of the member type pass, mixed lists fail."""
        prop = array_of(int)
        assert prop.validator([0, 1, 2]) is True
        assert prop.validator([0, 1, "string"]) is False

    @pytest.mark.unit
    def test_nested_descriptors(self, types):
        """Members can be descriptors with their own validators."""
        assert array_of(types.number).validator([0, 1, 2]) is True
        integers = array_of(types.integer)
        assert integers.validator([0, 1, 2]) is True
        assert integers.validator([0, 1.2, 2]) is False

    @pytest.mark.unit
    def test_default_factory(self):
        """List defaults are copied, invalid ones rejected."""
        prop = array_of(int)
        default = prop.with_default([0, 1]).default
        assert default() == [0, 1]
        assert array_of(int).with_default(["test", 1]).default is MISSING

    @pytest.mark.unit
    def test_failure_message(self):
        """The nested failure is embedded in the message."""
        message = validate_type(array_of(int), [1, "x"], silent=True)
        assert message == (
            '* value "x" should be of type "int"\n'
            ' * array_of - value must be a list of "int"'
        )

    @pytest.mark.unit
    def test_non_list_rejected(self):
        """Calling the validator with a non-list fails."""
        assert array_of(int).validator("abc") is False


class TestObjectOf:
    """Tests for object_of()."""

    @pytest.mark.unit
    def test_type(self):
        """Native type is dict."""
        assert object_of(int).type is dict

    @pytest.mark.unit
    def test_values(self):
        """All values must match the member type."""
        prop = object_of(int)
        assert prop.validator({"id": 10, "age": 30}) is True
        assert prop.validator({"id": "10", "age": 30}) is False

    @pytest.mark.unit
    def test_nested_descriptors(self, types):
        """Members can be descriptors."""
        assert object_of(types.number).validator({"id": 10, "age": 30}) is True
        integers = object_of(types.integer)
        assert integers.validator({"id": 10, "age": 30}) is True
        assert integers.validator({"id": 10.2, "age": 30}) is False

    @pytest.mark.unit
    def test_default_factory(self):
        """Dict defaults are copied, invalid ones rejected."""
        default = object_of(int).with_default({"id": 10, "age": 30}).default
        assert default() == {"id": 10, "age": 30}
        assert object_of(int).with_default({"id": "10"}).default is MISSING


class TestShape:
    """Tests for shape()."""

    @pytest.mark.unit
    def test_type(self, person):
        """Native type is dict and the result is a ShapePropType."""
        prop = shape(person)
        assert isinstance(prop, ShapePropType)
        assert prop.type is dict
        assert prop.is_required.required is True

    @pytest.mark.unit
    def test_matching_shape(self, person):
        """Values matching every field pass."""
        prop = shape(person)
        assert prop.validator({"id": 10, "name": "John", "age": 30}) is True
        assert prop.validator({"id": "10", "name": "John", "age": 30}) is False

    @pytest.mark.unit
    def test_extra_keys_rejected(self, person):
        """Undeclared keys fail in strict mode."""
        prop = shape(person)
        value = {"id": 10, "name": "John", "age": 30, "nationality": ""}
        assert prop.validator(value) is False

    @pytest.mark.unit
    def test_loose_mode(self, person):
        """Loose shapes accept undeclared keys, in any modifier order."""
        value = {"id": 10, "name": "John", "age": 30, "nationality": ""}
        assert shape(person).loose.validator(value) is True
        loose_required = shape(person).loose.is_required
        required_loose = shape(person).is_required.loose
        for prop in (loose_required, required_loose):
            assert prop.required is True
            assert prop.is_loose is True
            assert prop.validator(value) is True

    @pytest.mark.unit
    def test_non_dict_rejected(self, person):
        """Strings and class instances are not shapes."""
        prop = shape(person)
        assert prop.validator("a string") is False
        assert prop.validator(MyClass()) is False

    @pytest.mark.unit
    def test_default(self, person):
        """Defaults must match the shape."""
        values = {"id": 10, "name": "John", "age": 30}
        assert shape(person).with_default(values).default() == values
        bad = {"id": "10", "name": "John", "age": 30}
        assert shape(person).with_default(bad).default is MISSING

    @pytest.mark.unit
    def test_required_fields(self, types):
        """Required fields must be present, optional ones may be absent."""
        prop = shape({"id": types.integer.is_required, "name": str})
        assert prop.validator({"name": "John"}) is False
        assert prop.validator({"id": 10}) is True

    @pytest.mark.unit
    def test_required_any_field(self, types):
        """A required unconstrained field accepts None."""
        prop = shape({"my_key": types.any.is_required, "name": None})
        assert prop.validator({"name": "John"}) is False
        assert prop.validator({"my_key": None}) is True

    @pytest.mark.unit
    def test_explicit_missing_value(self, types):
        """A field explicitly set to MISSING counts as absent."""
        prop = shape({"message": types.string})
        assert prop.validator({"message": MISSING}) is True

    @pytest.mark.unit
    def test_missing_messages(self, types, diagnostics):
        """Missing required keys are listed in the diagnostic."""
        prop = shape({"a": types.string.is_required, "b": types.string.is_required})
        assert prop.validator({"a": "x"}) is False
        assert prop.validator({}) is False
        assert diagnostics() == [
            '[proptypes warn]: shape - required property "b" is not defined.',
            '[proptypes warn]: shape - required properties "a", "b" are not defined.',
        ]

    @pytest.mark.unit
    def test_extra_key_message(self, diagnostics):
        """Undeclared keys are named with the allowed keys."""
        shape({"id": int, "name": str}).validator({"age": 1})
        assert diagnostics() == [
            '[proptypes warn]: shape - shape definition does not include a "age" '
            'property. Allowed keys: "id", "name".'
        ]

    @pytest.mark.unit
    def test_field_message(self, diagnostics):
        """Field failures embed the nested message."""
        shape({"id": int}).validator({"id": "10"})
        assert diagnostics() == [
            '[proptypes warn]: shape - "id" property validation error:\n'
            ' * value "10" should be of type "int"'
        ]

    @pytest.mark.unit
    def test_component_props_as_fields(self, types):
        """A component's prop definitions can be used as a shape."""
        user_props = {"name": types.string.is_required, "age": types.integer}
        users = array_of(shape(user_props)).is_required
        assert validate([{"name": "John", "age": 20}], users) is True
        assert validate([{"age": 20}], users) is False

    @pytest.mark.unit
    def test_requires_mapping(self):
        """A non-mapping argument is a configuration error."""
        with pytest.raises(PropTypeError):
            shape([("id", int)])


class TestOneOfType:
    """Tests for one_of_type()."""

    @pytest.mark.unit
    def test_native_union(self):
        """Without validators the result is a plain native union."""
        prop = one_of_type([int, list, MyClass])
        assert prop.type == [int, list, MyClass]
        assert prop.validator is None
        assert prop.is_required.required is True

    @pytest.mark.unit
    def test_native_union_default(self):
        """Defaults are checked against the union."""
        assert one_of_type([int, list, MyClass]).with_default(1).default == 1
        assert one_of_type([int, list]).with_default("test").default is MISSING

    @pytest.mark.unit
    def test_flattens_and_deduplicates(self, types):
        """Descriptor types are spliced into the union once each."""
        prop = one_of_type([str, {"type": str}, types.number, int])
        assert prop.type == [str, int, float]
        assert prop.validator is None

    @pytest.mark.unit
    def test_complex_candidates(self):
        """Nested one_of and shape validators are kept as alternatives."""
        prop = one_of_type([one_of([0, 1, "string"]), shape({"id": int})])
        assert prop.type == [int, str, dict]
        assert prop.validator(1) is True
        assert prop.validator(5) is False
        assert prop.validator({"id": 10}) is True
        assert prop.validator({"id": "10"}) is False

    @pytest.mark.unit
    def test_multiple_shapes(self, types):
        """The first matching shape wins."""
        prop = one_of_type(
            [
                shape({"id": int, "name": types.string.is_required}),
                shape({"id": int, "age": types.integer.is_required}),
                shape({}),
            ]
        )
        assert prop.validator({"id": 1, "name": "John"}) is True
        assert prop.validator({"id": 2, "age": 30}) is True
        assert prop.validator({}) is True
        assert prop.validator({"id": 2}) is False

    @pytest.mark.unit
    def test_failure_message(self, diagnostics):
        """A single combined diagnostic is emitted."""
        prop = one_of_type([custom(lambda v: False), int])
        assert prop.validator("x") is False
        assert diagnostics() == [
            '[proptypes warn]: one_of_type - value "x" does not match any of the '
            "passed-in validators."
        ]

    @pytest.mark.unit
    def test_requires_sequence(self):
        """A non-sequence argument is a configuration error."""
        with pytest.raises(PropTypeError):
            one_of_type(int)
