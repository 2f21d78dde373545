"""Unit tests for the prop types namespace and extension registry."""

from collections.abc import Callable
from datetime import date
from enum import Enum

import pytest

from proptypes.descriptor import MISSING, PropType, PropTypeError, Verdict, to_type
from proptypes.registry import (
    SENSIBLE_DEFAULTS,
    ExtensionSpec,
    PropTypes,
    noop,
    prop_types,
)
from proptypes.validation import validate, validate_type

PRIMITIVES_WITH_DEFAULTS = ("func", "bool", "string", "number", "array", "object", "integer")


class Color(Enum):
    RED = "red"


class Recorder:
    """Validator double recording its calls."""

    def __init__(self, result=True):
        self.result = result
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)
        return self.result


class TestPrimitives:
    """Tests for the primitive accessors."""

    @pytest.mark.unit
    def test_any(self, types):
        """any is unconstrained and accepts a custom default."""
        assert types.any.type is None
        assert types.any.with_default("test").default == "test"
        assert types.any.is_required.required is True

    @pytest.mark.unit
    def test_func(self, types):
        """func defaults to a no-op function and keeps custom factories."""

        def my_fn():
            pass

        assert types.func.type is Callable
        assert types.func.default is noop
        assert types.func.with_default(my_fn).default is my_fn

    @pytest.mark.unit
    def test_bool(self, types):
        """bool defaults to True."""
        assert types.bool.to_dict() == {"type": bool, "required": False, "default": True}
        assert types.bool.with_default(False).default is False

    @pytest.mark.unit
    def test_string(self, types):
        """string defaults to the empty string."""
        assert types.string.type is str
        assert types.string.default == ""
        assert types.string.with_default("test").default == "test"

    @pytest.mark.unit
    def test_number(self, types):
        """number accepts ints and floats and defaults to 0."""
        assert types.number.type == [int, float]
        assert types.number.default == 0
        assert types.number.with_default(100).default == 100
        assert validate(1.5, types.number) is True
        assert validate(True, types.number) is False

    @pytest.mark.unit
    def test_array(self, types):
        """array defaults to a list factory."""
        assert types.array.type is list
        assert types.array.default() == []
        arr = [0, 1]
        assert types.array.with_default(arr).default() == arr

    @pytest.mark.unit
    def test_object(self, types):
        """object defaults to a dict factory."""
        assert types.object.type is dict
        assert types.object.default() == {}
        assert types.object.default() is not types.object.default()

    @pytest.mark.unit
    def test_integer(self, types):
        """integer validates integral numbers and is not validatable."""
        prop = types.integer
        assert prop.type == [int, float]
        assert prop.default == 0
        assert prop.validator(100) is True
        assert prop.validator(float("inf")) is False
        assert prop.validator(0.1) is False
        assert types.integer.with_default(100).default == 100
        assert types.integer.with_default(0.1).default == 0
        assert prop.validatable is False

    @pytest.mark.unit
    def test_symbol(self, types):
        """symbol accepts enum members and has no default."""
        prop = types.symbol
        assert prop.type is None
        assert prop.default is MISSING
        assert prop.validator(Color.RED) is True
        assert prop.validator("red") is False

    @pytest.mark.unit
    def test_builtin_validator_messages(self, types, diagnostics):
        """integer and symbol explain their failures."""
        assert validate_type(types.integer.is_required, 1.5) is False
        assert validate_type(types.symbol, "red") is False
        assert diagnostics() == [
            '[proptypes warn]: * integer - "1.5" is not an integer',
            '[proptypes warn]: * symbol - "red" is not an enum member',
        ]

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name",
        ["any", "func", "bool", "string", "number", "array", "object", "integer", "symbol"],
    )
    def test_fresh_descriptor_per_read(self, types, name):
        """Each read builds an independent descriptor."""
        first = getattr(types, name)
        second = getattr(types, name)
        assert first is not second
        first.is_required
        assert second.required is False

    @pytest.mark.unit
    def test_validate_method_on_primitive(self, types):
        """Validatable primitives accept a validator."""
        prop = types.string.with_default("John").is_required.validate(
            lambda p, value: value == "John"
        )
        assert prop.validator("John") is True
        assert prop.validator("Jane") is False


class TestSensibleDefaults:
    """Tests for the sensible_defaults switch."""

    @pytest.mark.unit
    def test_disable(self, types):
        """False strips every built-in default."""
        types.sensible_defaults = False
        for name in PRIMITIVES_WITH_DEFAULTS:
            assert getattr(types, name).default is MISSING

    @pytest.mark.unit
    def test_restore(self, types):
        """True restores the built-in defaults."""
        types.sensible_defaults = False
        types.sensible_defaults = True
        for name in PRIMITIVES_WITH_DEFAULTS:
            assert getattr(types, name).has_default
        assert types.sensible_defaults == SENSIBLE_DEFAULTS

    @pytest.mark.unit
    def test_partial_mapping(self, types):
        """A mapping only applies to the listed primitives."""
        types.sensible_defaults = {"func": noop, "string": "test"}
        for name in ("bool", "number", "array", "object", "integer"):
            assert getattr(types, name).default is MISSING
        assert types.func.default is noop
        assert types.string.default == "test"

    @pytest.mark.unit
    def test_invalid_switch(self, types):
        """Other values are a configuration error."""
        with pytest.raises(PropTypeError):
            types.sensible_defaults = "yes"

    @pytest.mark.unit
    def test_environment_initial_state(self, monkeypatch):
        """The initial state comes from PROPTYPES_SENSIBLE_DEFAULTS."""
        monkeypatch.setenv("PROPTYPES_SENSIBLE_DEFAULTS", "false")
        assert PropTypes().string.default is MISSING
        monkeypatch.setenv("PROPTYPES_SENSIBLE_DEFAULTS", "true")
        assert PropTypes().string.default == ""


class TestExtend:
    """Tests for extend()."""

    @pytest.mark.unit
    def test_getter(self, types):
        """Getter extensions build a descriptor on read."""
        validator = Recorder()
        types.extend({"name": "date", "validator": validator, "getter": True, "type": date})

        date_type = types.date
        assert isinstance(date_type, PropType)
        assert date_type.type is date
        date_type.validator("v")
        assert validator.calls == [(date_type, "v")]

    @pytest.mark.unit
    def test_factory(self, types):
        """Non-getter extensions are factory functions."""
        types.extend({"name": "date_fn", "type": date})
        assert callable(types.date_fn)
        assert types.date_fn().is_required.to_dict() == {"type": date, "required": True}

    @pytest.mark.unit
    def test_factory_arguments(self, types):
        """Factory arguments are passed to the validator before the value."""
        validator = Recorder()
        types.extend({"name": "date_fn_args", "type": date, "validator": validator})

        prop = types.date_fn_args(1, 2)
        prop.validator(3)
        assert validator.calls == [(prop, 1, 2, 3)]

    @pytest.mark.unit
    def test_validate_method(self, types):
        """validate=True makes the descriptors validatable."""
        types.extend({"name": "custom_date", "type": date, "getter": True, "validate": True})
        assert types.custom_date.validatable is True
        types.extend({"name": "plain_date", "type": date, "getter": True})
        assert types.plain_date.validatable is False

    @pytest.mark.unit
    def test_clones_per_read(self, types):
        """Each read of a getter extension is a new descriptor."""
        types.extend({"name": "clone_demo", "type": dict, "getter": True, "validate": True})
        assert types.clone_demo is not types.clone_demo

    @pytest.mark.unit
    def test_list_of_specs(self, types):
        """A list registers every spec and returns the namespace."""
        result = types.extend(
            [
                {"name": "type1", "type": str, "getter": True},
                {"name": "type2", "type": int, "getter": True},
            ]
        )
        assert result is types
        assert types.type1.type is str
        assert types.type2.type is int

    @pytest.mark.unit
    def test_extension_spec_model(self, types):
        """ExtensionSpec instances are accepted directly."""
        spec = ExtensionSpec(name="when", type=date, getter=True, validate=True)
        types.extend(spec)
        assert types.when.type is date
        assert types.when.validatable is True

    @pytest.mark.unit
    def test_initial_required_and_default(self, types):
        """required and default can be given in the spec."""
        types.extend(
            {"name": "label", "type": str, "getter": True, "required": True, "default": "x"}
        )
        assert types.label.to_dict() == {"type": str, "required": True, "default": "x"}

    @pytest.mark.unit
    def test_mutable_default_not_shared(self, types):
        """List defaults in a spec are fresh on every read."""
        types.extend({"name": "tags", "type": list, "default": ["a"], "getter": True})
        assert callable(types.tags.default)
        assert types.tags.default() == ["a"]
        assert types.tags.default() is not types.tags.default()

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["string", "shape", "extend", "utils"])
    def test_builtin_names_rejected(self, types, name):
        """Built-in names cannot be overwritten."""
        with pytest.raises(PropTypeError, match="already defined"):
            types.extend({"name": name, "type": str})

    @pytest.mark.unit
    def test_duplicate_rejected(self, types):
        """Registering a name twice fails and keeps the first type."""
        types.extend({"name": "twice", "type": str, "getter": True})
        with pytest.raises(PropTypeError, match='Type "twice" already defined'):
            types.extend({"name": "twice", "type": int, "getter": True})
        assert types.twice.type is str

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "spec",
        [
            {"type": str},
            {"name": "", "type": str},
            {"name": "x", "validator": "not callable"},
            {"name": "x", "unknown": True},
            "x",
        ],
    )
    def test_malformed_specs(self, types, spec):
        """Malformed specs are configuration errors."""
        with pytest.raises(PropTypeError):
            types.extend(spec)

    @pytest.mark.unit
    def test_unknown_attribute(self, types):
        """Unknown names raise AttributeError."""
        with pytest.raises(AttributeError):
            types.nothing_here

    @pytest.mark.unit
    def test_extensions_are_per_namespace(self, types):
        """Extending one namespace leaves others untouched."""
        types.extend({"name": "local_only", "type": str, "getter": True})
        assert not PropTypes().is_defined("local_only")


class TestInheritance:
    """Tests for extensions derived from existing descriptors."""

    @pytest.mark.unit
    def test_inherits_flags(self, types):
        """type, required and default are inherited."""
        parent = types.string.is_required.with_default("parent")
        types.extend({"name": "string_alias", "type": parent, "getter": True})

        prop = types.string_alias
        assert prop.to_dict() == {"type": str, "required": True, "default": "parent"}
        assert prop.validatable is False

    @pytest.mark.unit
    def test_optional_parent_keeps_own_required(self, types):
        """An optional parent does not reset the extension's required flag."""
        types.extend(
            {"name": "needed", "type": types.string, "getter": True, "required": True}
        )
        assert types.needed.required is True
        types.extend({"name": "optional", "type": types.string, "getter": True})
        assert types.optional.required is False

    @pytest.mark.unit
    def test_child_validator_runs_with_child(self, types):
        """The child validator receives the derived descriptor."""
        validator = Recorder(result=True)
        types.extend(
            {
                "name": "string_validation_alias",
                "type": types.string,
                "getter": True,
                "validator": validator,
            }
        )

        prop = types.string_validation_alias
        assert prop.type is str
        assert prop.validator("a") is True
        assert validator.calls == [(prop, "a")]

    @pytest.mark.unit
    def test_parent_validator_enforced(self, types):
        """A failing parent validator fails the child without its own."""
        types.extend({"name": "whole", "type": types.integer, "getter": True})
        assert types.whole.validator(3) is True
        assert types.whole.validator(3.5) is False

    @pytest.mark.unit
    def test_parent_checked_before_child(self, types):
        """The child validator only runs when the parent passes."""
        validator = Recorder(result=True)
        types.extend(
            {"name": "even", "type": types.integer, "getter": True, "validator": validator}
        )
        assert types.even.validator(1.5) is False
        assert validator.calls == []

    @pytest.mark.unit
    def test_complex_parent(self, types):
        """Shape parents keep their required keys and loose mode."""
        parent = types.shape(
            {"name": types.string.is_required, "number": types.one_of([1, 2, 3])}
        ).is_required.loose

        types.extend({"name": "shape_alias", "type": parent, "getter": True})
        prop = types.shape_alias

        assert prop.type is dict
        assert prop.required is True
        passing = {"name": "John", "number": 1}
        assert prop.validator(passing) is True
        assert prop.validator({**passing, "other": True}) is True
        assert prop.validator({**passing, "number": 4}) is False

    @pytest.mark.unit
    def test_parent_validator_reads_live_parent(self, types):
        """The chained validator calls the parent's current validator."""
        parent = types.string.validate(lambda p, value: True)
        types.extend({"name": "tracked", "type": parent, "getter": True})
        parent.validate(lambda p, value: value.startswith("/"))
        assert types.tracked.validator("/url") is True
        assert types.tracked.validator("url") is False

    @pytest.mark.unit
    def test_chained_extensions(self, types):
        """Extensions can derive from other extensions."""
        types.extend(
            {
                "name": "router_location",
                "getter": True,
                "type": types.one_of_type(
                    [
                        types.shape(
                            {"path": types.string.is_required, "query": types.object}
                        ).loose,
                        types.shape(
                            {"name": types.string.is_required, "params": types.object}
                        ).loose,
                    ]
                ),
            }
        )
        types.extend(
            {
                "name": "router_to",
                "getter": True,
                "type": types.one_of_type([str, types.router_location]),
            }
        )

        prop = types.router_to
        assert prop.validator("/url") is True
        assert prop.validator({"path": "/url"}) is True
        assert prop.validator({"query": {}}) is False
        assert validate({"name": "home", "extra": 1}, prop) is True

    @pytest.mark.unit
    def test_union_parent(self, types):
        """Union parents keep their native union."""
        parent = types.one_of_type([int, types.string])
        types.extend({"name": "alias_one_of", "getter": True, "type": parent})

        prop = types.alias_one_of
        assert prop.type == parent.type
        assert types.utils.validate(1, prop) is True
        assert types.utils.validate(False, prop) is False

    @pytest.mark.unit
    def test_factory_parent(self, types):
        """Factory extensions pass their arguments to the child validator."""
        validator = Recorder(result=True)
        types.extend({"name": "alias_min_length", "type": types.string, "validator": validator})

        prop = types.alias_min_length(3)
        assert prop.type is str
        prop.validator("a")
        assert validator.calls == [(prop, 3, "a")]

    @pytest.mark.unit
    def test_factory_parent_with_verdict(self, types):
        """Parameterized validators may return Verdicts with messages."""

        def min_length(prop, size, value):
            if len(value) >= size:
                return True
            return Verdict.fail(f"{prop.name} - must be at least {size} long")

        types.extend({"name": "min_length", "type": types.string, "validator": min_length})
        prop = types.min_length(3)
        assert validate("abcd", prop) is True
        assert types.utils.validate("ab", prop) is False


class TestSubclassing:
    """Tests for namespaces extended through subclassing."""

    @pytest.mark.unit
    def test_subclass_property(self):
        """Subclasses add named types as properties."""

        class CustomTypes(PropTypes):
            @property
            def adult(self) -> PropType:
                return to_type("adult", {"type": int, "validator": lambda p, v: v >= 18})

        types = CustomTypes()
        assert types.adult.validator(20) is True
        assert types.adult.validator(17) is False
        assert types.string.type is str
        with pytest.raises(PropTypeError):
            types.extend({"name": "adult", "type": int})


class TestUtils:
    """Tests for the utils namespace."""

    @pytest.mark.unit
    def test_exposes_helpers(self, types):
        """utils proxies validate and to_type."""
        assert types.utils.to_type is to_type
        assert types.utils.validate is validate

    @pytest.mark.unit
    def test_default_instance(self):
        """The shared namespace is a PropTypes instance."""
        assert isinstance(prop_types, PropTypes)
        assert prop_types.string.type is str
