"""Unit tests for the validation engine."""

from collections import OrderedDict
from collections.abc import Callable

import pytest

from proptypes.descriptor import MISSING, Verdict, to_type
from proptypes.validation import (
    get_native_type,
    get_type,
    is_integer,
    validate,
    validate_type,
)


class MyClass:
    pass


class MyStr(str):
    pass


class TestHelpers:
    """Tests for type helpers."""

    @pytest.mark.unit
    def test_get_type_names(self):
        """Display names for classes, unions and descriptors."""
        assert get_type(str) == "str"
        assert get_type([int, float]) == "int or float"
        assert get_type(None) is None
        assert get_type(to_type("x", {"type": list})) == "list"
        assert get_type({"type": dict}) == "dict"

    @pytest.mark.unit
    def test_get_native_type(self):
        """Native type names come from the value's own class."""
        assert get_native_type("a") == "str"
        assert get_native_type(True) == "bool"
        assert get_native_type(None) is None
        assert get_native_type(MISSING) is None

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [
            (100, True),
            (1.0, True),
            (0.1, False),
            (float("inf"), False),
            (float("nan"), False),
            (True, False),
            ("1", False),
        ],
    )
    def test_is_integer(self, value, expected):
        """Integral numbers only, booleans excluded."""
        assert is_integer(value) is expected


class TestNativeChecks:
    """Tests for native type checking."""

    @pytest.mark.unit
    def test_named_types_exact(self):
        """str/int/float/bool compare the exact type name."""
        assert validate_type(str, "a") is True
        assert validate_type(int, 1) is True
        assert validate_type(float, 1.5) is True
        assert validate_type(bool, False) is True
        assert validate_type(int, True, silent=True) is not True
        assert validate_type(str, MyStr("a"), silent=True) is not True

    @pytest.mark.unit
    def test_structural_list_and_dict(self):
        """list and dict use isinstance checks."""
        assert validate_type(list, [1]) is True
        assert validate_type(dict, OrderedDict(a=1)) is True
        assert validate_type(dict, MyClass(), silent=True) is not True
        assert validate_type(list, (1,), silent=True) is not True

    @pytest.mark.unit
    def test_callable(self):
        """Callable accepts functions, builtins and classes."""
        assert validate_type(Callable, len) is True
        assert validate_type(Callable, lambda: None) is True
        assert validate_type(Callable, MyClass) is True
        assert validate_type(Callable, 1, silent=True) is not True

    @pytest.mark.unit
    def test_instance_check(self):
        """Other classes are instance checks."""
        assert validate_type(MyClass, MyClass()) is True
        assert validate_type(MyClass, object(), silent=True) is not True

    @pytest.mark.unit
    def test_non_class_type_never_matches(self):
        """A tag that is not a class fails instead of raising."""
        assert validate_type({"type": "str"}, "str", silent=True) is not True

    @pytest.mark.unit
    def test_union(self):
        """A list type passes when any member passes."""
        assert validate_type([int, str], "a") is True
        assert validate_type([int, str], 1) is True
        message = validate_type([int, str], 1.5, silent=True)
        assert message == 'value "1.5" should be of type "int or str"'

    @pytest.mark.unit
    def test_none_type_is_unconstrained(self):
        """type None accepts anything."""
        assert validate_type(None, object()) is True
        assert validate_type(to_type("any", {"type": None}), None) is True


class TestRequiredAndMissing:
    """Tests for the absent value short-circuit."""

    @pytest.mark.unit
    def test_missing_passes_when_optional(self):
        """MISSING passes optional props before any check."""
        prop = to_type("string", {"type": str, "validator": lambda p, v: False})
        assert validate_type(prop, MISSING) is True

    @pytest.mark.unit
    def test_missing_fails_when_required(self):
        """MISSING is checked normally for required props."""
        prop = to_type("string", {"type": str}).is_required
        assert validate_type(prop, MISSING, silent=True) is not True

    @pytest.mark.unit
    def test_required_union_rejects_missing(self, types):
        """Union members do not let a required prop go absent."""
        message = validate_type(types.number.is_required, MISSING, silent=True)
        assert message == 'number - value "MISSING" should be of type "int or float"'
        union = types.one_of_type([str, int]).is_required
        assert validate_type(union, MISSING, silent=True) is not True
        assert validate_type(types.number, MISSING) is True

    @pytest.mark.unit
    def test_required_union_field_in_shape(self, types):
        """A required number field set to MISSING fails the shape."""
        prop = types.shape({"id": types.number.is_required})
        assert validate({"id": MISSING}, prop) is False
        assert validate({"id": 1.5}, prop) is True

    @pytest.mark.unit
    def test_none_is_not_absent(self):
        """None is a value, not an absent prop."""
        prop = to_type("string", {"type": str})
        assert validate_type(prop, None, silent=True) == (
            'string - value "None" should be of type "str"'
        )


class TestReporting:
    """Tests for loud and silent reporting modes."""

    @pytest.mark.unit
    def test_loud_native_failure(self, diagnostics):
        """Loud mode emits and returns False."""
        prop = to_type("string", {"type": str})
        assert validate_type(prop, 0) is False
        assert diagnostics() == [
            '[proptypes warn]: string - value "0" should be of type "str"'
        ]

    @pytest.mark.unit
    def test_silent_native_failure(self, diagnostics):
        """Silent mode returns the message and emits nothing."""
        prop = to_type("string", {"type": str})
        result = validate_type(prop, 0, silent=True)
        assert result == 'string - value "0" should be of type "str"'
        assert diagnostics() == []

    @pytest.mark.unit
    def test_validator_messages_joined(self, diagnostics):
        """Validator messages are bulleted and joined."""
        prop = to_type(
            "pair",
            {"validator": lambda p, v: Verdict.fail("first", "second")},
        )
        assert validate_type(prop, 1, silent=True) == "* first\n * second"
        assert diagnostics() == []

        assert validate_type(prop, 1) is False
        assert diagnostics() == ["[proptypes warn]: * first\n * second"]

    @pytest.mark.unit
    def test_validator_without_messages(self, diagnostics):
        """A bare False validator yields an empty message."""
        prop = to_type("quiet", {"validator": lambda p, v: False})
        assert validate_type(prop, 1, silent=True) == ""
        assert validate_type(prop, 1) is False
        assert diagnostics() == []

    @pytest.mark.unit
    def test_validator_skipped_on_native_failure(self):
        """The validator only runs after the native check passed."""
        calls = []
        prop = to_type("x", {"type": int, "validator": lambda p, v: calls.append(v)})
        validate_type(prop, "a", silent=True)
        assert calls == []

    @pytest.mark.unit
    def test_validator_exceptions_propagate(self):
        """Errors inside validators are not swallowed."""

        def broken(prop, value):
            raise ValueError("boom")

        prop = to_type("broken", {"validator": broken})
        with pytest.raises(ValueError, match="boom"):
            validate_type(prop, 1)


class TestValidate:
    """Tests for the boolean convenience wrapper."""

    @pytest.mark.unit
    def test_with_prop_types(self, types):
        """Works with namespace descriptors."""
        assert validate("string", types.string) is True
        assert validate(0, types.string) is False

    @pytest.mark.unit
    def test_with_simple_mappings(self):
        """Works with plain mapping descriptors."""
        assert validate("string", {"type": str}) is True
        assert validate(0, {"type": str}) is False

    @pytest.mark.unit
    def test_with_mapping_validator(self):
        """Mapping validators are called with the value only."""
        prop = {"type": str, "validator": lambda value: len(value) > 4}
        assert validate("string", prop) is True
        assert validate("s", prop) is False

    @pytest.mark.unit
    def test_never_emits(self, types, diagnostics):
        """validate() is always silent."""
        validate(0, types.string)
        assert diagnostics() == []
