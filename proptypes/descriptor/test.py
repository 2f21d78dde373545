"""Unit tests for the descriptor factory."""

import pytest

from proptypes.descriptor import (
    MISSING,
    BoundValidator,
    PropType,
    PropTypeError,
    Verdict,
    run_validator,
    to_type,
)


class TestMissing:
    """Tests for the MISSING sentinel."""

    @pytest.mark.unit
    def test_is_singleton(self):
        """MISSING is a single shared object."""
        assert MISSING is type(MISSING)()

    @pytest.mark.unit
    def test_is_falsy(self):
        """MISSING is falsy and distinct from None."""
        assert not MISSING
        assert MISSING is not None
        assert repr(MISSING) == "MISSING"


class TestToType:
    """Tests for the to_type() factory."""

    @pytest.mark.unit
    def test_builds_prop_type(self):
        """Fields are copied onto the descriptor."""
        prop = to_type("string", {"type": str})
        assert isinstance(prop, PropType)
        assert prop.name == "string"
        assert prop.type is str
        assert prop.required is False
        assert prop.default is MISSING
        assert prop.validator is None

    @pytest.mark.unit
    def test_does_not_mutate_base_fields(self):
        """The base mapping is copied."""
        fields = {"type": int}
        prop = to_type("number", fields)
        prop.type = str
        assert fields == {"type": int}

    @pytest.mark.unit
    def test_name_is_read_only(self):
        """The name tag cannot be reassigned."""
        prop = to_type("string", {"type": str})
        with pytest.raises(AttributeError):
            prop.name = "other"

    @pytest.mark.unit
    def test_unknown_fields_rejected(self):
        """Unknown base fields are a configuration error."""
        with pytest.raises(PropTypeError, match="shape"):
            to_type("broken", {"type": str, "shape": {}})

    @pytest.mark.unit
    def test_error_prefix(self):
        """Configuration errors carry the library prefix and are TypeErrors."""
        with pytest.raises(TypeError) as info:
            to_type("broken", {"nope": 1})
        assert str(info.value).startswith("[proptypes error]: ")

    @pytest.mark.unit
    def test_validator_bound_to_descriptor(self):
        """Raw validators receive the owning descriptor first."""
        seen = []

        def validator(prop, value):
            seen.append((prop, value))
            return True

        prop = to_type("custom", {"validator": validator})
        assert isinstance(prop.validator, BoundValidator)
        assert prop.validator("v") is True
        assert seen == [(prop, "v")]

    @pytest.mark.unit
    def test_bound_validator_keeps_binding(self):
        """An already bound validator is not rebound."""
        parent = to_type("parent", {"validator": lambda prop, value: prop.name})
        child = to_type("child", {"validator": parent.validator})
        assert child.validator is parent.validator
        assert child.validator.prop is parent


class TestIsRequired:
    """Tests for the is_required modifier."""

    @pytest.mark.unit
    def test_sets_flag_and_returns_self(self):
        """Reading is_required flips the flag on the same object."""
        prop = to_type("any", {"type": None})
        assert prop.is_required is prop
        assert prop.required is True

    @pytest.mark.unit
    def test_idempotent(self):
        """Reading is_required twice equals reading it once."""
        prop = to_type("any", {"type": None}).is_required.is_required
        assert prop.required is True
        assert prop.to_dict() == {"type": None, "required": True}


class TestWithDefault:
    """Tests for the with_default modifier."""

    @pytest.mark.unit
    def test_sets_valid_default(self):
        """A valid value becomes the default."""
        prop = to_type("string", {"type": str}).with_default("test")
        assert prop.default == "test"
        assert prop.has_default

    @pytest.mark.unit
    def test_missing_without_default_is_noop(self):
        """with_default() with no value leaves the descriptor untouched."""
        prop = to_type("string", {"type": str})
        assert prop.with_default() is prop
        assert prop.default is MISSING

    @pytest.mark.unit
    def test_missing_clears_default(self):
        """with_default(MISSING) clears an existing default."""
        prop = to_type("string", {"type": str}).with_default("x")
        prop.with_default(MISSING)
        assert not prop.has_default

    @pytest.mark.unit
    def test_invalid_default_rejected(self, diagnostics):
        """An invalid default is reported and not stored."""
        prop = to_type("string", {"type": str})
        assert prop.with_default(10) is prop
        assert prop.default is MISSING
        assert any(
            'string - invalid default value: "10"' in message
            for message in diagnostics()
        )

    @pytest.mark.unit
    def test_list_default_is_copying_factory(self):
        """List defaults are wrapped in a factory returning fresh copies."""
        value = [0, 1]
        prop = to_type("array", {"type": list}).with_default(value)
        assert callable(prop.default)
        first = prop.default()
        assert first == value
        assert first is not value
        assert prop.default() is not first

    @pytest.mark.unit
    def test_dict_default_is_copying_factory(self):
        """Dict defaults are wrapped in a factory returning fresh copies."""
        value = {"test": "test"}
        prop = to_type("object", {"type": dict}).with_default(value)
        assert prop.default() == value
        assert prop.default() is not value

    @pytest.mark.unit
    def test_base_field_default_is_copying_factory(self):
        """Mutable defaults given as base fields are wrapped as well."""
        value = ["a"]
        prop = to_type("tags", {"type": list, "default": value})
        assert callable(prop.default)
        assert prop.default() == ["a"]
        assert prop.default() is not prop.default()
        assert prop.default() is not value

    @pytest.mark.unit
    def test_callable_stored_verbatim(self):
        """Callables are stored as factories without validation."""

        def factory():
            return [0, 1]

        prop = to_type("array", {"type": list}).with_default(factory)
        assert prop.default is factory

    @pytest.mark.unit
    def test_validator_applies_to_default(self):
        """The descriptor's validator guards the default."""
        prop = to_type("positive", {"type": int, "validator": lambda p, v: v > 0})
        assert prop.with_default(-1).default is MISSING
        assert prop.with_default(3).default == 3


class TestValidateMethod:
    """Tests for the validate() modifier."""

    @pytest.mark.unit
    def test_attaches_validator(self):
        """Validatable descriptors accept a new validator."""
        prop = to_type("string", {"type": str}, validatable=True)
        result = prop.validate(lambda p, value: value == "John")
        assert result is prop
        assert prop.validator("John") is True
        assert prop.validator("Jane") is False

    @pytest.mark.unit
    def test_validator_receives_descriptor(self):
        """The attached validator sees the descriptor's own name."""
        prop = to_type("named", {"type": str}, validatable=True)
        prop.validate(lambda p, value: p.name == "named")
        assert prop.validator("anything") is True

    @pytest.mark.unit
    def test_unsupported_is_soft_failure(self, diagnostics):
        """Non-validatable descriptors report and stay unchanged."""
        prop = to_type("integer", {"type": int})
        assert prop.validate(lambda p, value: False) is prop
        assert prop.validator is None
        assert diagnostics() == [
            '[proptypes warn]: integer - "validate" method not supported on this type'
        ]


class TestVerdict:
    """Tests for Verdict and validator invocation."""

    @pytest.mark.unit
    def test_truthiness_follows_passed(self):
        """A Verdict is truthy only when passed."""
        assert Verdict(True)
        assert not Verdict(False, ("reason",))

    @pytest.mark.unit
    def test_of_normalizes(self):
        """Plain results become Verdicts without messages."""
        assert Verdict.of(1) == Verdict(True)
        assert Verdict.of(None) == Verdict(False)

    @pytest.mark.unit
    def test_fail_drops_empty_messages(self):
        """Empty messages are not recorded."""
        assert Verdict.fail("", "a") == Verdict(False, ("a",))

    @pytest.mark.unit
    def test_run_validator_collects_without_emitting(self, diagnostics):
        """Bound validators report through the Verdict only."""
        prop = to_type("x", {"validator": lambda p, v: Verdict.fail("x - nope")})
        assert run_validator(prop.validator, 1) == Verdict(False, ("x - nope",))
        assert diagnostics() == []

    @pytest.mark.unit
    def test_calling_bound_validator_emits(self, diagnostics):
        """Calling a bound validator directly forwards its messages."""
        prop = to_type("x", {"validator": lambda p, v: Verdict.fail("x - nope")})
        assert prop.validator(1) is False
        assert diagnostics() == ["[proptypes warn]: x - nope"]

    @pytest.mark.unit
    def test_run_validator_plain_callable(self):
        """Plain callables are supported."""
        assert run_validator(lambda v: v == 1, 1) == Verdict(True)


class TestToDict:
    """Tests for the host-facing record."""

    @pytest.mark.unit
    def test_omits_unset_fields(self):
        """default and validator are only present when set."""
        prop = to_type("date", {"type": str}).is_required
        assert prop.to_dict() == {"type": str, "required": True}

    @pytest.mark.unit
    def test_includes_default(self):
        """A set default is included."""
        prop = to_type("string", {"type": str}).with_default("a")
        assert prop.to_dict()["default"] == "a"
