"""Tests for the public proptypes API."""

import pytest

import proptypes
from proptypes import MISSING, PropTypes, validate, validate_type


class TestPublicApi:
    """Tests for defining component props through the package root."""

    @pytest.mark.unit
    def test_exports(self):
        """Every exported name resolves."""
        for name in proptypes.__all__:
            assert hasattr(proptypes, name)

    @pytest.mark.unit
    def test_component_definition(self, types: PropTypes):
        """A typical props mapping validates realistic inputs."""
        props = {
            "title": types.string.is_required,
            "count": types.integer.with_default(1),
            "tags": types.array_of(str).with_default(["new"]),
            "status": types.one_of(["draft", "published"]).with_default("draft"),
            "owner": types.shape({"id": int, "name": types.string}).loose,
        }

        assert props["tags"].default() == ["new"]
        assert props["status"].default == "draft"

        incoming = {"title": "Hello", "count": 3, "owner": {"id": 1, "extra": True}}
        for key, prop in props.items():
            assert validate(incoming.get(key, MISSING), prop) is True, key

        assert validate(MISSING, props["title"]) is False
        assert validate(["a", 1], props["tags"]) is False
        assert validate("archived", props["status"]) is False

    @pytest.mark.unit
    def test_loud_validation_reports(self, types: PropTypes, diagnostics):
        """Loud validation of a nested failure emits one combined diagnostic."""
        prop = types.array_of(types.shape({"id": int}))
        assert validate_type(prop, [{"id": "1"}]) is False
        messages = diagnostics()
        assert len(messages) == 1
        assert messages[0].startswith("[proptypes warn]: * ")
        assert 'array_of - value must be a list of "dict"' in messages[0]
