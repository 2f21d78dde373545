"""Tests for configuration management."""

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("PROPTYPES_SILENT", raising=False)
        assert get_environment(EnvVar.PROPTYPES_SILENT) is False

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("PROPTYPES_SILENT", "false")
        assert get_environment(EnvVar.PROPTYPES_SILENT, override=True) is True

    @pytest.mark.unit
    def test_bool_type_conversion_true(self, monkeypatch):
        """Boolean type conversion for true values."""
        for value in ("true", "1", "yes", "TRUE", "Yes"):
            monkeypatch.setenv("PROPTYPES_PRODUCTION", value)
            assert get_environment(EnvVar.PROPTYPES_PRODUCTION) is True

    @pytest.mark.unit
    def test_bool_type_conversion_false(self, monkeypatch):
        """Boolean type conversion for false values."""
        for value in ("false", "0", "no", "FALSE", "No"):
            monkeypatch.setenv("PROPTYPES_SENSIBLE_DEFAULTS", value)
            assert get_environment(EnvVar.PROPTYPES_SENSIBLE_DEFAULTS) is False

    @pytest.mark.unit
    def test_unrecognized_bool_returns_default(self, monkeypatch):
        """Unrecognized boolean value falls back to the default."""
        monkeypatch.setenv("PROPTYPES_SENSIBLE_DEFAULTS", "maybe")
        assert get_environment(EnvVar.PROPTYPES_SENSIBLE_DEFAULTS) is True

    @pytest.mark.unit
    def test_string_type(self, monkeypatch):
        """String type returns as-is."""
        monkeypatch.setenv("PROPTYPES_LOG_LEVEL", "DEBUG")
        result = get_environment(EnvVar.PROPTYPES_LOG_LEVEL)
        assert result == "DEBUG"
        assert isinstance(result, str)


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.PROPTYPES_SILENT)
        assert isinstance(info, EnvConfig)
        assert info.name == "PROPTYPES_SILENT"
        assert info.default is False
        assert info.var_type is bool
        assert info.category == "diagnostics"

    @pytest.mark.unit
    def test_names_match_members(self):
        """Every EnvConfig name matches its enum member name."""
        for var in EnvVar:
            assert var.value.name == var.name


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_list_all(self):
        """Lists every variable without a category filter."""
        assert list_environment_variables() == list(EnvVar)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Filters variables by category."""
        result = list_environment_variables("types")
        assert result == [EnvVar.PROPTYPES_SENSIBLE_DEFAULTS]

    @pytest.mark.unit
    def test_unknown_category_is_empty(self):
        """Unknown categories yield no variables."""
        assert list_environment_variables("nope") == []
