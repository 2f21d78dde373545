"""Tests for core logging module."""

import logging
from io import StringIO

import pytest

from .lib import WARN_PREFIX, get_logger, is_silent, set_silent, setup_logging, warn


class TestLogging:
    """Test core logging API."""

    def test_get_logger(self) -> None:
        """Verify logger instance creation."""
        logger = get_logger("test")
        assert logger.name == "test"
        assert isinstance(logger, logging.Logger)

    def test_get_logger_default_name(self) -> None:
        """Verify default logger name."""
        logger = get_logger()
        assert logger.name == "proptypes"

    def test_setup_logging(self) -> None:
        """Verify logging setup."""
        stream = StringIO()
        setup_logging(level=logging.DEBUG, stream=stream)
        logger = get_logger("test_setup")
        logger.debug("test message")

        # basicConfig might not apply if logging was already configured,
        # we only check the API contract.
        assert logger.level == logging.NOTSET


class TestWarn:
    """Test the diagnostic sink."""

    @pytest.mark.unit
    def test_warn_logs_with_prefix(self, caplog) -> None:
        """Diagnostics are logged at WARNING level with the library prefix."""
        with caplog.at_level(logging.WARNING, logger="proptypes"):
            warn("string - something is off")
        assert caplog.records[-1].levelno == logging.WARNING
        assert caplog.records[-1].getMessage() == (
            WARN_PREFIX + "string - something is off"
        )

    @pytest.mark.unit
    def test_silence_switch(self, caplog) -> None:
        """The silence switch drops diagnostics."""
        set_silent(True)
        with caplog.at_level(logging.WARNING, logger="proptypes"):
            warn("hidden")
        assert not caplog.records

    @pytest.mark.unit
    def test_silent_defers_to_environment(self, monkeypatch) -> None:
        """With no explicit switch the environment decides."""
        set_silent(None)
        monkeypatch.setenv("PROPTYPES_SILENT", "1")
        assert is_silent() is True
        monkeypatch.setenv("PROPTYPES_SILENT", "0")
        assert is_silent() is False

    @pytest.mark.unit
    def test_production_overrides_switch(self, monkeypatch) -> None:
        """Production mode silences diagnostics regardless of the switch."""
        set_silent(False)
        monkeypatch.setenv("PROPTYPES_PRODUCTION", "true")
        assert is_silent() is True
