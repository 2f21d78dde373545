"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Isolation of the process-wide switches (silence, environment)
- A fresh prop types namespace per test
- Diagnostic capture helpers
"""

from __future__ import annotations

import logging
from typing import Callable, Generator

import pytest
from dotenv import load_dotenv

from proptypes.core.log import set_silent
from proptypes.registry import PropTypes

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Global Switches
# =============================================================================


@pytest.fixture(autouse=True)
def _loud_diagnostics(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Emit diagnostics during tests regardless of the developer's .env."""
    for name in (
        "PROPTYPES_SILENT",
        "PROPTYPES_PRODUCTION",
        "PROPTYPES_SENSIBLE_DEFAULTS",
    ):
        monkeypatch.delenv(name, raising=False)
    set_silent(False)
    yield
    set_silent(None)


# =============================================================================
# Common Test Fixtures
# =============================================================================


@pytest.fixture
def types() -> PropTypes:
    """Create an isolated prop types namespace.

    Returns:
        A PropTypes instance with built-in sensible defaults and no
        extensions.
    """
    return PropTypes(sensible_defaults=True)


@pytest.fixture
def diagnostics(caplog: pytest.LogCaptureFixture) -> Callable[[], list[str]]:
    """Collect diagnostics emitted on the proptypes logger.

    Returns:
        Callable returning the messages logged so far, oldest first.
    """
    caplog.set_level(logging.WARNING, logger="proptypes")

    def collect() -> list[str]:
        return [
            record.getMessage()
            for record in caplog.records
            if record.name == "proptypes"
        ]

    return collect
