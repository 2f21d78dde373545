"""Logging micro API for proptypes."""

from .lib import get_logger, is_silent, set_silent, setup_logging, warn

__all__ = ["get_logger", "setup_logging", "warn", "is_silent", "set_silent"]
