"""Core utilities shared across proptypes."""

from .log import get_logger, is_silent, set_silent, setup_logging, warn

__all__ = ["get_logger", "setup_logging", "warn", "is_silent", "set_silent"]
