"""Core logging implementation for proptypes.

Validation diagnostics are routed through `warn()`, which writes one line
per message to the ``proptypes`` logger. Output is observability only and
can be turned off with `set_silent()` or the ``PROPTYPES_SILENT`` and
``PROPTYPES_PRODUCTION`` environment variables.
"""

import logging
import sys
from typing import Optional

from proptypes.config import EnvVar, get_environment

__all__ = ["get_logger", "setup_logging", "warn", "is_silent", "set_silent"]

LOGGER_NAME = "proptypes"
WARN_PREFIX = "[proptypes warn]: "

_silent: Optional[bool] = None


def setup_logging(level: int = logging.INFO, stream=sys.stderr) -> None:
    """Configure basic logging.

    Args:
        level: Logging level.
        stream: Output stream.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=stream,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Name of the logger.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name or LOGGER_NAME)


def set_silent(flag: Optional[bool]) -> None:
    """Set the global silence switch.

    Args:
        flag: True to drop diagnostics, False to emit them, None to defer
            to the PROPTYPES_SILENT environment variable.
    """
    global _silent
    _silent = flag


def is_silent() -> bool:
    """Check whether diagnostics are currently suppressed."""
    if get_environment(EnvVar.PROPTYPES_PRODUCTION):
        return True
    if _silent is not None:
        return _silent
    return bool(get_environment(EnvVar.PROPTYPES_SILENT))


def warn(message: str) -> None:
    """Emit a validation diagnostic.

    Args:
        message: Diagnostic text, usually "<name> - <reason>".
    """
    if is_silent():
        return
    get_logger().warning("%s%s", WARN_PREFIX, message)
