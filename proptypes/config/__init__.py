"""Centralized configuration management for proptypes.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from proptypes.config import EnvVar, get_environment
    >>>
    >>> silent = get_environment(EnvVar.PROPTYPES_SILENT)  # Returns bool
    >>> for var in list_environment_variables("diagnostics"):
    ...     info = get_environment_info(var)
    ...     print(f"{info.name}: {info.description}")

Environment Variable Categories:
    diagnostics: Warning output, production mode and log level
    types: Behavior of the built-in prop types
"""

from .lib import (
    # Core types
    EnvConfig,
    EnvVar,
    # Main interface
    get_environment,
    get_environment_info,
    # Introspection
    list_environment_variables,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Introspection
    "list_environment_variables",
]
