"""CLI entry point for proptypes.

This module acts as the central entry point for the project's developer
tools. It delegates commands to the appropriate handlers.
"""

import argparse
import logging
import subprocess
import sys

from dotenv import load_dotenv

from proptypes.config import (
    EnvVar,
    get_environment,
    get_environment_info,
    list_environment_variables,
)
from proptypes.core.log import get_logger, setup_logging

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")


# =============================================================================
# Env Command
# =============================================================================


def cmd_env(args: argparse.Namespace) -> int:
    """List environment variables with their current values."""
    variables = list_environment_variables(args.category)
    if not variables:
        logger.error(f"Unknown category: {args.category}")
        return 1

    for var in variables:
        info = get_environment_info(var)
        value = get_environment(var)
        marker = "" if value == info.default else " (overridden)"
        print(f"{info.name}={value!r}{marker}")
        if args.verbose and info.description:
            print(f"    [{info.category}] {info.description}")
    return 0


def handle_env_command(argv: list[str]) -> int:
    """Handle env-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . env",
        description="Show proptypes environment configuration",
    )
    parser.add_argument(
        "category",
        nargs="?",
        default=None,
        help="Only show variables of this category (diagnostics, types)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show descriptions",
    )
    args = parser.parse_args(argv)
    return cmd_env(args)


# =============================================================================
# Test Command
# =============================================================================


def cmd_test(extra_args: list[str]) -> int:
    """Run pytest with provided arguments and test tier options.

    Usage:
        python . test                # Run all tests
        python . test --unit         # Run only unit tests
        python . test --all          # Run all tests explicitly
        python . test -v             # Run with verbose output
        python . test -k "shape"     # Run tests matching pattern
    """
    tier_markers = {
        "--unit": ["-m", "unit"],
        "--all": [],
    }

    pytest_args: list[str] = []
    remaining_args: list[str] = []

    for arg in extra_args:
        if arg in tier_markers:
            pytest_args.extend(tier_markers[arg])
        else:
            remaining_args.append(arg)

    cmd = [sys.executable, "-m", "pytest", *pytest_args, *remaining_args]
    logger.info(f"Running: {' '.join(cmd)}")

    try:
        return subprocess.call(cmd)
    except KeyboardInterrupt:
        return 130


# =============================================================================
# Main
# =============================================================================


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\nCommands:")
    print("  env        Show environment configuration")
    print("  test       Run pytest with tier options")
    print("\nExamples:")
    print("  python . env -v                     # All variables with descriptions")
    print("  python . env diagnostics            # Warning related variables")
    print("  python . test --unit                # Run unit tests")


def main() -> int:
    """Main entry point for the CLI."""
    if len(sys.argv) < 2:
        show_help()
        return 1

    command = sys.argv[1]
    rest_args = sys.argv[2:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    commands = {
        "env": lambda: handle_env_command(rest_args),
        "test": lambda: cmd_test(rest_args),
    }

    if command in commands:
        level_name = get_environment(EnvVar.PROPTYPES_LOG_LEVEL).upper()
        setup_logging(level=getattr(logging, level_name, logging.INFO))
        return commands[command]()

    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
