"""CLI utility functions and error handling.

Provides exit codes, stderr/stdout output helpers and the ``KEY=VALUE``
argument parsing shared by tfhelm commands.

Example:
    from tfhelm_core.cli.utils import error_exit, ExitCode

    if not path.exists():
        error_exit("File not found", exit_code=ExitCode.FILE_NOT_FOUND, path=str(path))
"""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from typing import NoReturn


class ExitCode(IntEnum):
    """Standard exit codes for CLI commands."""

    SUCCESS = 0
    """Command completed successfully."""

    GENERAL_ERROR = 1
    """General error (catch-all for failures)."""

    USAGE_ERROR = 2
    """Invalid usage (bad arguments, missing required options)."""

    FILE_NOT_FOUND = 3
    """Required file or directory not found."""

    VALIDATION_ERROR = 5
    """Input validation failed (bad values, overrides or manifests)."""


def error(message: str, **context: str | int | bool | None) -> None:
    """Print an error message to stderr.

    Example:
        error("File not found", path="/path/to/file")
        # Output: Error: File not found (path=/path/to/file)
    """
    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items() if v is not None)
        full_message = f"Error: {message} ({context_str})"
    else:
        full_message = f"Error: {message}"

    click.echo(full_message, err=True)


def error_exit(
    message: str,
    exit_code: ExitCode = ExitCode.GENERAL_ERROR,
    **context: str | int | bool | None,
) -> NoReturn:
    """Print an error message to stderr and exit with a code.

    Raises:
        SystemExit: Always exits with the specified code.
    """
    error(message, **context)
    sys.exit(exit_code)


def success(message: str) -> None:
    """Print a result message to stdout."""
    click.echo(message)


def info(message: str) -> None:
    """Print an informational message to stderr."""
    click.echo(message, err=True)


def split_assignment(item: str, option: str) -> tuple[str, str]:
    """Split a ``KEY=VALUE`` argument at the first ``=``.

    Args:
        item: Raw argument.
        option: Option name for the error message.

    Returns:
        The key and value.

    Raises:
        SystemExit: If ``item`` has no ``=`` or an empty key.
    """
    key, sep, value = item.partition("=")
    if not sep or not key:
        error_exit(
            f"Invalid {option} value (expected KEY=VALUE): {item}",
            exit_code=ExitCode.USAGE_ERROR,
        )
    return key, value


__all__: list[str] = [
    "ExitCode",
    "error",
    "error_exit",
    "info",
    "split_assignment",
    "success",
]
