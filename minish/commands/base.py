"""
Base utilities for command implementations.

This module provides common helper functions that command modules can use
to reduce code duplication and maintain consistency.
"""

from typing import Optional

from ..exceptions import TooManyArgumentsError
from ..process import Process


def write_error(process: Process, message: str, prefix_command: bool = True):
    """
    Write an error message to stderr.

    Args:
        process: The process object
        message: The error message
        prefix_command: If True, prefix message with command name
    """
    if prefix_command:
        process.stderr.write(f"{process.command}: {message}\n")
    else:
        process.stderr.write(f"{message}\n")


def validate_arg_count(process: Process, max_args: Optional[int] = None) -> bool:
    """
    Validate the number of arguments.

    Args:
        process: The process object
        max_args: Maximum allowed arguments (None = unlimited)

    Returns:
        True if valid, False if invalid (error already written to stderr)
    """
    if max_args is not None and len(process.args) > max_args:
        write_error(process, str(TooManyArgumentsError(process.command)), prefix_command=False)
        return False

    return True


def handle_not_found_error(process: Process, filename: str,
                           command_name: Optional[str] = None) -> int:
    """
    Handle file/directory not found errors.

    Args:
        process: Process object with stderr stream
        filename: The file/path that was not found
        command_name: Optional command name (defaults to process.command)

    Returns:
        Exit code (always 1 for errors)
    """
    cmd = command_name or process.command
    process.stderr.write(f"{cmd}: {filename}: No such file or directory\n")
    return 1


def handle_generic_error(process: Process, error: Exception, context: str = "",
                         command_name: Optional[str] = None) -> int:
    """
    Handle generic errors with optional context.

    Args:
        process: Process object with stderr stream
        error: The exception that was caught
        context: Optional context string (e.g., filename, operation)
        command_name: Optional command name (defaults to process.command)

    Returns:
        Exit code (always 1 for errors)
    """
    cmd = command_name or process.command
    error_msg = getattr(error, 'strerror', None) or str(error)

    if context:
        process.stderr.write(f"{cmd}: {context}: {error_msg}\n")
    else:
        process.stderr.write(f"{cmd}: {error_msg}\n")

    return 1


__all__ = [
    'write_error',
    'validate_arg_count',
    'handle_not_found_error',
    'handle_generic_error',
]
