"""
Custom exception hierarchy for minish.

This module defines a structured exception hierarchy that provides:
- Clear error categorization
- Consistent error messages
- Proper exit codes

Usage:
    from minish.exceptions import DirectoryNotFoundError

    try:
        environment.set_current_dir(path)
    except DirectoryNotFoundError as e:
        stderr.write(f"cd: {e}\\n")
        return e.exit_code
"""

from typing import Optional

from .exit_codes import (
    EXIT_COMMAND_NOT_FOUND,
    EXIT_FAILURE,
    EXIT_NOT_EXECUTABLE,
    EXIT_USAGE,
)


class ShellError(Exception):
    """
    Base class for all shell errors.

    All custom exceptions should inherit from this class.
    This allows catching all shell-specific errors with a single except clause.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = EXIT_FAILURE):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


# =============================================================================
# File System Errors
# =============================================================================

class FileSystemError(ShellError):
    """
    Base class for filesystem-related errors.

    Raised when working directory or path operations fail.
    """

    def __init__(self, message: str, path: Optional[str] = None, exit_code: int = EXIT_FAILURE):
        super().__init__(message, exit_code)
        self.path = path


class DirectoryNotFoundError(FileSystemError):
    """
    Raised when a directory cannot be entered.

    Example:
        raise DirectoryNotFoundError("/definitely/missing/path")
    """

    def __init__(self, path: str, message: Optional[str] = None):
        if message is None:
            message = f"{path}: No such file or directory"
        super().__init__(message, path, exit_code=EXIT_FAILURE)


# =============================================================================
# Command Errors
# =============================================================================

class CommandError(ShellError):
    """
    Base class for command-related errors.

    Raised when command resolution or execution fails.
    """

    def __init__(self, command: str, message: str, exit_code: int = EXIT_FAILURE):
        super().__init__(message, exit_code)
        self.command = command


class CommandNotFoundError(CommandError):
    """
    Raised when a command is neither a builtin nor on the search path.

    Example:
        raise CommandNotFoundError("nonexistent")
    """

    def __init__(self, command: str):
        message = f"{command}: command not found"
        super().__init__(command, message, exit_code=EXIT_COMMAND_NOT_FOUND)


class NotExecutableError(CommandError):
    """
    Raised when a command exists on the search path but cannot be executed.

    Example:
        raise NotExecutableError("notes.txt", "/usr/local/bin/notes.txt")
    """

    def __init__(self, command: str, path: Optional[str] = None):
        message = f"{command} is not executable"
        super().__init__(command, message, exit_code=EXIT_NOT_EXECUTABLE)
        self.path = path


class SpawnError(CommandError):
    """
    Raised when the operating system refuses to create a child process.

    Example:
        raise SpawnError("/usr/bin/tool", "Permission denied")
    """

    def __init__(self, command: str, details: str):
        message = f"{command}: {details}"
        super().__init__(command, message, exit_code=EXIT_NOT_EXECUTABLE)
        self.details = details


class TooManyArgumentsError(CommandError):
    """
    Raised when a builtin receives more arguments than it accepts.

    Example:
        raise TooManyArgumentsError("pwd")
    """

    def __init__(self, command: str):
        message = f"{command}: too many arguments"
        super().__init__(command, message, exit_code=EXIT_FAILURE)


# =============================================================================
# Parsing Errors
# =============================================================================

class ParsingError(ShellError):
    """
    Base class for parsing-related errors.

    Raised (or recorded as a warning) when tokenizing shell input.
    """

    def __init__(self, message: str, line: Optional[str] = None, position: Optional[int] = None):
        super().__init__(message, exit_code=EXIT_USAGE)
        self.line = line
        self.position = position


class UnmatchedQuoteError(ParsingError):
    """
    Recorded when a line ends inside a quoted region.

    The tokenizer does not raise this; it reports the message as a warning
    and keeps the words it collected.

    Example:
        UnmatchedQuoteError("echo 'hello", position=5)
    """

    def __init__(self, line: str, quote_char: str = "'", position: Optional[int] = None):
        super().__init__("unclosed quote", line=line, position=position)
        self.quote_char = quote_char
