"""
Built-in shell commands registry.

The set of builtins is closed: BuiltinKind has one member per builtin and
every member must have a handler in the commands/ directory. Adding a
builtin means adding a member here and a module there.
"""

from enum import Enum
from typing import Callable, Optional

from .commands import load_all_commands


class BuiltinKind(Enum):
    """Builtin commands, valued by their command name"""
    ECHO = "echo"
    TYPE = "type"
    EXIT = "exit"
    PWD = "pwd"
    CD = "cd"


BUILTINS = load_all_commands()

_missing = [kind.value for kind in BuiltinKind if kind.value not in BUILTINS]
if _missing:
    raise RuntimeError(f"builtins without a handler: {', '.join(_missing)}")


def classify(name: str) -> Optional[BuiltinKind]:
    """
    Look a command name up among the builtins.

    Matching is exact and case-sensitive.

    Args:
        name: The command name to look up

    Returns:
        The matching BuiltinKind, or None

    Example:
        >>> classify('cd')
        <BuiltinKind.CD: 'cd'>
        >>> classify('CD') is None
        True
    """
    try:
        return BuiltinKind(name)
    except ValueError:
        return None


def get_builtin(kind: BuiltinKind) -> Callable:
    """
    Get the handler for a builtin.

    Example:
        >>> handler = get_builtin(BuiltinKind.ECHO)
        >>> handler(process)
    """
    return BUILTINS[kind.value]
