"""minish - a minimal interactive command interpreter"""

from loguru import logger

from .dispatcher import Dispatcher
from .environment import Environment, OSEnvironment, ShellEnvironment
from .exit_codes import ExitOutcome
from .lexer import NO_COMMAND, ParsedCommand, tokenize
from .resolver import ExecutableResolver, Resolution, ResolutionKind
from .shell import Shell

__version__ = "0.1.0"

logger.disable("minish")

__all__ = [
    "Dispatcher",
    "Environment",
    "ExecutableResolver",
    "ExitOutcome",
    "NO_COMMAND",
    "OSEnvironment",
    "ParsedCommand",
    "Resolution",
    "ResolutionKind",
    "Shell",
    "ShellEnvironment",
    "tokenize",
]
