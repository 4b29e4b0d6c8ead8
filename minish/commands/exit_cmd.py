"""
EXIT command - terminate the interpreter.

Note: Module name is exit_cmd.py to avoid shadowing the exit builtin.
"""

import re

from ..control_flow import ExitShell
from ..process import Process
from . import register_command
from .base import write_error

STATUS_PATTERN = re.compile(r'[+-]?[0-9]+')

# Exit statuses are 8 bits wide; larger values wrap like they do in sh
STATUS_MODULUS = 256


@register_command('exit')
def cmd_exit(process: Process) -> int:
    """
    Terminate the interpreter with an optional exit status

    Usage: exit [n]

    Examples:
        exit          # Exit with status 0
        exit 42       # Exit with status 42
        exit 256      # Exit with status 0
    """
    if not process.args:
        raise ExitShell(0)

    if len(process.args) == 1 and STATUS_PATTERN.fullmatch(process.args[0]):
        raise ExitShell(int(process.args[0]) % STATUS_MODULUS)

    write_error(process, "too many arguments")
    return 1
