"""
PWD command - print working directory.
"""

from ..process import Process
from . import register_command
from .base import validate_arg_count, handle_generic_error


@register_command('pwd')
def cmd_pwd(process: Process) -> int:
    """
    Print working directory

    Usage: pwd
    """
    if not validate_arg_count(process, max_args=0):
        return 1

    try:
        cwd = process.context.cwd
    except OSError as e:
        return handle_generic_error(process, e)

    process.stdout.write(f"{cwd}\n")
    return 0
