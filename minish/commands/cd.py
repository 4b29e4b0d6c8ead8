"""
CD command - change the working directory.
"""

from ..exceptions import FileSystemError
from ..process import Process
from . import register_command
from .base import handle_not_found_error

HOME_SHORTHAND = '~'
FALLBACK_HOME = '/'


@register_command('cd')
def cmd_cd(process: Process) -> int:
    """
    Change the working directory

    Usage: cd [dir]

    With no argument, or with '~', changes to $HOME ('/' when unset).
    Only the first argument is used.
    """
    if not process.args or process.args[0] == HOME_SHORTHAND:
        target = process.context.get_variable('HOME') or FALLBACK_HOME
    else:
        target = process.args[0]

    try:
        process.context.change_directory(target)
    except FileSystemError:
        return handle_not_found_error(process, target)

    return 0
