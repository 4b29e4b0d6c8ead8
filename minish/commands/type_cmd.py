"""
TYPE command - describe how each name would be run.

Note: Module name is type_cmd.py because 'type' is a Python builtin.
"""

from ..process import Process
from ..resolver import ResolutionKind
from . import register_command


@register_command('type')
def cmd_type(process: Process) -> int:
    """
    Describe each name as a builtin, an executable path, or not found

    Usage: type name...
    """
    from ..builtins import classify

    exit_code = 0
    for name in process.args:
        if classify(name) is not None:
            process.stdout.write(f"{name} is a shell builtin\n")
            continue

        resolution = process.context.resolve_command(name)
        if resolution.kind is ResolutionKind.FOUND:
            process.stdout.write(f"{name} is {resolution.path}\n")
        else:
            process.stdout.write(f"{name}: not found\n")
            exit_code = 1

    return exit_code
