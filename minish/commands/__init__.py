"""
Builtin command handlers.

Each module registers one handler under its command name with
@register_command. load_all_commands() imports every module listed in
COMMAND_MODULES so the registry is complete.
"""

import importlib
from typing import Callable, Dict

BUILTINS: Dict[str, Callable] = {}

COMMAND_MODULES = (
    'cd',
    'echo',
    'exit_cmd',
    'pwd',
    'type_cmd',
)


def register_command(name: str):
    """
    Register a handler under a command name.

    Example:
        @register_command('echo')
        def cmd_echo(process: Process) -> int:
            ...
    """
    def decorator(func: Callable) -> Callable:
        BUILTINS[name] = func
        return func
    return decorator


def load_all_commands() -> Dict[str, Callable]:
    """Import every handler module and return the populated registry"""
    for module_name in COMMAND_MODULES:
        importlib.import_module(f'{__name__}.{module_name}')
    return BUILTINS
