"""
CommandContext - Encapsulates everything a builtin needs besides its streams.

Builtins talk to the working directory, the variables and the executable
lookup through this object instead of reaching for process globals.
"""

from dataclasses import dataclass, field
from typing import Optional

from .environment import Environment, OSEnvironment
from .resolver import ExecutableResolver, Resolution


@dataclass
class CommandContext:
    """
    Encapsulates all context needed for builtin execution.

    Example:
        >>> from minish.environment import ShellEnvironment
        >>> ctx = CommandContext(ShellEnvironment(cwd='/tmp', env={'HOME': '/home/alice'}))
        >>> ctx.cwd
        '/tmp'
        >>> ctx.get_variable('HOME')
        '/home/alice'
    """

    environment: Environment = field(default_factory=OSEnvironment)
    resolver: Optional[ExecutableResolver] = None

    def __post_init__(self):
        if self.resolver is None:
            self.resolver = ExecutableResolver(self.environment)

    @property
    def cwd(self) -> str:
        """Current working directory (may raise OSError)"""
        return self.environment.get_current_dir()

    def change_directory(self, path: str) -> None:
        """
        Change the working directory.

        Raises:
            DirectoryNotFoundError: If path is not an existing directory
        """
        self.environment.set_current_dir(path)

    def get_variable(self, name: str) -> Optional[str]:
        """Get an environment variable, or None if unset"""
        return self.environment.get_env(name)

    def resolve_command(self, name: str) -> Resolution:
        """Look a command name up on the search path"""
        return self.resolver.resolve(name)

    def __repr__(self):
        return f"CommandContext(environment={self.environment!r})"
