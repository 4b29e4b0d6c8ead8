"""
Environment - Abstract interface over process-wide shell state.

The working directory and environment variables outlive a single command.
Builtins and the resolver reach them only through this interface, so the
dispatcher can be exercised against in-process state without touching the
real process:
- OSEnvironment (the running process, used by the CLI)
- ShellEnvironment (private cwd and variables, used for embedding and tests)
"""

import os
from abc import ABC, abstractmethod
from typing import Dict, Optional

from loguru import logger

from .exceptions import DirectoryNotFoundError
from .path_manager import PathManager


class Environment(ABC):
    """
    Abstract interface for working directory and variable access.

    All implementations must provide these core operations.
    """

    @abstractmethod
    def get_current_dir(self) -> str:
        """
        Get the current working directory.

        Raises:
            OSError: If the directory can no longer be determined
        """
        pass

    @abstractmethod
    def set_current_dir(self, path: str) -> None:
        """
        Change the current working directory.

        Args:
            path: Target directory (absolute or relative to the current one)

        Raises:
            DirectoryNotFoundError: If path does not exist or is not a directory.
                The current directory is left unchanged.
        """
        pass

    @abstractmethod
    def get_env(self, name: str) -> Optional[str]:
        """
        Get an environment variable.

        Returns:
            The value, or None if the variable is unset
        """
        pass

    @abstractmethod
    def as_dict(self) -> Dict[str, str]:
        """Get a copy of all variables, as handed to child processes"""
        pass


class OSEnvironment(Environment):
    """Environment backed by the running process (os.getcwd / os.chdir / os.environ)"""

    def get_current_dir(self) -> str:
        return os.getcwd()

    def set_current_dir(self, path: str) -> None:
        try:
            os.chdir(path)
        except OSError as e:
            logger.debug("chdir {!r} failed: {}", path, e)
            raise DirectoryNotFoundError(path) from e
        logger.debug("cwd is now {}", path)

    def get_env(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def as_dict(self) -> Dict[str, str]:
        return dict(os.environ)


class ShellEnvironment(Environment):
    """
    Environment with its own working directory and variables.

    The working directory is tracked by a PathManager; directory changes are
    validated against the real filesystem but never change the process cwd.

    Example:
        >>> env = ShellEnvironment(cwd='/tmp', env={'PATH': '/usr/bin'})
        >>> env.get_env('PATH')
        '/usr/bin'
        >>> env.set_current_dir('..')
        >>> env.get_current_dir()
        '/'
    """

    def __init__(self, cwd: Optional[str] = None, env: Optional[Dict[str, str]] = None):
        self.path_manager = PathManager(cwd if cwd is not None else os.getcwd())
        self.env: Dict[str, str] = dict(os.environ) if env is None else dict(env)

    def get_current_dir(self) -> str:
        return self.path_manager.get_cwd()

    def set_current_dir(self, path: str) -> None:
        target = self.path_manager.resolve_path(path)
        # Same checks chdir(2) makes: a directory the caller may search
        if not os.path.isdir(target) or not os.access(target, os.X_OK):
            raise DirectoryNotFoundError(path)
        self.path_manager.change_directory(target)
        logger.debug("cwd is now {}", target)

    def get_env(self, name: str) -> Optional[str]:
        return self.env.get(name)

    def as_dict(self) -> Dict[str, str]:
        return dict(self.env)

    def __repr__(self):
        return (
            f"ShellEnvironment(cwd={self.get_current_dir()!r}, "
            f"env_vars={len(self.env)})"
        )
