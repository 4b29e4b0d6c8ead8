"""
Executable lookup on the search path.

The search path is read from the environment on every lookup, so a change
to PATH takes effect on the very next command.
"""

import os
import stat
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from loguru import logger

from .environment import Environment

PATH_SEPARATOR = ':'
EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class ResolutionKind(Enum):
    """Outcome of looking a command name up on the search path"""
    FOUND = "found"
    FOUND_NOT_EXECUTABLE = "found_not_executable"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Resolution:
    """
    Result of ExecutableResolver.resolve().

    Attributes:
        kind: Which of the three outcomes this is
        path: Candidate path for FOUND and FOUND_NOT_EXECUTABLE, else None
    """

    kind: ResolutionKind
    path: Optional[str] = None

    @classmethod
    def found(cls, path: str) -> 'Resolution':
        return cls(ResolutionKind.FOUND, path)

    @classmethod
    def not_executable(cls, path: str) -> 'Resolution':
        return cls(ResolutionKind.FOUND_NOT_EXECUTABLE, path)

    @classmethod
    def not_found(cls) -> 'Resolution':
        return cls(ResolutionKind.NOT_FOUND)

    @property
    def is_found(self) -> bool:
        return self.kind is ResolutionKind.FOUND


def _stat(path: str) -> Optional[os.stat_result]:
    try:
        return os.stat(path)
    except (OSError, ValueError):
        return None


def is_executable(path: str) -> bool:
    """
    Check if path is a regular file with any execute permission bit set.

    Args:
        path: Filesystem path

    Returns:
        True for an executable regular file, False otherwise (including missing files)
    """
    st = _stat(path)
    return st is not None and stat.S_ISREG(st.st_mode) and bool(st.st_mode & EXECUTE_BITS)


class ExecutableResolver:
    """
    Maps command names to executable files.

    A directory that holds a same-named file without execute permission does
    not stop the search: a later directory may hold an executable one. Only
    when the whole search path is exhausted is the last non-executable match
    reported.

    Example:
        >>> resolver = ExecutableResolver(ShellEnvironment(env={'PATH': '/usr/bin:/bin'}))
        >>> resolver.resolve('ls')
        Resolution(kind=<ResolutionKind.FOUND: 'found'>, path='/usr/bin/ls')
    """

    def __init__(self, environment: Environment):
        self.environment = environment

    def search_path(self) -> List[str]:
        """
        Read the current search path.

        Returns:
            Directories in lookup order; an empty PATH entry means the current
            directory. Empty list when PATH is unset.
        """
        value = self.environment.get_env('PATH')
        if value is None:
            return []
        return [entry or '.' for entry in value.split(PATH_SEPARATOR)]

    def resolve(self, name: str) -> Resolution:
        """
        Find the executable for a command name.

        Args:
            name: Command name; a name containing '/' is checked directly
                instead of being searched for

        Returns:
            Resolution.found(path), Resolution.not_executable(path), or
            Resolution.not_found()
        """
        if not name:
            return Resolution.not_found()

        if '/' in name:
            candidates = [self._absolute(name)]
        else:
            candidates = [self._absolute(os.path.join(directory, name))
                          for directory in self.search_path()]

        last_existing = None
        for candidate in candidates:
            st = _stat(candidate)
            if st is None:
                continue

            if stat.S_ISREG(st.st_mode) and st.st_mode & EXECUTE_BITS:
                logger.debug("resolved {} -> {}", name, candidate)
                return Resolution.found(candidate)

            logger.debug("skipping non-executable {}", candidate)
            last_existing = candidate

        if last_existing is not None:
            return Resolution.not_executable(last_existing)

        logger.debug("{} not found on search path", name)
        return Resolution.not_found()

    def _absolute(self, path: str) -> str:
        if os.path.isabs(path):
            return path
        try:
            cwd = self.environment.get_current_dir()
        except OSError:
            return path
        return os.path.join(cwd, path)
