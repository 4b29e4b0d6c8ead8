"""Path and working directory management for minish.

This module provides the PathManager class which handles:
- Current working directory tracking
- Path resolution (relative to absolute)
"""

import os


class PathManager:
    """Manages paths and working directory.

    This class encapsulates path-related operations including:
    - Tracking the current working directory
    - Resolving relative paths to absolute paths

    The tracked directory is independent of the real process cwd, so
    several shells can live in one process.

    Attributes:
        cwd: Current working directory
    """

    def __init__(self, initial_cwd: str = "/"):
        """Initialize the path manager.

        Args:
            initial_cwd: Initial current working directory (default: '/')
        """
        self.cwd = self.normalize_path(initial_cwd)

    def resolve_path(self, path: str) -> str:
        """Resolve a relative or absolute path to an absolute path.

        Args:
            path: Path to resolve (can be relative or absolute)

        Returns:
            Absolute, normalized path

        Examples:
            resolve_path('/foo/bar') -> '/foo/bar'
            resolve_path('bar') with cwd='/foo' -> '/foo/bar'
            resolve_path('../baz') with cwd='/foo/bar' -> '/foo/baz'
        """
        if not path:
            path = self.cwd

        if path.startswith("/"):
            return self.normalize_path(path)
        return self.normalize_path(os.path.join(self.cwd, path))

    def change_directory(self, path: str) -> None:
        """Change the current working directory.

        Args:
            path: New directory path (can be relative or absolute)

        Note:
            The path should be validated (exists and is a directory) by the
            caller before calling this.
        """
        self.cwd = self.resolve_path(path)

    def get_cwd(self) -> str:
        """Get the current working directory."""
        return self.cwd

    def normalize_path(self, path: str) -> str:
        """Normalize a path without resolving it relative to cwd.

        Args:
            path: Path to normalize

        Returns:
            Normalized path
        """
        normalized = os.path.normpath(path)
        # POSIX normpath keeps a leading '//' as-is
        if normalized.startswith("//"):
            normalized = "/" + normalized.lstrip("/")
        return normalized
