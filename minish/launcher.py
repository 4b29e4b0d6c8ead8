"""Launching external programs with the interpreter's own standard streams"""

import subprocess
from typing import Dict, List, Optional

from loguru import logger

from .exceptions import SpawnError


class ProcessLauncher:
    """
    Runs an external program and blocks until it exits.

    The child inherits stdin, stdout and stderr from the interpreter; nothing
    is captured or buffered. Its exit status is returned for logging only.
    """

    def launch(
        self,
        path: str,
        args: List[str],
        argv0: Optional[str] = None,
        cwd: Optional[str] = None,
        env: Optional[Dict[str, str]] = None,
    ) -> int:
        """
        Spawn path and wait for it.

        Args:
            path: Executable to run
            args: Arguments after argv[0]
            argv0: Name the child sees as argv[0] (defaults to path)
            cwd: Working directory for the child (defaults to the interpreter's)
            env: Environment for the child (defaults to the interpreter's)

        Returns:
            The child's exit status

        Raises:
            SpawnError: If the operating system could not create the process
        """
        argv = [argv0 or path, *args]
        logger.debug("spawning {} argv={}", path, argv)

        try:
            completed = subprocess.run(argv, executable=path, cwd=cwd, env=env)
        except OSError as e:
            raise SpawnError(argv0 or path, e.strerror or str(e)) from e

        logger.debug("{} exited with status {}", path, completed.returncode)
        return completed.returncode
