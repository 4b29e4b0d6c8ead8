"""Exit status constants and the per-command outcome returned by dispatch."""

from dataclasses import dataclass

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_NOT_EXECUTABLE = 126
EXIT_COMMAND_NOT_FOUND = 127


@dataclass(frozen=True)
class ExitOutcome:
    """
    Result of dispatching one command line.

    Attributes:
        status: Exit status of the command that just ran
        should_exit: True when the interpreter itself must terminate with status
    """

    status: int = EXIT_SUCCESS
    should_exit: bool = False

    @classmethod
    def proceed(cls, status: int = EXIT_SUCCESS) -> 'ExitOutcome':
        """Keep looping; remember the command's status."""
        return cls(status=status, should_exit=False)

    @classmethod
    def terminate(cls, status: int = EXIT_SUCCESS) -> 'ExitOutcome':
        """Stop the interpreter with the given status."""
        return cls(status=status, should_exit=True)
