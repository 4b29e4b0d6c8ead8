"""
Control flow signals raised by builtins.

These are not errors: they unwind from a builtin handler back to the
dispatcher, which turns them into an ExitOutcome. Process.execute() lets
them propagate untouched.
"""


class ControlFlowException(Exception):
    """Base class for control flow signals"""
    pass


class ExitShell(ControlFlowException):
    """Raised by the exit builtin to terminate the interpreter"""

    def __init__(self, status: int = 0):
        super().__init__(status)
        self.status = status
