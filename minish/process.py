"""Process class for builtin command execution"""

from typing import List, Optional, Callable

from .context import CommandContext
from .control_flow import ControlFlowException
from .exit_codes import EXIT_FAILURE
from .streams import InputStream, OutputStream, ErrorStream


class Process:
    """Represents a single builtin invocation with its streams and context"""

    def __init__(
        self,
        command: str,
        args: List[str],
        stdin: Optional[InputStream] = None,
        stdout: Optional[OutputStream] = None,
        stderr: Optional[ErrorStream] = None,
        executor: Optional[Callable] = None,
        context: Optional[CommandContext] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name
            args: Command arguments
            stdin: Input stream
            stdout: Output stream
            stderr: Error stream
            executor: Callable that executes the command
            context: CommandContext giving access to cwd, variables and lookup
        """
        self.command = command
        self.args = args
        self.stdin = stdin or InputStream.from_text('')
        self.stdout = stdout or OutputStream.to_buffer()
        self.stderr = stderr or ErrorStream.to_buffer()
        self.executor = executor
        self.context = context if context is not None else CommandContext()

        self.exit_code = 0

    def execute(self) -> int:
        """
        Execute the process

        Returns:
            Exit code (0 for success, non-zero for error)

        Raises:
            ControlFlowException: Propagated from the builtin (e.g. exit)
        """
        try:
            self.exit_code = self.executor(self)
        except KeyboardInterrupt:
            raise
        except ControlFlowException:
            raise
        except Exception as e:
            self.stderr.write(f"Error executing '{self.command}': {str(e)}\n")
            self.exit_code = EXIT_FAILURE
        finally:
            self.stdout.flush()
            self.stderr.flush()

        return self.exit_code

    def get_stdout(self) -> Optional[str]:
        """Get stdout contents"""
        return self.stdout.get_value()

    def get_stderr(self) -> Optional[str]:
        """Get stderr contents"""
        return self.stderr.get_value()

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
