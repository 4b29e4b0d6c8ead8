"""Interactive prompt loop for minish"""

from typing import Optional

from loguru import logger

from .dispatcher import Dispatcher
from .environment import Environment, OSEnvironment
from .exit_codes import EXIT_SUCCESS, ExitOutcome
from .lexer import tokenize
from .streams import ErrorStream, InputStream, OutputStream

DEFAULT_PROMPT = "$ "


class Shell:
    """
    Reads one line at a time, runs it, and prompts again.

    Example:
        >>> shell = Shell(stdin=InputStream.from_text("echo hi\\nexit 3\\n"))
        >>> shell.run()
        3
    """

    def __init__(
        self,
        environment: Optional[Environment] = None,
        stdin: Optional[InputStream] = None,
        stdout: Optional[OutputStream] = None,
        stderr: Optional[ErrorStream] = None,
        prompt: str = DEFAULT_PROMPT,
    ):
        self.environment = environment or OSEnvironment()
        self.stdin = stdin or InputStream.from_stdin()
        self.stdout = stdout or OutputStream.from_stdout()
        self.stderr = stderr or ErrorStream.from_stderr()
        self.prompt = prompt
        self.dispatcher = Dispatcher(self.environment, self.stdout, self.stderr)

    def execute(self, line: str) -> ExitOutcome:
        """
        Tokenize and dispatch a single line.

        Args:
            line: Raw input line (a trailing newline is ignored)

        Returns:
            ExitOutcome of the command
        """
        parsed = tokenize(line, self.stderr)
        outcome = self.dispatcher.dispatch(parsed)
        if not parsed.is_empty:
            logger.debug("{!r} finished with status {}", parsed, outcome.status)
        return outcome

    def run(self) -> int:
        """
        Run the prompt loop until exit or end of input.

        Returns:
            Status the interpreter should exit with (0 at end of input)
        """
        while True:
            self.stdout.write(self.prompt)
            self.stdout.flush()

            line = self.stdin.readline()
            if not line:
                # End of input: leave the terminal on a fresh line
                self.stdout.write("\n")
                self.stdout.flush()
                logger.debug("end of input")
                return EXIT_SUCCESS

            outcome = self.execute(line.rstrip("\r\n"))
            if outcome.should_exit:
                return outcome.status
