"""Routing parsed commands to builtins or external programs"""

from typing import Optional

from loguru import logger

from .builtins import BuiltinKind, classify, get_builtin
from .context import CommandContext
from .control_flow import ExitShell
from .environment import Environment
from .exceptions import CommandNotFoundError, NotExecutableError, SpawnError
from .exit_codes import ExitOutcome
from .launcher import ProcessLauncher
from .lexer import ParsedCommand
from .process import Process
from .resolver import ExecutableResolver, ResolutionKind
from .streams import ErrorStream, OutputStream


class Dispatcher:
    """
    Decides how a parsed command runs and runs it.

    Builtins are tried first, then the search path. The three lookup
    outcomes each have their own report:
    - found: the program is launched and waited for
    - found but not executable: '<name> is not executable' on stderr
    - not found: '<name>: command not found' on stdout

    Only the exit builtin ends the interpreter; every other path returns an
    ExitOutcome that keeps the loop going.
    """

    def __init__(
        self,
        environment: Environment,
        stdout: Optional[OutputStream] = None,
        stderr: Optional[ErrorStream] = None,
        resolver: Optional[ExecutableResolver] = None,
        launcher: Optional[ProcessLauncher] = None,
    ):
        self.environment = environment
        self.stdout = stdout or OutputStream.from_stdout()
        self.stderr = stderr or ErrorStream.from_stderr()
        self.resolver = resolver or ExecutableResolver(environment)
        self.launcher = launcher or ProcessLauncher()
        self.context = CommandContext(environment=environment, resolver=self.resolver)

    def dispatch(self, parsed: ParsedCommand) -> ExitOutcome:
        """
        Run one parsed command.

        Args:
            parsed: Output of the tokenizer

        Returns:
            ExitOutcome telling the loop whether to continue
        """
        if parsed.is_empty:
            return ExitOutcome.proceed()

        kind = classify(parsed.name)
        if kind is not None:
            return self.run_builtin(kind, parsed)

        resolution = self.resolver.resolve(parsed.name)

        if resolution.kind is ResolutionKind.FOUND:
            return self.run_external(resolution.path, parsed)

        if resolution.kind is ResolutionKind.FOUND_NOT_EXECUTABLE:
            error = NotExecutableError(parsed.name, resolution.path)
            self.stderr.write(f"{error}\n")
            return ExitOutcome.proceed(error.exit_code)

        error = CommandNotFoundError(parsed.name)
        self.stdout.write(f"{error}\n")
        return ExitOutcome.proceed(error.exit_code)

    def run_builtin(self, kind: BuiltinKind, parsed: ParsedCommand) -> ExitOutcome:
        """Run a builtin handler in-process"""
        logger.debug("dispatch {} -> builtin {}", parsed.name, kind.name)
        process = Process(
            command=parsed.name,
            args=list(parsed.args),
            stdout=self.stdout,
            stderr=self.stderr,
            executor=get_builtin(kind),
            context=self.context,
        )

        try:
            status = process.execute()
        except ExitShell as e:
            logger.debug("exit requested with status {}", e.status)
            return ExitOutcome.terminate(e.status)

        return ExitOutcome.proceed(status)

    def run_external(self, path: str, parsed: ParsedCommand) -> ExitOutcome:
        """Launch an external program and wait for it"""
        logger.debug("dispatch {} -> {}", parsed.name, path)
        # Our buffered output must reach the terminal before the child's
        self.stdout.flush()
        self.stderr.flush()

        try:
            cwd = self.environment.get_current_dir()
        except OSError:
            cwd = None

        try:
            status = self.launcher.launch(
                path,
                list(parsed.args),
                argv0=parsed.name,
                cwd=cwd,
                env=self.environment.as_dict(),
            )
        except SpawnError as e:
            self.stderr.write(f"{e}\n")
            return ExitOutcome.proceed(e.exit_code)

        return ExitOutcome.proceed(status)
