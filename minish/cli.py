"""minish command line entry point."""

from typing import Optional

import typer

from .logging_utils import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV, configure_logging
from .shell import DEFAULT_PROMPT, Shell

app = typer.Typer(name="minish", help="A minimal interactive command interpreter", add_completion=False)


@app.command()
def main(
    command: Optional[str] = typer.Option(None, "--command", "-c", help="Run one command line and exit"),
    prompt: str = typer.Option(DEFAULT_PROMPT, "--prompt", envvar="MINISH_PROMPT", help="Prompt string"),
    log_level: str = typer.Option(DEFAULT_LOG_LEVEL, "--log-level", envvar=LOG_LEVEL_ENV, help="Log level"),
) -> None:
    configure_logging(log_level)
    shell = Shell(prompt=prompt)

    if command is not None:
        outcome = shell.execute(command)
        raise typer.Exit(outcome.status)

    raise typer.Exit(shell.run())
