"""Guess-the-number CLI (Typer).

The command wires the console adapter and Rich rendering into a
`SessionController` and maps the core's fatal errors to exit codes:

- 0: the session was won.
- 1: the input stream ended before a winning guess.
- 2: no target could be drawn.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console

from adapters.console_input import ConsoleInput
from cli.ui_components import (
    print_banner,
    print_feedback,
    print_guess,
    print_invalid_input,
    print_revealed_target,
)
from core.config import AppSettings
from core.domain.errors import EntropySourceError, InputStreamError
from core.domain.models import ComparisonResult
from core.logging_config import setup_logging
from core.services.session import SessionController, SessionHooks
from core.services.target_generator import TargetGenerator

EXIT_INPUT_CLOSED = 1
EXIT_NO_ENTROPY = 2

app = typer.Typer(add_completion=False, help="Guess the number between 1 and 100.")

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


@app.command()
def play() -> None:
    """Guess the number: keep guessing until you hit the hidden value."""

    settings = AppSettings()
    setup_logging(settings.log_level, settings.log_file)

    print_banner(_console)

    controller: SessionController | None = None

    def on_feedback(guess: int, result: ComparisonResult) -> None:
        print_feedback(_console, result)
        if settings.reveal_target and controller is not None:
            print_revealed_target(_console, controller.target)

    hooks = SessionHooks(
        invalid_input=lambda raw: print_invalid_input(_console),
        guess=lambda guess: print_guess(_console, guess),
        feedback=on_feedback,
        won=lambda outcome: print_feedback(_console, ComparisonResult.EQUAL),
    )

    try:
        controller = SessionController(
            ConsoleInput(_console),
            generator=TargetGenerator(),
            hooks=hooks,
        )
    except EntropySourceError as exc:
        logger.info("Cannot start session: %s", exc)
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=EXIT_NO_ENTROPY) from exc

    try:
        controller.run()
    except InputStreamError as exc:
        logger.info("Session aborted: %s", exc)
        _err_console.print(f"\n[red]Error:[/red] {exc} before a winning guess.")
        raise typer.Exit(code=EXIT_INPUT_CLOSED) from exc


def run() -> None:
    app()
