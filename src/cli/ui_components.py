"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Gives every `ComparisonResult` exactly one rendering, checked in one place.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from core.domain.models import ComparisonResult

INVALID_INPUT_MESSAGE = "Invalid value is given. Guess again!"

FEEDBACK_MESSAGES: dict[ComparisonResult, tuple[str, str]] = {
    ComparisonResult.LESS: ("Too small", "yellow"),
    ComparisonResult.GREATER: ("Too big", "yellow"),
    ComparisonResult.EQUAL: ("You win!", "bold green"),
}


def print_banner(console: Console) -> None:
    """Print the introductory line once per session."""

    console.print(Text("Guess the number!", style="bold cyan"))


def feedback_text(result: ComparisonResult) -> Text:
    try:
        message, style = FEEDBACK_MESSAGES[result]
    except KeyError:
        raise ValueError(f"no feedback message for {result!r}") from None
    return Text(message, style=style)


def print_invalid_input(console: Console) -> None:
    console.print(Text(INVALID_INPUT_MESSAGE, style="red"))


def print_guess(console: Console, guess: int) -> None:
    console.print(Text.assemble("You guessed: ", (str(guess), "bold")))


def print_feedback(console: Console, result: ComparisonResult) -> None:
    console.print(feedback_text(result))


def print_revealed_target(console: Console, target: int) -> None:
    console.print(Text(f"Generated number was: {target}", style="dim"))
