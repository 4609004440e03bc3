"""Console input adapter (Rich).

Why an adapter:
- The session only knows the `InputSource` contract; prompt rendering and
  terminal reads stay out of the core.
- End-of-file is translated into the core's `InputStreamError` here, at the
  edge where it happens.
"""

from __future__ import annotations

from rich.console import Console

from core.domain.errors import InputStreamError
from core.interfaces.io import InputSource

PROMPT = "Please input your guess: "


class ConsoleInput(InputSource):
    """Reads one guess per call from the terminal."""

    def __init__(self, console: Console | None = None, *, prompt: str = PROMPT) -> None:
        self._console = console or Console()
        self._prompt = prompt

    def read_line(self) -> str:
        try:
            return self._console.input(self._prompt)
        except EOFError as exc:
            raise InputStreamError("input stream closed") from exc
        except OSError as exc:
            raise InputStreamError(f"failed to read line: {exc}") from exc
