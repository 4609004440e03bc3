"""Error taxonomy.

Recoverable:
- `InputFormatError`: absorbed by the session controller, which re-prompts.

Fatal (unwind to the CLI, which maps them to exit codes):
- `InputStreamError`: the input collaborator cannot supply another line.
- `EntropySourceError`: no target can be drawn.
"""

from __future__ import annotations

from core.domain.models import ParseFailure, SessionEvent, SessionState


class GameError(Exception):
    """Base class for every error raised by the game core."""


class InputFormatError(GameError, ValueError):
    def __init__(self, raw: str, failure: ParseFailure = ParseFailure.NOT_A_NUMBER) -> None:
        super().__init__(f"{raw!r} is not a valid integer guess")
        self.raw = raw
        self.failure = failure


class InputStreamError(GameError):
    """The input stream ended or failed before the session was won."""


class EntropySourceError(GameError):
    """The entropy source could not produce a target."""


class InvalidTransitionError(GameError, RuntimeError):
    def __init__(self, state: SessionState, event: SessionEvent) -> None:
        super().__init__(f"no transition from {state.value} on {event.value}")
        self.state = state
        self.event = event
