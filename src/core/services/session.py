"""Guessing session orchestration.

The controller owns the target and drives the read → validate → compare →
feedback cycle. Everything user-facing (prompts, colors, exit codes) stays in
the CLI layer; the controller only reports through `SessionHooks`, which keeps
it reusable from tests or any other front-end.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from core.domain.errors import InputFormatError, InvalidTransitionError
from core.domain.models import (
    TARGET_HIGH,
    TARGET_LOW,
    ComparisonResult,
    SessionEvent,
    SessionOutcome,
    SessionState,
)
from core.interfaces.io import InputSource
from core.services.comparison import compare
from core.services.guess_parser import parse_guess
from core.services.target_generator import TargetGenerator

logger = logging.getLogger(__name__)


_TRANSITIONS: dict[tuple[SessionState, SessionEvent], SessionState] = {
    (SessionState.AWAITING_INPUT, SessionEvent.INPUT_RECEIVED): SessionState.VALIDATING,
    (SessionState.VALIDATING, SessionEvent.INPUT_REJECTED): SessionState.AWAITING_INPUT,
    (SessionState.VALIDATING, SessionEvent.GUESS_ACCEPTED): SessionState.COMPARING,
    (SessionState.COMPARING, SessionEvent.GUESS_MISSED): SessionState.CONTINUING,
    (SessionState.COMPARING, SessionEvent.GUESS_MATCHED): SessionState.WON,
    (SessionState.CONTINUING, SessionEvent.FEEDBACK_SENT): SessionState.AWAITING_INPUT,
}


def transition(state: SessionState, event: SessionEvent) -> SessionState:
    """Pure transition function of the session state machine."""

    try:
        return _TRANSITIONS[(state, event)]
    except KeyError:
        raise InvalidTransitionError(state, event) from None


@dataclass
class SessionHooks:
    """Optional callbacks for UI layers."""

    invalid_input: Callable[[str], None] | None = None
    guess: Callable[[int], None] | None = None
    feedback: Callable[[int, ComparisonResult], None] | None = None
    won: Callable[[SessionOutcome], None] | None = None


class SessionController:
    """One guessing session, from target draw to a winning guess.

    The target is drawn in the constructor, so an `EntropySourceError` aborts
    before any input is requested.
    """

    def __init__(
        self,
        input_source: InputSource,
        *,
        generator: TargetGenerator | None = None,
        hooks: SessionHooks | None = None,
    ) -> None:
        self._input = input_source
        self._hooks = hooks or SessionHooks()
        self._target = (generator or TargetGenerator()).generate(TARGET_LOW, TARGET_HIGH)
        self._state = SessionState.AWAITING_INPUT
        self._outcome: SessionOutcome | None = None
        logger.info("Session started")

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def target(self) -> int:
        return self._target

    @property
    def outcome(self) -> SessionOutcome | None:
        return self._outcome

    def _advance(self, event: SessionEvent) -> None:
        new_state = transition(self._state, event)
        logger.debug("%s --%s--> %s", self._state.value, event.value, new_state.value)
        self._state = new_state

    def handle(self, raw: str) -> ComparisonResult | None:
        """Process one line that has already been read.

        Returns the comparison result, or `None` when the line was rejected.
        """

        self._advance(SessionEvent.INPUT_RECEIVED)

        try:
            guess = parse_guess(raw)
        except InputFormatError as exc:
            logger.debug("Rejected input %r (%s)", exc.raw, exc.failure.value)
            self._advance(SessionEvent.INPUT_REJECTED)
            if self._hooks.invalid_input:
                self._hooks.invalid_input(raw)
            return None

        self._advance(SessionEvent.GUESS_ACCEPTED)
        if self._hooks.guess:
            self._hooks.guess(guess)

        result = compare(guess, self._target)
        if result is ComparisonResult.EQUAL:
            self._advance(SessionEvent.GUESS_MATCHED)
            self._outcome = SessionOutcome(target=self._target, guess=guess)
            logger.info("Session won")
            if self._hooks.won:
                self._hooks.won(self._outcome)
            return result

        self._advance(SessionEvent.GUESS_MISSED)
        if self._hooks.feedback:
            self._hooks.feedback(guess, result)
        self._advance(SessionEvent.FEEDBACK_SENT)
        return result

    def run(self) -> SessionOutcome:
        """Loop until a guess matches.

        `InputStreamError` raised by the input source propagates unchanged.
        """

        while self._outcome is None:
            self.handle(self._input.read_line())
        return self._outcome
