"""Domain models (Pydantic v2 + enums).

Why Pydantic here:
- The terminal outcome of a session is a small, immutable record; a frozen
  model gives validation and a stable `model_dump` for free.
- The enums are `str` based so they log and serialize as readable values.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

TARGET_LOW = 1
TARGET_HIGH = 100

# Signed 64-bit domain accepted by the guess parser.
GUESS_MIN = -(2**63)
GUESS_MAX = 2**63 - 1


class ComparisonResult(str, Enum):
    """Ordering of a guess relative to the target."""

    LESS = "less"
    GREATER = "greater"
    EQUAL = "equal"


class ParseFailure(str, Enum):
    """Reasons a raw line cannot become a guess."""

    NOT_A_NUMBER = "not_a_number"


class SessionState(str, Enum):
    AWAITING_INPUT = "awaiting_input"
    VALIDATING = "validating"
    COMPARING = "comparing"
    CONTINUING = "continuing"
    WON = "won"

    @property
    def is_terminal(self) -> bool:
        return self is SessionState.WON


class SessionEvent(str, Enum):
    INPUT_RECEIVED = "input_received"
    INPUT_REJECTED = "input_rejected"
    GUESS_ACCEPTED = "guess_accepted"
    GUESS_MISSED = "guess_missed"
    GUESS_MATCHED = "guess_matched"
    FEEDBACK_SENT = "feedback_sent"


class SessionOutcome(BaseModel):
    """Terminal value of a won session."""

    model_config = ConfigDict(frozen=True)

    target: int = Field(
        ...,
        ge=TARGET_LOW,
        le=TARGET_HIGH,
        description="Secret value drawn at session start.",
    )
    guess: int = Field(
        ...,
        description="The guess that matched the target.",
    )
