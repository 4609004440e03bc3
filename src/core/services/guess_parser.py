"""Guess parsing.

`int()` is more lenient than the game protocol: it accepts a leading `+`,
digit-group underscores, non-ASCII digits and arbitrarily large values. The
parser narrows it to a plain base-10 literal inside the signed 64-bit domain.
"""

from __future__ import annotations

import re

from core.domain.errors import InputFormatError
from core.domain.models import GUESS_MAX, GUESS_MIN, ParseFailure

_INTEGER_LITERAL = re.compile(r"-?[0-9]+")

# Digits in GUESS_MAX; longer literals cannot fit and are never handed to int().
_MAX_DIGITS = len(str(GUESS_MAX))


def parse_guess(raw: str) -> int:
    """Convert one raw line into a guess.

    Leading and trailing whitespace (including the line terminator) is ignored.
    Raises `InputFormatError` with `ParseFailure.NOT_A_NUMBER` for empty text,
    anything other than an optional `-` followed by ASCII digits, and values
    outside the representable domain. No clamping to the target range happens.
    """

    text = raw.strip()
    if not _INTEGER_LITERAL.fullmatch(text):
        raise InputFormatError(raw, ParseFailure.NOT_A_NUMBER)

    digits = text.lstrip("-").lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        raise InputFormatError(raw, ParseFailure.NOT_A_NUMBER)

    value = -int(digits) if text.startswith("-") else int(digits)
    if value < GUESS_MIN or value > GUESS_MAX:
        raise InputFormatError(raw, ParseFailure.NOT_A_NUMBER)
    return value
