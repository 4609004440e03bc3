from __future__ import annotations

from core.domain.models import ComparisonResult


def compare(guess: int, target: int) -> ComparisonResult:
    """Order `guess` against `target`."""

    if guess < target:
        return ComparisonResult.LESS
    if guess > target:
        return ComparisonResult.GREATER
    return ComparisonResult.EQUAL
