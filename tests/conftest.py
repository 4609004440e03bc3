"""
Shared fixtures and test doubles for the game tests.
"""

from typing import Iterable

import pytest

from core.domain.errors import InputStreamError
from core.services.target_generator import TargetGenerator


class ScriptedInput:
    """InputSource that replays fixed lines, then reports a closed stream."""

    def __init__(self, lines: Iterable[str]):
        self._lines = list(lines)
        self.reads = 0

    def read_line(self) -> str:
        if self.reads >= len(self._lines):
            raise InputStreamError("input stream closed")
        line = self._lines[self.reads]
        self.reads += 1
        return line


class FixedRandom:
    """RandomSource that always returns the same value and records calls."""

    def __init__(self, value: int):
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return self.value


class BrokenRandom:
    """RandomSource whose entropy pool is unavailable."""

    def __init__(self, exc: Exception):
        self.exc = exc

    def randint(self, a: int, b: int) -> int:
        raise self.exc


@pytest.fixture
def fixed_generator():
    """Factory for generators that always draw the given target."""

    def _make(target: int = 50) -> TargetGenerator:
        return TargetGenerator(FixedRandom(target))

    return _make


@pytest.fixture(autouse=True)
def clean_game_env(monkeypatch):
    """Keep developer environment variables out of the tests."""
    for name in ("GUESS_GAME_LOG_LEVEL", "GUESS_GAME_LOG_FILE", "GUESS_GAME_REVEAL_TARGET"):
        monkeypatch.delenv(name, raising=False)
