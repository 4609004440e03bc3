"""Contracts for the session's external collaborators.

Why Protocol:
- Structural typing lets the console adapter, test doubles and any future
  front-end plug into the controller without inheriting from anything.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class InputSource(Protocol):
    """Supplies one raw line of text per call.

    Rules:
    - Blocking is allowed; it is the session's only suspension point.
    - When no further line can be produced, raise `InputStreamError`.
    """

    def read_line(self) -> str:
        ...


@runtime_checkable
class RandomSource(Protocol):
    """Minimal slice of `random.Random` used to draw the target."""

    def randint(self, a: int, b: int) -> int:
        ...
