"""Target generation.

The generator is the only consumer of entropy in a session and is called
exactly once, when the session controller is built.
"""

from __future__ import annotations

import logging
import random

from core.domain.errors import EntropySourceError
from core.interfaces.io import RandomSource

logger = logging.getLogger(__name__)


class TargetGenerator:
    """Draws a uniformly distributed integer from an inclusive range."""

    def __init__(self, rng: RandomSource | None = None) -> None:
        # SystemRandom reads os.urandom; failures surface on the first draw.
        self._rng = rng or random.SystemRandom()

    def generate(self, low: int, high: int) -> int:
        if low > high:
            raise ValueError(f"empty range: low={low} > high={high}")

        try:
            value = self._rng.randint(low, high)
        except (OSError, NotImplementedError) as exc:
            raise EntropySourceError(f"entropy source unavailable: {exc}") from exc
        if not low <= value <= high:
            raise EntropySourceError(f"entropy source returned {value} outside [{low}, {high}]")

        logger.debug("Target drawn from [%d, %d]", low, high)
        return value
