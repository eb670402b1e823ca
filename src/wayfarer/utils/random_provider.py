from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class RandomProvider:
    """
    Seeded source of randomness for battles.

    Flee rolls and random enemy damage draw from one instance owned by the
    session, so a given seed replays the same fights. Anything exposing
    ``random()`` and ``randint()`` can stand in for it.
    """

    seed: Optional[int] = None
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)
        if self.seed is not None:
            logger.debug("Battle RNG seeded with %d", self.seed)

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        return self._rng.random()

    def randint(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], both ends inclusive."""
        return self._rng.randint(low, high)
