from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable

logger = logging.getLogger(__name__)

Sleeper = Callable[[float], None]


@dataclass
class Pacer:
    """Blocking wall-clock pauses for message pacing.

    ``speed`` divides every wait (2.0 halves them); a disabled pacer or a
    non-positive speed never sleeps. Tests inject ``sleeper`` or use
    ``Pacer.instant()``.
    """

    enabled: bool = True
    speed: float = 1.0
    sleeper: Sleeper = field(default=time.sleep, repr=False)

    @classmethod
    def instant(cls) -> "Pacer":
        return cls(enabled=False)

    def seconds_for(self, wait_ms: int) -> float:
        if not self.enabled or self.speed <= 0 or wait_ms <= 0:
            return 0.0
        return wait_ms / 1000.0 / self.speed

    def pause(self, wait_ms: int) -> None:
        seconds = self.seconds_for(wait_ms)
        if seconds > 0:
            self.sleeper(seconds)
