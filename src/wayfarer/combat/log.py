from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CombatEvent:
    """A log event emitted during a battle.

    Common event types: "start", "attack", "retaliate", "flee", "victory", "defeat".
    """

    turn: int
    type: str
    message: str
    data: Optional[Dict[str, Any]] = None


class CombatLog:
    """Lightweight in-memory record of one battle's notable events."""

    def __init__(self) -> None:
        self._events: List[CombatEvent] = []

    def add(self, turn: int, event_type: str, message: str, **data: Any) -> CombatEvent:
        ev = CombatEvent(turn=turn, type=event_type, message=message, data=data or None)
        self._events.append(ev)
        # Forward to standard logging for visibility if configured.
        if event_type in ("victory", "defeat", "flee"):
            logger.info(message)
        else:
            logger.debug(message)
        return ev

    def events(self) -> List[CombatEvent]:
        return list(self._events)

    def of_type(self, event_type: str) -> List[CombatEvent]:
        return [ev for ev in self._events if ev.type == event_type]

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        self._events.clear()
