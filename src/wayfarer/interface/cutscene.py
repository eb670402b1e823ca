from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from .console import Console, Style
from .pacing import Pacer

logger = logging.getLogger(__name__)


def speaker_line(name: str, message: str) -> str:
    """Format a line of dialogue as ``"<name>: <message>"``."""
    return f"{name}: {message}"


@dataclass(frozen=True)
class CutscenePart:
    message: str
    wait_ms: int = 0


class Cutscene:
    """An ordered script of messages, each followed by a pause."""

    def __init__(self, parts: Optional[Iterable[CutscenePart]] = None) -> None:
        self._parts: List[CutscenePart] = list(parts or [])

    def add(self, message: str, wait_ms: int = 0) -> "Cutscene":
        if wait_ms < 0:
            raise ValueError("wait_ms cannot be negative")
        self._parts.append(CutscenePart(message=message, wait_ms=wait_ms))
        return self

    def __len__(self) -> int:
        return len(self._parts)

    def __iter__(self) -> Iterator[CutscenePart]:
        return iter(self._parts)

    def lines(self) -> List[str]:
        return [part.message for part in self._parts]

    @property
    def total_wait_ms(self) -> int:
        return sum(part.wait_ms for part in self._parts)

    def play(self, console: Console, pacer: Optional[Pacer] = None, style: Style = Style.PLAIN) -> None:
        """Print every message, pausing after each one for its wait."""
        if pacer is None:
            pacer = Pacer()
        logger.debug("Playing cutscene: %d parts, %d ms of pauses", len(self._parts), self.total_wait_ms)
        for part in self._parts:
            console.write(part.message, style)
            pacer.pause(part.wait_ms)


def monologue(name: str, lines: Iterable[Tuple[str, int]]) -> Cutscene:
    """Build a cutscene where every (message, wait_ms) line is spoken by ``name``."""
    scene = Cutscene()
    for message, wait_ms in lines:
        scene.add(speaker_line(name, message), wait_ms)
    return scene
