from __future__ import annotations

from enum import Enum
from typing import Optional

from ..utils.text import normalize


class Direction(Enum):
    """The four cardinal directions a room exit can face."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    def flip(self) -> "Direction":
        """Return the opposite direction. flip(flip(d)) == d and no direction is its own opposite."""
        return _OPPOSITES[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, text: str) -> Optional["Direction"]:
        """Parse a direction word or its one-letter abbreviation; None if unrecognized."""
        return _ALIASES.get(normalize(text))


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

_ALIASES = {
    "north": Direction.NORTH,
    "n": Direction.NORTH,
    "south": Direction.SOUTH,
    "s": Direction.SOUTH,
    "east": Direction.EAST,
    "e": Direction.EAST,
    "west": Direction.WEST,
    "w": Direction.WEST,
}
