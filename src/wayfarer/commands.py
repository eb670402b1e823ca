from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from .utils.text import normalize
from .world.direction import Direction


class Command(Enum):
    """Commands accepted at the main exploration prompt."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    HELP = "help"
    LOCATION = "location"
    OBJECTS = "objects"
    INTERACT = "interact"
    EXAMINE = "examine"
    SAVE = "save"
    QUIT = "quit"

    @property
    def direction(self) -> Optional[Direction]:
        """The movement direction for N/S/E/W commands, None for everything else."""
        return _DIRECTIONS.get(self)


_DIRECTIONS = {
    Command.NORTH: Direction.NORTH,
    Command.SOUTH: Direction.SOUTH,
    Command.EAST: Direction.EAST,
    Command.WEST: Direction.WEST,
}

_MOVES = {direction: command for command, direction in _DIRECTIONS.items()}

_ALIASES = {
    "help": Command.HELP,
    "location": Command.LOCATION,
    "loc": Command.LOCATION,
    "l": Command.LOCATION,
    "objects": Command.OBJECTS,
    "o": Command.OBJECTS,
    "interact": Command.INTERACT,
    "i": Command.INTERACT,
    "examine": Command.EXAMINE,
    "save": Command.SAVE,
    "quit": Command.QUIT,
    "exit": Command.QUIT,
    "close": Command.QUIT,
}


def parse_command(text: str) -> Optional[Command]:
    """Movement words and their abbreviations come from Direction.parse."""
    direction = Direction.parse(text)
    if direction is not None:
        return _MOVES[direction]
    return _ALIASES.get(normalize(text))


def parse_yes_no(text: str) -> Optional[bool]:
    """``y``/``yes`` -> True, ``n``/``no`` -> False, anything else -> None."""
    answer = normalize(text)
    if answer in ("y", "yes"):
        return True
    if answer in ("n", "no"):
        return False
    return None


HELP_TITLE = "--------------- HELP MENU ---------------"

HELP_ENTRIES: List[Tuple[str, str]] = [
    ("help", "displays this menu"),
    ("north", "moves the player north"),
    ("south", "moves the player south"),
    ("east", "moves the player east"),
    ("west", "moves the player west"),
    ("location", "displays your current location"),
    ("objects", "displays all objects in your current location"),
    ("interact", "interacts with an object in your current location"),
    ("examine", "describes an object in your current location"),
    ("save", "saves the game"),
    ("quit", "quits the game"),
]

UNIMPLEMENTED = {Command.SAVE}
