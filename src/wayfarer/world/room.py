from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, NewType, Optional

from ..errors import DuplicateObjectError
from ..utils.text import normalize
from .direction import Direction

if TYPE_CHECKING:
    from .objects import AreaObject

logger = logging.getLogger(__name__)

RoomId = NewType("RoomId", int)


@dataclass(eq=False)
class Room:
    """
    A node of the world graph.

    Rooms are owned by a WorldGraph and referred to everywhere else by their
    RoomId handle, so every path that reaches a room sees the same mutable
    object. Equality is identity.

    Attributes:
        id: Handle assigned by the owning WorldGraph.
        name: Display label, also resolvable through WorldGraph.find().
        description: Free text shown with the location.
        exits: At most one neighbor per Direction. Unexplored edges are simply absent.
    """

    id: RoomId
    name: str
    description: str = ""
    exits: Dict[Direction, RoomId] = field(default_factory=dict)
    _objects: Dict[str, "AreaObject"] = field(default_factory=dict, repr=False)

    def __str__(self) -> str:
        return self.name

    # --- Exits ---

    def exit(self, direction: Direction) -> Optional[RoomId]:
        return self.exits.get(direction)

    def set_exit(self, direction: Direction, target: RoomId) -> None:
        previous = self.exits.get(direction)
        self.exits[direction] = target
        if previous is not None and previous != target:
            logger.debug("Room %r: %s exit rewired %s -> %s", self.name, direction.value, previous, target)

    # --- Objects ---

    def add_object(self, obj: "AreaObject") -> None:
        """Add an object keyed by its normalized name.

        Raises:
            DuplicateObjectError: If an object with the same normalized name is already here.
        """
        key = obj.key
        if key in self._objects:
            raise DuplicateObjectError(f"Room {self.name!r} already has an object named {obj.name!r}")
        self._objects[key] = obj
        logger.debug("Added object %r to room %r", obj.name, self.name)

    def remove_object(self, name: str) -> Optional["AreaObject"]:
        """Remove and return the object with this name, or None if absent."""
        removed = self._objects.pop(normalize(name), None)
        if removed is not None:
            logger.debug("Removed object %r from room %r", removed.name, self.name)
        return removed

    def get_object(self, name: str) -> Optional["AreaObject"]:
        return self._objects.get(normalize(name))

    def has_object(self, name: str) -> bool:
        return normalize(name) in self._objects

    def list_objects(self) -> List["AreaObject"]:
        """All objects in this room ordered by normalized name."""
        return [self._objects[key] for key in sorted(self._objects)]

    def object_names(self) -> List[str]:
        return sorted(self._objects)
