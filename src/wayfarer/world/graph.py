from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Optional

from ..errors import UnknownRoomError
from ..utils.text import normalize
from .direction import Direction
from .room import Room, RoomId

if TYPE_CHECKING:
    from .objects import AreaObject

logger = logging.getLogger(__name__)


class WorldGraph:
    """Arena of rooms joined by directional exits.

    Rooms are stored by value in the arena and exits hold RoomId handles, so
    cycles never pass through ownership. Resolving a handle always yields the
    one shared Room; mutations made through any path are visible through all
    others.

    Usage:
        world = WorldGraph()
        clearing = world.add_room("Clearing")
        cave = world.add_room("Cave")
        world.attach(clearing, cave, Direction.SOUTH)
        world.travel(clearing, Direction.SOUTH)  # -> cave
    """

    def __init__(self) -> None:
        self._rooms: List[Room] = []

    def __len__(self) -> int:
        return len(self._rooms)

    def __iter__(self) -> Iterator[Room]:
        return iter(self._rooms)

    def __contains__(self, room_id: object) -> bool:
        return isinstance(room_id, int) and 0 <= room_id < len(self._rooms)

    def add_room(
        self,
        name: str,
        description: str = "",
        objects: Iterable["AreaObject"] = (),
    ) -> RoomId:
        room_id = RoomId(len(self._rooms))
        room = Room(id=room_id, name=name, description=description)
        for obj in objects:
            room.add_object(obj)
        self._rooms.append(room)
        logger.debug("Created room %r with id=%d", name, room_id)
        return room_id

    def room(self, room_id: RoomId) -> Room:
        if room_id not in self:
            raise UnknownRoomError(f"No room with id {room_id!r}")
        return self._rooms[room_id]

    def rooms(self) -> List[Room]:
        return list(self._rooms)

    def find(self, name: str) -> Optional[RoomId]:
        """Return the handle of the first room whose normalized name matches."""
        wanted = normalize(name)
        for room in self._rooms:
            if normalize(room.name) == wanted:
                return room.id
        return None

    def require(self, name: str) -> RoomId:
        room_id = self.find(name)
        if room_id is None:
            raise UnknownRoomError(f"No room named {name!r}")
        return room_id

    # --- Links ---

    def attach_oneway(self, source: RoomId, target: RoomId, direction: Direction) -> None:
        """Point source's exit in direction at target. Nothing is set on target."""
        room = self.room(source)
        self.room(target)
        room.set_exit(direction, target)
        logger.debug("Linked %r -%s-> %r", room.name, direction.value, self._rooms[target].name)

    def attach(self, a: RoomId, b: RoomId, direction: Direction) -> None:
        """Link a to b in direction and b back to a in the opposite direction."""
        self.attach_oneway(a, b, direction)
        self.attach_oneway(b, a, direction.flip())

    def travel(self, room_id: RoomId, direction: Direction) -> Optional[RoomId]:
        """Neighbor handle in direction, or None if there is no exit. Pure lookup."""
        return self.room(room_id).exit(direction)

    def exits(self, room_id: RoomId) -> Dict[Direction, RoomId]:
        return dict(self.room(room_id).exits)
