"""
World model: rooms, their directional links, and the objects inside them.

Declarative object behaviors live in ``wayfarer.world.effects`` and are
imported from there directly.
"""
from .direction import Direction
from .room import Room, RoomId
from .graph import WorldGraph
from .objects import AreaObject, Behavior
from .interaction import InteractionContext

__all__ = [
    "Direction",
    "Room",
    "RoomId",
    "WorldGraph",
    "AreaObject",
    "Behavior",
    "InteractionContext",
]
