"""
Wayfarer package root.

Headless domain logic for a small turn-based text adventure:
- A world graph of rooms joined by directional exits (one-way or two-way)
- Area objects whose behaviors mutate the player and the world
- A player with health, experience, a weapon and a name-keyed flag store
- A turn-based battle engine resolving player vs enemy encounters

Terminal I/O (colored output, prompts, cutscene pacing) lives in
``wayfarer.interface`` and is composed by ``wayfarer.session``.
"""
from .errors import (
    WayfarerError,
    UnknownRoomError,
    DuplicateObjectError,
    InteractionError,
    BattleOverError,
    SettingsError,
)
from .player import FlagStore, Player, Weapon
from .world import AreaObject, Direction, InteractionContext, Room, RoomId, WorldGraph
from .combat import BattleCommand, BattleEngine, BattleState, Enemy

__version__ = "0.3.0"

__all__ = [
    "WayfarerError",
    "UnknownRoomError",
    "DuplicateObjectError",
    "InteractionError",
    "BattleOverError",
    "SettingsError",
    "FlagStore",
    "Player",
    "Weapon",
    "AreaObject",
    "Direction",
    "InteractionContext",
    "Room",
    "RoomId",
    "WorldGraph",
    "BattleCommand",
    "BattleEngine",
    "BattleState",
    "Enemy",
    "__version__",
]
