from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from ..errors import InteractionError
from ..interface.console import Console, Style
from .graph import WorldGraph
from .objects import AreaObject
from .room import Room, RoomId

if TYPE_CHECKING:
    from ..combat.engine import BattleState
    from ..combat.enemy import Enemy
    from ..interface.cutscene import Cutscene
    from ..player import Player

logger = logging.getLogger(__name__)

BattleRunner = Callable[["Enemy"], "BattleState"]
CutscenePlayer = Callable[["Cutscene"], None]


@dataclass
class InteractionContext:
    """Everything an object behavior may read or mutate during one interaction.

    The player and the world graph are handed over by reference; behaviors
    change them in place. Battles and cutscenes are delegated to the session
    through the optional runner callables.
    """

    player: "Player"
    world: WorldGraph
    room_id: RoomId
    obj: AreaObject
    console: Console
    battle_runner: Optional[BattleRunner] = None
    cutscene_player: Optional[CutscenePlayer] = None

    @property
    def room(self) -> Room:
        return self.world.room(self.room_id)

    def say(self, message: str, style: Style = Style.PLAIN) -> None:
        self.console.write(message, style)

    def consume(self) -> bool:
        """Remove the interacted object from the room it was found in."""
        removed = self.room.remove_object(self.obj.name)
        return removed is not None

    def start_battle(self, enemy: "Enemy") -> "BattleState":
        if self.battle_runner is None:
            raise InteractionError(f"{self.obj.name!r} started a battle but no battle runner is available")
        logger.info("Battle started by %r against %s", self.obj.name, enemy.name)
        return self.battle_runner(enemy)

    def play(self, cutscene: "Cutscene") -> None:
        if self.cutscene_player is not None:
            self.cutscene_player(cutscene)
            return
        for line in cutscene.lines():
            self.console.write(line)
