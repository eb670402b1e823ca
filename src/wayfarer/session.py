from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Callable, Dict, Optional

from .combat.enemy import Enemy
from .combat.engine import BattleEngine, BattleState
from .commands import HELP_ENTRIES, HELP_TITLE, UNIMPLEMENTED, Command
from .interface.console import Console, Style
from .interface.cutscene import Cutscene
from .interface.pacing import Pacer
from .interface.prompt import Prompter
from .player import Player
from .settings import Settings
from .utils.random_provider import RandomProvider
from .world.direction import Direction
from .world.graph import WorldGraph
from .world.interaction import InteractionContext
from .world.objects import AreaObject
from .world.room import Room

logger = logging.getLogger(__name__)

CANCEL_WORDS = ("", "cancel")


class SessionEnd(Enum):
    QUIT = auto()
    DEFEAT = auto()
    END_OF_INPUT = auto()


class GameSession:
    """The exploration command loop for one player in one world.

    Exactly one command is processed at a time; object behaviors, battles and
    cutscenes all run to completion inside that command.
    """

    def __init__(
        self,
        world: WorldGraph,
        player: Player,
        *,
        console: Optional[Console] = None,
        prompter: Optional[Prompter] = None,
        settings: Optional[Settings] = None,
        rng: Optional[RandomProvider] = None,
        pacer: Optional[Pacer] = None,
    ) -> None:
        self.world = world
        self.player = player
        self.settings = settings if settings is not None else Settings()
        self.console = console if console is not None else Console(color=self.settings.display.color)
        self.prompter = prompter if prompter is not None else Prompter(self.console)
        self.rng = rng if rng is not None else RandomProvider(self.settings.battle.seed)
        if pacer is None:
            pacer = Pacer(enabled=self.settings.pacing.enabled, speed=self.settings.pacing.speed)
        self.pacer = pacer
        self.running = True
        self.ended: Optional[SessionEnd] = None
        self._handlers: Dict[Command, Callable[[], None]] = {
            Command.HELP: self.show_help,
            Command.LOCATION: self.describe_location,
            Command.OBJECTS: self.list_objects,
            Command.INTERACT: self.interact,
            Command.EXAMINE: self.examine,
            Command.SAVE: self.save,
            Command.QUIT: self.quit,
        }

    @property
    def room(self) -> Room:
        return self.world.room(self.player.location)

    def run(self) -> SessionEnd:
        """Process commands until the player quits, dies, or input runs out."""
        logger.info("Session started in %r", self.room.name)
        try:
            while self.running:
                self.handle(self.prompter.command())
        except EOFError:
            logger.info("Input closed; ending session")
            self.console.say()
            self._stop(SessionEnd.END_OF_INPUT)
        logger.info("Session ended: %s", self.ended.name if self.ended else "unknown")
        return self.ended or SessionEnd.QUIT

    def handle(self, command: Command) -> None:
        logger.debug("Handling command %s", command.value)
        direction = command.direction
        if direction is not None:
            self.move(direction)
        else:
            self._handlers[command]()
        # Object behaviors can hurt the player outside of battle too
        if self.running and not self.player.alive:
            self._die()

    # --- Commands ---

    def move(self, direction: Direction) -> bool:
        target = self.world.travel(self.player.location, direction)
        if target is None:
            self.console.error(f"You cannot go {direction.label} of here.")
            return False
        self.player.move_to(target)
        self.describe_location()
        return True

    def describe_location(self) -> None:
        room = self.room
        self.console.write(f"You are at {room.name}.", Style.EMPHASIS)
        if room.description:
            self.console.say(room.description)

    def list_objects(self) -> None:
        objects = self.room.list_objects()
        if not objects:
            self.console.say("There are no objects here.")
            return
        for obj in objects:
            self.console.say(obj.name)

    def interact(self, name: Optional[str] = None) -> bool:
        """Run an object's behavior. Returns False if nothing was interacted with."""
        obj = self._select_object("What do you want to interact with? ", name)
        if obj is None:
            return False
        ctx = InteractionContext(
            player=self.player,
            world=self.world,
            room_id=self.player.location,
            obj=obj,
            console=self.console,
            battle_runner=self.run_battle,
            cutscene_player=self.play,
        )
        obj.interact(ctx)
        return True

    def examine(self, name: Optional[str] = None) -> bool:
        obj = self._select_object("What do you want to examine? ", name)
        if obj is None:
            return False
        self.console.write(obj.name, Style.EMPHASIS)
        self.console.say()
        self.console.say(obj.description)
        return True

    def show_help(self) -> None:
        self.console.info(HELP_TITLE)
        self.console.say()
        self.console.info("Commands:")
        self.console.say()
        for name, description in HELP_ENTRIES:
            line = f"{name}: {description}"
            if Command(name) in UNIMPLEMENTED:
                line += " (UNIMPLEMENTED)"
            self.console.info(line)

    def save(self) -> None:
        self.console.warn("This feature is currently not implemented.")

    def quit(self) -> None:
        self.console.say("Goodbye.")
        self._stop(SessionEnd.QUIT)

    # --- Collaborators handed to object behaviors ---

    def run_battle(self, enemy: Enemy) -> BattleState:
        engine = BattleEngine(
            self.player,
            enemy,
            rng=self.rng,
            console=self.console,
            pacer=self.pacer,
            settings=self.settings.battle,
        )
        outcome = engine.run(self.prompter.battle_command)
        if outcome is BattleState.DEFEAT:
            self._die()
        return outcome

    def play(self, cutscene: Cutscene) -> None:
        cutscene.play(self.console, self.pacer, Style.SPEECH)

    # --- Helpers ---

    def _select_object(self, question: str, name: Optional[str]) -> Optional[AreaObject]:
        if name is None:
            name = self.prompter.ask(question)
        if name.strip().lower() in CANCEL_WORDS:
            self.console.hint("Cancelled.")
            return None
        obj = self.room.get_object(name)
        if obj is None:
            self.console.error("That object does not exist.")
            self.console.hint("Type objects to see all objects in this area.")
            self.console.say()
        return obj

    def _die(self) -> None:
        logger.info("Player died in %r", self.room.name)
        self.console.error("You have died. Your journey ends here.")
        self._stop(SessionEnd.DEFEAT)

    def _stop(self, reason: SessionEnd) -> None:
        self.running = False
        if self.ended is None:
            self.ended = reason
