"""
Declarative object behaviors.

Each effect is a small dataclass that is callable with an InteractionContext,
so object behavior can be authored as data and composed:

    AreaObject(
        "Rusty Door",
        "A door flaked with rust. It has a keyhole.",
        RequireFlag(
            "key",
            then=Sequence(Say("The key turns."), SpawnRoom("Cellar", Direction.WEST), Consume()),
            otherwise=Say("It's locked."),
        ),
    )

Plain functions taking the context remain valid behaviors too.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional, Tuple

from ..combat.engine import BattleState
from ..interface.console import Style
from ..interface.cutscene import monologue
from ..player import Weapon
from .direction import Direction
from .objects import AreaObject, Behavior

if TYPE_CHECKING:
    from ..combat.enemy import Enemy
    from .interaction import InteractionContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Say:
    message: str
    style: Style = Style.PLAIN

    def __call__(self, ctx: "InteractionContext") -> None:
        ctx.say(self.message, self.style)


@dataclass(frozen=True)
class SetFlag:
    flag: str
    value: bool = True

    def __call__(self, ctx: "InteractionContext") -> None:
        ctx.player.flags.set(self.flag, self.value)


@dataclass(frozen=True)
class ClearFlag:
    flag: str

    def __call__(self, ctx: "InteractionContext") -> None:
        ctx.player.flags.clear(self.flag)


@dataclass(frozen=True)
class Heal:
    """Restore health; ``amount=None`` heals to full."""

    amount: Optional[int] = None

    def __call__(self, ctx: "InteractionContext") -> None:
        healed = ctx.player.heal(self.amount)
        ctx.say(
            f"You recover {healed} health ({ctx.player.health}/{ctx.player.max_health}).",
            Style.INFO,
        )


@dataclass(frozen=True)
class Hurt:
    amount: int

    def __call__(self, ctx: "InteractionContext") -> None:
        taken = ctx.player.take_damage(self.amount)
        ctx.say(
            f"You lose {taken} health ({ctx.player.health}/{ctx.player.max_health}).",
            Style.WARNING,
        )


@dataclass(frozen=True)
class GrantXp:
    amount: int

    def __call__(self, ctx: "InteractionContext") -> None:
        gained = ctx.player.gain_xp(self.amount)
        ctx.say(f"You gain {gained} experience.", Style.INFO)


@dataclass(frozen=True)
class RaiseMaxHealth:
    amount: int

    def __call__(self, ctx: "InteractionContext") -> None:
        ctx.player.raise_max_health(self.amount)
        ctx.say(f"Your maximum health is now {ctx.player.max_health}.", Style.INFO)


@dataclass(frozen=True)
class Equip:
    weapon: Weapon

    def __call__(self, ctx: "InteractionContext") -> None:
        ctx.player.equip(self.weapon)
        ctx.say(f"You equip the {self.weapon.label} ({self.weapon.damage} damage).", Style.INFO)


@dataclass(frozen=True)
class MoveTo:
    """Put the player in the named room."""

    room: str

    def __call__(self, ctx: "InteractionContext") -> None:
        target = ctx.world.require(self.room)
        ctx.player.move_to(target)
        ctx.say(f"You are now at {ctx.world.room(target).name}.", Style.EMPHASIS)


@dataclass(frozen=True)
class Link:
    """Connect the current room to an existing room by name."""

    direction: Direction
    room: str
    two_way: bool = True

    def __call__(self, ctx: "InteractionContext") -> None:
        target = ctx.world.require(self.room)
        if self.two_way:
            ctx.world.attach(ctx.room_id, target, self.direction)
        else:
            ctx.world.attach_oneway(ctx.room_id, target, self.direction)


@dataclass(frozen=True)
class SpawnRoom:
    """Create a room and link it to the current one.

    A room with the same name is reused rather than created twice.
    """

    name: str
    direction: Direction
    description: str = ""
    objects: Tuple[AreaObject, ...] = ()
    two_way: bool = True
    enter: bool = False

    def __call__(self, ctx: "InteractionContext") -> None:
        target = ctx.world.find(self.name)
        if target is None:
            target = ctx.world.add_room(self.name, self.description, self.objects)
            logger.info("Spawned room %r from %r", self.name, ctx.obj.name)
        if self.two_way:
            ctx.world.attach(ctx.room_id, target, self.direction)
        else:
            ctx.world.attach_oneway(ctx.room_id, target, self.direction)
        if self.enter:
            ctx.player.move_to(target)


@dataclass(frozen=True)
class Consume:
    """Remove the interacted object from its room."""

    def __call__(self, ctx: "InteractionContext") -> None:
        ctx.consume()


@dataclass(frozen=True)
class RequireFlag:
    """Run ``then`` if the flag is set (or unset, with ``negate``), else ``otherwise``."""

    flag: str
    then: Behavior
    otherwise: Optional[Behavior] = None
    negate: bool = False

    def __call__(self, ctx: "InteractionContext") -> None:
        passed = ctx.player.flags.is_set(self.flag) != self.negate
        logger.debug("Flag gate %r (negate=%s) on %r: %s", self.flag, self.negate, ctx.obj.name, passed)
        branch = self.then if passed else self.otherwise
        if branch is not None:
            branch(ctx)


@dataclass(frozen=True)
class Sequence:
    steps: Tuple[Behavior, ...] = field(default_factory=tuple)

    def __init__(self, *steps: Behavior) -> None:
        object.__setattr__(self, "steps", tuple(steps))

    def __call__(self, ctx: "InteractionContext") -> None:
        for step in self.steps:
            step(ctx)


@dataclass(frozen=True)
class Battle:
    """Start a battle with a freshly built enemy and branch on the outcome.

    Enemies are per-encounter, so a factory is stored rather than an instance.
    World consequences of winning (opening a door, removing the boss) belong in
    ``on_victory`` and run only after the battle engine has returned.
    """

    enemy: Callable[[], "Enemy"]
    on_victory: Optional[Behavior] = None
    on_fled: Optional[Behavior] = None
    on_defeat: Optional[Behavior] = None

    def __call__(self, ctx: "InteractionContext") -> None:
        outcome = ctx.start_battle(self.enemy())
        follow_up = {
            BattleState.VICTORY: self.on_victory,
            BattleState.FLED: self.on_fled,
            BattleState.DEFEAT: self.on_defeat,
        }.get(outcome)
        if follow_up is not None:
            follow_up(ctx)


@dataclass(frozen=True)
class Monologue:
    """A speaker delivering paced lines, each a (message, wait_ms) pair."""

    speaker: str
    lines: Tuple[Tuple[str, int], ...]

    def __call__(self, ctx: "InteractionContext") -> None:
        ctx.play(monologue(self.speaker, self.lines))
