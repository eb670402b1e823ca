"""
The bundled adventure.

Map (two-way unless noted):

    Village -W- Village Road -W- Clearing (start)
                                    |
                                    S
                                   Cave <-------------------+
                                    |                       |
                                    S                 (one-way, W)
                                  Depths -E- Boss Room -N- Treasure Room
                                    |
                                    W (opened by the rusty door)
                                  Cellar

The Boss Room's north exit only appears once the troll is beaten; the way
out of the Treasure Room is a drop back into the Cave.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from ..combat.enemy import Enemy, enraged_damage, fixed_damage
from ..interface.console import Style
from ..interface.cutscene import Cutscene
from ..player import Weapon
from ..world.direction import Direction
from ..world.effects import (
    Battle,
    Consume,
    Equip,
    GrantXp,
    Heal,
    Hurt,
    Link,
    Monologue,
    RaiseMaxHealth,
    RequireFlag,
    Say,
    Sequence,
    SetFlag,
    SpawnRoom,
)
from ..world.graph import WorldGraph
from ..world.objects import AreaObject
from ..world.room import RoomId

logger = logging.getLogger(__name__)

CLEARING = "Clearing"
VILLAGE_ROAD = "Village Road"
VILLAGE = "Village"
CAVE = "Cave"
DEPTHS = "Depths"
BOSS_ROOM = "Boss Room"
TREASURE_ROOM = "Treasure Room"
CELLAR = "Cellar"

FLAG_KEY = "key"
FLAG_TROLL_DEFEATED = "troll defeated"
FLAG_STICK_TAKEN = "stick taken"
FLAG_CHEST_OPENED = "chest opened"


@dataclass(frozen=True)
class DemoWorld:
    world: WorldGraph
    start: RoomId


def cave_troll() -> Enemy:
    return Enemy(
        name="Cave Troll",
        health=12,
        damage=enraged_damage(base=1, enraged=3, threshold=4),
        xp_reward=40,
        flee_resistance=0.75,
    )


def goblin() -> Enemy:
    return Enemy(name="Goblin", health=5, damage=fixed_damage(1), xp_reward=10, flee_resistance=0.3)


def skeleton() -> Enemy:
    return Enemy(name="Skeleton", health=8, damage=fixed_damage(2), xp_reward=25, flee_resistance=0.5)


def _cellar_objects():
    return (
        AreaObject(
            "Skeleton",
            "A heap of bones that is not quite still.",
            Battle(
                skeleton,
                on_victory=Sequence(Say("The bones clatter to the floor for good."), Consume()),
                on_fled=Say("You back away. The bones settle, waiting."),
            ),
        ),
        AreaObject(
            "Cracked Flask",
            "A flask of something red and warm.",
            Sequence(RaiseMaxHealth(2), Heal(), Say("It tastes of iron."), Consume()),
        ),
    )


def _clearing_objects():
    return (
        AreaObject(
            "Sign",
            "A weathered wooden sign.",
            Say("West: Village. South: Cave. 'Beware the troll.'"),
        ),
    )


def _village_road_objects():
    return (
        AreaObject(
            "Goblin",
            "A goblin picking through a ditch. It has noticed you.",
            Battle(
                goblin,
                on_victory=Sequence(Say("The goblin scurries off into the fields."), Consume()),
                on_fled=Say("You leave the goblin to its ditch."),
            ),
        ),
    )


def _village_objects():
    return (
        AreaObject(
            "Healer",
            "An old woman tending a fire.",
            Sequence(Say("The healer presses a warm hand to your forehead."), Heal()),
        ),
        AreaObject(
            "Weapon Rack",
            "A rack of tools and the odd weapon.",
            RequireFlag(
                FLAG_STICK_TAKEN,
                negate=True,
                then=Sequence(Equip(Weapon.STICK), SetFlag(FLAG_STICK_TAKEN)),
                otherwise=Say("Nothing else here is worth carrying."),
            ),
        ),
        AreaObject(
            "Elder",
            "The village elder, leaning on a staff.",
            Monologue(
                "Elder",
                (
                    ("A troll has made the cave depths its home.", 1500),
                    ("Whatever it guards, it guards jealously.", 1500),
                    ("Find a weapon before you go down there.", 1000),
                ),
            ),
        ),
    )


def _cave_objects():
    return (
        AreaObject(
            "Loose Rock",
            "A rock that sits a little too neatly.",
            RequireFlag(
                FLAG_KEY,
                negate=True,
                then=Sequence(Say("Under the rock is a small iron key. You take it."), SetFlag(FLAG_KEY)),
                otherwise=Say("Just dirt under there now."),
            ),
        ),
        AreaObject(
            "Stalactite",
            "Sharp, and lower than it looks.",
            Sequence(Say("You crack your head on it."), Hurt(1)),
        ),
    )


def _depths_objects():
    return (
        AreaObject(
            "Rusty Door",
            "A door flaked with rust. It has a keyhole.",
            RequireFlag(
                FLAG_KEY,
                then=Sequence(
                    Say("The key turns with a grinding sound and the door swings open to the west."),
                    SpawnRoom(CELLAR, Direction.WEST, "A damp cellar that smells of old bones.", _cellar_objects()),
                    Consume(),
                ),
                otherwise=Say("It's locked.", Style.WARNING),
            ),
        ),
    )


def _boss_room_objects():
    return (
        AreaObject(
            "Cave Troll",
            "A hulking troll squatting in front of a passage to the north.",
            Battle(
                cave_troll,
                on_victory=Sequence(
                    Say("The troll collapses, revealing a passage to the north."),
                    SetFlag(FLAG_TROLL_DEFEATED),
                    Link(Direction.NORTH, TREASURE_ROOM),
                    Consume(),
                ),
                on_fled=Say("You scramble back out of the troll's reach."),
            ),
        ),
    )


def _treasure_room_objects():
    return (
        AreaObject(
            "Chest",
            "An iron-banded chest.",
            RequireFlag(
                FLAG_CHEST_OPENED,
                negate=True,
                then=Sequence(
                    Say("Inside is a sword and a pile of old coins."),
                    Equip(Weapon.SWORD),
                    GrantXp(50),
                    SetFlag(FLAG_CHEST_OPENED),
                ),
                otherwise=Say("The chest is empty."),
            ),
        ),
    )


def build_demo_world() -> DemoWorld:
    world = WorldGraph()
    clearing = world.add_room(CLEARING, "A quiet clearing ringed by pines.", _clearing_objects())
    village_road = world.add_room(VILLAGE_ROAD, "A rutted road between fields.", _village_road_objects())
    village = world.add_room(VILLAGE, "A handful of cottages around a well.", _village_objects())
    cave = world.add_room(CAVE, "The mouth of a deep cave. Water drips somewhere.", _cave_objects())
    depths = world.add_room(DEPTHS, "Cold, dark tunnels far below the surface.", _depths_objects())
    boss_room = world.add_room(BOSS_ROOM, "A wide cavern littered with gnawed bones.", _boss_room_objects())
    treasure = world.add_room(
        TREASURE_ROOM,
        "A small chamber. A crack in the west wall drops back toward the cave.",
        _treasure_room_objects(),
    )

    world.attach(clearing, village_road, Direction.WEST)
    world.attach(village_road, village, Direction.WEST)
    world.attach(clearing, cave, Direction.SOUTH)
    world.attach(cave, depths, Direction.SOUTH)
    world.attach(depths, boss_room, Direction.EAST)
    # Boss Room -> Treasure Room is opened by beating the troll; the way back is one-way.
    world.attach_oneway(treasure, boss_room, Direction.SOUTH)
    world.attach_oneway(treasure, cave, Direction.WEST)

    logger.debug("Demo world built with %d rooms", len(world))
    return DemoWorld(world=world, start=clearing)


def intro_cutscene() -> Cutscene:
    return (
        Cutscene()
        .add("Welcome to the game!\n", 2000)
        .add("You find yourself in a strange clearing.", 2000)
        .add("There is a deep cave nearby.", 1500)
    )
