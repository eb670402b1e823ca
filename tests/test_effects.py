import pytest

from wayfarer.combat import BattleState, Enemy, fixed_damage
from wayfarer.errors import InteractionError, UnknownRoomError
from wayfarer.player import Player, Weapon
from wayfarer.world import AreaObject, Direction, InteractionContext, WorldGraph
from wayfarer.world.effects import (
    Battle,
    ClearFlag,
    Consume,
    Equip,
    GrantXp,
    Heal,
    Hurt,
    Link,
    Monologue,
    MoveTo,
    RaiseMaxHealth,
    RequireFlag,
    Say,
    Sequence,
    SetFlag,
    SpawnRoom,
)


class Scene:
    """A two-room world with one object under test in the first room."""

    def __init__(self, console, behavior, **ctx_kwargs):
        self.world = WorldGraph()
        self.hall = self.world.add_room("Hall")
        self.yard = self.world.add_room("Yard")
        self.obj = AreaObject("Thing", "A thing.", behavior)
        self.world.room(self.hall).add_object(self.obj)
        self.player = Player(location=self.hall)
        self.console = console
        self.ctx = InteractionContext(
            player=self.player,
            world=self.world,
            room_id=self.hall,
            obj=self.obj,
            console=console,
            **ctx_kwargs,
        )

    def use(self):
        self.obj.interact(self.ctx)


def test_say(console):
    scene = Scene(console, Say("Hello there."))
    scene.use()
    assert console.lines == ["Hello there."]


def test_set_and_clear_flags(console):
    scene = Scene(console, Sequence(SetFlag("lever"), SetFlag("bell"), ClearFlag("bell")))
    scene.use()

    assert scene.player.flags.is_set("lever")
    assert "bell" not in scene.player.flags


class TestRequireFlag:
    def test_branches_on_flag(self, console):
        scene = Scene(console, RequireFlag("key", then=Say("Open."), otherwise=Say("It's locked.")))

        scene.use()
        scene.player.flags.set("key")
        scene.use()

        assert console.lines == ["It's locked.", "Open."]

    def test_negate_runs_then_only_while_flag_is_unset(self, console):
        scene = Scene(
            console,
            RequireFlag("taken", negate=True, then=Sequence(Say("Taken."), SetFlag("taken")), otherwise=Say("Empty.")),
        )

        scene.use()
        scene.use()

        assert console.lines == ["Taken.", "Empty."]

    def test_missing_otherwise_does_nothing(self, console):
        scene = Scene(console, RequireFlag("key", then=Say("Open.")))
        scene.use()
        assert console.lines == []


class TestLockedDoor:
    def door(self):
        return RequireFlag(
            "key",
            then=Sequence(Say("The door opens."), SpawnRoom("Cellar", Direction.WEST, "Damp."), Consume()),
            otherwise=Say("It's locked."),
        )

    def test_without_key_nothing_changes(self, console):
        scene = Scene(console, self.door())

        scene.use()

        assert console.lines == ["It's locked."]
        assert scene.world.find("Cellar") is None
        assert scene.world.travel(scene.hall, Direction.WEST) is None
        assert scene.world.room(scene.hall).has_object("Thing")

    def test_with_key_spawns_linked_room_and_removes_door(self, console):
        scene = Scene(console, self.door())
        scene.player.flags.set("key")

        scene.use()

        cellar = scene.world.find("Cellar")
        assert cellar is not None
        assert scene.world.travel(scene.hall, Direction.WEST) == cellar
        assert scene.world.travel(cellar, Direction.EAST) == scene.hall
        assert scene.world.room(cellar).description == "Damp."
        assert not scene.world.room(scene.hall).has_object("Thing")
        # The player does not move unless asked to
        assert scene.player.location == scene.hall


def test_spawn_room_reuses_existing_room(console):
    scene = Scene(console, SpawnRoom("Yard", Direction.NORTH, two_way=False, enter=True))
    rooms_before = len(scene.world)

    scene.use()

    assert len(scene.world) == rooms_before
    assert scene.world.travel(scene.hall, Direction.NORTH) == scene.yard
    assert scene.world.travel(scene.yard, Direction.SOUTH) is None
    assert scene.player.location == scene.yard


def test_spawn_room_with_objects(console):
    crate = AreaObject("Crate", "Empty.", Say("Nothing."))
    scene = Scene(console, SpawnRoom("Shed", Direction.EAST, objects=(crate,)))

    scene.use()

    shed = scene.world.require("Shed")
    assert scene.world.room(shed).get_object("crate") is crate


class TestLinksAndMoves:
    def test_link_two_way(self, console):
        scene = Scene(console, Link(Direction.SOUTH, "yard"))
        scene.use()

        assert scene.world.travel(scene.hall, Direction.SOUTH) == scene.yard
        assert scene.world.travel(scene.yard, Direction.NORTH) == scene.hall

    def test_link_one_way(self, console):
        scene = Scene(console, Link(Direction.SOUTH, "Yard", two_way=False))
        scene.use()

        assert scene.world.travel(scene.hall, Direction.SOUTH) == scene.yard
        assert scene.world.travel(scene.yard, Direction.NORTH) is None

    def test_move_to(self, console):
        scene = Scene(console, MoveTo("Yard"))
        scene.use()

        assert scene.player.location == scene.yard
        assert console.lines == ["You are now at Yard."]

    def test_unknown_room_names_raise(self, console):
        scene = Scene(console, MoveTo("Moon"))
        with pytest.raises(UnknownRoomError):
            scene.use()
        assert scene.player.location == scene.hall


class TestPlayerEffects:
    def test_heal_and_hurt(self, console):
        scene = Scene(console, Sequence(Hurt(4), Heal(1), Heal()))
        scene.use()

        assert scene.player.health == 10
        assert console.lines == [
            "You lose 4 health (6/10).",
            "You recover 1 health (7/10).",
            "You recover 3 health (10/10).",
        ]

    def test_equip_grant_xp_and_raise_max_health(self, console):
        scene = Scene(console, Sequence(Equip(Weapon.SWORD), GrantXp(50), RaiseMaxHealth(2)))
        scene.use()

        assert scene.player.weapon is Weapon.SWORD
        assert scene.player.xp == 50
        assert scene.player.max_health == 12
        assert "You equip the sword (5 damage)." in console.lines
        assert "You gain 50 experience." in console.lines

    def test_consume_removes_the_object(self, console):
        scene = Scene(console, Consume())
        scene.use()

        assert scene.world.room(scene.hall).list_objects() == []
        assert scene.ctx.consume() is False


class TestBattle:
    def test_branches_on_outcome_with_a_fresh_enemy_each_time(self, console):
        built = []
        outcomes = [BattleState.FLED, BattleState.VICTORY]

        def goblin():
            enemy = Enemy("Goblin", 5, fixed_damage(1))
            built.append(enemy)
            return enemy

        def runner(enemy):
            return outcomes.pop(0)

        scene = Scene(
            console,
            Battle(goblin, on_victory=Sequence(Say("Won."), Consume()), on_fled=Say("Fled.")),
            battle_runner=runner,
        )

        scene.use()
        scene.use()

        assert console.lines == ["Fled.", "Won."]
        assert len(built) == 2
        assert built[0] is not built[1]
        assert not scene.world.room(scene.hall).has_object("Thing")

    def test_defeat_branch(self, console):
        scene = Scene(
            console,
            Battle(lambda: Enemy("Wolf", 3, fixed_damage(1)), on_defeat=Say("Lost.")),
            battle_runner=lambda enemy: BattleState.DEFEAT,
        )
        scene.use()
        assert console.lines == ["Lost."]

    def test_without_a_runner_the_interaction_fails(self, console):
        scene = Scene(console, Battle(lambda: Enemy("Wolf", 3, fixed_damage(1))))
        with pytest.raises(InteractionError):
            scene.use()


class TestMonologue:
    LINES = (("A troll lives below.", 1500), ("Be careful.", 1000))

    def test_uses_the_cutscene_player(self, console):
        played = []
        scene = Scene(console, Monologue("Elder", self.LINES), cutscene_player=played.append)

        scene.use()

        assert len(played) == 1
        assert played[0].lines() == ["Elder: A troll lives below.", "Elder: Be careful."]
        assert played[0].total_wait_ms == 2500
        assert console.lines == []

    def test_falls_back_to_plain_output(self, console):
        scene = Scene(console, Monologue("Elder", self.LINES))
        scene.use()
        assert console.lines == ["Elder: A troll lives below.", "Elder: Be careful."]


def test_plain_function_behaviors(console):
    def ring(ctx):
        ctx.say(f"The {ctx.obj.name.lower()} rings in the {ctx.room.name.lower()}.")

    scene = Scene(console, ring)
    scene.use()
    assert console.lines == ["The thing rings in the hall."]
