from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, Optional

from ..errors import BattleOverError
from ..interface.console import Console, Style
from ..interface.pacing import Pacer
from ..settings import BattleSettings
from ..utils.random_provider import RandomProvider
from .commands import BATTLE_OPTIONS, BattleCommand
from .enemy import Enemy
from .log import CombatLog

if TYPE_CHECKING:
    from ..player import Player

logger = logging.getLogger(__name__)


class BattleState(Enum):
    """Battle state machine.

    AWAITING_COMMAND -> RESOLVING -> (AWAITING_COMMAND | VICTORY | FLED | DEFEAT)
    """

    AWAITING_COMMAND = auto()
    RESOLVING = auto()
    VICTORY = auto()
    FLED = auto()
    DEFEAT = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (BattleState.VICTORY, BattleState.FLED, BattleState.DEFEAT)


@dataclass(frozen=True)
class TurnResult:
    """Outcome of one processed battle command.

    Attributes:
        command: The command that was processed.
        state: Battle state after processing.
        consumed_turn: False for informational commands (no enemy action).
        damage_dealt: Damage the player dealt to the enemy.
        damage_taken: Damage the enemy dealt to the player.
        flee_succeeded: None unless a run was attempted.
        enemy_acted: Whether the enemy attacked this turn.
    """

    command: BattleCommand
    state: BattleState
    consumed_turn: bool
    damage_dealt: int = 0
    damage_taken: int = 0
    flee_succeeded: Optional[bool] = None
    enemy_acted: bool = False


class BattleEngine:
    """Turn loop resolving one player against one enemy.

    Per consuming turn the player acts first (attack or run), then the enemy
    retaliates unless the battle already ended. Rules that vary between
    conventions come from BattleSettings:

    - retaliate_on_killing_blow=False (default): the turn the enemy drops to 0
      ends in VICTORY immediately. When True, the enemy still strikes once; if
      that strike kills the player, the battle ends in DEFEAT.
    - punish_failed_flee=False (default): a failed run exchanges no damage.

    Experience is awarded here on victory. World consequences (doors, removing
    the boss object) are the caller's business after run() returns.
    """

    def __init__(
        self,
        player: "Player",
        enemy: Enemy,
        *,
        rng: Optional[RandomProvider] = None,
        console: Optional[Console] = None,
        pacer: Optional[Pacer] = None,
        settings: Optional[BattleSettings] = None,
        log: Optional[CombatLog] = None,
    ) -> None:
        self.player = player
        self.enemy = enemy
        self.settings = settings if settings is not None else BattleSettings()
        self.rng = rng if rng is not None else RandomProvider(self.settings.seed)
        self.console = console if console is not None else Console()
        self.pacer = pacer if pacer is not None else Pacer()
        self.log = log if log is not None else CombatLog()
        self.turn: int = 0
        self._state = BattleState.AWAITING_COMMAND
        self._started = False

    @property
    def state(self) -> BattleState:
        return self._state

    @property
    def is_over(self) -> bool:
        return self._state.is_terminal

    def start(self) -> None:
        """Announce the encounter. Safe to call more than once."""
        if self._started:
            return
        self._started = True
        message = f"The {self.enemy.name} wants to fight!"
        self.log.add(self.turn, "start", message, enemy=self.enemy.name, enemy_hp=self.enemy.health)
        self.console.write(message, Style.WARNING)
        self.console.write("Type options to see battle commands.", Style.HINT)

    def run(self, next_command: Callable[[], BattleCommand]) -> BattleState:
        """Keep asking for commands until the battle reaches a terminal state."""
        self.start()
        while not self._state.is_terminal:
            self.step(next_command())
        logger.info("Battle against %s ended: %s after %d turns", self.enemy.name, self._state.name, self.turn)
        return self._state

    def step(self, command: BattleCommand) -> TurnResult:
        """Process a single battle command.

        Raises:
            BattleOverError: If the battle already reached VICTORY, FLED or DEFEAT.
        """
        if self._state.is_terminal:
            raise BattleOverError(f"Battle against {self.enemy.name} is already over ({self._state.name})")
        self.start()

        if not command.consumes_turn:
            if command is BattleCommand.HEALTH:
                self._show_health()
            else:
                self._show_options()
            return TurnResult(command=command, state=self._state, consumed_turn=False)

        self._state = BattleState.RESOLVING
        self.turn += 1
        dealt = 0
        fled: Optional[bool] = None

        if command is BattleCommand.ATTACK:
            dealt = self._player_attacks()
            if not self.enemy.alive:
                self._win()
                if not self.settings.retaliate_on_killing_blow:
                    return self._finish(command, BattleState.VICTORY, dealt=dealt)
        else:
            fled = self._attempt_flee()
            if fled:
                return self._finish(command, BattleState.FLED, fled=True)
            if not self.settings.punish_failed_flee:
                return self._finish(command, BattleState.AWAITING_COMMAND, fled=False)

        taken = self._enemy_acts()
        if not self.player.alive:
            self._lose()
            state = BattleState.DEFEAT
        elif not self.enemy.alive:
            state = BattleState.VICTORY
        else:
            state = BattleState.AWAITING_COMMAND
        return self._finish(command, state, dealt=dealt, taken=taken, fled=fled, enemy_acted=True)

    # --- Resolution steps ---

    def _finish(
        self,
        command: BattleCommand,
        state: BattleState,
        *,
        dealt: int = 0,
        taken: int = 0,
        fled: Optional[bool] = None,
        enemy_acted: bool = False,
    ) -> TurnResult:
        self._state = state
        return TurnResult(
            command=command,
            state=state,
            consumed_turn=True,
            damage_dealt=dealt,
            damage_taken=taken,
            flee_succeeded=fled,
            enemy_acted=enemy_acted,
        )

    def _player_attacks(self) -> int:
        weapon = self.player.weapon
        dealt = self.enemy.take_damage(weapon.damage)
        message = f"You hit the {self.enemy.name} with your {weapon.label} for {dealt} damage."
        self.log.add(self.turn, "attack", message, damage=dealt, enemy_hp=self.enemy.health)
        self.console.write(message)
        return dealt

    def _attempt_flee(self) -> bool:
        roll = self.rng.random()
        blocked = roll < self.enemy.flee_resistance
        logger.debug(
            "Flee attempt: roll=%.5f, resistance=%.5f, blocked=%s", roll, self.enemy.flee_resistance, blocked
        )
        if blocked:
            message = "You failed to run away!"
            self.console.write(message, Style.WARNING)
        else:
            message = "You got away safely."
            self.console.write(message, Style.INFO)
        self.log.add(self.turn, "flee", message, roll=roll, success=not blocked)
        return not blocked

    def _enemy_acts(self) -> int:
        self.pacer.pause(self.settings.pre_attack_pause_ms)
        taken = self.player.take_damage(self.enemy.roll_damage(self.rng))
        message = (
            f"The {self.enemy.name} hits you for {taken} damage "
            f"({self.player.health}/{self.player.max_health} health left)."
        )
        self.log.add(self.turn, "retaliate", message, damage=taken, player_hp=self.player.health)
        self.console.write(message, Style.WARNING)
        return taken

    def _win(self) -> None:
        gained = self.player.gain_xp(self.enemy.xp_reward)
        message = f"You defeated the {self.enemy.name}! You gain {gained} experience."
        self.log.add(self.turn, "victory", message, xp=gained)
        self.console.write(message, Style.EMPHASIS)

    def _lose(self) -> None:
        message = f"You were defeated by the {self.enemy.name}."
        self.log.add(self.turn, "defeat", message)
        self.console.write(message, Style.ERROR)

    # --- Informational commands ---

    def _show_health(self) -> None:
        self.console.write(f"Your health: {self.player.health}/{self.player.max_health}", Style.INFO)
        self.console.write(f"{self.enemy.name} health: {self.enemy.health}/{self.enemy.max_health}", Style.INFO)

    def _show_options(self) -> None:
        self.console.write("Battle commands:", Style.INFO)
        for name, description in BATTLE_OPTIONS:
            self.console.write(f"{name}: {description}", Style.INFO)
