from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from ..utils.math import saturating_sub
from ..utils.random_provider import RandomProvider

logger = logging.getLogger(__name__)

# Maps the enemy's current health and the battle RNG to the damage it deals this turn.
DamageGenerator = Callable[[int, RandomProvider], int]


def fixed_damage(amount: int) -> DamageGenerator:
    if amount < 0:
        raise ValueError("damage cannot be negative")

    def generate(_health: int, _rng: RandomProvider) -> int:
        return amount

    return generate


def enraged_damage(base: int, enraged: int, threshold: int) -> DamageGenerator:
    """Deal ``base`` damage, or ``enraged`` once health has fallen to ``threshold`` or below."""
    if base < 0 or enraged < 0:
        raise ValueError("damage cannot be negative")

    def generate(health: int, _rng: RandomProvider) -> int:
        return enraged if health <= threshold else base

    return generate


def random_damage(low: int, high: int, rng: Optional[RandomProvider] = None) -> DamageGenerator:
    """Uniform damage in [low, high] per turn.

    Rolls come from the battle's RNG, so a seeded session replays them. Pass
    ``rng`` to pin this generator to its own provider instead.
    """
    if low < 0 or high < low:
        raise ValueError("expected 0 <= low <= high")

    def generate(_health: int, battle_rng: RandomProvider) -> int:
        source = rng if rng is not None else battle_rng
        return source.randint(low, high)

    return generate


@dataclass
class Enemy:
    """
    A combat-only opponent, built at the start of a battle and dropped at its end.

    Attributes:
        name: Display name.
        health: Current health; saturates at zero.
        damage: Damage generator, called with current health and the battle RNG each time the enemy acts.
        xp_reward: Experience granted to the player on victory.
        flee_resistance: Probability in [0, 1] that a run attempt is blocked.
        max_health: Starting health; defaults to ``health``.
    """

    name: str
    health: int
    damage: DamageGenerator = field(repr=False)
    xp_reward: int = 0
    flee_resistance: float = 0.0
    max_health: int = 0

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Enemy.name must be a non-empty string")
        if self.health < 0:
            raise ValueError("Enemy health cannot be negative")
        if self.xp_reward < 0:
            raise ValueError("xp_reward cannot be negative")
        if not (0.0 <= self.flee_resistance <= 1.0):
            raise ValueError("flee_resistance must be within [0, 1]")
        if self.max_health <= 0:
            self.max_health = self.health

    @property
    def alive(self) -> bool:
        return self.health > 0

    def take_damage(self, amount: int) -> int:
        """Lose health, stopping at zero. Returns the damage actually applied."""
        if amount < 0:
            raise ValueError("Damage amount cannot be negative.")
        before = self.health
        self.health = saturating_sub(self.health, amount)
        logger.debug("%s takes %d damage (HP: %d/%d)", self.name, before - self.health, self.health, self.max_health)
        return before - self.health

    def roll_damage(self, rng: Optional[RandomProvider] = None) -> int:
        """Evaluate the damage generator against current health; never negative."""
        if rng is None:
            rng = RandomProvider()
        return max(0, int(self.damage(self.health, rng)))
