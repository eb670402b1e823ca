from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .utils.math import STAT_MAX, clamp, saturating_add, saturating_sub
from .utils.text import normalize
from .world.room import RoomId

logger = logging.getLogger(__name__)

BASE_MAX_HEALTH = 10


class Weapon(Enum):
    """Equippable weapons, each dealing a fixed amount of damage per hit."""

    FISTS = ("fists", 1)
    STICK = ("stick", 2)
    DAGGER = ("dagger", 3)
    SWORD = ("sword", 5)

    def __init__(self, label: str, damage: int) -> None:
        self.label = label
        self.damage = damage

    @classmethod
    def from_label(cls, label: str) -> "Weapon":
        wanted = normalize(label)
        for weapon in cls:
            if weapon.label == wanted:
                return weapon
        raise ValueError(f"Unknown weapon: {label!r}")


class FlagStore:
    """Name-keyed boolean flags that object behaviors use to gate each other.

    Names are normalized, so ``"Key"`` and ``" key "`` address the same flag.
    A flag that was never set reads as unset.
    """

    def __init__(self, initial: Optional[Dict[str, bool]] = None) -> None:
        self._flags: Dict[str, bool] = {}
        for name, value in (initial or {}).items():
            self.set(name, value)

    def set(self, name: str, value: bool = True) -> None:
        key = normalize(name)
        if not key:
            raise ValueError("Flag name must be a non-empty string")
        self._flags[key] = bool(value)
        logger.debug("Flag %r set to %s", key, bool(value))

    def clear(self, name: str) -> None:
        if self._flags.pop(normalize(name), None) is not None:
            logger.debug("Flag %r cleared", normalize(name))

    def is_set(self, name: str) -> bool:
        return self._flags.get(normalize(name), False)

    def get(self, name: str, default: Optional[bool] = None) -> Optional[bool]:
        return self._flags.get(normalize(name), default)

    def names(self) -> List[str]:
        return sorted(self._flags)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize(name) in self._flags

    def __len__(self) -> int:
        return len(self._flags)

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"FlagStore({self._flags!r})"


@dataclass
class Player:
    """
    The player character.

    Attributes:
        location: Handle of the current room in the WorldGraph.
        health: Current health, always within [0, max_health].
        max_health: Health ceiling (baseline 10).
        xp: Accumulated experience, saturating at STAT_MAX.
        weapon: Equipped weapon; its damage is dealt per attack.
        flags: Named flags read and written by object behaviors.
    """

    location: RoomId
    health: int = BASE_MAX_HEALTH
    max_health: int = BASE_MAX_HEALTH
    xp: int = 0
    weapon: Weapon = Weapon.FISTS
    flags: FlagStore = field(default_factory=FlagStore)

    def __post_init__(self) -> None:
        if self.max_health <= 0:
            raise ValueError("max_health must be positive")
        self.max_health = min(self.max_health, STAT_MAX)
        self.health = clamp(self.health, 0, self.max_health)
        self.xp = clamp(self.xp, 0, STAT_MAX)

    @property
    def alive(self) -> bool:
        return self.health > 0

    def take_damage(self, amount: int) -> int:
        """Lose health, stopping at zero. Returns the damage actually applied."""
        if amount < 0:
            raise ValueError("Damage amount cannot be negative.")
        before = self.health
        self.health = saturating_sub(self.health, amount)
        logger.debug("Player takes %d damage (HP: %d/%d)", before - self.health, self.health, self.max_health)
        return before - self.health

    def heal(self, amount: Optional[int] = None) -> int:
        """Restore health up to max_health; None restores fully. Returns the amount healed."""
        if amount is not None and amount < 0:
            raise ValueError("Heal amount cannot be negative.")
        before = self.health
        target = self.max_health if amount is None else saturating_add(self.health, amount, self.max_health)
        self.health = target
        return self.health - before

    def gain_xp(self, amount: int) -> int:
        """Add experience, saturating at STAT_MAX. Returns the experience actually gained."""
        if amount < 0:
            raise ValueError("Experience amount cannot be negative.")
        before = self.xp
        self.xp = saturating_add(self.xp, amount)
        if self.xp == STAT_MAX and before + amount > STAT_MAX:
            logger.info("Experience capped at %d", STAT_MAX)
        return self.xp - before

    def raise_max_health(self, amount: int) -> None:
        """Change max_health by amount (may be negative, never below 1) and clamp health."""
        self.max_health = clamp(self.max_health + amount, 1, STAT_MAX)
        self.health = min(self.health, self.max_health)
        logger.debug("Max health is now %d", self.max_health)

    def equip(self, weapon: Weapon) -> None:
        logger.debug("Equipped %s (was %s)", weapon.label, self.weapon.label)
        self.weapon = weapon

    def move_to(self, room_id: RoomId) -> None:
        logger.debug("Player moves to room id=%d", room_id)
        self.location = room_id
