from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from ..utils.text import normalize


class BattleCommand(Enum):
    """Commands accepted at the battle prompt."""

    ATTACK = "attack"
    RUN = "run"
    HEALTH = "health"
    OPTIONS = "options"

    @property
    def consumes_turn(self) -> bool:
        """Informational commands re-prompt without letting the enemy act."""
        return self in (BattleCommand.ATTACK, BattleCommand.RUN)

    @classmethod
    def parse(cls, text: str) -> Optional["BattleCommand"]:
        return _ALIASES.get(normalize(text))


_ALIASES = {
    "attack": BattleCommand.ATTACK,
    "run": BattleCommand.RUN,
    "health": BattleCommand.HEALTH,
    "options": BattleCommand.OPTIONS,
    "help": BattleCommand.OPTIONS,
}

BATTLE_OPTIONS: List[Tuple[str, str]] = [
    ("attack", "hit the enemy with your equipped weapon"),
    ("run", "try to escape the battle"),
    ("health", "show your health and the enemy's"),
    ("options", "show this list"),
]
