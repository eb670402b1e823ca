"""
Combat package.

Contains:
- Enemy model with state-dependent damage generators.
- Battle commands and their parser.
- The BattleEngine state machine and its in-memory CombatLog.
"""

from .commands import BattleCommand
from .enemy import Enemy, enraged_damage, fixed_damage, random_damage
from .log import CombatEvent, CombatLog
from .engine import BattleEngine, BattleState, TurnResult

__all__ = [
    "BattleCommand",
    "Enemy",
    "enraged_damage",
    "fixed_damage",
    "random_damage",
    "CombatEvent",
    "CombatLog",
    "BattleEngine",
    "BattleState",
    "TurnResult",
]
