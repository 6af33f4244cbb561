"""Core data structures and definitions.

This package contains fundamental data types and game definitions:
- data_structures.py: CombatStats and Outcome value types
- game_enums.py: Centralized enums for randomness systems, attack patterns, games
- game_info.py: Static per-game rules and lookup tables
"""

from .data_structures import CombatStats, Outcome, OutcomeList, HPState, ValidationMixin
from .game_enums import RNSystem, SpeedDiff, CritFormula, FEGame, GAME_NAMES, RN_SYSTEM_NAMES, SPEED_DIFF_NAMES
from .game_info import GameInfo, GAME_DATA, get_game_info, rn_system_for, crit_damage

__all__ = [
    "CombatStats",
    "Outcome",
    "OutcomeList",
    "HPState",
    "ValidationMixin",
    "RNSystem",
    "SpeedDiff",
    "CritFormula",
    "FEGame",
    "GAME_NAMES",
    "RN_SYSTEM_NAMES",
    "SPEED_DIFF_NAMES",
    "GameInfo",
    "GAME_DATA",
    "get_game_info",
    "rn_system_for",
    "crit_damage",
]
