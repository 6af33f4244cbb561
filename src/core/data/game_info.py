"""Static per-game rules and lookup queries.

Different games resolve hits and critical damage differently. This module
keeps those differences in a single table keyed by FEGame, so callers can ask
which randomness system or critical formula applies without branching on the
game themselves.
"""

from dataclasses import dataclass
from typing import Dict, Any

from .game_enums import FEGame, RNSystem, CritFormula, GAME_NAMES, RN_SYSTEM_NAMES


@dataclass(frozen=True)
class GameInfo:
    """Static combat rules for one game."""
    name: str
    rn_system: RNSystem
    crit_formula: CritFormula

    def get_display_properties(self) -> Dict[str, Any]:
        """Get properties used for display/rendering."""
        return {
            "name": self.name,
            "rn_system": RN_SYSTEM_NAMES[self.rn_system],
        }

    def get_gameplay_properties(self) -> Dict[str, Any]:
        """Get properties used for combat calculations."""
        return {
            "rn_system": self.rn_system,
            "crit_formula": self.crit_formula,
        }


def _info(game: FEGame, rn_system: RNSystem,
          crit_formula: CritFormula = CritFormula.TRIPLE_DAMAGE) -> GameInfo:
    return GameInfo(GAME_NAMES[game], rn_system, crit_formula)


# Centralized rules for every supported game
GAME_DATA: Dict[FEGame, GameInfo] = {
    FEGame.FE1: _info(FEGame.FE1, RNSystem.DIRECT),
    FEGame.FE2: _info(FEGame.FE2, RNSystem.DIRECT),
    FEGame.FE3: _info(FEGame.FE3, RNSystem.DIRECT),
    FEGame.FE4: _info(FEGame.FE4, RNSystem.DIRECT, CritFormula.DOUBLE_ATTACK),
    FEGame.FE5: _info(FEGame.FE5, RNSystem.DIRECT, CritFormula.DOUBLE_ATTACK),
    FEGame.FE6: _info(FEGame.FE6, RNSystem.AVERAGED),
    FEGame.FE7: _info(FEGame.FE7, RNSystem.AVERAGED),
    FEGame.FE8: _info(FEGame.FE8, RNSystem.AVERAGED),
    FEGame.FE9: _info(FEGame.FE9, RNSystem.AVERAGED),
    FEGame.FE10: _info(FEGame.FE10, RNSystem.AVERAGED),
    FEGame.FE11: _info(FEGame.FE11, RNSystem.AVERAGED),
    FEGame.FE12: _info(FEGame.FE12, RNSystem.AVERAGED),
    FEGame.FE13: _info(FEGame.FE13, RNSystem.AVERAGED),
    FEGame.FE14: _info(FEGame.FE14, RNSystem.SPLIT_BLEND),
    FEGame.FE15: _info(FEGame.FE15, RNSystem.AVERAGED),
    FEGame.SOV: _info(FEGame.SOV, RNSystem.SPLIT_BLEND),
}


def get_game_info(game: FEGame) -> GameInfo:
    """Get the rules entry for a game."""
    return GAME_DATA[game]


def rn_system_for(game: FEGame) -> RNSystem:
    """Return the randomness system a game uses for hit rates."""
    return GAME_DATA[game].rn_system


def crit_damage(game: FEGame, atk: int, defense: int) -> int:
    """Critical damage under the game's formula, floored at zero.

    FE4 and FE5 double Atk before subtracting Def; every other game triples
    the normal damage (Atk - Def).
    """
    formula = GAME_DATA[game].crit_formula
    if formula is CritFormula.DOUBLE_ATTACK:
        damage = atk * 2 - defense
    else:
        damage = (atk - defense) * 3
    return max(0, damage)
