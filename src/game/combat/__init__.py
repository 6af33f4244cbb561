"""Combat system components.

This package contains the combat probability logic with clear separation of concerns:
- battle_calculator.py: Outcome engine that branches and merges round states
- forecast.py: Read-only summaries of an outcome distribution
"""

from .battle_calculator import BattleCalculator, CRIT_MULTIPLIER
from .forecast import BattleForecast, BattleForecaster, build_forecast

__all__ = [
    "BattleCalculator",
    "CRIT_MULTIPLIER",
    "BattleForecast",
    "BattleForecaster",
    "build_forecast",
]
