"""
Battle forecast summaries built on top of the outcome engine.

The engine returns a raw distribution over HP pairs. This module condenses it
into the numbers a player cares about when reading a preview: how likely each
side is to die, how much HP each is expected to keep, and the full list of
results ordered from most to least likely.
"""
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from ...core.data import CombatStats, FEGame, Outcome, OutcomeList, RNSystem, SpeedDiff, SPEED_DIFF_NAMES
from ...core.hit_rates import resolve_system
from ..log_manager import LogManager
from .battle_calculator import BattleCalculator


@dataclass(frozen=True)
class BattleForecast:
    """Summary of a round's outcome distribution."""
    outcomes: tuple[Outcome, ...]
    attacker_start_hp: int
    defender_start_hp: int
    attacker_death_chance: float
    defender_death_chance: float
    expected_attacker_hp: float
    expected_defender_hp: float

    @property
    def attacker_survival_chance(self) -> float:
        """Chance the attacker ends the round above 0 HP."""
        return 1.0 - self.attacker_death_chance

    @property
    def defender_survival_chance(self) -> float:
        """Chance the defender ends the round above 0 HP."""
        return 1.0 - self.defender_death_chance

    @property
    def most_likely(self) -> Outcome:
        """The single most probable outcome."""
        return self.outcomes[0]

    def attacker_hp_distribution(self) -> dict[int, float]:
        """Marginal probability of each attacker HP value."""
        distribution: dict[int, float] = {}
        for outcome in self.outcomes:
            distribution[outcome.attacker_hp] = distribution.get(outcome.attacker_hp, 0.0) + outcome.probability
        return distribution

    def defender_hp_distribution(self) -> dict[int, float]:
        """Marginal probability of each defender HP value."""
        distribution: dict[int, float] = {}
        for outcome in self.outcomes:
            distribution[outcome.defender_hp] = distribution.get(outcome.defender_hp, 0.0) + outcome.probability
        return distribution


def build_forecast(outcomes: OutcomeList, attacker_hp: int, defender_hp: int) -> BattleForecast:
    """
    Condense a canonical outcome list into a BattleForecast.

    Args:
        outcomes: Result of BattleCalculator.evaluate_round
        attacker_hp: Attacker HP before combat
        defender_hp: Defender HP before combat

    Returns:
        BattleForecast with outcomes sorted by descending probability
    """
    ordered = sorted(outcomes, key=lambda o: (-o.probability, o.attacker_hp, o.defender_hp))

    probs = np.array([o.probability for o in ordered], dtype=np.float64)
    atk_hps = np.array([o.attacker_hp for o in ordered], dtype=np.float64)
    def_hps = np.array([o.defender_hp for o in ordered], dtype=np.float64)

    return BattleForecast(
        outcomes=tuple(ordered),
        attacker_start_hp=attacker_hp,
        defender_start_hp=defender_hp,
        attacker_death_chance=float(probs[atk_hps == 0].sum()),
        defender_death_chance=float(probs[def_hps == 0].sum()),
        expected_attacker_hp=float(np.dot(probs, atk_hps)),
        expected_defender_hp=float(np.dot(probs, def_hps)),
    )


class BattleForecaster:
    """Runs the outcome engine for a matchup and reports a forecast."""

    def __init__(self, log_manager: Optional[LogManager] = None):
        self.log_manager = log_manager

    def _log(self, text: str, debug: bool = False) -> None:
        if self.log_manager is None:
            return
        if debug:
            self.log_manager.debug(text)
        else:
            self.log_manager.calculator(text)

    def forecast(self, game: Union[RNSystem, FEGame],
                 attacker: CombatStats, attacker_hp: int,
                 defender: CombatStats, defender_hp: int,
                 pattern: SpeedDiff = SpeedDiff.EVEN) -> BattleForecast:
        """
        Forecast a round of combat.

        Args:
            game: Game (or randomness system directly) whose rules apply
            attacker: The initiating side's stats
            attacker_hp: Attacker HP before combat
            defender: The defending side's stats
            defender_hp: Defender HP before combat
            pattern: Strike order produced by the speed difference

        Returns:
            BattleForecast for the round
        """
        system = resolve_system(game)
        self._log(f"Forecast {SPEED_DIFF_NAMES[pattern]} under {system.name}: "
                  f"{attacker_hp} HP {attacker} vs {defender_hp} HP {defender}", debug=True)

        outcomes = BattleCalculator.evaluate_round(system, attacker, attacker_hp,
                                                   defender, defender_hp, pattern)
        self._log(f"{len(outcomes)} distinct outcomes, total probability "
                  f"{BattleCalculator.total_probability(outcomes):.12f}", debug=True)

        result = build_forecast(outcomes, attacker_hp, defender_hp)
        self._log(f"Defender dies {result.defender_death_chance:.2%}, "
                  f"attacker dies {result.attacker_death_chance:.2%}")
        return result
