"""
Edge case and error handling tests.

Tests boundary conditions, invalid inputs at construction boundaries,
and extreme values flowing through the outcome engine.
"""
import pytest

from src.core.data import CombatStats, Outcome, RNSystem, SpeedDiff
from src.game.combat import BattleCalculator, build_forecast
from tests.test_utils import assert_canonical, outcome_map


class TestPreconditionBoundaries:
    """Invalid stats are rejected before they reach the engine."""

    @pytest.mark.parametrize("kwargs", [
        {"hit": 101},
        {"hit": -1},
        {"crit": 101},
        {"damage": -2},
    ])
    def test_invalid_stats(self, kwargs):
        with pytest.raises(ValueError):
            CombatStats(**kwargs)

    def test_negative_starting_hp_rejected(self, sure_hitter, inert_defender):
        with pytest.raises(ValueError):
            BattleCalculator.evaluate_round(RNSystem.DIRECT, sure_hitter, -1, inert_defender, 10)


class TestExtremeValues:
    """Test the engine at the edges of its input space."""

    def test_both_sides_zero_hp(self, sure_hitter):
        result = BattleCalculator.evaluate_round(RNSystem.DIRECT, sure_hitter, 0, sure_hitter, 0,
                                                 SpeedDiff.ATTACKER_DOUBLES)

        assert result == [Outcome(1.0, 0, 0)]

    def test_zero_damage_never_changes_hp(self):
        harmless = CombatStats(damage=0, hit=100, crit=100, doubles_self=True)
        result = BattleCalculator.evaluate_round(RNSystem.AVERAGED, harmless, 5, harmless, 5,
                                                 SpeedDiff.DEFENDER_DOUBLES)

        assert result == [Outcome(1.0, 5, 5)]

    def test_huge_damage_floors_at_zero(self):
        nuke = CombatStats(damage=10_000, hit=50, crit=50)
        result = BattleCalculator.evaluate_round(RNSystem.DIRECT, nuke, 1, nuke, 1)

        assert_canonical(result)
        assert all(o.attacker_hp >= 0 and o.defender_hp >= 0 for o in result)
        mapping = outcome_map(result)
        assert mapping[(1, 0)] == pytest.approx(0.5)
        assert mapping[(0, 1)] == pytest.approx(0.25)
        assert mapping[(1, 1)] == pytest.approx(0.25)

    def test_two_brave_sides_stay_small(self):
        brave = CombatStats(damage=1, hit=50, crit=50, doubles_self=True)
        result = BattleCalculator.evaluate_round(RNSystem.SPLIT_BLEND, brave, 60, brave, 60,
                                                 SpeedDiff.ATTACKER_DOUBLES)

        assert_canonical(result)
        # Four strikes by the attacker remove at most 4 * 3 HP
        assert min(o.defender_hp for o in result) >= 60 - 4 * 3

    def test_forecast_of_certain_stalemate(self, inert_defender):
        result = BattleCalculator.evaluate_round(RNSystem.DIRECT, inert_defender, 10, inert_defender, 10)
        forecast = build_forecast(result, 10, 10)

        assert forecast.attacker_death_chance == 0.0
        assert forecast.expected_attacker_hp == 10.0
