"""
Outcome engine for a single round of preview-level combat.

This module enumerates every way a round can play out using only the numbers
shown in a combat preview: damage, hit, crit and brave effects. Skills, held
items, personal weapons and lifesteal are not modelled.

Each strike splits every live state into miss, hit and critical branches, and
states that land on the same HP pair are merged, so the list stays small no
matter how many strikes are folded in. The result always sums to 1.
"""
from typing import Union

from ...core.data import CombatStats, Outcome, OutcomeList, RNSystem, FEGame, SpeedDiff
from ...core.hit_rates import resolve_system, true_hit

# Critical hits deal this multiple of normal damage. FE4 and FE5 compute crits
# from Atk and Def instead, which this calculator does not see.
CRIT_MULTIPLIER = 3


class BattleCalculator:
    """Calculates outcome distributions for one round of combat."""

    @staticmethod
    def canonicalize(outcomes: OutcomeList) -> OutcomeList:
        """Merge outcomes with identical HP and drop zero-probability ones."""
        return Outcome.collect(outcomes)

    @staticmethod
    def total_probability(outcomes: OutcomeList) -> float:
        """Sum of probabilities across a list of outcomes."""
        return sum(outcome.probability for outcome in outcomes)

    @staticmethod
    def _branch_strike(profile: CombatStats, prob_hit: float, states: OutcomeList) -> OutcomeList:
        """Split each state into miss, normal hit and critical branches.

        States are read from the striker's point of view: attacker_hp is the
        striker, defender_hp the target. Nothing is merged here.
        """
        prob_miss = 1.0 - prob_hit
        prob_crit = prob_hit * (profile.crit / 100.0)
        prob_normal = prob_hit * (1.0 - profile.crit / 100.0)

        branches: OutcomeList = []
        for state in states:
            if state.attacker_hp == 0:
                # dead units can't strike
                branches.append(state)
                continue

            branches.append(Outcome.derived(
                state.probability * prob_miss,
                state.attacker_hp,
                state.defender_hp,
            ))
            branches.append(Outcome.derived(
                state.probability * prob_normal,
                state.attacker_hp,
                max(0, state.defender_hp - profile.damage),
            ))
            branches.append(Outcome.derived(
                state.probability * prob_crit,
                state.attacker_hp,
                max(0, state.defender_hp - CRIT_MULTIPLIER * profile.damage),
            ))
        return branches

    @staticmethod
    def possible_outcomes(profile: CombatStats, system: Union[RNSystem, FEGame],
                          states: OutcomeList) -> OutcomeList:
        """
        Apply one turn of strikes from the striker's point of view.

        A brave striker hits twice in a row, the second strike starting from
        the HP left by the first.

        Args:
            profile: Stats of the striking side
            system: Randomness system (or game) used to resolve the hit rate
            states: Incoming outcomes with the striker in attacker_hp

        Returns:
            Canonical list of outcomes after the turn
        """
        prob_hit = true_hit(resolve_system(system), profile.hit)
        branches = BattleCalculator._branch_strike(profile, prob_hit, states)
        if profile.doubles_self:
            branches = BattleCalculator._branch_strike(profile, prob_hit, branches)
        return BattleCalculator.canonicalize(branches)

    @staticmethod
    def apply_strike(profile: CombatStats, system: Union[RNSystem, FEGame],
                     states: OutcomeList, defender_is_target: bool = True) -> OutcomeList:
        """
        Apply one side's turn to a list of round states.

        Args:
            profile: Stats of the striking side
            system: Randomness system (or game) used to resolve the hit rate
            states: Outcomes in (attacker_hp, defender_hp) order
            defender_is_target: True when the attacker strikes the defender,
                False when the defender strikes back

        Returns:
            Canonical outcomes, still in (attacker_hp, defender_hp) order
        """
        if defender_is_target:
            return BattleCalculator.possible_outcomes(profile, system, states)

        swapped = [state.switch() for state in states]
        after = BattleCalculator.possible_outcomes(profile, system, swapped)
        return [state.switch() for state in after]

    @staticmethod
    def evaluate_round(game_system: Union[RNSystem, FEGame],
                       attacker: CombatStats, attacker_hp: int,
                       defender: CombatStats, defender_hp: int,
                       pattern: SpeedDiff = SpeedDiff.EVEN) -> OutcomeList:
        """
        Calculate every possible result of a round of combat.

        Args:
            game_system: Randomness system, or the game whose system applies
            attacker: The initiating side's stats
            attacker_hp: Attacker HP before combat
            defender: The defending side's stats
            defender_hp: Defender HP before combat
            pattern: Strike order produced by the speed difference

        Returns:
            Canonical list of outcomes whose probabilities sum to 1
        """
        system = resolve_system(game_system)
        states: OutcomeList = [Outcome(1.0, attacker_hp, defender_hp)]

        # AB is common to every pattern
        states = BattleCalculator.apply_strike(attacker, system, states)
        states = BattleCalculator.apply_strike(defender, system, states, defender_is_target=False)

        if pattern is SpeedDiff.ATTACKER_DOUBLES:
            states = BattleCalculator.apply_strike(attacker, system, states)
        elif pattern is SpeedDiff.DEFENDER_DOUBLES:
            states = BattleCalculator.apply_strike(defender, system, states, defender_is_target=False)

        return states
