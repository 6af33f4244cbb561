"""Centralized combat enums and constants.

This module contains the enums shared by the hit-rate model, the outcome
engine and the per-game rules table, providing a single source of truth.
"""

from enum import Enum, auto


class RNSystem(Enum):
    """Randomness systems used to turn a listed hit rate into a true one."""
    DIRECT = auto()       # One RN: listed value is the real chance
    AVERAGED = auto()     # Two RN: average of two draws compared to the listed value
    SPLIT_BLEND = auto()  # Fates RN: one RN below 50, blended curve at 50 and above


class SpeedDiff(Enum):
    """Attack patterns produced by the speed difference between the two sides.

    The letters describe strike order: A is the attacker, B the defender.
    """
    EVEN = auto()              # AB
    ATTACKER_DOUBLES = auto()  # ABA
    DEFENDER_DOUBLES = auto()  # ABB

    @classmethod
    def from_doubling(cls, attacker_doubles: bool, defender_doubles: bool) -> "SpeedDiff":
        """Build the pattern from each side's "outspeeds the other" flag.

        Raises:
            ValueError: If both sides claim to double, which speed cannot produce
        """
        if attacker_doubles and defender_doubles:
            raise ValueError("Attacker and defender cannot both double")
        if attacker_doubles:
            return cls.ATTACKER_DOUBLES
        if defender_doubles:
            return cls.DEFENDER_DOUBLES
        return cls.EVEN

    @classmethod
    def from_name(cls, name: str) -> "SpeedDiff":
        """Parse a pattern name such as "even" or "ATTACKER_DOUBLES".

        Raises:
            ValueError: If name is not a string or matches no pattern
        """
        if not isinstance(name, str):
            raise ValueError(f"Speed pattern must be a string, got {name!r}")
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown speed pattern: {name!r}")


class CritFormula(Enum):
    """Critical damage formulas used across the series."""
    TRIPLE_DAMAGE = auto()  # (Atk - Def) * 3
    DOUBLE_ATTACK = auto()  # Atk * 2 - Def


class FEGame(Enum):
    """Games with distinct combat rules, keyed by release."""
    FE1 = auto()
    FE2 = auto()
    FE3 = auto()
    FE4 = auto()
    FE5 = auto()
    FE6 = auto()
    FE7 = auto()
    FE8 = auto()
    FE9 = auto()
    FE10 = auto()
    FE11 = auto()
    FE12 = auto()
    FE13 = auto()
    FE14 = auto()
    FE15 = auto()
    SOV = auto()

    def __str__(self) -> str:
        return GAME_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> "FEGame":
        """Parse a game identifier such as "FE7" or "SoV" (case-insensitive).

        Raises:
            ValueError: If name is not a string or matches no game
        """
        if not isinstance(name, str):
            raise ValueError(f"Game must be a string, got {name!r}")
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown game: {name!r}")


# Convenience mappings for display
GAME_NAMES = {game: game.name for game in FEGame}
GAME_NAMES[FEGame.SOV] = "SoV"

RN_SYSTEM_NAMES = {
    RNSystem.DIRECT: "1RN",
    RNSystem.AVERAGED: "2RN",
    RNSystem.SPLIT_BLEND: "Fates RN",
}

SPEED_DIFF_NAMES = {
    SpeedDiff.EVEN: "AB",
    SpeedDiff.ATTACKER_DOUBLES: "ABA",
    SpeedDiff.DEFENDER_DOUBLES: "ABB",
}
