"""Value types shared by the hit-rate model and the outcome engine.

Data Flow:
1. CombatStats (one side's preview numbers) -> outcome engine
2. Outcome lists (one per point in the round) -> BattleForecast (display)

Both structures are immutable and safe to share between evaluations.
"""

from dataclasses import dataclass, asdict
from typing import Any


class ValidationMixin:
    """Mixin providing validation utilities for data structures."""

    @staticmethod
    def validate_int(name: str, value: Any) -> None:
        """Reject anything that is not a plain integer (bools included)."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an integer, got {value!r}")

    @classmethod
    def validate_non_negative(cls, name: str, value: Any) -> None:
        """Validate that value is an integer >= 0."""
        cls.validate_int(name, value)
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}")

    @classmethod
    def validate_percentage(cls, name: str, value: Any) -> None:
        """Validate that value is an integer percentage in 0..=100."""
        cls.validate_int(name, value)
        if not 0 <= value <= 100:
            raise ValueError(f"{name} must be between 0 and 100, got {value}")


@dataclass(frozen=True)
class CombatStats(ValidationMixin):
    """The stats needed for one side of combat, as shown in the preview.

    Attributes:
        damage: Damage dealt by a normal hit
        hit: Listed hit rate (0-100)
        crit: Critical rate (0-100)
        doubles_self: Strikes twice per turn. Usually called brave after the
            weapons that grant it, though gauntlets and others do the same.
    """
    damage: int = 0
    hit: int = 0
    crit: int = 0
    doubles_self: bool = False

    def __post_init__(self) -> None:
        self.validate_non_negative("damage", self.damage)
        self.validate_percentage("hit", self.hit)
        self.validate_percentage("crit", self.crit)
        if not isinstance(self.doubles_self, bool):
            raise ValueError(f"doubles_self must be a bool, got {self.doubles_self!r}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict with stable field names."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CombatStats":
        """Create CombatStats from a dict produced by to_dict."""
        return cls(
            damage=data.get("damage", 0),
            hit=data.get("hit", 0),
            crit=data.get("crit", 0),
            doubles_self=data.get("doubles_self", False),
        )


@dataclass(frozen=True)
class Outcome(ValidationMixin):
    """One possible state of the round, with its probability.

    HP values are never negative: damage floors at zero.
    """
    probability: float
    attacker_hp: int
    defender_hp: int

    def __post_init__(self) -> None:
        self.validate_non_negative("attacker_hp", self.attacker_hp)
        self.validate_non_negative("defender_hp", self.defender_hp)
        if not self.probability >= 0.0:
            raise ValueError(f"probability must be non-negative, got {self.probability!r}")

    @classmethod
    def derived(cls, probability: float, attacker_hp: int, defender_hp: int) -> "Outcome":
        """Build an outcome from an already validated one, skipping the checks.

        Only for states derived inside the engine: probabilities are products
        of values in [0, 1] and HP is floored at zero, so nothing can go out of
        range. Anything coming from outside goes through the normal constructor.
        """
        outcome = object.__new__(cls)
        object.__setattr__(outcome, "probability", probability)
        object.__setattr__(outcome, "attacker_hp", attacker_hp)
        object.__setattr__(outcome, "defender_hp", defender_hp)
        return outcome

    @property
    def hp_state(self) -> tuple[int, int]:
        """The (attacker_hp, defender_hp) key used when merging outcomes."""
        return (self.attacker_hp, self.defender_hp)

    def switch(self) -> "Outcome":
        """Swap attacker and defender."""
        return Outcome.derived(self.probability, self.defender_hp, self.attacker_hp)

    def scaled(self, factor: float) -> "Outcome":
        """Return the same state with its probability multiplied by factor."""
        return Outcome(self.probability * factor, self.attacker_hp, self.defender_hp)

    @staticmethod
    def collect(outcomes: "OutcomeList") -> "OutcomeList":
        """Merge identical HP states and drop impossible ones.

        The returned list keeps first-seen order and carries the same total
        probability as the input.
        """
        merged: dict[tuple[int, int], float] = {}
        for outcome in outcomes:
            if outcome.probability == 0.0:
                continue
            key = outcome.hp_state
            merged[key] = merged.get(key, 0.0) + outcome.probability
        return [Outcome.derived(prob, atk_hp, def_hp) for (atk_hp, def_hp), prob in merged.items()]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict with stable field names."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Outcome":
        """Create an Outcome from a dict produced by to_dict."""
        return cls(
            probability=float(data["probability"]),
            attacker_hp=data["attacker_hp"],
            defender_hp=data["defender_hp"],
        )


# Type aliases for cleaner code
OutcomeList = list[Outcome]
HPState = tuple[int, int]
