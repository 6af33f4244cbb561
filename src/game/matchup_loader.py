"""
Matchup loading from YAML files.

A matchup file describes one attacker-vs-defender exchange: the game whose
rules apply, the speed pattern, and each side's HP and preview stats.

    game: FE7
    speed: ATTACKER_DOUBLES
    attacker: {name: Eliwood, hp: 30, damage: 10, hit: 85, crit: 5, brave: false}
    defender: {name: Brigand, hp: 28, damage: 12, hit: 60, crit: 0}
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..core.data import CombatStats, FEGame, SpeedDiff, ValidationMixin
from .log_manager import LogManager


@dataclass(frozen=True)
class Matchup:
    """A fully validated attacker-vs-defender exchange."""
    game: FEGame
    speed: SpeedDiff
    attacker: CombatStats
    attacker_hp: int
    defender: CombatStats
    defender_hp: int
    attacker_name: str = "Attacker"
    defender_name: str = "Defender"


def _parse_side(side: dict[str, Any], default_name: str) -> tuple[str, CombatStats, int]:
    """Parse one side's block into (name, stats, hp)."""
    if not isinstance(side, dict):
        raise ValueError(f"{default_name} must be a mapping, got {side!r}")
    hp = side["hp"]
    ValidationMixin.validate_non_negative("hp", hp)
    stats = CombatStats(
        damage=side.get("damage", 0),
        hit=side.get("hit", 0),
        crit=side.get("crit", 0),
        doubles_self=side.get("brave", side.get("doubles_self", False)),
    )
    return str(side.get("name", default_name)), stats, hp


def parse_matchup(data: dict[str, Any]) -> Matchup:
    """
    Build a Matchup from already-loaded YAML data.

    Raises:
        KeyError: If a required key (game, attacker, defender, hp) is missing
        ValueError: If a value is out of range or names an unknown game/pattern
    """
    if not isinstance(data, dict):
        raise ValueError("Matchup data must be a mapping")

    game = FEGame.from_name(data["game"])
    speed = SpeedDiff.from_name(data.get("speed", "EVEN"))
    attacker_name, attacker, attacker_hp = _parse_side(data["attacker"], "Attacker")
    defender_name, defender, defender_hp = _parse_side(data["defender"], "Defender")

    return Matchup(
        game=game,
        speed=speed,
        attacker=attacker,
        attacker_hp=attacker_hp,
        defender=defender,
        defender_hp=defender_hp,
        attacker_name=attacker_name,
        defender_name=defender_name,
    )


def load_matchup(file_path: str, log_manager: Optional[LogManager] = None) -> Matchup:
    """
    Load a matchup from a YAML file.

    Args:
        file_path: Path to the YAML file
        log_manager: Optional log manager to report loading progress

    Returns:
        The parsed Matchup
    """
    path_obj = Path(file_path)

    try:
        with open(path_obj, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Matchup file not found: {file_path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML matchup {file_path}: {e}")

    try:
        matchup = parse_matchup(data)
    except KeyError as e:
        raise KeyError(f"Missing key in {file_path}: {e}")
    except ValueError as e:
        raise ValueError(f"Invalid matchup in {file_path}: {e}")

    if log_manager is not None:
        log_manager.loader(f"Loaded matchup {matchup.attacker_name} vs "
                           f"{matchup.defender_name} ({matchup.game}) from {path_obj.name}")
    return matchup
