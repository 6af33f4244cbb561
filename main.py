#!/usr/bin/env python3
"""
Command line front end for the combat forecast calculator.

Forecast a matchup from a YAML file, or from stats given on the command line,
or print the true hit table of a randomness system.
"""

import argparse
import sys
from typing import Optional

from src.core.data import CombatStats, FEGame, RNSystem, SpeedDiff
from src.game.combat import BattleForecaster
from src.game.log_manager import LogManager
from src.game.matchup_loader import Matchup, load_matchup
from src.renderers.forecast_renderer import render_forecast, render_true_hit_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Combat outcome calculator for Fire Emblem previews",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --matchup assets/data/matchups/fe7_eliwood_vs_brigand.yaml
  python main.py --game FE7 --atk 20,6,88,7 --def 21,8,51,0 --speed ATTACKER_DOUBLES
  python main.py --game SoV --atk 27,9,72,3 --atk-brave --def 40,14,65,0
  python main.py --table AVERAGED
        """
    )

    parser.add_argument("--matchup", help="YAML matchup file")
    parser.add_argument("--game", default="FE7", help="Game identifier (default: FE7)")
    parser.add_argument("--atk", help="Attacker as HP,DAMAGE,HIT,CRIT")
    parser.add_argument("--def", dest="defn", help="Defender as HP,DAMAGE,HIT,CRIT")
    parser.add_argument("--atk-brave", action="store_true", help="Attacker strikes twice per turn")
    parser.add_argument("--def-brave", action="store_true", help="Defender strikes twice per turn")
    parser.add_argument("--speed", default="EVEN",
                        help="EVEN, ATTACKER_DOUBLES or DEFENDER_DOUBLES")
    parser.add_argument("--table", help="Print the true hit table for DIRECT, AVERAGED or SPLIT_BLEND")
    parser.add_argument("--debug", action="store_true", help="Print calculator log messages")
    return parser


def parse_side(spec: str, brave: bool) -> tuple[int, CombatStats]:
    """Parse "HP,DAMAGE,HIT,CRIT" into (hp, stats)."""
    try:
        hp, damage, hit, crit = (int(part) for part in spec.split(","))
    except ValueError:
        raise ValueError(f"Expected HP,DAMAGE,HIT,CRIT, got {spec!r}")
    if hp < 0:
        raise ValueError(f"hp must be non-negative, got {hp}")
    return hp, CombatStats(damage=damage, hit=hit, crit=crit, doubles_self=brave)


def matchup_from_args(args: argparse.Namespace, log_manager: LogManager) -> Matchup:
    if args.matchup:
        return load_matchup(args.matchup, log_manager)

    if not args.atk or not args.defn:
        raise ValueError("Either --matchup or both --atk and --def are required")

    attacker_hp, attacker = parse_side(args.atk, args.atk_brave)
    defender_hp, defender = parse_side(args.defn, args.def_brave)
    return Matchup(
        game=FEGame.from_name(args.game),
        speed=SpeedDiff.from_name(args.speed),
        attacker=attacker,
        attacker_hp=attacker_hp,
        defender=defender,
        defender_hp=defender_hp,
    )


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    log_manager = LogManager()
    if args.debug:
        log_manager.toggle_debug()

    try:
        if args.table:
            try:
                system = RNSystem[args.table.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown randomness system: {args.table!r}")
            lines = render_true_hit_table(system)
        else:
            matchup = matchup_from_args(args, log_manager)
            forecast = BattleForecaster(log_manager).forecast(
                matchup.game,
                matchup.attacker, matchup.attacker_hp,
                matchup.defender, matchup.defender_hp,
                matchup.speed,
            )
            lines = render_forecast(forecast, matchup.attacker_name, matchup.defender_name)
    except (FileNotFoundError, KeyError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n".join(lines))
    if args.debug:
        print("\n".join(log_manager.format_messages()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
