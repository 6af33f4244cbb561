"""
Hit-rate model: listed hit rates to true hit probabilities.

Most games in the series do not show the real hit chance. The number in the
combat preview (the listed value) is fed through the game's randomness system,
which usually makes likely events likelier and unlikely ones rarer: a listed
90 may hit 99% of the time under two-RN rules.

The games are also deterministic. Random numbers are read off a pre-rolled
sequence, so the same action on the same turn always resolves the same way.
That does not change the probabilities computed here, only how the player
experiences them.

The domain is 101 integers, so every system is tabulated once at import time
and lookups are plain array reads.
"""
import math
import operator
from typing import Union

import numpy as np
from numpy.typing import NDArray

from .data.game_enums import RNSystem, FEGame
from .data.game_info import rn_system_for

LISTED_VALUES = np.arange(101, dtype=np.int64)

# Number of values a single RN can take (0-99 inclusive)
RN_RANGE = 100


def _direct(listed: int) -> float:
    """One RN: the listed value is the truth."""
    return listed / 100.0


def _split_blend(listed: int) -> float:
    """Fates RN: one RN below 50, a sinusoidal blend toward two RN above.

    The curve is an empirical fit to observed behavior; keep its structure.
    """
    lh = float(listed)
    if listed < 50:
        return lh / 100.0
    return (lh + ((4.0 / 30.0) * lh * math.sin(math.radians((0.02 * lh - 1.0) * 180.0)))) / 100.0


def _averaged_table() -> NDArray[np.float64]:
    """Two RN: exact chance that two draws in 0-99 sum below 2 * listed."""
    draws = np.arange(RN_RANGE, dtype=np.int64)
    sums = np.sort(np.add.outer(draws, draws).ravel())
    # searchsorted with side="left" counts sums strictly below each threshold
    hits = np.searchsorted(sums, 2 * LISTED_VALUES, side="left")
    return hits.astype(np.float64) / float(RN_RANGE * RN_RANGE)


def _build_tables() -> dict[RNSystem, NDArray[np.float64]]:
    tables = {
        RNSystem.DIRECT: np.array([_direct(int(v)) for v in LISTED_VALUES], dtype=np.float64),
        RNSystem.AVERAGED: _averaged_table(),
        RNSystem.SPLIT_BLEND: np.array([_split_blend(int(v)) for v in LISTED_VALUES], dtype=np.float64),
    }
    for table in tables.values():
        table.setflags(write=False)
    return tables


_TRUE_HIT_TABLES = _build_tables()


def resolve_system(system: Union[RNSystem, FEGame]) -> RNSystem:
    """Accept either a randomness system or a game and return the system."""
    if isinstance(system, FEGame):
        return rn_system_for(system)
    return system


def true_hit(system: Union[RNSystem, FEGame], listed: int) -> float:
    """Return the true hit probability (0-1) for a listed hit rate (0-100).

    Args:
        system: Randomness system, or a game whose system should be used
        listed: Listed hit rate; callers validate the range beforehand

    Returns:
        Probability that the strike connects

    Raises:
        TypeError: If listed is not an integer
        IndexError: If listed falls outside the table. Negative values are
            rejected too rather than wrapping around to the top of the table.
    """
    index = operator.index(listed)
    if index < 0:
        raise IndexError(f"listed hit rate {listed} is below the table")
    return float(_TRUE_HIT_TABLES[resolve_system(system)][index])


def true_hit_table(system: Union[RNSystem, FEGame]) -> NDArray[np.float64]:
    """Return the read-only table of true hit rates indexed by listed value."""
    return _TRUE_HIT_TABLES[resolve_system(system)]
