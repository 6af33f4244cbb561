"""
Basic test fixtures for the combat calculator test suite.

Provides simple fixtures for testing the hit-rate model and outcome engine.
"""

import sys
import os
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from src.core.data.data_structures import CombatStats
from src.game.log_manager import LogManager


@pytest.fixture
def inert_defender():
    """A defender that never hits back."""
    return CombatStats(damage=0, hit=0, crit=0)


@pytest.fixture
def sure_hitter():
    """An attacker that always lands normal hits for 5 damage."""
    return CombatStats(damage=5, hit=100, crit=0)


@pytest.fixture
def brave_hitter():
    """A brave attacker that always lands normal hits for 5 damage."""
    return CombatStats(damage=5, hit=100, crit=0, doubles_self=True)


@pytest.fixture
def typical_attacker():
    """Mid-game attacker with some crit."""
    return CombatStats(damage=9, hit=78, crit=12)


@pytest.fixture
def typical_defender():
    """Mid-game enemy that counters."""
    return CombatStats(damage=7, hit=64, crit=3)


@pytest.fixture
def log_manager():
    """A fresh log manager with debug output enabled."""
    manager = LogManager()
    manager.toggle_debug()
    return manager


@pytest.fixture
def matchups_dir():
    """Directory holding the bundled YAML matchups."""
    return os.path.join(project_root, "assets", "data", "matchups")
