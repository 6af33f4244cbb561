"""
Test constants and configuration for the combat calculator test suite.

This module defines reference values and tolerances used across
multiple test modules.
"""

# Tolerance for probability mass checks
PROBABILITY_TOLERANCE = 1e-9

# Tolerance for published reference hit rates
REFERENCE_TOLERANCE = 0.01

# Listed 70 hit under each randomness system
DIRECT_TRUE_HIT_70 = 0.70
AVERAGED_TRUE_HIT_70 = 0.823
SPLIT_BLEND_TRUE_HIT_70 = 0.7887

# Exact two RN value: 8230 of 10000 draw pairs sum below 140
AVERAGED_HITS_70 = 8230

# Listed values where the blended curve changes behavior
SPLIT_BLEND_THRESHOLD = 50

ALL_LISTED_VALUES = list(range(101))
