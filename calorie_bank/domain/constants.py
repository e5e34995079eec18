"""Safety floors, thresholds and tunables shared by the ledger and recovery maths."""

from __future__ import annotations

from typing import Final, Mapping

MIN_SAFE_DAILY_CALORIES: Final[int] = 1200
MAX_DAILY_REDUCTION: Final[int] = 500

# Excess strictly above ``mild`` is an event; ``moderate``/``severe`` are inclusive.
OVEREATING_THRESHOLDS: Final[Mapping[str, int]] = {
    "mild": 200,
    "moderate": 500,
    "severe": 1000,
}

# Bank status
SAFE_TO_EAT_BUFFER_FRACTION: Final[float] = 0.05
PROJECTION_TOLERANCE_FRACTION: Final[float] = 0.05

# Banking plan warnings
LARGE_BANKING_FRACTION: Final[float] = 0.15
LOW_TARGET_MARGIN: Final[int] = 200
HARD_REDUCTION_WARNING: Final[int] = 300

# Bank-aware detection floors, as fractions of the daily baseline
REDISTRIBUTION_FLOOR_FRACTION: Final[float] = 0.7
BANKING_FLOOR_FRACTION: Final[float] = 0.9

# Impact analysis
DEFAULT_GOAL_WEEKS: Final[int] = 12
DEFAULT_WORKOUT_CALORIES: Final[int] = 350
WORKOUT_CALORIES_PER_KG: Final[int] = 5
MAX_EQUIVALENT_WORKOUTS: Final[int] = 50
MAX_TIMELINE_DELAY_DAYS: Final[int] = 365
MAX_WEEKS_TO_NULLIFY: Final[int] = 52
MAX_IMPACT_PERCENT: Final[float] = 1000.0
MAX_JOURNEY_PERCENT: Final[float] = 100.0

# Rebalancing options
QUICK_RECOVERY_MAX_EXCESS: Final[int] = 800
MODERATE_CORRECTION_EXCESS: Final[int] = 700
