"""Overeating detection and recovery planning."""

from .detection import classify_excess, daily_excess, detect_overeating_event, is_significant_excess
from .errors import UnknownRebalancingOption
from .impact import calculate_impact_analysis
from .options import generate_rebalancing_options
from .planner import create_recovery_plan, recommend_strategy
from .sessions import (
    abandon_session,
    acknowledge_event,
    is_stale_event,
    recovery_stage,
    resolve_event,
    select_option,
    start_recovery_session,
    update_session_progress,
)

__all__ = [
    "UnknownRebalancingOption",
    "abandon_session",
    "acknowledge_event",
    "calculate_impact_analysis",
    "classify_excess",
    "create_recovery_plan",
    "daily_excess",
    "detect_overeating_event",
    "generate_rebalancing_options",
    "is_significant_excess",
    "is_stale_event",
    "recommend_strategy",
    "recovery_stage",
    "resolve_event",
    "select_option",
    "start_recovery_session",
    "update_session_progress",
]
