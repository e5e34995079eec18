"""What an overeating event actually costs, framed for the user."""

from __future__ import annotations

import logging
import math
from typing import Optional

from ...models.ledger import WeeklyGoal
from ...models.recovery import ImpactAnalysis, OvereatingEvent, Perspective, RealImpact
from ..constants import (
    DEFAULT_GOAL_WEEKS,
    DEFAULT_WORKOUT_CALORIES,
    MAX_EQUIVALENT_WORKOUTS,
    MAX_IMPACT_PERCENT,
    MAX_JOURNEY_PERCENT,
    MAX_TIMELINE_DELAY_DAYS,
    MAX_WEEKS_TO_NULLIFY,
    WORKOUT_CALORIES_PER_KG,
)
from ..rounding import round_percent
from .messages import build_reframe

logger = logging.getLogger(__name__)


def _percent_of(part: float, whole: float) -> float:
    return part / whole * 100 if whole > 0 else 0.0


def calculate_impact_analysis(
    event: OvereatingEvent, goal: WeeklyGoal, user_weight: Optional[float] = None
) -> ImpactAnalysis:
    """Express the excess against the week, the deficit and the whole journey.

    Goals without a timeline estimate are treated as a twelve week journey.
    """

    excess = event.excess_calories
    weekly_deficit = abs(goal.deficit_target)

    weekly_budget_impact = _percent_of(excess, goal.weekly_allowance)
    weekly_deficit_impact = _percent_of(excess, weekly_deficit)
    journey_weeks = goal.estimated_weeks_to_goal or DEFAULT_GOAL_WEEKS
    main_goal_impact = _percent_of(excess, weekly_deficit * journey_weeks)

    weeks_to_recover = math.ceil(excess / weekly_deficit) if weekly_deficit > 0 else 1
    timeline_delay_days = min(weeks_to_recover * 7, MAX_TIMELINE_DELAY_DAYS)

    per_workout = user_weight * WORKOUT_CALORIES_PER_KG if user_weight else DEFAULT_WORKOUT_CALORIES
    equivalent_workouts = min(excess / per_workout, MAX_EQUIVALENT_WORKOUTS)
    weeks_to_nullify = min(weeks_to_recover, MAX_WEEKS_TO_NULLIFY)

    logger.debug(
        "Impact of %s kcal: week=%.1f%% deficit=%.1f%% journey=%.1f%%",
        excess,
        weekly_budget_impact,
        weekly_deficit_impact,
        main_goal_impact,
    )

    budget_percent = round_percent(min(weekly_budget_impact, MAX_IMPACT_PERCENT))
    return ImpactAnalysis(
        real_impact=RealImpact(
            timeline_delay_days=round_percent(timeline_delay_days),
            weekly_budget_impact=budget_percent,
            weekly_deficit_impact=round_percent(min(weekly_deficit_impact, MAX_IMPACT_PERCENT)),
            main_goal_impact=round_percent(min(main_goal_impact, MAX_IMPACT_PERCENT)),
        ),
        perspective=Perspective(
            equivalent_workouts=round_percent(equivalent_workouts),
            weeks_to_recover=weeks_to_recover,
            days_to_nullify=weeks_to_nullify * 7,
            percent_of_total_journey=round_percent(min(main_goal_impact, MAX_JOURNEY_PERCENT)),
        ),
        reframe=build_reframe(event.trigger_type, budget_percent),
    )
