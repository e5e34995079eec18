"""Rebalancing options offered after an overeating event."""

from __future__ import annotations

import logging
from typing import List, Optional

from ...models.ledger import WeeklyGoal
from ...models.recovery import OptionImpact, RebalancingOption, Recommendation, TriggerType
from ..constants import MAX_DAILY_REDUCTION, MIN_SAFE_DAILY_CALORIES, QUICK_RECOVERY_MAX_EXCESS
from ..rounding import round_calories

logger = logging.getLogger(__name__)


def _gentle(excess: int, goal: WeeklyGoal, trigger_type: TriggerType) -> Optional[RebalancingOption]:
    days = 7
    reduction = round_calories(excess / days)
    new_target = goal.daily_baseline - reduction
    if new_target < MIN_SAFE_DAILY_CALORIES:
        return None
    return RebalancingOption(
        id="gentle_7day",
        name="Gentle 7-Day Rebalance",
        description=f"Reduce by {reduction} calories/day for {days} days",
        duration_days=days,
        daily_adjustment=-reduction,
        min_safety_cals=MIN_SAFE_DAILY_CALORIES,
        impact=OptionImpact(
            new_daily_target=new_target,
            effort_level="minimal" if reduction <= 100 else "moderate",
            risk_level="safe",
        ),
        pros=[
            "Barely noticeable daily reduction",
            "Maintains consistent energy levels",
            "High success rate",
            "No hunger or performance impact",
        ],
        recommendation=None if trigger_type == "severe" else "recommended",
    )


def _moderate(excess: int, goal: WeeklyGoal) -> Optional[RebalancingOption]:
    days = 5
    reduction = round_calories(excess / days)
    new_target = goal.daily_baseline - reduction
    if new_target < MIN_SAFE_DAILY_CALORIES:
        return None
    return RebalancingOption(
        id="moderate_5day",
        name="Moderate 5-Day Rebalance",
        description=f"Reduce by {reduction} calories/day for {days} days",
        duration_days=days,
        daily_adjustment=-reduction,
        min_safety_cals=MIN_SAFE_DAILY_CALORIES,
        impact=OptionImpact(
            new_daily_target=new_target,
            effort_level="moderate" if reduction <= 150 else "challenging",
            risk_level="safe" if reduction <= 200 else "moderate",
        ),
        pros=[
            "Back on track faster",
            "Still manageable daily reduction",
            "Good for motivated periods",
        ],
        cons=["Noticeable hunger increase"] if reduction > 150 else [],
    )


def _quick(excess: int, goal: WeeklyGoal, trigger_type: TriggerType) -> Optional[RebalancingOption]:
    if excess > QUICK_RECOVERY_MAX_EXCESS:
        return None
    days = 3
    reduction = round_calories(excess / days)
    new_target = goal.daily_baseline - reduction
    if new_target < MIN_SAFE_DAILY_CALORIES or reduction > MAX_DAILY_REDUCTION:
        return None
    recommendation: Recommendation = "advanced" if trigger_type == "mild" else "not-recommended"
    return RebalancingOption(
        id="quick_3day",
        name="Quick 3-Day Recovery",
        description=f"Reduce by {reduction} calories/day for {days} days",
        duration_days=days,
        daily_adjustment=-reduction,
        min_safety_cals=MIN_SAFE_DAILY_CALORIES,
        impact=OptionImpact(
            new_daily_target=new_target,
            effort_level="challenging",
            risk_level="moderate" if reduction <= 250 else "aggressive",
        ),
        pros=[
            "Fastest recovery",
            "Minimal timeline impact",
            "Good for small overages",
        ],
        cons=[
            "Requires strong discipline",
            "May increase hunger",
            "Could trigger restriction mindset",
        ],
        recommendation=recommendation,
    )


def _maintenance(goal: WeeklyGoal, trigger_type: TriggerType) -> RebalancingOption:
    maintenance_target = round_calories(goal.daily_baseline + abs(goal.deficit_target) / 7)
    return RebalancingOption(
        id="maintenance_week",
        name="Take a Maintenance Week",
        description="Eat at maintenance calories and extend timeline",
        duration_days=7,
        daily_adjustment=0,
        min_safety_cals=MIN_SAFE_DAILY_CALORIES,
        impact=OptionImpact(
            new_daily_target=max(MIN_SAFE_DAILY_CALORIES, maintenance_target),
            effort_level="minimal",
            risk_level="safe",
        ),
        pros=[
            "Zero additional stress",
            "Prevents binge-restrict cycle",
            "Mental health focused",
            "Still making progress (not gaining)",
        ],
        cons=[
            "Extends timeline by ~1 week",
            'May feel like "giving up"',
        ],
        recommendation="recommended" if trigger_type == "severe" else None,
    )


def generate_rebalancing_options(
    excess: int, goal: WeeklyGoal, trigger_type: TriggerType
) -> List[RebalancingOption]:
    """Options in presentation order; any that would break the floor are left out."""

    candidates = [
        _gentle(excess, goal, trigger_type),
        _moderate(excess, goal),
        _quick(excess, goal, trigger_type),
        _maintenance(goal, trigger_type),
    ]
    options = [option for option in candidates if option is not None]
    logger.debug("Generated %s options for %s kcal", [o.id for o in options], excess)
    return options
