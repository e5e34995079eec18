"""Recovery plan assembly."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ...models.ledger import WeeklyGoal
from ...models.recovery import OvereatingEvent, RecoveryPlan, RecoveryStrategy, TriggerType
from ..constants import MODERATE_CORRECTION_EXCESS
from .impact import calculate_impact_analysis
from .options import generate_rebalancing_options

logger = logging.getLogger(__name__)


def recommend_strategy(trigger_type: TriggerType, excess: int) -> RecoveryStrategy:
    if trigger_type == "severe":
        return "maintenance-week"
    if trigger_type == "moderate" and excess > MODERATE_CORRECTION_EXCESS:
        return "moderate-correction"
    return "gentle-rebalancing"


def create_recovery_plan(
    event: OvereatingEvent,
    goal: WeeklyGoal,
    user_weight: Optional[float] = None,
    *,
    now: datetime,
) -> RecoveryPlan:
    """Build the impact analysis and option set for ``event``.

    The plan only proposes changes; applying an option to the ledger is the
    caller's decision.
    """

    plan = RecoveryPlan(
        id=f"recovery_{event.id}",
        overeating_event_id=event.id,
        strategy=recommend_strategy(event.trigger_type, event.excess_calories),
        impact_analysis=calculate_impact_analysis(event, goal, user_weight),
        rebalancing_options=generate_rebalancing_options(
            event.excess_calories, goal, event.trigger_type
        ),
        created_at=now,
    )
    logger.info("Recovery plan %s uses strategy %s", plan.id, plan.strategy)
    return plan
