"""Overeating detection in simple and bank-aware modes."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ...models.ledger import DailyCalorieRecord, WeeklyContext, WeeklyGoal
from ...models.recovery import DetectionMode, OvereatingEvent, TriggerType
from ..constants import (
    BANKING_FLOOR_FRACTION,
    OVEREATING_THRESHOLDS,
    REDISTRIBUTION_FLOOR_FRACTION,
)
from ..rounding import round_calories

logger = logging.getLogger(__name__)


def classify_excess(excess: float) -> TriggerType:
    if excess >= OVEREATING_THRESHOLDS["severe"]:
        return "severe"
    if excess >= OVEREATING_THRESHOLDS["moderate"]:
        return "moderate"
    return "mild"


def is_significant_excess(excess: float) -> bool:
    return excess > OVEREATING_THRESHOLDS["mild"]


def daily_excess(record: DailyCalorieRecord) -> float:
    """Consumption over the day's locked (or live) target."""
    target = (
        record.locked_daily_target
        if record.locked_daily_target is not None
        else record.effective_target
    )
    return record.consumed - target


def _make_event(
    day: date, excess: int, now: datetime, *, redistribution_unsafe: bool = False
) -> OvereatingEvent:
    return OvereatingEvent(
        id=f"overeating_{day.isoformat()}_{int(now.timestamp())}",
        date=day,
        excess_calories=excess,
        trigger_type=classify_excess(excess),
        detected_at=now,
        redistribution_unsafe=redistribution_unsafe,
    )


def _redistribution_floor(goal: WeeklyGoal) -> float:
    floor = REDISTRIBUTION_FLOOR_FRACTION * goal.daily_baseline
    plan = goal.active_banking_plan
    if plan is not None:
        floor = max(floor, BANKING_FLOOR_FRACTION * (goal.daily_baseline - plan.daily_reduction))
    return floor


def detect_overeating_event(
    record: DailyCalorieRecord,
    goal: WeeklyGoal,
    weekly_context: Optional[WeeklyContext] = None,
    *,
    now: datetime,
    mode: DetectionMode = "bank-aware",
) -> Optional[OvereatingEvent]:
    """Return an event when ``record`` warrants recovery, else ``None``.

    Simple mode reports the raw daily excess. Bank-aware mode only reports
    when the whole week is over its allowance, and then reports the weekly
    shortfall; it falls back to simple mode without a ``weekly_context``.
    """

    excess = round_calories(daily_excess(record))
    if not is_significant_excess(excess):
        return None

    if mode == "simple" or weekly_context is None:
        return _make_event(record.date, excess, now)

    weekly_net = (
        weekly_context.total_consumed - weekly_context.total_burned + record.net_consumed
    )
    balance = goal.weekly_allowance - weekly_net
    if balance >= 0:
        logger.debug("Daily excess %s absorbed by weekly balance %s", excess, balance)
        return None

    shortfall = round_calories(abs(balance))
    if shortfall <= 0:
        return None

    days_after = 6 - weekly_context.days_elapsed
    if days_after > 0:
        spread_target = goal.daily_baseline - shortfall / days_after
        unsafe = spread_target < _redistribution_floor(goal)
    else:
        unsafe = True

    logger.info(
        "Overeating on %s: daily excess %s, weekly shortfall %s (redistribution unsafe: %s)",
        record.date,
        excess,
        shortfall,
        unsafe,
    )
    return _make_event(record.date, shortfall, now, redistribution_unsafe=unsafe)
