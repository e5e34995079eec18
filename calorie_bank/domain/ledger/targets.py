"""Daily target locking and applying recovery adjustments to the ledger."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import List, Sequence, Tuple

from ...models.ledger import DailyCalorieRecord, LedgerUpdate, WeeklyContext, WeeklyGoal
from ...models.recovery import RebalancingOption
from ..calendar import day_index
from ..constants import MIN_SAFE_DAILY_CALORIES
from .errors import InvalidDateRange
from .records import baseline_record, index_records, sorted_records

logger = logging.getLogger(__name__)


def lock_daily_target(
    goal: WeeklyGoal, daily_records: Sequence[DailyCalorieRecord], day: date
) -> Tuple[LedgerUpdate, int]:
    """Freeze the effective target for ``day``; a no-op once locked."""

    if not goal.contains(day):
        raise InvalidDateRange(day, goal.week_start_date)

    by_date = index_records(daily_records)
    record = by_date.get(day) or baseline_record(goal, day)
    if record.locked_daily_target is None:
        record = record.model_copy(update={"locked_daily_target": record.effective_target})
        logger.debug("Locked %s at %s kcal", day, record.locked_daily_target)
    by_date[day] = record
    return LedgerUpdate(goal=goal, records=sorted_records(by_date)), record.locked_daily_target


def weekly_context_for(
    goal: WeeklyGoal, daily_records: Sequence[DailyCalorieRecord], day: date
) -> WeeklyContext:
    """Totals for the days of the week before ``day``."""

    if not goal.contains(day):
        raise InvalidDateRange(day, goal.week_start_date)
    prior = [r for r in daily_records if goal.week_start_date <= r.date < day]
    return WeeklyContext(
        total_consumed=sum(r.consumed for r in prior),
        total_burned=sum(r.burned for r in prior),
        days_elapsed=day_index(goal.week_start_date, day),
    )


def apply_rebalancing_option(
    goal: WeeklyGoal,
    daily_records: Sequence[DailyCalorieRecord],
    option: RebalancingOption,
    start_date: date,
) -> LedgerUpdate:
    """Write a chosen option's daily adjustment into the following days.

    The window may run past the end of the week; those records belong to the
    next week's ledger. Locked days are skipped and no day's effective target
    is pushed below the safety floor.
    """

    by_date = index_records(daily_records)
    for offset in range(option.duration_days):
        day = start_date + timedelta(days=offset)
        record = by_date.get(day) or baseline_record(goal, day)
        if record.is_locked:
            continue
        adjustment = option.daily_adjustment
        headroom = record.target + record.banking_adjustment - MIN_SAFE_DAILY_CALORIES
        if adjustment < 0:
            adjustment = max(adjustment, -max(0, headroom))
        by_date[day] = record.model_copy(update={"recovery_adjustment": adjustment})

    logger.info(
        "Applied %s (%s kcal/day) from %s for %s days",
        option.id,
        option.daily_adjustment,
        start_date,
        option.duration_days,
    )
    return LedgerUpdate(goal=goal, records=sorted_records(by_date))


def clear_recovery_adjustments(
    daily_records: Sequence[DailyCalorieRecord], start_date: date, end_date: date
) -> List[DailyCalorieRecord]:
    """Drop recovery adjustments from unlocked days in the window; returns changed records."""

    cleared: List[DailyCalorieRecord] = []
    for record in daily_records:
        if not start_date <= record.date <= end_date:
            continue
        if record.is_locked or record.recovery_adjustment == 0:
            continue
        cleared.append(record.model_copy(update={"recovery_adjustment": 0}))
    return cleared
