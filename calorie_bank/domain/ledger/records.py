"""Helpers for working with the per-day record set."""

from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List, Optional

from ...models.ledger import CalorieBankingPlan, DailyCalorieRecord, WeeklyGoal


def index_records(records: Iterable[DailyCalorieRecord]) -> Dict[date, DailyCalorieRecord]:
    return {record.date: record for record in records}


def sorted_records(by_date: Dict[date, DailyCalorieRecord]) -> List[DailyCalorieRecord]:
    return [by_date[day] for day in sorted(by_date)]


def banking_adjustment_for(plan: Optional[CalorieBankingPlan], day: date) -> int:
    """Signed delta an active banking plan applies to ``day``."""
    if plan is None or not plan.is_active:
        return 0
    if day == plan.target_date:
        return plan.total_banked
    if day in plan.reduction_dates:
        return -plan.daily_reduction
    return 0


def baseline_record(goal: WeeklyGoal, day: date) -> DailyCalorieRecord:
    """A fresh record for a day nothing has been logged against yet."""
    return DailyCalorieRecord(
        date=day,
        target=goal.daily_baseline,
        banking_adjustment=banking_adjustment_for(goal.active_banking_plan, day),
    )


def today_target_for(
    goal: WeeklyGoal, record: Optional[DailyCalorieRecord], day: date
) -> int:
    """Locked target if frozen, otherwise the day's live effective target."""
    if record is None:
        return goal.daily_baseline + banking_adjustment_for(goal.active_banking_plan, day)
    if record.locked_daily_target is not None:
        return record.locked_daily_target
    return record.effective_target
