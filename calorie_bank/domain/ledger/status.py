"""Weekly bank status projection."""

from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

from ...models.ledger import CalorieBankStatus, DailyCalorieRecord, ProjectedOutcome, WeeklyGoal
from ..calendar import day_index
from ..constants import PROJECTION_TOLERANCE_FRACTION, SAFE_TO_EAT_BUFFER_FRACTION
from ..rounding import round_calories
from .errors import EmptyGoal, InvalidDateRange
from .records import index_records, today_target_for

logger = logging.getLogger(__name__)


def _projected_outcome(projected_remaining: float, weekly_allowance: int) -> ProjectedOutcome:
    tolerance = PROJECTION_TOLERANCE_FRACTION * weekly_allowance
    if projected_remaining < -tolerance:
        return "over-budget"
    if projected_remaining > tolerance:
        return "under-budget"
    return "on-track"


def compute_bank_status(
    goal: WeeklyGoal, daily_records: Sequence[DailyCalorieRecord], today: date
) -> CalorieBankStatus:
    """Summarise the week so far for ``today``.

    Only records from the goal's Monday through ``today`` count towards the
    totals. Today's locked target is reserved before the remainder is spread
    over the future days, so ``daily_average`` goes negative rather than being
    clamped once the week is over budget.

    Raises:
        EmptyGoal: the goal carries no positive allowance.
        InvalidDateRange: ``today`` is not inside the goal's week.
    """

    if goal.weekly_allowance <= 0:
        raise EmptyGoal(goal.week_start_date)
    if not goal.contains(today):
        raise InvalidDateRange(today, goal.week_start_date)

    recorded = [r for r in daily_records if goal.week_start_date <= r.date <= today]
    total_consumed = sum(r.consumed for r in recorded)
    total_burned = sum(r.burned for r in recorded)
    total_used = total_consumed - total_burned

    days_elapsed = day_index(goal.week_start_date, today) + 1
    days_left = 7 - days_elapsed + 1
    days_left_excluding_today = days_left - 1

    today_record = index_records(recorded).get(today)
    today_target = today_target_for(goal, today_record, today)
    today_consumed = today_record.consumed if today_record else 0
    today_net = today_record.net_consumed if today_record else 0

    remaining = goal.weekly_allowance - total_used
    reserved_today = max(0, today_target - today_consumed)
    remaining_for_future_days = remaining - reserved_today
    daily_average = remaining_for_future_days / max(days_left_excluding_today, 1)

    pace = (remaining + today_net) / days_left
    buffer = SAFE_TO_EAT_BUFFER_FRACTION * goal.daily_baseline
    safe_to_eat_today = max(0, min(today_target, pace) - buffer)

    completed_days = days_elapsed - 1
    if completed_days:
        usual_day = max(0, (total_used - today_net) / completed_days)
    else:
        usual_day = goal.daily_baseline
    projected_remaining = remaining_for_future_days - usual_day * days_left_excluding_today

    logger.debug(
        "Bank status %s: used=%s remaining=%s future=%s projected=%s",
        today,
        total_used,
        remaining,
        remaining_for_future_days,
        projected_remaining,
    )

    active_plan = goal.active_banking_plan
    return CalorieBankStatus(
        weekly_allowance=goal.weekly_allowance,
        total_consumed=round_calories(total_consumed),
        total_burned=round_calories(total_burned),
        total_used=round_calories(total_used),
        remaining=round_calories(remaining),
        remaining_for_future_days=round_calories(remaining_for_future_days),
        days_left=days_left,
        days_left_excluding_today=days_left_excluding_today,
        daily_average=round_calories(daily_average),
        today_target=today_target,
        safe_to_eat_today=round_calories(safe_to_eat_today),
        left_to_eat_today=round_calories(max(0, today_target - today_consumed)),
        avg_daily_consumption=round_calories(total_consumed / days_elapsed),
        avg_daily_burned=round_calories(total_burned / days_elapsed),
        projected_remaining=round_calories(projected_remaining),
        projected_outcome=_projected_outcome(projected_remaining, goal.weekly_allowance),
        active_banking_plan=active_plan,
        is_banking_adjusted=active_plan is not None,
    )
