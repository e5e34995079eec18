"""Calorie banking plans: validation, creation and cancellation."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Sequence

from ...models.ledger import (
    BankingDayImpact,
    BankingImpactPreview,
    BankingPlanOutcome,
    BankingPlanValidation,
    CalorieBankingPlan,
    DailyCalorieRecord,
    LedgerIssue,
    LedgerIssueCode,
    LedgerUpdate,
    WeeklyGoal,
)
from ..calendar import iter_days
from ..constants import (
    HARD_REDUCTION_WARNING,
    LARGE_BANKING_FRACTION,
    LOW_TARGET_MARGIN,
    MAX_DAILY_REDUCTION,
    MIN_SAFE_DAILY_CALORIES,
)
from .records import banking_adjustment_for, baseline_record, index_records, sorted_records

logger = logging.getLogger(__name__)


def _issue(code: LedgerIssueCode, message: str) -> LedgerIssue:
    return LedgerIssue(code=code, message=message)


def reduction_days(
    goal: WeeklyGoal,
    by_date: Dict[date, DailyCalorieRecord],
    target_date: date,
    today: date,
) -> List[date]:
    """Unlocked days from ``today`` up to, but excluding, the target day."""
    first = max(today, goal.week_start_date)
    last = min(target_date - timedelta(days=1), goal.week_end_date)
    days: List[date] = []
    for day in iter_days(first, last):
        record = by_date.get(day)
        if record is not None and record.is_locked:
            continue
        days.append(day)
    return days


def available_target_dates(
    goal: WeeklyGoal, daily_records: Sequence[DailyCalorieRecord], today: date
) -> List[date]:
    """Days later this week that a plan could bank onto.

    A day qualifies when it is not locked and at least one unlocked day
    between today and it is left to reduce.
    """
    if not goal.contains(today):
        return []
    by_date = index_records(daily_records)
    dates: List[date] = []
    for day in iter_days(today + timedelta(days=1), goal.week_end_date):
        record = by_date.get(day)
        if record is not None and record.is_locked:
            continue
        if reduction_days(goal, by_date, day, today):
            dates.append(day)
    return dates


def is_banking_available(
    goal: WeeklyGoal, daily_records: Sequence[DailyCalorieRecord], today: date
) -> bool:
    return bool(available_target_dates(goal, daily_records, today))


def _base_target(goal: WeeklyGoal, record: Optional[DailyCalorieRecord]) -> int:
    if record is None:
        return goal.daily_baseline
    return record.target + record.recovery_adjustment


def _impact_preview(
    goal: WeeklyGoal,
    by_date: Dict[date, DailyCalorieRecord],
    target_date: date,
    daily_reduction: int,
    days: List[date],
) -> BankingImpactPreview:
    impacts = [
        BankingDayImpact(
            date=day,
            reduction=daily_reduction,
            new_target=_base_target(goal, by_date.get(day)) - daily_reduction,
        )
        for day in days
    ]
    total_banked = daily_reduction * len(impacts)
    min_daily = min((i.new_target for i in impacts), default=goal.daily_baseline)
    return BankingImpactPreview(
        target_date=target_date,
        target_date_boost=total_banked,
        daily_reductions=impacts,
        min_daily_calories=min_daily,
        total_banked=total_banked,
        days_affected=len(impacts),
    )


def validate_banking_plan(
    goal: WeeklyGoal,
    target_date: date,
    daily_reduction: int,
    today: date,
    daily_records: Sequence[DailyCalorieRecord] = (),
) -> BankingPlanValidation:
    """Check a proposed plan and preview its effect on each reduction day.

    Every problem is collected rather than raised so the caller can show them
    together. Errors block the plan; warnings are advisory.
    """

    errors: List[LedgerIssue] = []
    warnings: List[LedgerIssue] = []
    by_date = index_records(daily_records)

    if goal.weekly_allowance <= 0:
        errors.append(_issue(LedgerIssueCode.EMPTY_GOAL, "The weekly goal has no allowance"))
    if not goal.contains(today):
        errors.append(
            _issue(
                LedgerIssueCode.INVALID_DATE_RANGE,
                f"{today.isoformat()} is outside the current week",
            )
        )

    target_ok = False
    if not goal.contains(target_date):
        errors.append(
            _issue(
                LedgerIssueCode.TARGET_DATE_OUTSIDE_WEEK,
                "Target date must fall within the current week",
            )
        )
    elif target_date < today:
        errors.append(
            _issue(LedgerIssueCode.TARGET_DATE_IN_PAST, "Target date cannot be in the past")
        )
    else:
        target_ok = True
        target_record = by_date.get(target_date)
        if target_record is not None and target_record.is_locked:
            errors.append(
                _issue(
                    LedgerIssueCode.TARGET_DATE_LOCKED,
                    "The target day's calorie target is already locked",
                )
            )

    if daily_reduction <= 0:
        errors.append(
            _issue(
                LedgerIssueCode.INVALID_DAILY_REDUCTION,
                "Daily reduction must be greater than 0",
            )
        )
    elif daily_reduction > MAX_DAILY_REDUCTION:
        errors.append(
            _issue(
                LedgerIssueCode.EXCESSIVE_DAILY_REDUCTION,
                f"Daily reduction cannot exceed {MAX_DAILY_REDUCTION} calories",
            )
        )

    days = reduction_days(goal, by_date, target_date, today) if goal.contains(today) else []
    if target_ok and not days:
        errors.append(
            _issue(
                LedgerIssueCode.NO_DAYS_TO_REDUCE,
                "There are no days left before the target day to bank from",
            )
        )

    preview = _impact_preview(goal, by_date, target_date, daily_reduction, days)

    if days and daily_reduction > 0:
        if preview.min_daily_calories < MIN_SAFE_DAILY_CALORIES:
            errors.append(
                _issue(
                    LedgerIssueCode.UNSAFE_DAILY_REDUCTION,
                    "Banking would create unsafe daily minimums "
                    f"({preview.min_daily_calories} < {MIN_SAFE_DAILY_CALORIES})",
                )
            )
        elif preview.min_daily_calories < MIN_SAFE_DAILY_CALORIES + LOW_TARGET_MARGIN:
            warnings.append(
                _issue(
                    LedgerIssueCode.LOW_DAILY_TARGETS,
                    "Banking creates very low daily targets - consider reducing the amount",
                )
            )
        if preview.total_banked > LARGE_BANKING_FRACTION * goal.weekly_allowance:
            warnings.append(
                _issue(
                    LedgerIssueCode.LARGE_BANKING_AMOUNT,
                    f"Banking {preview.total_banked} calories is a large share of the week",
                )
            )
        if HARD_REDUCTION_WARNING < daily_reduction <= MAX_DAILY_REDUCTION:
            warnings.append(
                _issue(
                    LedgerIssueCode.HARD_TO_SUSTAIN_REDUCTION,
                    "Large daily reductions may be difficult to maintain",
                )
            )

    return BankingPlanValidation(errors=errors, warnings=warnings, impact_preview=preview)


def cancel_banking_plan(
    goal: WeeklyGoal,
    daily_records: Sequence[DailyCalorieRecord],
    today: Optional[date] = None,
) -> LedgerUpdate:
    """Deactivate the plan and restore baseline targets on unlocked days.

    Locked days, and days before ``today`` when it is given, keep whatever
    adjustment they were locked with.
    """

    by_date = index_records(daily_records)
    for day, record in list(by_date.items()):
        if record.banking_adjustment == 0 or record.is_locked:
            continue
        if today is not None and day < today:
            continue
        by_date[day] = record.model_copy(update={"banking_adjustment": 0})

    plan = goal.banking_plan
    if plan is not None and plan.is_active:
        logger.info("Cancelling banking plan %s", plan.id)
        goal = goal.model_copy(
            update={"banking_plan": plan.model_copy(update={"is_active": False})}
        )
    return LedgerUpdate(goal=goal, records=sorted_records(by_date))


def create_banking_plan(
    goal: WeeklyGoal,
    daily_records: Sequence[DailyCalorieRecord],
    target_date: date,
    daily_reduction: int,
    today: date,
    now: datetime,
) -> BankingPlanOutcome:
    """Validate and, when valid, install a plan replacing any existing one."""

    validation = validate_banking_plan(goal, target_date, daily_reduction, today, daily_records)
    if not validation.is_valid:
        logger.info(
            "Rejected banking plan for %s: %s",
            target_date,
            [issue.code.value for issue in validation.errors],
        )
        return BankingPlanOutcome(
            goal=goal,
            records=sorted_records(index_records(daily_records)),
            validation=validation,
        )

    cleared = cancel_banking_plan(goal, daily_records, today)
    preview = validation.impact_preview
    plan = CalorieBankingPlan(
        id=f"banking_{target_date.isoformat()}_{int(now.timestamp())}",
        week_start_date=goal.week_start_date,
        target_date=target_date,
        daily_reduction=daily_reduction,
        total_banked=preview.total_banked,
        remaining_days_count=preview.days_affected,
        reduction_dates=[impact.date for impact in preview.daily_reductions],
        created_at=now,
    )

    updated_goal = cleared.goal.model_copy(update={"banking_plan": plan})
    by_date = index_records(cleared.records)
    for day in [*plan.reduction_dates, plan.target_date]:
        record = by_date.get(day) or baseline_record(updated_goal, day)
        by_date[day] = record.model_copy(
            update={"banking_adjustment": banking_adjustment_for(plan, day)}
        )

    logger.info(
        "Banking plan %s: %s kcal over %s days onto %s",
        plan.id,
        plan.total_banked,
        plan.remaining_days_count,
        plan.target_date,
    )
    return BankingPlanOutcome(
        goal=updated_goal,
        records=sorted_records(by_date),
        validation=validation,
        plan=plan,
    )
