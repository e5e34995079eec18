from calorie_bank.domain.ledger import (
    available_target_dates,
    banking_adjustment_for,
    cancel_banking_plan,
    create_banking_plan,
    is_banking_available,
    validate_banking_plan,
)
from calorie_bank.models.ledger import LedgerIssueCode
from tests.builders import NOW, day, make_goal, make_plan, make_record


def test_valid_plan_previews_each_reduction_day() -> None:
    validation = validate_banking_plan(make_goal(), day(5), 200, day(0))

    assert validation.is_valid
    assert validation.warnings == []
    preview = validation.impact_preview
    assert preview.days_affected == 5
    assert preview.total_banked == 1000
    assert preview.target_date_boost == 1000
    assert preview.min_daily_calories == 1800
    assert [impact.date for impact in preview.daily_reductions] == [day(i) for i in range(5)]


def test_target_date_today_has_no_days_to_reduce() -> None:
    validation = validate_banking_plan(make_goal(), day(2), 200, day(2))

    assert validation.error_codes() == [LedgerIssueCode.NO_DAYS_TO_REDUCE]


def test_target_date_in_past() -> None:
    validation = validate_banking_plan(make_goal(), day(0), 200, day(2))

    assert LedgerIssueCode.TARGET_DATE_IN_PAST in validation.error_codes()


def test_target_date_outside_week() -> None:
    validation = validate_banking_plan(make_goal(), day(7), 200, day(2))

    assert LedgerIssueCode.TARGET_DATE_OUTSIDE_WEEK in validation.error_codes()


def test_locked_target_date_is_rejected() -> None:
    records = [make_record(5, locked_daily_target=2000)]

    validation = validate_banking_plan(make_goal(), day(5), 200, day(0), records)

    assert LedgerIssueCode.TARGET_DATE_LOCKED in validation.error_codes()


def test_locked_today_as_target_lists_every_problem() -> None:
    records = [make_record(2, locked_daily_target=2000)]

    validation = validate_banking_plan(make_goal(), day(2), 200, day(2), records)

    assert validation.error_codes() == [
        LedgerIssueCode.TARGET_DATE_LOCKED,
        LedgerIssueCode.NO_DAYS_TO_REDUCE,
    ]


def test_reduction_must_be_positive_and_bounded() -> None:
    assert validate_banking_plan(make_goal(), day(5), 0, day(0)).error_codes() == [
        LedgerIssueCode.INVALID_DAILY_REDUCTION
    ]
    assert LedgerIssueCode.EXCESSIVE_DAILY_REDUCTION in validate_banking_plan(
        make_goal(), day(5), 600, day(0)
    ).error_codes()


def test_reduction_below_safety_floor_is_an_error() -> None:
    validation = validate_banking_plan(make_goal(baseline=1500), day(5), 400, day(0))

    assert validation.error_codes() == [LedgerIssueCode.UNSAFE_DAILY_REDUCTION]
    assert validation.impact_preview.min_daily_calories == 1100


def test_low_daily_targets_warn_without_failing() -> None:
    validation = validate_banking_plan(make_goal(baseline=1500), day(5), 200, day(0))

    assert validation.is_valid
    assert validation.warning_codes() == [LedgerIssueCode.LOW_DAILY_TARGETS]


def test_large_reductions_warn() -> None:
    hard = validate_banking_plan(make_goal(), day(5), 400, day(0))
    large = validate_banking_plan(make_goal(), day(6), 400, day(0))

    assert hard.warning_codes() == [LedgerIssueCode.HARD_TO_SUSTAIN_REDUCTION]
    assert large.warning_codes() == [
        LedgerIssueCode.LARGE_BANKING_AMOUNT,
        LedgerIssueCode.HARD_TO_SUSTAIN_REDUCTION,
    ]


def test_preview_accounts_for_recovery_adjustments() -> None:
    records = [make_record(1, recovery_adjustment=-100)]

    validation = validate_banking_plan(make_goal(), day(5), 200, day(0), records)

    assert validation.impact_preview.min_daily_calories == 1700


def test_create_plan_conserves_calories() -> None:
    outcome = create_banking_plan(make_goal(), [], day(5), 200, day(0), NOW)

    plan = outcome.plan
    assert plan is not None
    assert plan.id == f"banking_{day(5).isoformat()}_{int(NOW.timestamp())}"
    assert plan.total_banked == plan.daily_reduction * plan.remaining_days_count == 1000
    assert outcome.goal.active_banking_plan == plan

    adjustments = {record.date: record.banking_adjustment for record in outcome.records}
    assert adjustments[day(5)] == 1000
    assert all(adjustments[day(i)] == -200 for i in range(5))
    assert sum(adjustments.values()) == 0


def test_create_plan_skips_locked_days() -> None:
    records = [make_record(1, consumed=1500, locked_daily_target=2000)]

    outcome = create_banking_plan(make_goal(), records, day(5), 200, day(0), NOW)

    assert outcome.plan is not None
    assert outcome.plan.total_banked == 800
    assert day(1) not in outcome.plan.reduction_dates
    locked = next(r for r in outcome.records if r.date == day(1))
    assert locked.banking_adjustment == 0
    assert locked.consumed == 1500


def test_invalid_plan_leaves_ledger_untouched() -> None:
    goal = make_goal()
    records = [make_record(0, consumed=1000)]

    outcome = create_banking_plan(goal, records, day(2), 200, day(2), NOW)

    assert outcome.plan is None
    assert outcome.goal == goal
    assert outcome.records == records
    assert not outcome.validation.is_valid


def test_new_plan_replaces_the_previous_one() -> None:
    first = create_banking_plan(make_goal(), [], day(5), 200, day(0), NOW)

    second = create_banking_plan(first.goal, first.records, day(4), 100, day(0), NOW)

    adjustments = {record.date: record.banking_adjustment for record in second.records}
    assert adjustments[day(5)] == 0
    assert adjustments[day(4)] == 400
    assert all(adjustments[day(i)] == -100 for i in range(4))
    assert second.goal.banking_plan == second.plan


def test_cancel_restores_unlocked_future_days_only() -> None:
    plan = make_plan(5, 200, [0, 1, 2, 3, 4])
    goal = make_goal(plan=plan)
    records = [make_record(0, consumed=1700, banking_adjustment=-200, locked_daily_target=1800)]
    records += [make_record(i, banking_adjustment=-200) for i in range(1, 5)]
    records.append(make_record(5, banking_adjustment=1000))

    update = cancel_banking_plan(goal, records, day(1))

    adjustments = {record.date: record.banking_adjustment for record in update.records}
    assert adjustments[day(0)] == -200
    assert all(adjustments[day(i)] == 0 for i in range(1, 6))
    assert update.goal.banking_plan is not None
    assert update.goal.banking_plan.is_active is False
    assert update.goal.active_banking_plan is None


def test_banking_adjustment_for_each_day() -> None:
    plan = make_plan(5, 200, [2, 3, 4])

    assert banking_adjustment_for(plan, day(5)) == 600
    assert banking_adjustment_for(plan, day(3)) == -200
    assert banking_adjustment_for(plan, day(1)) == 0
    assert banking_adjustment_for(None, day(3)) == 0
    assert banking_adjustment_for(plan.model_copy(update={"is_active": False}), day(5)) == 0


def test_available_targets_run_from_tomorrow_and_skip_locked_days() -> None:
    records = [make_record(4, locked_daily_target=2000)]

    assert available_target_dates(make_goal(), records, day(2)) == [day(3), day(5), day(6)]
    assert is_banking_available(make_goal(), records, day(2)) is True


def test_no_targets_without_a_day_to_reduce() -> None:
    locked_today = [make_record(5, locked_daily_target=2000)]

    assert available_target_dates(make_goal(), locked_today, day(5)) == []
    assert is_banking_available(make_goal(), [], day(6)) is False
