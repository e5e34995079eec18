import pytest

from calorie_bank.domain.ledger import (
    InvalidDateRange,
    apply_rebalancing_option,
    clear_recovery_adjustments,
    lock_daily_target,
    weekly_context_for,
)
from calorie_bank.models.recovery import OptionImpact, RebalancingOption
from tests.builders import day, make_goal, make_plan, make_record


def make_option(adjustment: int, duration: int = 7) -> RebalancingOption:
    return RebalancingOption(
        id="gentle_7day",
        name="Gentle 7-Day Rebalance",
        description="test option",
        duration_days=duration,
        daily_adjustment=adjustment,
        min_safety_cals=1200,
        impact=OptionImpact(new_daily_target=2000 + adjustment, effort_level="minimal", risk_level="safe"),
    )


def test_lock_creates_record_at_effective_target() -> None:
    update, locked = lock_daily_target(make_goal(), [], day(2))

    assert locked == 2000
    assert [r.date for r in update.records] == [day(2)]
    assert update.records[0].locked_daily_target == 2000


def test_lock_is_idempotent() -> None:
    goal = make_goal()
    first, locked = lock_daily_target(goal, [make_record(2, consumed=900)], day(2))

    second, relocked = lock_daily_target(goal, first.records, day(2))

    assert relocked == locked
    assert second.records == first.records


def test_lock_uses_banking_adjustment() -> None:
    goal = make_goal(plan=make_plan(5, 100, [0, 1, 2, 3, 4]))

    _, locked = lock_daily_target(goal, [], day(5))

    assert locked == 2500


def test_locked_target_survives_later_changes() -> None:
    goal = make_goal()
    update, _ = lock_daily_target(goal, [make_record(2)], day(2))
    changed = update.records[0].model_copy(update={"banking_adjustment": -300})

    _, locked = lock_daily_target(goal, [changed], day(2))

    assert locked == 2000


def test_lock_outside_week_is_rejected() -> None:
    with pytest.raises(InvalidDateRange):
        lock_daily_target(make_goal(), [], day(-1))


def test_weekly_context_counts_days_before_the_checked_day() -> None:
    records = [
        make_record(0, consumed=2100, burned=100),
        make_record(1, consumed=1800),
        make_record(3, consumed=3000),
    ]

    context = weekly_context_for(make_goal(), records, day(3))

    assert context.total_consumed == 3900
    assert context.total_burned == 100
    assert context.days_elapsed == 3


def test_apply_option_runs_into_the_next_week_and_skips_locked_days() -> None:
    records = [make_record(4, locked_daily_target=2000)]

    update = apply_rebalancing_option(make_goal(), records, make_option(-100), day(3))

    by_date = {r.date: r for r in update.records}
    assert by_date[day(4)].recovery_adjustment == 0
    assert [by_date[day(i)].recovery_adjustment for i in (3, 5, 6, 7, 8, 9)] == [-100] * 6
    assert by_date[day(9)].effective_target == 1900


def test_apply_option_never_crosses_safety_floor() -> None:
    goal = make_goal(baseline=1300)
    records = [make_record(1, target=1300)]

    update = apply_rebalancing_option(goal, records, make_option(-200, duration=3), day(1))

    assert all(r.effective_target >= 1200 for r in update.records)
    assert [r.recovery_adjustment for r in update.records] == [-100, -100, -100]


def test_clear_recovery_adjustments_only_touches_unlocked_days_in_window() -> None:
    records = [
        make_record(1, recovery_adjustment=-100, locked_daily_target=1900),
        make_record(2, recovery_adjustment=-100),
        make_record(3, recovery_adjustment=-100),
        make_record(6, recovery_adjustment=-100),
    ]

    cleared = clear_recovery_adjustments(records, day(1), day(3))

    assert [(r.date, r.recovery_adjustment) for r in cleared] == [(day(2), 0), (day(3), 0)]
