from datetime import timedelta

import pytest

from calorie_bank.domain.recovery import (
    UnknownRebalancingOption,
    abandon_session,
    acknowledge_event,
    create_recovery_plan,
    is_stale_event,
    recovery_stage,
    resolve_event,
    select_option,
    start_recovery_session,
    update_session_progress,
)
from calorie_bank.models.recovery import RecoveryPlan
from tests.builders import NOW, day, make_event, make_goal, make_record


@pytest.fixture
def plan() -> RecoveryPlan:
    return create_recovery_plan(make_event(700), make_goal(), now=NOW)


def test_select_option_records_the_choice(plan: RecoveryPlan) -> None:
    selected, option = select_option(plan, "gentle_7day")

    assert selected.selected_option_id == "gentle_7day"
    assert option.daily_adjustment == -100
    assert plan.selected_option_id is None


def test_select_unknown_option(plan: RecoveryPlan) -> None:
    with pytest.raises(UnknownRebalancingOption):
        select_option(plan, "crash_diet")


def test_session_covers_the_option_duration(plan: RecoveryPlan) -> None:
    _, option = select_option(plan, "gentle_7day")

    session = start_recovery_session(plan, option, day(3), now=NOW)

    assert session.recovery_plan_id == plan.id
    assert session.option_id == "gentle_7day"
    assert session.start_date == day(3)
    assert session.end_date == day(9)
    assert session.status == "active"
    assert session.progress.days_remaining == 7
    assert session.progress.adjusted_target == 1900


def test_progress_counts_finished_days_and_adherence(plan: RecoveryPlan) -> None:
    _, option = select_option(plan, "gentle_7day")
    session = start_recovery_session(plan, option, day(3), now=NOW)
    records = [
        make_record(3, consumed=1800, recovery_adjustment=-100),
        make_record(4, consumed=2500, recovery_adjustment=-100),
        make_record(5, consumed=2400, burned=600, recovery_adjustment=-100),
    ]

    before = update_session_progress(session, records, day(3), now=NOW)
    during = update_session_progress(session, records, day(6), now=NOW)

    assert before.progress.days_completed == 0
    assert before.progress.adherence_rate == 100.0
    assert during.progress.days_completed == 3
    assert during.progress.days_remaining == 4
    assert during.progress.adherence_rate == 66.7
    assert during.status == "active"


def test_session_completes_after_its_last_day(plan: RecoveryPlan) -> None:
    _, option = select_option(plan, "gentle_7day")
    session = start_recovery_session(plan, option, day(3), now=NOW)
    later = NOW + timedelta(days=7)

    finished = update_session_progress(session, [], day(10), now=later)

    assert finished.status == "completed"
    assert finished.completed_at == later
    assert finished.progress.days_completed == 7
    assert finished.progress.days_remaining == 0
    assert update_session_progress(finished, [], day(11), now=later) == finished


def test_abandon_only_affects_active_sessions(plan: RecoveryPlan) -> None:
    _, option = select_option(plan, "moderate_5day")
    session = start_recovery_session(plan, option, day(3), now=NOW)

    abandoned = abandon_session(session, NOW)

    assert abandoned.status == "abandoned"
    assert abandoned.completed_at == NOW
    assert abandon_session(abandoned, NOW + timedelta(hours=1)) == abandoned


def test_event_lifecycle_stages(plan: RecoveryPlan) -> None:
    event = make_event(700)
    assert recovery_stage(event) == "detected"
    assert recovery_stage(event, plan) == "plan-generated"

    acknowledged = acknowledge_event(event)
    assert acknowledged.user_acknowledged is True
    assert recovery_stage(acknowledged, plan) == "acknowledged"

    _, option = select_option(plan, "gentle_7day")
    session = start_recovery_session(plan, option, day(3), now=NOW)
    assert recovery_stage(acknowledged, plan, session) == "option-applied"
    assert recovery_stage(acknowledged, plan, abandon_session(session, NOW)) == "resolved"

    resolved = resolve_event(event, NOW)
    assert recovery_stage(resolved) == "resolved"
    assert resolve_event(resolved, NOW + timedelta(days=1)).resolved_at == NOW


def test_stale_events() -> None:
    event = make_event(700, date=day(2))

    assert is_stale_event(event, make_record(2, consumed=2150)) is True
    assert is_stale_event(event, make_record(2, consumed=2600)) is False
    assert is_stale_event(event, None) is True
