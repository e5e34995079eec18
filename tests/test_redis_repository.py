"""Redis repository serialisation tests."""

from __future__ import annotations

import json

import pytest

from calorie_bank.domain.recovery import create_recovery_plan, select_option, start_recovery_session
from calorie_bank.storage.redis_repository import RedisCalorieBankRepository
from tests.builders import MONDAY, NOW, day, make_configuration, make_event, make_goal, make_record
from tests.conftest import RedisFake

pytestmark = pytest.mark.asyncio


async def test_goal_configuration_never_expires(
    repository: RedisCalorieBankRepository, redis_fake: RedisFake
) -> None:
    await repository.save_goal_configuration(make_configuration())

    redis_fake.assert_last_set("calorie_bank:goal_configuration")
    assert redis_fake.expirations["calorie_bank:goal_configuration"] is None
    assert await repository.get_goal_configuration() == make_configuration()


async def test_weekly_goal_round_trip_with_expiry(
    repository: RedisCalorieBankRepository, redis_fake: RedisFake
) -> None:
    goal = make_goal()

    await repository.save_weekly_goal(goal)

    redis_fake.assert_last_set("calorie_bank:weekly_goal:2025-01-06", ex=30 * 24 * 60 * 60)
    assert await repository.get_weekly_goal(MONDAY) == goal
    assert await repository.get_weekly_goal(day(7)) is None


async def test_daily_records_are_grouped_by_week_and_merged(
    repository: RedisCalorieBankRepository, redis_fake: RedisFake
) -> None:
    await repository.save_daily_records([make_record(1, consumed=1800), make_record(3)])
    await repository.save_daily_records(
        [make_record(3, consumed=2500), make_record(8, consumed=1500)]
    )

    this_week = await repository.list_daily_records(MONDAY)
    next_week = await repository.list_daily_records(day(7))

    assert [(r.date, r.consumed) for r in this_week] == [(day(1), 1800), (day(3), 2500)]
    assert [(r.date, r.consumed) for r in next_week] == [(day(8), 1500)]
    stored = json.loads(redis_fake.store["calorie_bank:daily_records:2025-01-06"])
    assert [entry["date"] for entry in stored] == ["2025-01-07", "2025-01-09"]


async def test_missing_values_read_as_empty(repository: RedisCalorieBankRepository) -> None:
    assert await repository.get_goal_configuration() is None
    assert await repository.list_daily_records(MONDAY) == []
    assert await repository.list_events() == []
    assert await repository.get_recovery_plan("recovery_missing") is None
    assert await repository.get_recovery_session() is None


async def test_events_are_replaced_wholesale(repository: RedisCalorieBankRepository) -> None:
    first = make_event(700, id="overeating_a")
    second = make_event(300, "mild", id="overeating_b", date=day(3))

    await repository.save_events([first, second])
    await repository.save_events([second])

    assert await repository.list_events() == [second]


async def test_zero_ttl_disables_expiry(redis_fake: RedisFake) -> None:
    repository = RedisCalorieBankRepository(redis_fake)

    await repository.save_weekly_goal(make_goal())

    assert redis_fake.expirations["calorie_bank:weekly_goal:2025-01-06"] is None
    assert redis_fake.keys("calorie_bank:") == ["calorie_bank:weekly_goal:2025-01-06"]


async def test_recovery_plan_and_session_round_trip(
    repository: RedisCalorieBankRepository,
) -> None:
    plan = create_recovery_plan(make_event(700), make_goal(), now=NOW)
    _, option = select_option(plan, "gentle_7day")
    session = start_recovery_session(plan, option, day(3), now=NOW)

    await repository.save_recovery_plan(plan)
    await repository.save_recovery_session(session)

    assert await repository.get_recovery_plan(plan.id) == plan
    assert await repository.get_recovery_session() == session
