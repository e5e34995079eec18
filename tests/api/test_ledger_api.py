"""Ledger endpoints: goal configuration, bank status and daily records."""

from __future__ import annotations

import json

import httpx
import pytest

from calorie_bank.settings import Settings
from tests.api.helpers import TODAY, auth_headers, configure_goal, log_day
from tests.conftest import RedisFake

pytestmark = pytest.mark.asyncio


async def test_bank_status_requires_configuration(
    client: httpx.AsyncClient, settings: Settings
) -> None:
    response = await client.get(
        "/v2/bank-status", params={"on": TODAY}, headers=auth_headers(settings)
    )

    assert response.status_code == 409
    assert response.json() == {"detail": {"error": "No goal configuration has been saved"}}


async def test_goal_configuration_derives_week(
    client: httpx.AsyncClient, settings: Settings, redis_fake: RedisFake
) -> None:
    response = await configure_goal(client, settings, daily_baseline=1800)

    goal = response.json()
    assert goal["week_start_date"] == "2025-01-06"
    assert goal["weekly_allowance"] == 12600
    assert goal["banking_plan"] is None
    stored = json.loads(redis_fake.store["calorie_bank:goal_configuration"])
    assert stored["daily_baseline"] == 1800
    assert redis_fake.expirations["calorie_bank:goal_configuration"] is None
    assert "calorie_bank:weekly_goal:2025-01-06" in redis_fake.store


async def test_bank_status_reports_week(client: httpx.AsyncClient, settings: Settings) -> None:
    await configure_goal(client, settings)
    await log_day(client, settings, "2025-01-06", consumed=2200)
    await log_day(client, settings, "2025-01-07", consumed=1900, burned=300)

    response = await client.get(
        "/v2/bank-status", params={"on": TODAY}, headers=auth_headers(settings)
    )

    assert response.status_code == 200
    body = response.json()
    assert body["part_of_day"] in {"night", "morning", "afternoon", "evening"}
    status = body["status"]
    assert status["weekly_allowance"] == 14000
    assert status["total_used"] == 3800
    assert status["remaining"] == 10200
    assert status["days_left"] == 5
    assert status["today_target"] == 2000
    assert status["is_banking_adjusted"] is False


async def test_bank_status_locks_today(
    client: httpx.AsyncClient, settings: Settings, redis_fake: RedisFake
) -> None:
    await configure_goal(client, settings)

    await client.get("/v2/bank-status", params={"on": TODAY}, headers=auth_headers(settings))

    records = json.loads(redis_fake.store["calorie_bank:daily_records:2025-01-06"])
    assert [(r["date"], r["locked_daily_target"]) for r in records] == [(TODAY, 2000)]


async def test_upsert_daily_record(client: httpx.AsyncClient, settings: Settings) -> None:
    await configure_goal(client, settings)

    first = await log_day(client, settings, "2025-01-07", consumed=1200)
    second = await log_day(client, settings, "2025-01-07", consumed=1500, burned=250)

    assert first["consumed"] == 1200
    assert second["consumed"] == 1500
    assert second["burned"] == 250
    assert second["target"] == 2000


async def test_upsert_rejects_negative_totals(
    client: httpx.AsyncClient, settings: Settings
) -> None:
    await configure_goal(client, settings)

    response = await client.put(
        "/v2/daily-records/2025-01-07",
        json={"consumed": -5},
        headers=auth_headers(settings),
    )

    assert response.status_code == 422


async def test_lock_daily_target_is_stable(client: httpx.AsyncClient, settings: Settings) -> None:
    await configure_goal(client, settings)

    first = await client.post("/v2/daily-records/2025-01-09/lock", headers=auth_headers(settings))
    await configure_goal(client, settings, daily_baseline=1700)
    second = await client.post("/v2/daily-records/2025-01-09/lock", headers=auth_headers(settings))

    assert first.status_code == 200
    assert first.json() == {"date": "2025-01-09", "locked_daily_target": 2000}
    assert second.json() == first.json()


async def test_unknown_timezone_is_rejected(client: httpx.AsyncClient, settings: Settings) -> None:
    await configure_goal(client, settings)

    response = await client.get(
        "/v2/bank-status",
        params={"on": TODAY, "timezone": "Mars/Olympus_Mons"},
        headers=auth_headers(settings),
    )

    assert response.status_code == 422
    assert response.json() == {"detail": {"error": "Unknown timezone: Mars/Olympus_Mons"}}
