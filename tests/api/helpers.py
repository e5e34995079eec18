"""Factories and request helpers for API tests."""

from __future__ import annotations

from typing import Any, Dict

import httpx

from calorie_bank.settings import Settings

TODAY = "2025-01-08"


def auth_headers(settings: Settings) -> Dict[str, str]:
    return {"x-api-key": settings.api_key}


def make_configuration_payload(**overrides: Any) -> Dict[str, Any]:
    """Return a canonical goal configuration payload with optional overrides."""

    payload: Dict[str, Any] = {
        "daily_baseline": 2000,
        "weekly_deficit_target": -3500,
        "estimated_weeks_to_goal": 10,
        "user_weight_kg": 70,
    }
    payload.update(overrides)
    return payload


async def configure_goal(
    client: httpx.AsyncClient, settings: Settings, **overrides: Any
) -> httpx.Response:
    response = await client.put(
        "/v2/goal-configuration",
        json=make_configuration_payload(**overrides),
        params={"on": TODAY},
        headers=auth_headers(settings),
    )
    assert response.status_code == 200, response.text
    return response


async def log_day(
    client: httpx.AsyncClient, settings: Settings, day: str, consumed: float, burned: float = 0
) -> Dict[str, Any]:
    response = await client.put(
        f"/v2/daily-records/{day}",
        json={"consumed": consumed, "burned": burned},
        headers=auth_headers(settings),
    )
    assert response.status_code == 200, response.text
    return response.json()
