"""Shared test fixtures and doubles."""

from __future__ import annotations

import sys
from collections.abc import AsyncIterator, Iterator
from pathlib import Path
from typing import Dict, Optional

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from calorie_bank import main
from calorie_bank.platform.wiring import get_redis
from calorie_bank.settings import Settings, get_settings
from calorie_bank.storage.redis_repository import RedisCalorieBankRepository, RedisClient


class RedisFake(RedisClient):
    """In-memory Redis double that records interactions."""

    def __init__(self) -> None:
        self.store: Dict[str, str] = {}
        self.expirations: Dict[str, Optional[int]] = {}
        self._last_get: str | None = None
        self._last_set: tuple[str, str, Optional[int]] | None = None

    def assert_last_get(self, key: str) -> None:
        """Assert the most recent ``get`` call was for ``key``."""

        assert self._last_get == key, f"Expected last get for {key!r}, saw {self._last_get!r}"

    def assert_last_set(self, key: str, *, ex: Optional[int] = None) -> None:
        """Assert the most recent ``set`` call matched the provided values."""

        assert self._last_set is not None, "No set() call was recorded"
        last_key, _, last_ex = self._last_set
        assert last_key == key, f"Expected last set for {key!r}, saw {last_key!r}"
        if ex is not None:
            assert last_ex == ex, f"Expected last set ex {ex!r}, saw {last_ex!r}"

    def keys(self, prefix: str = "") -> list[str]:
        return sorted(key for key in self.store if key.startswith(prefix))

    def get(self, key: str) -> Optional[str]:
        self._last_get = key
        return self.store.get(key)

    def set(self, key: str, value: str, ex: Optional[int] = None) -> None:
        self._last_set = (key, value, ex)
        self.store[key] = value
        self.expirations[key] = ex


@pytest.fixture
def settings() -> Settings:
    """Canonical settings instance reused across tests."""

    return Settings(
        api_key="test-key",
        upstash_redis_rest_url="https://redis.example.com",
        upstash_redis_rest_token="redis-token",
        state_ttl_days=30,
    )


@pytest.fixture
def redis_fake() -> RedisFake:
    return RedisFake()


@pytest.fixture
def repository(redis_fake: RedisFake, settings: Settings) -> RedisCalorieBankRepository:
    return RedisCalorieBankRepository(redis_fake, ttl_seconds=settings.state_ttl_seconds)


@pytest.fixture
def app(settings: Settings, redis_fake: RedisFake) -> Iterator[FastAPI]:
    """Configured FastAPI application instance for integration tests."""

    app = main.app
    overrides = {
        get_settings: lambda: settings,
        get_redis: lambda: redis_fake,
    }
    app.dependency_overrides.update(overrides)
    try:
        yield app
    finally:
        for dependency in overrides:
            app.dependency_overrides.pop(dependency, None)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Async HTTP client bound to the FastAPI app."""

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as api_client:
        yield api_client
