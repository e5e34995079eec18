"""Redis-backed implementation of the calorie bank repository."""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from typing import Dict, List, Optional, Protocol, Sequence, Type, TypeVar

from pydantic import BaseModel, TypeAdapter

from ..domain.calendar import week_start_for
from ..models.ledger import DailyCalorieRecord, GoalConfiguration, WeeklyGoal
from ..models.recovery import OvereatingEvent, RecoveryPlan, RecoverySession
from .ports import CalorieBankRepository

logger = logging.getLogger(__name__)

KEY_PREFIX = "calorie_bank"

_records_adapter = TypeAdapter(List[DailyCalorieRecord])
_events_adapter = TypeAdapter(List[OvereatingEvent])

ModelT = TypeVar("ModelT", bound=BaseModel)


class RedisClient(Protocol):
    """Minimal Redis client interface used by the repository."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str, ex: int | None = None) -> None:
        ...


def goal_configuration_key() -> str:
    return f"{KEY_PREFIX}:goal_configuration"


def weekly_goal_key(week_start: date) -> str:
    return f"{KEY_PREFIX}:weekly_goal:{week_start.isoformat()}"


def daily_records_key(week_start: date) -> str:
    return f"{KEY_PREFIX}:daily_records:{week_start.isoformat()}"


def events_key() -> str:
    return f"{KEY_PREFIX}:overeating_events"


def recovery_plan_key(plan_id: str) -> str:
    return f"{KEY_PREFIX}:recovery_plan:{plan_id}"


def recovery_session_key() -> str:
    return f"{KEY_PREFIX}:recovery_session"


class RedisCalorieBankRepository(CalorieBankRepository):
    """Store each value as pydantic JSON under ``calorie_bank:*`` keys.

    Per-week and recovery keys expire after ``ttl_seconds`` when it is set;
    the goal configuration never expires.
    """

    def __init__(self, redis: RedisClient, ttl_seconds: Optional[int] = None) -> None:
        self._redis = redis
        self._ttl = ttl_seconds

    def _load(self, key: str, model: Type[ModelT]) -> Optional[ModelT]:
        raw = self._redis.get(key)
        if not raw:
            return None
        return model.model_validate_json(raw)

    def _store(self, key: str, payload: str, *, expire: bool = True) -> None:
        if expire and self._ttl:
            self._redis.set(key, payload, ex=self._ttl)
        else:
            self._redis.set(key, payload)

    async def get_goal_configuration(self) -> Optional[GoalConfiguration]:
        return self._load(goal_configuration_key(), GoalConfiguration)

    async def save_goal_configuration(self, configuration: GoalConfiguration) -> None:
        self._store(goal_configuration_key(), configuration.model_dump_json(), expire=False)

    async def get_weekly_goal(self, week_start: date) -> Optional[WeeklyGoal]:
        return self._load(weekly_goal_key(week_start), WeeklyGoal)

    async def save_weekly_goal(self, goal: WeeklyGoal) -> None:
        self._store(weekly_goal_key(goal.week_start_date), goal.model_dump_json())

    async def list_daily_records(self, week_start: date) -> List[DailyCalorieRecord]:
        raw = self._redis.get(daily_records_key(week_start))
        if not raw:
            return []
        return sorted(_records_adapter.validate_json(raw), key=lambda r: r.date)

    async def save_daily_records(self, records: Sequence[DailyCalorieRecord]) -> None:
        by_week: Dict[date, List[DailyCalorieRecord]] = defaultdict(list)
        for record in records:
            by_week[week_start_for(record.date)].append(record)

        for week_start, changed in by_week.items():
            merged = {r.date: r for r in await self.list_daily_records(week_start)}
            merged.update({r.date: r for r in changed})
            ordered = [merged[day] for day in sorted(merged)]
            self._store(daily_records_key(week_start), _records_adapter.dump_json(ordered).decode())
            logger.debug("Stored %s records for week %s", len(ordered), week_start)

    async def list_events(self) -> List[OvereatingEvent]:
        raw = self._redis.get(events_key())
        if not raw:
            return []
        return _events_adapter.validate_json(raw)

    async def save_events(self, events: Sequence[OvereatingEvent]) -> None:
        self._store(events_key(), _events_adapter.dump_json(list(events)).decode())

    async def get_recovery_plan(self, plan_id: str) -> Optional[RecoveryPlan]:
        return self._load(recovery_plan_key(plan_id), RecoveryPlan)

    async def save_recovery_plan(self, plan: RecoveryPlan) -> None:
        self._store(recovery_plan_key(plan.id), plan.model_dump_json())

    async def get_recovery_session(self) -> Optional[RecoverySession]:
        return self._load(recovery_session_key(), RecoverySession)

    async def save_recovery_session(self, session: RecoverySession) -> None:
        self._store(recovery_session_key(), session.model_dump_json())


def create_redis_repository(
    *, redis: RedisClient, ttl_seconds: Optional[int] = None
) -> CalorieBankRepository:
    """Create a Redis repository without FastAPI dependencies."""
    return RedisCalorieBankRepository(redis=redis, ttl_seconds=ttl_seconds)
