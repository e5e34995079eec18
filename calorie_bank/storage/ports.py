"""Persistence port for calorie bank state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional, Sequence

from ..models.ledger import DailyCalorieRecord, GoalConfiguration, WeeklyGoal
from ..models.recovery import OvereatingEvent, RecoveryPlan, RecoverySession


class CalorieBankRepository(ABC):
    """Interface describing where goals, records and recovery state are kept."""

    @abstractmethod
    async def get_goal_configuration(self) -> Optional[GoalConfiguration]:
        """Return the onboarding goal configuration, if one was saved."""

    @abstractmethod
    async def save_goal_configuration(self, configuration: GoalConfiguration) -> None:
        """Persist the goal configuration."""

    @abstractmethod
    async def get_weekly_goal(self, week_start: date) -> Optional[WeeklyGoal]:
        """Return the goal for the week beginning on ``week_start``."""

    @abstractmethod
    async def save_weekly_goal(self, goal: WeeklyGoal) -> None:
        """Persist a weekly goal, keyed by its Monday."""

    @abstractmethod
    async def list_daily_records(self, week_start: date) -> List[DailyCalorieRecord]:
        """Return the records of one week ordered by date."""

    @abstractmethod
    async def save_daily_records(self, records: Sequence[DailyCalorieRecord]) -> None:
        """Upsert records by date; records may span several weeks."""

    @abstractmethod
    async def list_events(self) -> List[OvereatingEvent]:
        """Return known overeating events."""

    @abstractmethod
    async def save_events(self, events: Sequence[OvereatingEvent]) -> None:
        """Replace the stored overeating events."""

    @abstractmethod
    async def get_recovery_plan(self, plan_id: str) -> Optional[RecoveryPlan]:
        """Return a recovery plan by id."""

    @abstractmethod
    async def save_recovery_plan(self, plan: RecoveryPlan) -> None:
        """Persist a recovery plan."""

    @abstractmethod
    async def get_recovery_session(self) -> Optional[RecoverySession]:
        """Return the most recent recovery session, whatever its status."""

    @abstractmethod
    async def save_recovery_session(self, session: RecoverySession) -> None:
        """Persist the current recovery session."""
