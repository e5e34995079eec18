from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..domain.calendar import week_start_for
from ..domain.ledger import build_weekly_goal, compute_bank_status, lock_daily_target
from ..domain.ledger.records import baseline_record, index_records
from ..models.ledger import DailyCalorieRecord, DailyTotals, GoalConfiguration, WeeklyGoal
from ..models.responses import BankStatusResponse, LockedTargetResponse
from ..models.time import get_local_time
from ..storage.ports import CalorieBankRepository
from .context import TimeProvider, load_week, read_clock

logger = logging.getLogger(__name__)


@dataclass
class SaveGoalConfigurationUseCase:
    """Store the goal configuration and re-derive the current week's goal.

    An existing banking plan is carried over and unlocked days move to the
    new baseline.
    """

    repository: CalorieBankRepository
    time_provider: TimeProvider = get_local_time

    async def __call__(
        self, configuration: GoalConfiguration, timezone: str, on: Optional[date] = None
    ) -> WeeklyGoal:
        clock = read_clock(self.time_provider, timezone, on)
        await self.repository.save_goal_configuration(configuration)

        week_start = week_start_for(clock.today)
        previous = await self.repository.get_weekly_goal(week_start)
        goal = build_weekly_goal(configuration, week_start)
        if previous is not None:
            goal = goal.model_copy(update={"banking_plan": previous.banking_plan})
        await self.repository.save_weekly_goal(goal)

        records = await self.repository.list_daily_records(week_start)
        rebased = [
            r.model_copy(update={"target": configuration.daily_baseline})
            for r in records
            if not r.is_locked and r.target != configuration.daily_baseline
        ]
        if rebased:
            await self.repository.save_daily_records(rebased)

        logger.info(
            "Saved goal configuration: %s kcal/day, %s kcal/week deficit",
            configuration.daily_baseline,
            configuration.weekly_deficit_target,
        )
        return goal


@dataclass
class GetBankStatusUseCase:
    """Lock today's target, then project the week."""

    repository: CalorieBankRepository
    time_provider: TimeProvider = get_local_time

    async def __call__(self, timezone: str, on: Optional[date] = None) -> BankStatusResponse:
        clock = read_clock(self.time_provider, timezone, on)
        goal, records = await load_week(self.repository, clock.today)

        today_record = index_records(records).get(clock.today)
        if today_record is None or not today_record.is_locked:
            update, _ = lock_daily_target(goal, records, clock.today)
            records = update.records
            await self.repository.save_daily_records(
                [r for r in records if r.date == clock.today]
            )

        status = compute_bank_status(goal, records, clock.today)
        return BankStatusResponse(
            status=status, local_time=clock.now, part_of_day=clock.part_of_day
        )


@dataclass
class UpsertDailyTotalsUseCase:
    """Replace one day's consumed and burned totals."""

    repository: CalorieBankRepository

    async def __call__(self, day: date, totals: DailyTotals) -> DailyCalorieRecord:
        goal, records = await load_week(self.repository, day)
        record = index_records(records).get(day) or baseline_record(goal, day)
        record = record.model_copy(
            update={"consumed": totals.consumed, "burned": totals.burned}
        )
        await self.repository.save_daily_records([record])
        logger.info("Recorded %s: consumed=%s burned=%s", day, totals.consumed, totals.burned)
        return record


@dataclass
class LockDailyTargetUseCase:
    repository: CalorieBankRepository

    async def __call__(self, day: date) -> LockedTargetResponse:
        goal, records = await load_week(self.repository, day)
        update, locked = lock_daily_target(goal, records, day)
        await self.repository.save_daily_records([r for r in update.records if r.date == day])
        return LockedTargetResponse(date=day.isoformat(), locked_daily_target=locked)


__all__ = [
    "GetBankStatusUseCase",
    "LockDailyTargetUseCase",
    "SaveGoalConfigurationUseCase",
    "UpsertDailyTotalsUseCase",
]
