from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import List, Optional

from ..domain.calendar import week_start_for
from ..domain.ledger import (
    apply_rebalancing_option,
    clear_recovery_adjustments,
    weekly_context_for,
)
from ..domain.ledger.records import index_records
from ..domain.recovery import (
    abandon_session,
    acknowledge_event,
    create_recovery_plan,
    detect_overeating_event,
    is_stale_event,
    resolve_event,
    select_option,
    start_recovery_session,
    update_session_progress,
)
from ..models.ledger import DailyCalorieRecord
from ..models.recovery import (
    AppliedRecovery,
    OvereatingCheckResult,
    OvereatingEvent,
    RecoveryPlan,
    RecoverySession,
)
from ..models.time import get_local_time
from ..storage.ports import CalorieBankRepository
from .context import TimeProvider, load_week, read_clock
from .errors import EventNotFoundError, NoActiveSessionError, PlanNotFoundError

logger = logging.getLogger(__name__)


async def _records_covering(
    repository: CalorieBankRepository, first: date, last: date
) -> List[DailyCalorieRecord]:
    records: List[DailyCalorieRecord] = []
    week = week_start_for(first)
    while week <= last:
        records.extend(await repository.list_daily_records(week))
        week += timedelta(days=7)
    return records


async def _find_event(repository: CalorieBankRepository, event_id: str) -> OvereatingEvent:
    for event in await repository.list_events():
        if event.id == event_id:
            return event
    raise EventNotFoundError(event_id)


async def _replace_event(repository: CalorieBankRepository, event: OvereatingEvent) -> None:
    events = await repository.list_events()
    await repository.save_events([event if e.id == event.id else e for e in events])


async def _resolve_plan_event(
    repository: CalorieBankRepository, plan_id: str, now: datetime
) -> None:
    plan = await repository.get_recovery_plan(plan_id)
    if plan is None:
        return
    events = await repository.list_events()
    await repository.save_events(
        [resolve_event(e, now) if e.id == plan.overeating_event_id else e for e in events]
    )


@dataclass
class CheckOvereatingUseCase:
    """Run bank-aware detection for today and refresh the stored events.

    Today's previous event is replaced (or dropped when nothing is detected
    any more), this week's unresolved events whose day no longer shows a
    notable excess are cleaned up, and resolved events from earlier weeks
    are pruned.
    """

    repository: CalorieBankRepository
    time_provider: TimeProvider = get_local_time

    async def __call__(self, timezone: str, on: Optional[date] = None) -> OvereatingCheckResult:
        clock = read_clock(self.time_provider, timezone, on)
        goal, records = await load_week(self.repository, clock.today)
        by_date = index_records(records)

        event: Optional[OvereatingEvent] = None
        record = by_date.get(clock.today)
        if record is not None:
            context = weekly_context_for(goal, records, clock.today)
            event = detect_overeating_event(record, goal, context, now=clock.now)

        kept: List[OvereatingEvent] = []
        for existing in await self.repository.list_events():
            if existing.resolved_at is not None and existing.date < goal.week_start_date:
                continue
            if existing.date == clock.today:
                if (
                    event is not None
                    and existing.excess_calories == event.excess_calories
                    and existing.trigger_type == event.trigger_type
                ):
                    event = existing
                continue
            if (
                existing.resolved_at is None
                and goal.contains(existing.date)
                and is_stale_event(existing, by_date.get(existing.date))
            ):
                logger.info("Dropping stale overeating event %s", existing.id)
                continue
            kept.append(existing)

        if event is not None:
            kept.append(event)
            logger.info(
                "Overeating event %s: %s kcal (%s)",
                event.id,
                event.excess_calories,
                event.trigger_type,
            )
        await self.repository.save_events(sorted(kept, key=lambda e: e.date))
        return OvereatingCheckResult(event=event)


@dataclass
class CreateRecoveryPlanUseCase:
    repository: CalorieBankRepository
    time_provider: TimeProvider = get_local_time

    async def __call__(self, event_id: str, timezone: str) -> RecoveryPlan:
        clock = read_clock(self.time_provider, timezone)
        event = await _find_event(self.repository, event_id)
        goal, _ = await load_week(self.repository, event.date)
        configuration = await self.repository.get_goal_configuration()
        user_weight = configuration.user_weight_kg if configuration else None

        plan = create_recovery_plan(event, goal, user_weight, now=clock.now)
        await self.repository.save_recovery_plan(plan)
        return plan


@dataclass
class AcknowledgeEventUseCase:
    """Mark an event as seen; the user may dismiss it without acting."""

    repository: CalorieBankRepository

    async def __call__(self, event_id: str) -> OvereatingEvent:
        event = acknowledge_event(await _find_event(self.repository, event_id))
        await _replace_event(self.repository, event)
        return event


@dataclass
class ApplyRecoveryOptionUseCase:
    """Apply the chosen option to the ledger from tomorrow and start a session.

    Any session still active is abandoned and its remaining adjustments are
    cleared first.
    """

    repository: CalorieBankRepository
    time_provider: TimeProvider = get_local_time

    async def __call__(
        self, plan_id: str, option_id: str, timezone: str, on: Optional[date] = None
    ) -> AppliedRecovery:
        clock = read_clock(self.time_provider, timezone, on)
        plan = await self.repository.get_recovery_plan(plan_id)
        if plan is None:
            raise PlanNotFoundError(plan_id)
        plan, option = select_option(plan, option_id)

        start = clock.today + timedelta(days=1)
        end = start + timedelta(days=option.duration_days - 1)
        goal, _ = await load_week(self.repository, clock.today)

        previous = await self.repository.get_recovery_session()
        if previous is not None and previous.status == "active":
            stale = await _records_covering(self.repository, start, previous.end_date)
            await self.repository.save_daily_records(
                clear_recovery_adjustments(stale, start, previous.end_date)
            )
            await self.repository.save_recovery_session(abandon_session(previous, clock.now))
            if previous.recovery_plan_id != plan.id:
                await _resolve_plan_event(self.repository, previous.recovery_plan_id, clock.now)

        records = await _records_covering(self.repository, goal.week_start_date, end)
        update = apply_rebalancing_option(goal, records, option, start)
        await self.repository.save_daily_records(
            [r for r in update.records if start <= r.date <= end]
        )

        session = start_recovery_session(plan, option, start, now=clock.now)
        await self.repository.save_recovery_plan(plan)
        await self.repository.save_recovery_session(session)
        return AppliedRecovery(plan=plan, session=session)


@dataclass
class GetRecoverySessionUseCase:
    """Return the latest session with its progress recounted."""

    repository: CalorieBankRepository
    time_provider: TimeProvider = get_local_time

    async def __call__(self, timezone: str, on: Optional[date] = None) -> RecoverySession:
        clock = read_clock(self.time_provider, timezone, on)
        session = await self.repository.get_recovery_session()
        if session is None:
            raise NoActiveSessionError()
        if session.status != "active":
            return session

        records = await _records_covering(self.repository, session.start_date, session.end_date)
        refreshed = update_session_progress(session, records, clock.today, now=clock.now)
        if refreshed != session:
            await self.repository.save_recovery_session(refreshed)
        if refreshed.status == "completed":
            await _resolve_plan_event(self.repository, refreshed.recovery_plan_id, clock.now)
        return refreshed


@dataclass
class AbandonRecoverySessionUseCase:
    """Stop the active session and restore the days it had not reached."""

    repository: CalorieBankRepository
    time_provider: TimeProvider = get_local_time

    async def __call__(self, timezone: str, on: Optional[date] = None) -> RecoverySession:
        clock = read_clock(self.time_provider, timezone, on)
        session = await self.repository.get_recovery_session()
        if session is None or session.status != "active":
            raise NoActiveSessionError()

        first_open = max(clock.today + timedelta(days=1), session.start_date)
        records = await _records_covering(self.repository, first_open, session.end_date)
        await self.repository.save_daily_records(
            clear_recovery_adjustments(records, first_open, session.end_date)
        )

        abandoned = abandon_session(session, clock.now)
        await self.repository.save_recovery_session(abandoned)
        await _resolve_plan_event(self.repository, session.recovery_plan_id, clock.now)
        return abandoned


__all__ = [
    "AbandonRecoverySessionUseCase",
    "AcknowledgeEventUseCase",
    "ApplyRecoveryOptionUseCase",
    "CheckOvereatingUseCase",
    "CreateRecoveryPlanUseCase",
    "GetRecoverySessionUseCase",
]
