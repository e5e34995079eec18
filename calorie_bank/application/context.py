"""Clock and week loading shared by the use cases."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, List, Optional, Tuple

from ..domain.calendar import week_start_for
from ..domain.ledger import build_weekly_goal
from ..models.ledger import DailyCalorieRecord, WeeklyGoal
from ..storage.ports import CalorieBankRepository
from .errors import GoalNotConfiguredError

logger = logging.getLogger(__name__)

TimeProvider = Callable[[str], Tuple[datetime, str]]


@dataclass(frozen=True)
class Clock:
    now: datetime
    part_of_day: str
    today: date


def read_clock(time_provider: TimeProvider, timezone: str, on: Optional[date] = None) -> Clock:
    """Read the wall clock once; ``on`` overrides the local date."""
    now, part = time_provider(timezone)
    return Clock(now=now, part_of_day=part, today=on or now.date())


async def load_week(
    repository: CalorieBankRepository, day: date
) -> Tuple[WeeklyGoal, List[DailyCalorieRecord]]:
    """Return the goal and records of the week containing ``day``.

    A week without a stored goal gets one derived from the goal
    configuration, which is saved before returning.
    """

    week_start = week_start_for(day)
    goal = await repository.get_weekly_goal(week_start)
    if goal is None:
        configuration = await repository.get_goal_configuration()
        if configuration is None:
            raise GoalNotConfiguredError()
        goal = build_weekly_goal(configuration, week_start)
        await repository.save_weekly_goal(goal)
        logger.info("Started weekly goal for %s at %s kcal", week_start, goal.weekly_allowance)
    records = await repository.list_daily_records(week_start)
    return goal, records
