from __future__ import annotations

from datetime import datetime
from typing import Literal, Tuple
from zoneinfo import ZoneInfo

from pydantic import BaseModel, Field

PartOfDay = Literal["night", "morning", "afternoon", "evening"]


class TimeContext(BaseModel):
    """Mixin stamping a response with the local time it was computed for."""

    local_time: datetime = Field(..., description="Current local time with timezone")
    part_of_day: PartOfDay


def part_of_day(hour: int) -> PartOfDay:
    if 5 <= hour < 12:
        return "morning"
    if 12 <= hour < 17:
        return "afternoon"
    if 17 <= hour < 22:
        return "evening"
    return "night"


def get_local_time(timezone: str = "Europe/London") -> Tuple[datetime, PartOfDay]:
    """Return the current time in ``timezone`` and its part of day.

    The local calendar date of the returned datetime is what decides which
    ledger day and week a request belongs to.
    """

    now = datetime.now(ZoneInfo(timezone))
    return now, part_of_day(now.hour)
