"""Monday-anchored week helpers."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator


def week_start_for(day: date) -> date:
    """Return the Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


def day_index(week_start: date, day: date) -> int:
    """Zero-based position of ``day`` in the week (Monday is 0)."""
    return (day - week_start).days


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield each day from ``start`` to ``end`` inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
