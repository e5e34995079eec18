"""Precondition failures of the ledger projections."""

from __future__ import annotations

from datetime import date

from ...models.ledger import LedgerIssueCode


class LedgerError(ValueError):
    """Base class for ledger inputs that cannot be projected at all."""

    code: LedgerIssueCode

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidDateRange(LedgerError):
    code = LedgerIssueCode.INVALID_DATE_RANGE

    def __init__(self, day: date, week_start: date) -> None:
        self.day = day
        self.week_start = week_start
        super().__init__(
            f"{day.isoformat()} is outside the week starting {week_start.isoformat()}"
        )


class EmptyGoal(LedgerError):
    code = LedgerIssueCode.EMPTY_GOAL

    def __init__(self, week_start: date) -> None:
        self.week_start = week_start
        super().__init__(
            f"Weekly goal starting {week_start.isoformat()} has no calorie allowance"
        )
