from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..domain.ledger import (
    available_target_dates,
    cancel_banking_plan,
    create_banking_plan,
    is_banking_available,
    validate_banking_plan,
)
from ..models.ledger import (
    BankingPlanOutcome,
    BankingPlanRequest,
    BankingPlanValidation,
    BankingTargets,
)
from ..models.responses import OperationStatus
from ..models.time import get_local_time
from ..storage.ports import CalorieBankRepository
from .context import TimeProvider, load_week, read_clock
from .errors import PlanNotFoundError


@dataclass
class GetBankingTargetsUseCase:
    repository: CalorieBankRepository
    time_provider: TimeProvider = get_local_time

    async def __call__(self, timezone: str, on: Optional[date] = None) -> BankingTargets:
        clock = read_clock(self.time_provider, timezone, on)
        goal, records = await load_week(self.repository, clock.today)
        return BankingTargets(
            target_dates=available_target_dates(goal, records, clock.today),
            is_banking_available=is_banking_available(goal, records, clock.today),
        )


@dataclass
class ValidateBankingPlanUseCase:
    """Preview a banking plan for the current week without saving it."""

    repository: CalorieBankRepository
    time_provider: TimeProvider = get_local_time

    async def __call__(
        self, request: BankingPlanRequest, timezone: str, on: Optional[date] = None
    ) -> BankingPlanValidation:
        clock = read_clock(self.time_provider, timezone, on)
        goal, records = await load_week(self.repository, clock.today)
        return validate_banking_plan(
            goal, request.target_date, request.daily_reduction, clock.today, records
        )


@dataclass
class CreateBankingPlanUseCase:
    """Install a banking plan; nothing is written when validation fails."""

    repository: CalorieBankRepository
    time_provider: TimeProvider = get_local_time

    async def __call__(
        self, request: BankingPlanRequest, timezone: str, on: Optional[date] = None
    ) -> BankingPlanOutcome:
        clock = read_clock(self.time_provider, timezone, on)
        goal, records = await load_week(self.repository, clock.today)
        outcome = create_banking_plan(
            goal,
            records,
            request.target_date,
            request.daily_reduction,
            clock.today,
            clock.now,
        )
        if outcome.plan is not None:
            await self.repository.save_weekly_goal(outcome.goal)
            await self.repository.save_daily_records(outcome.records)
        return outcome


@dataclass
class CancelBankingPlanUseCase:
    repository: CalorieBankRepository
    time_provider: TimeProvider = get_local_time

    async def __call__(self, timezone: str, on: Optional[date] = None) -> OperationStatus:
        clock = read_clock(self.time_provider, timezone, on)
        goal, records = await load_week(self.repository, clock.today)
        plan = goal.active_banking_plan
        if plan is None:
            raise PlanNotFoundError("active")

        update = cancel_banking_plan(goal, records, clock.today)
        await self.repository.save_weekly_goal(update.goal)
        await self.repository.save_daily_records(update.records)
        return OperationStatus(status="cancelled", id=plan.id)


__all__ = [
    "CancelBankingPlanUseCase",
    "CreateBankingPlanUseCase",
    "GetBankingTargetsUseCase",
    "ValidateBankingPlanUseCase",
]
