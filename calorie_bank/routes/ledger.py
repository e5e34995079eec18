from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Path

from ..application.ledger import (
    GetBankStatusUseCase,
    LockDailyTargetUseCase,
    SaveGoalConfigurationUseCase,
    UpsertDailyTotalsUseCase,
)
from ..models.ledger import DailyCalorieRecord, DailyTotals, GoalConfiguration, WeeklyGoal
from ..models.responses import BankStatusResponse, LockedTargetResponse
from ..platform.wiring import (
    get_bank_status_use_case,
    get_lock_daily_target_use_case,
    get_save_goal_configuration_use_case,
    get_upsert_daily_totals_use_case,
)
from .utils import on_query, resolve_timezone, translate_errors

router: APIRouter = APIRouter()


@router.put("/goal-configuration", response_model=WeeklyGoal)
async def save_goal_configuration(
    configuration: GoalConfiguration,
    timezone: str = Depends(resolve_timezone),
    on: Optional[date] = on_query,
    use_case: SaveGoalConfigurationUseCase = Depends(get_save_goal_configuration_use_case),
) -> WeeklyGoal:
    return await use_case(configuration, timezone, on)


@router.get("/bank-status", response_model=BankStatusResponse)
async def get_bank_status(
    timezone: str = Depends(resolve_timezone),
    on: Optional[date] = on_query,
    use_case: GetBankStatusUseCase = Depends(get_bank_status_use_case),
) -> BankStatusResponse:
    with translate_errors():
        return await use_case(timezone, on)


@router.put("/daily-records/{day}", response_model=DailyCalorieRecord)
async def upsert_daily_totals(
    totals: DailyTotals,
    day: date = Path(..., description="Day to record in YYYY-MM-DD format."),
    use_case: UpsertDailyTotalsUseCase = Depends(get_upsert_daily_totals_use_case),
) -> DailyCalorieRecord:
    with translate_errors():
        return await use_case(day, totals)


@router.post("/daily-records/{day}/lock", response_model=LockedTargetResponse)
async def lock_daily_target(
    day: date = Path(..., description="Day to lock in YYYY-MM-DD format."),
    use_case: LockDailyTargetUseCase = Depends(get_lock_daily_target_use_case),
) -> LockedTargetResponse:
    with translate_errors():
        return await use_case(day)
