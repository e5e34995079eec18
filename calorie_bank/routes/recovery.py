from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends

from ..application.recovery import (
    AbandonRecoverySessionUseCase,
    AcknowledgeEventUseCase,
    ApplyRecoveryOptionUseCase,
    CheckOvereatingUseCase,
    CreateRecoveryPlanUseCase,
    GetRecoverySessionUseCase,
)
from ..models.recovery import (
    AppliedRecovery,
    ApplyOptionRequest,
    OvereatingCheckResult,
    OvereatingEvent,
    RecoveryPlan,
    RecoverySession,
)
from ..platform.wiring import (
    get_abandon_recovery_session_use_case,
    get_acknowledge_event_use_case,
    get_apply_recovery_option_use_case,
    get_check_overeating_use_case,
    get_create_recovery_plan_use_case,
    get_recovery_session_use_case,
)
from .utils import on_query, resolve_timezone, translate_errors

router: APIRouter = APIRouter(prefix="/recovery")


@router.post("/check", response_model=OvereatingCheckResult)
async def check_overeating(
    timezone: str = Depends(resolve_timezone),
    on: Optional[date] = on_query,
    use_case: CheckOvereatingUseCase = Depends(get_check_overeating_use_case),
) -> OvereatingCheckResult:
    with translate_errors():
        return await use_case(timezone, on)


@router.post("/events/{event_id}/plan", status_code=201, response_model=RecoveryPlan)
async def create_recovery_plan(
    event_id: str,
    timezone: str = Depends(resolve_timezone),
    use_case: CreateRecoveryPlanUseCase = Depends(get_create_recovery_plan_use_case),
) -> RecoveryPlan:
    with translate_errors():
        return await use_case(event_id, timezone)


@router.post("/events/{event_id}/acknowledge", response_model=OvereatingEvent)
async def acknowledge_event(
    event_id: str,
    use_case: AcknowledgeEventUseCase = Depends(get_acknowledge_event_use_case),
) -> OvereatingEvent:
    with translate_errors():
        return await use_case(event_id)


@router.post("/plans/{plan_id}/apply", response_model=AppliedRecovery)
async def apply_recovery_option(
    plan_id: str,
    request: ApplyOptionRequest,
    timezone: str = Depends(resolve_timezone),
    on: Optional[date] = on_query,
    use_case: ApplyRecoveryOptionUseCase = Depends(get_apply_recovery_option_use_case),
) -> AppliedRecovery:
    with translate_errors():
        return await use_case(plan_id, request.option_id, timezone, on)


@router.get("/session", response_model=RecoverySession)
async def get_recovery_session(
    timezone: str = Depends(resolve_timezone),
    on: Optional[date] = on_query,
    use_case: GetRecoverySessionUseCase = Depends(get_recovery_session_use_case),
) -> RecoverySession:
    with translate_errors():
        return await use_case(timezone, on)


@router.post("/session/abandon", response_model=RecoverySession)
async def abandon_recovery_session(
    timezone: str = Depends(resolve_timezone),
    on: Optional[date] = on_query,
    use_case: AbandonRecoverySessionUseCase = Depends(get_abandon_recovery_session_use_case),
) -> RecoverySession:
    with translate_errors():
        return await use_case(timezone, on)
