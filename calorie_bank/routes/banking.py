from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..application.banking import (
    CancelBankingPlanUseCase,
    CreateBankingPlanUseCase,
    GetBankingTargetsUseCase,
    ValidateBankingPlanUseCase,
)
from ..models.ledger import (
    BankingPlanOutcome,
    BankingPlanRequest,
    BankingPlanValidation,
    BankingTargets,
)
from ..models.responses import OperationStatus
from ..platform.wiring import (
    get_banking_targets_use_case,
    get_cancel_banking_plan_use_case,
    get_create_banking_plan_use_case,
    get_validate_banking_plan_use_case,
)
from .utils import on_query, resolve_timezone, translate_errors

router: APIRouter = APIRouter()


@router.get("/banking-plans/targets", response_model=BankingTargets)
async def list_banking_targets(
    timezone: str = Depends(resolve_timezone),
    on: Optional[date] = on_query,
    use_case: GetBankingTargetsUseCase = Depends(get_banking_targets_use_case),
) -> BankingTargets:
    with translate_errors():
        return await use_case(timezone, on)


@router.post("/banking-plans/validate", response_model=BankingPlanValidation)
async def validate_banking_plan(
    request: BankingPlanRequest,
    timezone: str = Depends(resolve_timezone),
    on: Optional[date] = on_query,
    use_case: ValidateBankingPlanUseCase = Depends(get_validate_banking_plan_use_case),
) -> BankingPlanValidation:
    with translate_errors():
        return await use_case(request, timezone, on)


@router.post(
    "/banking-plans",
    status_code=201,
    response_model=BankingPlanOutcome,
    responses={422: {"model": BankingPlanValidation}},
)
async def create_banking_plan(
    request: BankingPlanRequest,
    timezone: str = Depends(resolve_timezone),
    on: Optional[date] = on_query,
    use_case: CreateBankingPlanUseCase = Depends(get_create_banking_plan_use_case),
):
    with translate_errors():
        outcome = await use_case(request, timezone, on)
    if outcome.plan is None:
        return JSONResponse(
            status_code=422, content=outcome.validation.model_dump(mode="json")
        )
    return outcome


@router.delete("/banking-plans/active", response_model=OperationStatus)
async def cancel_banking_plan(
    timezone: str = Depends(resolve_timezone),
    on: Optional[date] = on_query,
    use_case: CancelBankingPlanUseCase = Depends(get_cancel_banking_plan_use_case),
) -> OperationStatus:
    with translate_errors():
        return await use_case(timezone, on)
