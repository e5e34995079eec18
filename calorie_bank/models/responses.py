from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer

from .ledger import CalorieBankStatus
from .time import TimeContext


class OperationStatus(BaseModel):
    """Normalized status payload returned by mutation endpoints."""

    status: str = Field(..., description="Short status indicator for the operation outcome.")
    id: Optional[str] = Field(
        None, description="Identifier of the resource affected by the operation, when relevant."
    )
    model_config = ConfigDict(json_schema_extra={"required": ["status"]})

    @model_serializer(mode="wrap")
    def _serialize(self, handler):  # type: ignore[override]
        payload = handler(self)
        if payload.get("id") is None:
            payload.pop("id", None)
        return payload


class BankStatusResponse(TimeContext):
    """Bank status stamped with the local time it was computed for."""

    status: CalorieBankStatus


class LockedTargetResponse(BaseModel):
    date: str
    locked_daily_target: int
