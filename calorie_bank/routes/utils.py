from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import Depends, HTTPException, Query

from ..application.errors import (
    EventNotFoundError,
    GoalNotConfiguredError,
    NoActiveSessionError,
    PlanNotFoundError,
)
from ..domain.ledger import LedgerError
from ..domain.recovery import UnknownRebalancingOption
from ..settings import Settings, get_settings

logger = logging.getLogger(__name__)


def resolve_timezone(
    timezone: Optional[str] = Query(
        default=None,
        description="IANA timezone deciding the local calendar day.",
    ),
    settings: Settings = Depends(get_settings),
) -> str:
    """Requested timezone, falling back to the configured default."""
    resolved = timezone or settings.default_timezone
    try:
        ZoneInfo(resolved)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise HTTPException(
            status_code=422, detail={"error": f"Unknown timezone: {resolved}"}
        ) from exc
    return resolved


on_query = Query(
    default=None,
    description="Treat this date (YYYY-MM-DD) as today instead of the local date.",
)


@contextmanager
def translate_errors() -> Iterator[None]:
    """Map application and ledger failures onto HTTP errors."""
    try:
        yield
    except GoalNotConfiguredError as exc:
        raise HTTPException(status_code=409, detail={"error": str(exc)}) from exc
    except (EventNotFoundError, PlanNotFoundError, NoActiveSessionError) as exc:
        raise HTTPException(status_code=404, detail={"error": str(exc)}) from exc
    except UnknownRebalancingOption as exc:
        raise HTTPException(status_code=422, detail={"error": str(exc)}) from exc
    except LedgerError as exc:
        logger.exception("Ledger rejected the request")
        raise HTTPException(
            status_code=422, detail={"error": exc.message, "code": exc.code.value}
        ) from exc
