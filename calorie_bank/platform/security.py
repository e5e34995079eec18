from __future__ import annotations

import logging
import secrets

from fastapi import Depends, HTTPException, Security
from fastapi.security import APIKeyHeader

from ..settings import Settings, get_settings

logger = logging.getLogger(__name__)

api_key_header: APIKeyHeader = APIKeyHeader(
    name="x-api-key", scheme_name="ApiKeyAuth", auto_error=False
)


def verify_api_key(
    x_api_key: str | None = Security(api_key_header),
    settings: Settings = Depends(get_settings),
) -> None:
    """Reject requests whose ``x-api-key`` header does not match the configured key."""
    if not x_api_key or not secrets.compare_digest(x_api_key, settings.api_key):
        logger.warning("Rejected request with %s API key", "missing" if not x_api_key else "invalid")
        raise HTTPException(status_code=401, detail={"error": "Unauthorized"})


__all__ = ["api_key_header", "verify_api_key"]
