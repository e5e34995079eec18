from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Hosting providers expose upper-case names (``API_KEY``); match either case.
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    api_key: str
    upstash_redis_rest_url: str
    upstash_redis_rest_token: str
    default_timezone: str = "Europe/London"
    state_ttl_days: int = 120

    @property
    def state_ttl_seconds(self) -> Optional[int]:
        """Expiry for per-week state keys; ``None`` keeps them forever."""
        if self.state_ttl_days <= 0:
            return None
        return self.state_ttl_days * 24 * 60 * 60


@lru_cache()
def get_settings() -> Settings:
    return Settings()
