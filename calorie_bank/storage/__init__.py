"""Persistence port and adapters."""

from .ports import CalorieBankRepository
from .redis_repository import RedisCalorieBankRepository, RedisClient, create_redis_repository

__all__ = [
    "CalorieBankRepository",
    "RedisCalorieBankRepository",
    "RedisClient",
    "create_redis_repository",
]
