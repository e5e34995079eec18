"""FastAPI dependency wiring for application use cases."""

from __future__ import annotations

from fastapi import Depends
from upstash_redis import Redis

from ..application.banking import (
    CancelBankingPlanUseCase,
    CreateBankingPlanUseCase,
    GetBankingTargetsUseCase,
    ValidateBankingPlanUseCase,
)
from ..application.ledger import (
    GetBankStatusUseCase,
    LockDailyTargetUseCase,
    SaveGoalConfigurationUseCase,
    UpsertDailyTotalsUseCase,
)
from ..application.recovery import (
    AbandonRecoverySessionUseCase,
    AcknowledgeEventUseCase,
    ApplyRecoveryOptionUseCase,
    CheckOvereatingUseCase,
    CreateRecoveryPlanUseCase,
    GetRecoverySessionUseCase,
)
from ..settings import Settings, get_settings
from ..storage.ports import CalorieBankRepository
from ..storage.redis_repository import RedisClient, create_redis_repository


def get_redis(settings: Settings = Depends(get_settings)) -> RedisClient:
    """Factory helper that provides an Upstash Redis client instance."""

    return Redis(
        url=settings.upstash_redis_rest_url,
        token=settings.upstash_redis_rest_token,
    )


def provide_repository(
    redis: RedisClient = Depends(get_redis),
    settings: Settings = Depends(get_settings),
) -> CalorieBankRepository:
    return create_redis_repository(redis=redis, ttl_seconds=settings.state_ttl_seconds)


def get_save_goal_configuration_use_case(
    repository: CalorieBankRepository = Depends(provide_repository),
) -> SaveGoalConfigurationUseCase:
    return SaveGoalConfigurationUseCase(repository)


def get_bank_status_use_case(
    repository: CalorieBankRepository = Depends(provide_repository),
) -> GetBankStatusUseCase:
    return GetBankStatusUseCase(repository)


def get_upsert_daily_totals_use_case(
    repository: CalorieBankRepository = Depends(provide_repository),
) -> UpsertDailyTotalsUseCase:
    return UpsertDailyTotalsUseCase(repository)


def get_lock_daily_target_use_case(
    repository: CalorieBankRepository = Depends(provide_repository),
) -> LockDailyTargetUseCase:
    return LockDailyTargetUseCase(repository)


def get_banking_targets_use_case(
    repository: CalorieBankRepository = Depends(provide_repository),
) -> GetBankingTargetsUseCase:
    return GetBankingTargetsUseCase(repository)


def get_validate_banking_plan_use_case(
    repository: CalorieBankRepository = Depends(provide_repository),
) -> ValidateBankingPlanUseCase:
    return ValidateBankingPlanUseCase(repository)


def get_create_banking_plan_use_case(
    repository: CalorieBankRepository = Depends(provide_repository),
) -> CreateBankingPlanUseCase:
    return CreateBankingPlanUseCase(repository)


def get_cancel_banking_plan_use_case(
    repository: CalorieBankRepository = Depends(provide_repository),
) -> CancelBankingPlanUseCase:
    return CancelBankingPlanUseCase(repository)


def get_check_overeating_use_case(
    repository: CalorieBankRepository = Depends(provide_repository),
) -> CheckOvereatingUseCase:
    return CheckOvereatingUseCase(repository)


def get_create_recovery_plan_use_case(
    repository: CalorieBankRepository = Depends(provide_repository),
) -> CreateRecoveryPlanUseCase:
    return CreateRecoveryPlanUseCase(repository)


def get_acknowledge_event_use_case(
    repository: CalorieBankRepository = Depends(provide_repository),
) -> AcknowledgeEventUseCase:
    return AcknowledgeEventUseCase(repository)


def get_apply_recovery_option_use_case(
    repository: CalorieBankRepository = Depends(provide_repository),
) -> ApplyRecoveryOptionUseCase:
    return ApplyRecoveryOptionUseCase(repository)


def get_recovery_session_use_case(
    repository: CalorieBankRepository = Depends(provide_repository),
) -> GetRecoverySessionUseCase:
    return GetRecoverySessionUseCase(repository)


def get_abandon_recovery_session_use_case(
    repository: CalorieBankRepository = Depends(provide_repository),
) -> AbandonRecoverySessionUseCase:
    return AbandonRecoverySessionUseCase(repository)


__all__ = [
    "get_redis",
    "provide_repository",
    "get_save_goal_configuration_use_case",
    "get_bank_status_use_case",
    "get_upsert_daily_totals_use_case",
    "get_lock_daily_target_use_case",
    "get_banking_targets_use_case",
    "get_validate_banking_plan_use_case",
    "get_create_banking_plan_use_case",
    "get_cancel_banking_plan_use_case",
    "get_check_overeating_use_case",
    "get_create_recovery_plan_use_case",
    "get_acknowledge_event_use_case",
    "get_apply_recovery_option_use_case",
    "get_recovery_session_use_case",
    "get_abandon_recovery_session_use_case",
]
