"""Use cases orchestrating the repository and the pure core."""

from .banking import (
    CancelBankingPlanUseCase,
    CreateBankingPlanUseCase,
    GetBankingTargetsUseCase,
    ValidateBankingPlanUseCase,
)
from .errors import (
    EventNotFoundError,
    GoalNotConfiguredError,
    NoActiveSessionError,
    PlanNotFoundError,
)
from .ledger import (
    GetBankStatusUseCase,
    LockDailyTargetUseCase,
    SaveGoalConfigurationUseCase,
    UpsertDailyTotalsUseCase,
)
from .recovery import (
    AbandonRecoverySessionUseCase,
    AcknowledgeEventUseCase,
    ApplyRecoveryOptionUseCase,
    CheckOvereatingUseCase,
    CreateRecoveryPlanUseCase,
    GetRecoverySessionUseCase,
)

__all__ = [
    "AbandonRecoverySessionUseCase",
    "AcknowledgeEventUseCase",
    "ApplyRecoveryOptionUseCase",
    "CancelBankingPlanUseCase",
    "CheckOvereatingUseCase",
    "CreateBankingPlanUseCase",
    "CreateRecoveryPlanUseCase",
    "EventNotFoundError",
    "GetBankStatusUseCase",
    "GetBankingTargetsUseCase",
    "GetRecoverySessionUseCase",
    "GoalNotConfiguredError",
    "LockDailyTargetUseCase",
    "NoActiveSessionError",
    "PlanNotFoundError",
    "SaveGoalConfigurationUseCase",
    "UpsertDailyTotalsUseCase",
    "ValidateBankingPlanUseCase",
]
