from .ledger import (
    BankingDayImpact,
    BankingImpactPreview,
    BankingPlanOutcome,
    BankingPlanRequest,
    BankingPlanValidation,
    CalorieBankStatus,
    CalorieBankingPlan,
    DailyCalorieRecord,
    DailyTotals,
    GoalConfiguration,
    LedgerIssue,
    LedgerIssueCode,
    LedgerUpdate,
    WeeklyContext,
    WeeklyGoal,
)
from .recovery import (
    AppliedRecovery,
    ApplyOptionRequest,
    ImpactAnalysis,
    OvereatingCheckResult,
    OvereatingEvent,
    RebalancingOption,
    RecoveryPlan,
    RecoverySession,
    SessionProgress,
)
from .responses import BankStatusResponse, LockedTargetResponse, OperationStatus
from .time import TimeContext

__all__ = [
    'BankingDayImpact',
    'BankingImpactPreview',
    'BankingPlanOutcome',
    'BankingPlanRequest',
    'BankingPlanValidation',
    'CalorieBankStatus',
    'CalorieBankingPlan',
    'DailyCalorieRecord',
    'DailyTotals',
    'GoalConfiguration',
    'LedgerIssue',
    'LedgerIssueCode',
    'LedgerUpdate',
    'WeeklyContext',
    'WeeklyGoal',
    'AppliedRecovery',
    'ApplyOptionRequest',
    'ImpactAnalysis',
    'OvereatingCheckResult',
    'OvereatingEvent',
    'RebalancingOption',
    'RecoveryPlan',
    'RecoverySession',
    'SessionProgress',
    'BankStatusResponse',
    'LockedTargetResponse',
    'OperationStatus',
    'TimeContext',
]
