"""Weekly ledger: bank status, banking plans and daily target locking."""

from .banking import (
    available_target_dates,
    cancel_banking_plan,
    create_banking_plan,
    is_banking_available,
    validate_banking_plan,
)
from .errors import EmptyGoal, InvalidDateRange, LedgerError
from .goals import build_weekly_goal
from .records import banking_adjustment_for
from .status import compute_bank_status
from .targets import (
    apply_rebalancing_option,
    clear_recovery_adjustments,
    lock_daily_target,
    weekly_context_for,
)

__all__ = [
    "EmptyGoal",
    "InvalidDateRange",
    "LedgerError",
    "apply_rebalancing_option",
    "available_target_dates",
    "banking_adjustment_for",
    "build_weekly_goal",
    "clear_recovery_adjustments",
    "cancel_banking_plan",
    "compute_bank_status",
    "create_banking_plan",
    "is_banking_available",
    "lock_daily_target",
    "validate_banking_plan",
    "weekly_context_for",
]
