from __future__ import annotations

from datetime import date, datetime, timedelta
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

ProjectedOutcome = Literal["on-track", "over-budget", "under-budget"]


class GoalConfiguration(BaseModel):
    """Goal setup produced by onboarding; the ledger treats it as opaque input."""

    daily_baseline: int = Field(..., gt=0, description="Per-day calorie target")
    weekly_deficit_target: int = Field(
        ..., description="Signed weekly energy goal; negative means deficit"
    )
    estimated_weeks_to_goal: Optional[int] = Field(None, gt=0)
    user_weight_kg: Optional[float] = Field(None, gt=0)


class CalorieBankingPlan(BaseModel):
    """Pre-committed move of calories from reduction days onto one target day."""

    id: str
    week_start_date: date
    target_date: date
    daily_reduction: int = Field(..., gt=0)
    total_banked: int
    remaining_days_count: int
    reduction_dates: List[date] = Field(default_factory=list)
    created_at: datetime
    is_active: bool = True


class WeeklyGoal(BaseModel):
    """Authoritative weekly budget anchored on a Monday."""

    week_start_date: date
    total_target: int
    daily_baseline: int
    deficit_target: int
    weekly_allowance: int
    estimated_weeks_to_goal: Optional[int] = None
    banking_plan: Optional[CalorieBankingPlan] = None

    @field_validator("week_start_date")
    @classmethod
    def _must_be_monday(cls, value: date) -> date:
        if value.weekday() != 0:
            raise ValueError("week_start_date must be a Monday")
        return value

    @property
    def week_end_date(self) -> date:
        return self.week_start_date + timedelta(days=6)

    def week_dates(self) -> List[date]:
        return [self.week_start_date + timedelta(days=i) for i in range(7)]

    def contains(self, day: date) -> bool:
        return self.week_start_date <= day <= self.week_end_date

    @property
    def active_banking_plan(self) -> Optional[CalorieBankingPlan]:
        if self.banking_plan is not None and self.banking_plan.is_active:
            return self.banking_plan
        return None


class DailyCalorieRecord(BaseModel):
    """Per-day ledger entry."""

    date: date
    consumed: float = 0
    burned: float = 0
    target: int = Field(..., description="Baseline target before banking")
    locked_daily_target: Optional[int] = None
    banking_adjustment: int = 0
    recovery_adjustment: int = 0

    @property
    def effective_target(self) -> int:
        return self.target + self.banking_adjustment + self.recovery_adjustment

    @property
    def is_locked(self) -> bool:
        return self.locked_daily_target is not None

    @property
    def net_consumed(self) -> float:
        return self.consumed - self.burned


class CalorieBankStatus(BaseModel):
    """Read-only projection of the week, computed on demand."""

    weekly_allowance: int
    total_consumed: int
    total_burned: int
    total_used: int
    remaining: int
    remaining_for_future_days: int
    days_left: int
    days_left_excluding_today: int
    daily_average: int = Field(
        ..., description="Per future day; negative values signal over-budget"
    )
    today_target: int
    safe_to_eat_today: int
    left_to_eat_today: int
    avg_daily_consumption: int
    avg_daily_burned: int
    projected_remaining: int
    projected_outcome: ProjectedOutcome
    active_banking_plan: Optional[CalorieBankingPlan] = None
    is_banking_adjusted: bool = False


class LedgerIssueCode(str, Enum):
    """Validation problems surfaced to the caller instead of raised."""

    INVALID_DATE_RANGE = "InvalidDateRange"
    EMPTY_GOAL = "EmptyGoal"
    TARGET_DATE_IN_PAST = "TargetDateInPast"
    TARGET_DATE_OUTSIDE_WEEK = "TargetDateOutsideWeek"
    TARGET_DATE_LOCKED = "TargetDateLocked"
    NO_DAYS_TO_REDUCE = "NoDaysToReduce"
    INVALID_DAILY_REDUCTION = "InvalidDailyReduction"
    EXCESSIVE_DAILY_REDUCTION = "ExcessiveDailyReduction"
    UNSAFE_DAILY_REDUCTION = "UnsafeDailyReduction"
    LARGE_BANKING_AMOUNT = "LargeBankingAmount"
    LOW_DAILY_TARGETS = "LowDailyTargets"
    HARD_TO_SUSTAIN_REDUCTION = "HardToSustainReduction"


class LedgerIssue(BaseModel):
    code: LedgerIssueCode
    message: str


class BankingDayImpact(BaseModel):
    date: date
    reduction: int
    new_target: int


class BankingImpactPreview(BaseModel):
    target_date: date
    target_date_boost: int
    daily_reductions: List[BankingDayImpact] = Field(default_factory=list)
    min_daily_calories: int
    total_banked: int
    days_affected: int


class BankingPlanValidation(BaseModel):
    """Outcome of checking a proposed banking plan against the ledger."""

    errors: List[LedgerIssue] = Field(default_factory=list)
    warnings: List[LedgerIssue] = Field(default_factory=list)
    impact_preview: BankingImpactPreview

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def error_codes(self) -> List[LedgerIssueCode]:
        return [issue.code for issue in self.errors]

    def warning_codes(self) -> List[LedgerIssueCode]:
        return [issue.code for issue in self.warnings]


class LedgerUpdate(BaseModel):
    """New goal and record set for the caller to persist."""

    goal: WeeklyGoal
    records: List[DailyCalorieRecord]


class BankingPlanOutcome(LedgerUpdate):
    """Result of attempting to create a banking plan."""

    validation: BankingPlanValidation
    plan: Optional[CalorieBankingPlan] = None


class WeeklyContext(BaseModel):
    """Week-to-date totals for the days before the day being checked."""

    total_consumed: float = 0
    total_burned: float = 0
    days_elapsed: int = Field(0, ge=0, le=6)


class DailyTotals(BaseModel):
    """Aggregated meal and workout totals supplied by the caller for one day."""

    consumed: float = Field(..., ge=0)
    burned: float = Field(0, ge=0)


class BankingPlanRequest(BaseModel):
    target_date: date
    daily_reduction: int


class BankingTargets(BaseModel):
    """Days a new banking plan could target, from tomorrow to the week's end."""

    target_dates: List[date] = Field(default_factory=list)
    is_banking_available: bool = False
