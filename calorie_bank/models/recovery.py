from __future__ import annotations

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

TriggerType = Literal["mild", "moderate", "severe"]
DetectionMode = Literal["simple", "bank-aware"]
RecoveryStrategy = Literal[
    "gentle-rebalancing",
    "moderate-correction",
    "quick-recovery",
    "maintenance-week",
]
EffortLevel = Literal["minimal", "moderate", "challenging"]
RiskLevel = Literal["safe", "moderate", "aggressive"]
Recommendation = Literal["recommended", "advanced", "not-recommended"]
SessionStatus = Literal["active", "completed", "abandoned"]
RecoveryStage = Literal[
    "detected",
    "plan-generated",
    "acknowledged",
    "option-applied",
    "resolved",
]


class OvereatingEvent(BaseModel):
    """A detected excursion beyond the safe weekly trajectory."""

    id: str
    date: date
    excess_calories: int = Field(..., gt=0)
    trigger_type: TriggerType
    detected_at: datetime
    user_acknowledged: bool = False
    redistribution_unsafe: bool = False
    resolved_at: Optional[datetime] = None


class RealImpact(BaseModel):
    timeline_delay_days: float
    weekly_budget_impact: float = Field(..., description="Percent of weekly allowance")
    weekly_deficit_impact: float = Field(..., description="Percent of weekly deficit")
    main_goal_impact: float = Field(..., description="Percent of the whole journey deficit")


class Perspective(BaseModel):
    equivalent_workouts: float
    weeks_to_recover: int
    days_to_nullify: int
    percent_of_total_journey: float


class Reframe(BaseModel):
    message: str
    focus_point: str
    success_reminder: Optional[str] = None


class ImpactAnalysis(BaseModel):
    real_impact: RealImpact
    perspective: Perspective
    reframe: Reframe


class OptionImpact(BaseModel):
    new_daily_target: int
    effort_level: EffortLevel
    risk_level: RiskLevel


class RebalancingOption(BaseModel):
    """One proposed multi-day reduction plan with an explicit safety floor."""

    id: str
    name: str
    description: str
    duration_days: int
    daily_adjustment: int = Field(..., description="Signed; negative is a reduction")
    min_safety_cals: int
    impact: OptionImpact
    pros: List[str] = Field(default_factory=list)
    cons: List[str] = Field(default_factory=list)
    recommendation: Optional[Recommendation] = None


class RecoveryPlan(BaseModel):
    id: str
    overeating_event_id: str
    strategy: RecoveryStrategy
    impact_analysis: ImpactAnalysis
    rebalancing_options: List[RebalancingOption]
    created_at: datetime
    selected_option_id: Optional[str] = None

    def option(self, option_id: str) -> Optional[RebalancingOption]:
        for candidate in self.rebalancing_options:
            if candidate.id == option_id:
                return candidate
        return None


class SessionProgress(BaseModel):
    days_completed: int = 0
    days_remaining: int
    adherence_rate: float = 100.0
    adjusted_target: int


class RecoverySession(BaseModel):
    """Tracks a rebalancing option the user chose to follow."""

    id: str
    recovery_plan_id: str
    option_id: str
    start_date: date
    end_date: date
    progress: SessionProgress
    status: SessionStatus = "active"
    completed_at: Optional[datetime] = None


class ApplyOptionRequest(BaseModel):
    option_id: str


class OvereatingCheckResult(BaseModel):
    """Detection outcome; ``event`` is null when no recovery is needed."""

    event: Optional[OvereatingEvent] = None


class AppliedRecovery(BaseModel):
    plan: RecoveryPlan
    session: RecoverySession
