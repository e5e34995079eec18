"""Overeating event and recovery session lifecycle.

Every transition is an explicit call; nothing here advances on its own.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Optional, Sequence, Tuple

from ...models.ledger import DailyCalorieRecord
from ...models.recovery import (
    OvereatingEvent,
    RebalancingOption,
    RecoveryPlan,
    RecoverySession,
    RecoveryStage,
    SessionProgress,
)
from ..calendar import iter_days
from ..rounding import round_calories, round_percent
from .detection import daily_excess, is_significant_excess
from .errors import UnknownRebalancingOption

logger = logging.getLogger(__name__)


def acknowledge_event(event: OvereatingEvent) -> OvereatingEvent:
    return event.model_copy(update={"user_acknowledged": True})


def resolve_event(event: OvereatingEvent, now: datetime) -> OvereatingEvent:
    if event.resolved_at is not None:
        return event
    return event.model_copy(update={"resolved_at": now})


def select_option(plan: RecoveryPlan, option_id: str) -> Tuple[RecoveryPlan, RebalancingOption]:
    option = plan.option(option_id)
    if option is None:
        raise UnknownRebalancingOption(plan.id, option_id)
    return plan.model_copy(update={"selected_option_id": option_id}), option


def start_recovery_session(
    plan: RecoveryPlan, option: RebalancingOption, start_date: date, *, now: datetime
) -> RecoverySession:
    """Open a session covering ``option.duration_days`` days from ``start_date``."""

    session = RecoverySession(
        id=f"session_{plan.id}_{int(now.timestamp())}",
        recovery_plan_id=plan.id,
        option_id=option.id,
        start_date=start_date,
        end_date=start_date + timedelta(days=option.duration_days - 1),
        progress=SessionProgress(
            days_remaining=option.duration_days,
            adjusted_target=option.impact.new_daily_target,
        ),
    )
    logger.info(
        "Started recovery session %s (%s to %s)", session.id, session.start_date, session.end_date
    )
    return session


def _within_target(record: Optional[DailyCalorieRecord]) -> bool:
    if record is None:
        return True
    target = (
        record.locked_daily_target
        if record.locked_daily_target is not None
        else record.effective_target
    )
    return record.net_consumed <= target


def update_session_progress(
    session: RecoverySession,
    daily_records: Sequence[DailyCalorieRecord],
    today: date,
    *,
    now: datetime,
) -> RecoverySession:
    """Recount finished session days and complete the session once it ends.

    A day counts as adherent when its net intake stayed within its target;
    days with nothing logged count as adherent.
    """

    if session.status != "active":
        return session

    by_date = {record.date: record for record in daily_records}
    last_finished = min(today - timedelta(days=1), session.end_date)
    finished = list(iter_days(session.start_date, last_finished))
    duration = (session.end_date - session.start_date).days + 1

    if finished:
        kept = sum(1 for day in finished if _within_target(by_date.get(day)))
        adherence = round_percent(kept / len(finished) * 100)
    else:
        adherence = 100.0

    progress = session.progress.model_copy(
        update={
            "days_completed": len(finished),
            "days_remaining": duration - len(finished),
            "adherence_rate": adherence,
        }
    )
    update = {"progress": progress}
    if today > session.end_date:
        update.update({"status": "completed", "completed_at": now})
        logger.info("Recovery session %s completed at %.1f%% adherence", session.id, adherence)
    return session.model_copy(update=update)


def abandon_session(session: RecoverySession, now: datetime) -> RecoverySession:
    if session.status != "active":
        return session
    logger.info("Recovery session %s abandoned", session.id)
    return session.model_copy(update={"status": "abandoned", "completed_at": now})


def recovery_stage(
    event: OvereatingEvent,
    plan: Optional[RecoveryPlan] = None,
    session: Optional[RecoverySession] = None,
) -> RecoveryStage:
    if event.resolved_at is not None or (session is not None and session.status != "active"):
        return "resolved"
    if session is not None:
        return "option-applied"
    if event.user_acknowledged:
        return "acknowledged"
    if plan is not None:
        return "plan-generated"
    return "detected"


def is_stale_event(event: OvereatingEvent, record: Optional[DailyCalorieRecord]) -> bool:
    """True when the day behind ``event`` no longer shows a notable excess."""
    if record is None or record.date != event.date:
        return True
    return not is_significant_excess(round_calories(daily_excess(record)))
