from __future__ import annotations

from datetime import date

from ...models.ledger import GoalConfiguration, WeeklyGoal


def build_weekly_goal(config: GoalConfiguration, week_start: date) -> WeeklyGoal:
    """Derive a fresh weekly goal (no banking plan) from the goal configuration."""
    total_target = config.daily_baseline * 7
    return WeeklyGoal(
        week_start_date=week_start,
        total_target=total_target,
        daily_baseline=config.daily_baseline,
        deficit_target=config.weekly_deficit_target,
        weekly_allowance=total_target,
        estimated_weeks_to_goal=config.estimated_weeks_to_goal,
    )
