"""Supportive reframing copy for each overeating severity."""

from __future__ import annotations

from ...models.recovery import Reframe, TriggerType


def build_reframe(trigger_type: TriggerType, weekly_impact: float) -> Reframe:
    """Pick the message triple for ``trigger_type`` using the weekly budget impact.

    ``weekly_impact`` is the already rounded percent of the weekly allowance.
    """

    exceeds_week = weekly_impact >= 100
    if trigger_type == "mild":
        return Reframe(
            message=(
                "This uses more than your weekly budget, but it's completely "
                "recoverable with the right plan."
                if exceeds_week
                else f"This uses {weekly_impact:.1f}% of your weekly calorie budget - "
                "completely manageable."
            ),
            focus_point=(
                "This is a substantial amount, but you have strategies to handle it."
                if exceeds_week
                else "One high day doesn't derail your progress - you have "
                f"{100 - weekly_impact:.1f}% of your week left."
            ),
            success_reminder="You've been consistent before, you can handle this easily.",
        )
    if trigger_type == "moderate":
        return Reframe(
            message=(
                "This exceeds your weekly budget. Let's create a smart rebalancing plan."
                if exceeds_week
                else f"This uses {weekly_impact:.1f}% of your weekly calorie budget. "
                "Mathematics, not emotions."
            ),
            focus_point=(
                "You have proven strategies to rebalance this systematically "
                "across the coming weeks."
            ),
            success_reminder="Every successful journey has days like this. It's normal.",
        )
    return Reframe(
        message=(
            "This is a substantial overage, but taking a maintenance approach "
            "prevents bigger setbacks."
            if exceeds_week
            else f"This uses {weekly_impact:.1f}% of your weekly budget, but a "
            "maintenance approach prevents setbacks."
        ),
        focus_point=(
            "Preventing a restrict-binge cycle is more important than perfect weekly targets."
        ),
        success_reminder=(
            "Consistency beats perfection. Protecting your mental health protects your results."
        ),
    )
