"""Lookup failures raised by the use cases."""

from __future__ import annotations


class GoalNotConfiguredError(LookupError):
    def __init__(self) -> None:
        super().__init__("No goal configuration has been saved")


class EventNotFoundError(LookupError):
    def __init__(self, event_id: str) -> None:
        self.event_id = event_id
        super().__init__(f"Overeating event {event_id} not found")


class PlanNotFoundError(LookupError):
    def __init__(self, plan_id: str) -> None:
        self.plan_id = plan_id
        super().__init__(f"Plan {plan_id} not found")


class NoActiveSessionError(LookupError):
    def __init__(self) -> None:
        super().__init__("There is no active recovery session")


__all__ = [
    "EventNotFoundError",
    "GoalNotConfiguredError",
    "NoActiveSessionError",
    "PlanNotFoundError",
]
