from __future__ import annotations


class UnknownRebalancingOption(LookupError):
    """Raised when a plan has no option with the requested id."""

    def __init__(self, plan_id: str, option_id: str) -> None:
        self.plan_id = plan_id
        self.option_id = option_id
        super().__init__(f"Recovery plan {plan_id} has no option {option_id!r}")
