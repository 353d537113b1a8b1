"""Membership plans offered at the front desk."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class MembershipPlan:
    code: str
    type: str
    description: str
    cost: Decimal


PLANS: dict[str, MembershipPlan] = {
    "monthly": MembershipPlan("monthly", "Monthly", "30-day membership", Decimal("50.00")),
    "annual": MembershipPlan("annual", "Annual", "365-day membership", Decimal("500.00")),
}


def get_plan(code: str | None) -> MembershipPlan | None:
    """Return the plan for a code (case-insensitive) or None when unknown."""
    if not code:
        return None
    return PLANS.get(code.strip().lower())
