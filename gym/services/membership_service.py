"""Membership ledger: purchases, edits, cancellations and revenue."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
import logging

from gym.domain.entities import Membership
from gym.domain.plans import get_plan
from gym.repositories.sql_repository import SQLRepository
from gym.services.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

_CENTS = Decimal("0.01")


def _money(value: Decimal | float | str) -> Decimal:
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"Invalid membership cost: {value}") from None
    if not amount.is_finite() or amount < 0:
        raise ValidationError("Membership cost must be a non-negative amount")
    return amount.quantize(_CENTS)


@dataclass
class MembershipService:
    """Owns membership records.

    The caller is responsible for passing a valid member id to ``purchase``; no
    ownership check is made on ``update`` or ``delete`` here.
    """

    repository: SQLRepository = field(default_factory=SQLRepository)

    def purchase(self, type: str, description: str, cost: Decimal | float | str, account_id: int) -> Membership:
        membership = self.repository.create_membership(
            type=(type or "").strip(),
            description=(description or "").strip(),
            cost=_money(cost),
            account_id=account_id,
        )
        logger.info("Account %s purchased membership %s (%s)", account_id, membership.id, membership.type)
        return membership

    def purchase_plan(self, plan_code: str, account_id: int) -> Membership:
        plan = get_plan(plan_code)
        if plan is None:
            raise ValidationError(f"Unknown membership plan: {plan_code}")
        return self.purchase(plan.type, plan.description, plan.cost, account_id)

    def get_by_id(self, membership_id: int) -> Membership:
        membership = self.repository.get_membership(membership_id)
        if membership is None:
            raise NotFoundError("Membership not found")
        return membership

    def list_by_account(self, account_id: int) -> list[Membership]:
        return self.repository.list_memberships(account_id=account_id)

    def list_all(self) -> list[Membership]:
        return self.repository.list_memberships()

    def update(self, membership: Membership) -> bool:
        membership.cost = _money(membership.cost)
        return self.repository.update_membership(membership)

    def delete(self, membership_id: int) -> bool:
        deleted = self.repository.delete_membership(membership_id)
        if deleted:
            logger.info("Cancelled membership %s", membership_id)
        return deleted

    def total_revenue(self) -> Decimal:
        return self.repository.sum_membership_costs()
