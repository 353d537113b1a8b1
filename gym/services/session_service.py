"""Session helpers: login/logout and the role-checked operations of each menu.

A ``Session`` is a plain value owned by the caller and passed into every
operation; there is no shared "current user". Every operation reloads the
caller's account and checks its stored role against ``ROLE_PERMISSIONS``
before touching a directory, so the menus are never the only thing standing
between a role and a forbidden action.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
import logging
from typing import Optional

from gym.domain.entities import Account, Membership, WorkoutClass
from gym.domain.roles import SELF_SERVICE_ROLES, Permission, Role, role_allows
from gym.repositories.sql_repository import SQLRepository
from gym.services.account_service import AccountService
from gym.services.class_service import ClassService
from gym.services.errors import NotFoundError, UnauthorizedError
from gym.services.membership_service import MembershipService

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """Anonymous while ``account`` is None, authenticated otherwise."""

    account: Optional[Account] = None

    @property
    def authenticated(self) -> bool:
        return self.account is not None

    @property
    def role(self) -> Optional[Role]:
        return self.account.role if self.account else None

    @property
    def account_id(self) -> Optional[int]:
        return self.account.id if self.account else None


@dataclass
class SessionService:
    """Ties the account directory, membership ledger and class catalog together."""

    repository: SQLRepository = field(default_factory=SQLRepository)

    def __post_init__(self):
        self.accounts = AccountService(self.repository)
        self.memberships = MembershipService(self.repository)
        self.classes = ClassService(self.repository)

    # -------------------------------------- helpers --------------------------------------
    def _authorize(self, session: Session, permission: Permission) -> Account:
        if session is None or not session.authenticated:
            raise UnauthorizedError("Please log in first")
        try:
            session.account = self.accounts.get_by_id(session.account_id)
        except NotFoundError:
            logger.warning("Session for deleted account %s rejected", session.account_id)
            session.account = None
            raise UnauthorizedError("Account no longer exists, please log in again") from None
        if not role_allows(session.role, permission):
            logger.warning(
                "Account %s (%s) denied %s", session.account_id, session.role.value, permission.value
            )
            raise UnauthorizedError(f"{session.role.value.title()} accounts cannot do that")
        return session.account

    # -------------------------------------- anonymous --------------------------------------
    def login(self, username: str, password: str) -> Session:
        return Session(account=self.accounts.login(username, password))

    def logout(self, session: Session) -> Session:
        session.account = None
        return session

    def register(
        self,
        username: str,
        password: str,
        email: str,
        phone: str,
        address: str,
        role: Role | str = Role.MEMBER,
    ) -> Account:
        parsed_role = Role.parse(role)
        if parsed_role not in SELF_SERVICE_ROLES:
            raise UnauthorizedError("Only member and trainer accounts can be self-registered")
        return self.accounts.register(username, password, email, phone, address, parsed_role)

    # -------------------------------------- all roles --------------------------------------
    def change_password(self, session: Session, new_password: str) -> bool:
        account = self._authorize(session, Permission.CHANGE_OWN_PASSWORD)
        return self.accounts.change_password(account.id, new_password)

    # -------------------------------------- admin --------------------------------------
    def list_accounts(self, session: Session) -> list[Account]:
        self._authorize(session, Permission.LIST_ACCOUNTS)
        return self.accounts.list_all()

    def delete_account(self, session: Session, account_id: int) -> bool:
        self._authorize(session, Permission.DELETE_ACCOUNT)
        return self.accounts.delete(account_id)

    def total_revenue(self, session: Session) -> Decimal:
        self._authorize(session, Permission.VIEW_REVENUE)
        return self.memberships.total_revenue()

    # -------------------------------------- trainer --------------------------------------
    def create_class(self, session: Session, type: str, description: str) -> WorkoutClass:
        trainer = self._authorize(session, Permission.CREATE_CLASS)
        return self.classes.create(type, description, trainer.id)

    def list_my_classes(self, session: Session) -> list[WorkoutClass]:
        trainer = self._authorize(session, Permission.LIST_OWN_CLASSES)
        return self.classes.list_by_trainer(trainer.id)

    def update_my_class(self, session: Session, class_id: int, type: str, description: str) -> bool:
        trainer = self._authorize(session, Permission.UPDATE_OWN_CLASS)
        return self.classes.update(
            WorkoutClass(id=class_id, type=type, description=description, trainer_id=trainer.id)
        )

    def delete_my_class(self, session: Session, class_id: int) -> bool:
        trainer = self._authorize(session, Permission.DELETE_OWN_CLASS)
        return self.classes.delete(class_id, trainer.id)

    # -------------------------------------- member --------------------------------------
    def list_classes(self, session: Session) -> list[WorkoutClass]:
        self._authorize(session, Permission.LIST_CLASSES)
        return self.classes.list_all()

    def purchase_membership(self, session: Session, plan_code: str) -> Membership:
        buyer = self._authorize(session, Permission.PURCHASE_MEMBERSHIP)
        return self.memberships.purchase_plan(plan_code, buyer.id)

    def list_my_memberships(self, session: Session) -> list[Membership]:
        member = self._authorize(session, Permission.LIST_OWN_MEMBERSHIPS)
        return self.memberships.list_by_account(member.id)
