"""
Account directory: registration, credential checks and profile maintenance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging

from gym.core.security import DUMMY_HASH, hash_password, needs_rehash, verify_password
from gym.domain.entities import Account
from gym.domain.roles import Role
from gym.repositories.sql_repository import SQLRepository
from gym.services.errors import (
    DuplicateUsernameError,
    ForbiddenError,
    InvalidCredentialsError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


@dataclass
class AccountService:
    """Owns account records and the password policy."""

    repository: SQLRepository = field(default_factory=SQLRepository)

    # -------------------------------------- registration --------------------------------------
    def register(
        self,
        username: str,
        password: str,
        email: str,
        phone: str,
        address: str,
        role: Role | str,
    ) -> Account:
        parsed_role = Role.parse(role)
        name = (username or "").strip()
        if self.repository.get_account_by_username(name):
            raise DuplicateUsernameError("Username already exists")
        account = self.repository.create_account(
            username=name,
            password_hash=hash_password(password),
            email=(email or "").strip(),
            phone=(phone or "").strip(),
            address=(address or "").strip(),
            role=parsed_role,
        )
        logger.info("Registered account %s (%s) as %s", account.id, account.username, account.role.value)
        return account

    # -------------------------------------- login --------------------------------------
    def login(self, username: str, password: str) -> Account:
        found = self.repository.get_credentials((username or "").strip())
        if not found:
            # Same work as a real check so the two failures are indistinguishable.
            verify_password(password, DUMMY_HASH)
            logger.warning("Login failed for unknown username")
            raise InvalidCredentialsError(INVALID_CREDENTIALS)
        account, stored_hash = found
        if not verify_password(password, stored_hash):
            logger.warning("Login failed for account %s", account.id)
            raise InvalidCredentialsError(INVALID_CREDENTIALS)
        if needs_rehash(stored_hash):
            self.repository.update_account_password(account.id, hash_password(password))
            logger.info("Upgraded password hash for account %s", account.id)
        return account

    # -------------------------------------- lookup --------------------------------------
    def get_by_id(self, account_id: int) -> Account:
        account = self.repository.get_account(account_id)
        if account is None:
            raise NotFoundError("User not found")
        return account

    def list_all(self) -> list[Account]:
        return self.repository.list_accounts()

    # -------------------------------------- changes --------------------------------------
    def update_profile(self, account: Account) -> bool:
        """Persist profile fields and role. Admin accounts keep the ADMIN role."""
        account.role = Role.parse(account.role)
        stored = self.repository.get_account(account.id)
        if stored and stored.is_admin and account.role is not Role.ADMIN:
            raise ForbiddenError("Cannot change the role of an admin user")
        account.username = (account.username or "").strip()
        holder = self.repository.get_account_by_username(account.username)
        if holder and holder.id != account.id:
            raise DuplicateUsernameError("Username already exists")
        return self.repository.update_account(account)

    def change_password(self, account_id: int, new_password: str) -> bool:
        changed = self.repository.update_account_password(account_id, hash_password(new_password))
        if changed:
            logger.info("Password changed for account %s", account_id)
        return changed

    def delete(self, account_id: int) -> bool:
        account = self.get_by_id(account_id)
        if account.is_admin:
            raise ForbiddenError("Cannot delete admin user")
        if self.repository.list_memberships(account_id=account_id):
            raise ForbiddenError("User has memberships")
        if self.repository.list_classes(trainer_id=account_id):
            raise ForbiddenError("User has workout classes")
        deleted = self.repository.delete_account(account_id)
        if deleted:
            logger.info("Deleted account %s (%s)", account.id, account.username)
        return deleted
