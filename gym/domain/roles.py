"""Roles and the role-indexed permission table."""
from __future__ import annotations

from enum import Enum

from gym.services.errors import InvalidRoleError


class Role(str, Enum):
    ADMIN = "ADMIN"
    TRAINER = "TRAINER"
    MEMBER = "MEMBER"

    @classmethod
    def parse(cls, value: "Role | str | None") -> "Role":
        """Accept a Role or its tag in any case; anything else is InvalidRoleError."""
        if isinstance(value, Role):
            return value
        tag = (value or "").strip().upper()
        try:
            return cls(tag)
        except ValueError:
            raise InvalidRoleError(f"Invalid role: {value}") from None


class Permission(str, Enum):
    LIST_ACCOUNTS = "accounts:list"
    DELETE_ACCOUNT = "accounts:delete"
    VIEW_REVENUE = "revenue:view"
    CREATE_CLASS = "classes:create"
    LIST_OWN_CLASSES = "classes:list-own"
    UPDATE_OWN_CLASS = "classes:update-own"
    DELETE_OWN_CLASS = "classes:delete-own"
    LIST_CLASSES = "classes:list"
    PURCHASE_MEMBERSHIP = "memberships:purchase"
    LIST_OWN_MEMBERSHIPS = "memberships:list-own"
    CHANGE_OWN_PASSWORD = "accounts:change-own-password"


ROLE_PERMISSIONS: dict[Role, frozenset[Permission]] = {
    Role.ADMIN: frozenset(
        {
            Permission.LIST_ACCOUNTS,
            Permission.DELETE_ACCOUNT,
            Permission.VIEW_REVENUE,
            Permission.CHANGE_OWN_PASSWORD,
        }
    ),
    Role.TRAINER: frozenset(
        {
            Permission.CREATE_CLASS,
            Permission.LIST_OWN_CLASSES,
            Permission.UPDATE_OWN_CLASS,
            Permission.DELETE_OWN_CLASS,
            Permission.PURCHASE_MEMBERSHIP,
            Permission.CHANGE_OWN_PASSWORD,
        }
    ),
    Role.MEMBER: frozenset(
        {
            Permission.LIST_CLASSES,
            Permission.PURCHASE_MEMBERSHIP,
            Permission.LIST_OWN_MEMBERSHIPS,
            Permission.CHANGE_OWN_PASSWORD,
        }
    ),
}

# Roles a visitor may pick when registering from the main menu.
SELF_SERVICE_ROLES = frozenset({Role.MEMBER, Role.TRAINER})


def role_allows(role: Role, permission: Permission) -> bool:
    return permission in ROLE_PERMISSIONS.get(role, frozenset())
