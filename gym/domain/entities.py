"""Records handed out by the repository and services.

Password hashes never leave the repository, so ``Account`` has no credential
field.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from .roles import Role

DEFAULT_CLASS_CAPACITY = 20
DEFAULT_CLASS_DURATION_MINUTES = 60


@dataclass
class Account:
    id: Optional[int]
    username: str
    email: str
    phone: str
    address: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


@dataclass
class Membership:
    id: Optional[int]
    type: str
    description: str
    cost: Decimal
    account_id: int
    start_date: Optional[date] = None


@dataclass
class WorkoutClass:
    id: Optional[int]
    type: str
    description: str
    trainer_id: int
    capacity: int = DEFAULT_CLASS_CAPACITY
    schedule_time: Optional[datetime] = None
    duration_minutes: int = DEFAULT_CLASS_DURATION_MINUTES
