"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Iterator, Optional

from sqlalchemy import select, update, delete, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gym.db.models import AccountRow, MembershipRow, WorkoutClassRow
from gym.db.session import get_session
from gym.domain.entities import (
    DEFAULT_CLASS_CAPACITY,
    DEFAULT_CLASS_DURATION_MINUTES,
    Account,
    Membership,
    WorkoutClass,
)
from gym.domain.roles import Role
from gym.services.errors import StorageError


@contextmanager
def _session() -> Iterator[Session]:
    """Open a session and report driver failures as StorageError."""
    try:
        with get_session() as session:
            yield session
    except SQLAlchemyError as exc:
        raise StorageError(f"Storage failure: {exc.__class__.__name__}") from exc


def _to_account(row: AccountRow) -> Account:
    return Account(
        id=row.id,
        username=row.username,
        email=row.email,
        phone=row.phone,
        address=row.address,
        role=Role(row.role),
    )


def _to_membership(row: MembershipRow) -> Membership:
    return Membership(
        id=row.id,
        type=row.type,
        description=row.description,
        cost=Decimal(str(row.cost)),
        account_id=row.account_id,
        start_date=row.start_date,
    )


def _utc(value: datetime | None) -> datetime | None:
    # SQLite hands DateTime(timezone=True) back naive; values are always written in UTC.
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_workout_class(row: WorkoutClassRow) -> WorkoutClass:
    return WorkoutClass(
        id=row.id,
        type=row.type,
        description=row.description,
        trainer_id=row.trainer_id,
        capacity=row.capacity,
        schedule_time=_utc(row.schedule_time),
        duration_minutes=row.duration_minutes,
    )


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    # -------------------------- accounts --------------------------
    def create_account(
        self,
        username: str,
        password_hash: str,
        email: str,
        phone: str,
        address: str,
        role: Role,
    ) -> Account:
        row = AccountRow(
            username=username,
            password_hash=password_hash,
            email=email,
            phone=phone,
            address=address,
            role=role.value,
        )
        with _session() as session:
            session.add(row)
            session.commit()
            session.refresh(row)
            return _to_account(row)

    def get_account(self, account_id: int) -> Optional[Account]:
        with _session() as session:
            row = session.get(AccountRow, account_id)
            return _to_account(row) if row else None

    def get_account_by_username(self, username: str) -> Optional[Account]:
        with _session() as session:
            stmt = select(AccountRow).where(AccountRow.username == username)
            row = session.execute(stmt).scalar_one_or_none()
            return _to_account(row) if row else None

    def get_credentials(self, username: str) -> Optional[tuple[Account, str]]:
        """Return the account and its stored password hash, for login only."""
        with _session() as session:
            stmt = select(AccountRow).where(AccountRow.username == username)
            row = session.execute(stmt).scalar_one_or_none()
            if not row:
                return None
            return _to_account(row), row.password_hash

    def list_accounts(self) -> list[Account]:
        with _session() as session:
            rows = session.execute(select(AccountRow)).scalars().all()
            return [_to_account(row) for row in rows]

    def update_account(self, account: Account) -> bool:
        with _session() as session:
            stmt = (
                update(AccountRow)
                .where(AccountRow.id == account.id)
                .values(
                    username=account.username,
                    email=account.email,
                    phone=account.phone,
                    address=account.address,
                    role=account.role.value,
                    updated_at=datetime.now(timezone.utc),
                )
            )
            result = session.execute(stmt)
            session.commit()
            return result.rowcount > 0

    def update_account_password(self, account_id: int, password_hash: str) -> bool:
        with _session() as session:
            stmt = (
                update(AccountRow)
                .where(AccountRow.id == account_id)
                .values(password_hash=password_hash, updated_at=datetime.now(timezone.utc))
            )
            result = session.execute(stmt)
            session.commit()
            return result.rowcount > 0

    def delete_account(self, account_id: int) -> bool:
        with _session() as session:
            result = session.execute(delete(AccountRow).where(AccountRow.id == account_id))
            session.commit()
            return result.rowcount > 0

    # -------------------------- memberships --------------------------
    def create_membership(
        self,
        type: str,
        description: str,
        cost: Decimal,
        account_id: int,
        start_date: date | None = None,
    ) -> Membership:
        row = MembershipRow(
            type=type,
            description=description,
            cost=cost,
            account_id=account_id,
            start_date=start_date or date.today(),
        )
        with _session() as session:
            session.add(row)
            session.commit()
            session.refresh(row)
            return _to_membership(row)

    def get_membership(self, membership_id: int) -> Optional[Membership]:
        with _session() as session:
            row = session.get(MembershipRow, membership_id)
            return _to_membership(row) if row else None

    def list_memberships(self, account_id: int | None = None) -> list[Membership]:
        stmt = select(MembershipRow)
        if account_id is not None:
            stmt = stmt.where(MembershipRow.account_id == account_id)
        with _session() as session:
            rows = session.execute(stmt).scalars().all()
            return [_to_membership(row) for row in rows]

    def update_membership(self, membership: Membership) -> bool:
        with _session() as session:
            stmt = (
                update(MembershipRow)
                .where(MembershipRow.id == membership.id)
                .values(type=membership.type, description=membership.description, cost=membership.cost)
            )
            result = session.execute(stmt)
            session.commit()
            return result.rowcount > 0

    def delete_membership(self, membership_id: int) -> bool:
        with _session() as session:
            result = session.execute(delete(MembershipRow).where(MembershipRow.id == membership_id))
            session.commit()
            return result.rowcount > 0

    def sum_membership_costs(self) -> Decimal:
        with _session() as session:
            total = session.execute(select(func.sum(MembershipRow.cost))).scalar()
        if total is None:
            return Decimal("0")
        return Decimal(str(total))

    # -------------------------- workout classes --------------------------
    def create_class(
        self,
        type: str,
        description: str,
        trainer_id: int,
        *,
        capacity: int = DEFAULT_CLASS_CAPACITY,
        schedule_time: datetime | None = None,
        duration_minutes: int = DEFAULT_CLASS_DURATION_MINUTES,
    ) -> WorkoutClass:
        row = WorkoutClassRow(
            type=type,
            description=description,
            trainer_id=trainer_id,
            capacity=capacity,
            schedule_time=(schedule_time or datetime.now(timezone.utc)).astimezone(timezone.utc),
            duration_minutes=duration_minutes,
        )
        with _session() as session:
            session.add(row)
            session.commit()
            session.refresh(row)
            return _to_workout_class(row)

    def get_class(self, class_id: int) -> Optional[WorkoutClass]:
        with _session() as session:
            row = session.get(WorkoutClassRow, class_id)
            return _to_workout_class(row) if row else None

    def list_classes(self, trainer_id: int | None = None) -> list[WorkoutClass]:
        stmt = select(WorkoutClassRow)
        if trainer_id is not None:
            stmt = stmt.where(WorkoutClassRow.trainer_id == trainer_id)
        with _session() as session:
            rows = session.execute(stmt).scalars().all()
            return [_to_workout_class(row) for row in rows]

    def update_class(self, workout_class: WorkoutClass) -> bool:
        with _session() as session:
            stmt = (
                update(WorkoutClassRow)
                .where(
                    WorkoutClassRow.id == workout_class.id,
                    WorkoutClassRow.trainer_id == workout_class.trainer_id,
                )
                .values(type=workout_class.type, description=workout_class.description)
            )
            result = session.execute(stmt)
            session.commit()
            return result.rowcount > 0

    def delete_class(self, class_id: int, trainer_id: int) -> bool:
        with _session() as session:
            stmt = delete(WorkoutClassRow).where(
                WorkoutClassRow.id == class_id,
                WorkoutClassRow.trainer_id == trainer_id,
            )
            result = session.execute(stmt)
            session.commit()
            return result.rowcount > 0
