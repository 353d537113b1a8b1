"""SQLAlchemy models for accounts, memberships and workout classes."""
from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    func,
)

from .session import Base


class AccountRow(Base):
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False)
    password_hash = Column(Text, nullable=False)
    email = Column(String(255), nullable=False, default="")
    phone = Column(String(50), nullable=False, default="")
    address = Column(Text, nullable=False, default="")
    role = Column(String(16), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint("role IN ('ADMIN', 'TRAINER', 'MEMBER')", name="valid_account_role"),
    )


class MembershipRow(Base):
    __tablename__ = "memberships"

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String(100), nullable=False)
    description = Column(Text, nullable=False, default="")
    cost = Column(Numeric(10, 2), nullable=False)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    start_date = Column(Date, nullable=False)

    __table_args__ = (
        CheckConstraint("cost >= 0", name="non_negative_membership_cost"),
    )


class WorkoutClassRow(Base):
    __tablename__ = "workout_classes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String(100), nullable=False)
    description = Column(Text, nullable=False, default="")
    trainer_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    capacity = Column(Integer, nullable=False, default=20)
    schedule_time = Column(DateTime(timezone=True), nullable=False)
    duration_minutes = Column(Integer, nullable=False, default=60)
