"""
Smoke tests for the SQLRepository against a temporary SQLite database.
"""
from __future__ import annotations

from decimal import Decimal

import pytest

from gym.db.create_tables import create_all
from gym.domain.roles import Role
from gym.services.errors import StorageError


def test_account_crud(repo):
    created = repo.create_account("alice", "argon2$x", "a@x.com", "555", "addr", Role.MEMBER)
    assert created.id is not None
    assert repo.get_account(created.id) == created
    assert repo.get_account_by_username("alice") == created

    account, stored = repo.get_credentials("alice")
    assert account == created
    assert stored == "argon2$x"

    created.email = "alice@gym.test"
    assert repo.update_account(created) is True
    assert repo.get_account(created.id).email == "alice@gym.test"

    assert repo.delete_account(created.id) is True
    assert repo.get_account(created.id) is None
    assert repo.delete_account(created.id) is False


def test_account_never_exposes_password_hash(repo):
    created = repo.create_account("bob", "argon2$secret", "", "", "", Role.TRAINER)

    assert not hasattr(created, "password_hash")
    assert "argon2$secret" not in repr(created)


def test_duplicate_username_is_a_storage_error(repo):
    repo.create_account("alice", "h", "", "", "", Role.MEMBER)

    with pytest.raises(StorageError):
        repo.create_account("alice", "h", "", "", "", Role.MEMBER)


def test_membership_listing_and_sum(repo):
    assert repo.sum_membership_costs() == Decimal("0")
    alice = repo.create_account("alice", "h", "", "", "", Role.MEMBER)
    bob = repo.create_account("bob", "h", "", "", "", Role.MEMBER)

    repo.create_membership("Monthly", "30-day membership", Decimal("50.00"), alice.id)
    repo.create_membership("Annual", "365-day membership", Decimal("500.00"), bob.id)

    assert len(repo.list_memberships()) == 2
    assert [m.type for m in repo.list_memberships(account_id=bob.id)] == ["Annual"]
    assert repo.sum_membership_costs() == Decimal("550.00")


def test_class_statements_filter_on_trainer(repo):
    tom = repo.create_account("tom", "h", "", "", "", Role.TRAINER)
    tina = repo.create_account("tina", "h", "", "", "", Role.TRAINER)
    created = repo.create_class("Yoga", "relax", trainer_id=tom.id)
    assert created.capacity == 20
    assert created.duration_minutes == 60
    assert created.schedule_time is not None

    created.trainer_id = tina.id
    created.type = "Pilates"
    assert repo.update_class(created) is False
    assert repo.delete_class(created.id, tina.id) is False
    assert repo.get_class(created.id).type == "Yoga"

    assert repo.delete_class(created.id, tom.id) is True
    assert repo.list_classes() == []


def test_references_to_missing_accounts_are_rejected(repo):
    with pytest.raises(StorageError):
        repo.create_membership("Monthly", "30-day membership", Decimal("50.00"), 404)
    with pytest.raises(StorageError):
        repo.create_class("Yoga", "relax", trainer_id=404)

    assert repo.list_memberships() == []
    assert repo.list_classes() == []


def test_account_with_memberships_cannot_be_removed(repo):
    alice = repo.create_account("alice", "h", "", "", "", Role.MEMBER)
    repo.create_membership("Monthly", "30-day membership", Decimal("50.00"), alice.id)

    with pytest.raises(StorageError):
        repo.delete_account(alice.id)
    assert repo.get_account(alice.id) == alice


def test_create_all_reports_tables(db_env):
    assert create_all() == ["accounts", "memberships", "workout_classes"]
