from __future__ import annotations

from dataclasses import replace
from datetime import timezone

import pytest

from gym.domain.roles import Role
from gym.services.class_service import ClassService
from gym.services.errors import NotFoundError, UnauthorizedError


@pytest.fixture()
def svc(db_env) -> ClassService:
    return ClassService()


@pytest.fixture()
def trainers(svc) -> tuple[int, int]:
    tom = svc.repository.create_account("tom", "argon2$x", "", "", "", Role.TRAINER)
    tina = svc.repository.create_account("tina", "argon2$x", "", "", "", Role.TRAINER)
    return tom.id, tina.id


def test_create_uses_defaults(svc, trainers):
    tom, _ = trainers
    yoga = svc.create("Yoga", "relax", trainer_id=tom)

    assert yoga.id is not None
    assert yoga.trainer_id == tom
    assert yoga.capacity == 20
    assert yoga.duration_minutes == 60
    assert yoga.schedule_time is not None


def test_schedule_time_reads_back_in_utc(svc, trainers):
    yoga = svc.create("Yoga", "relax", trainer_id=trainers[0])

    stored = svc.get_by_id(yoga.id)

    assert stored.schedule_time.tzinfo is not None
    assert stored.schedule_time.utcoffset() == timezone.utc.utcoffset(None)
    assert stored.schedule_time == yoga.schedule_time


def test_owner_updates_and_deletes(svc, trainers):
    tom, tina = trainers
    yoga = svc.create("Yoga", "relax", trainer_id=tom)

    with pytest.raises(UnauthorizedError):
        svc.update(replace(yoga, trainer_id=tina, type="Spin"))
    assert svc.get_by_id(yoga.id).type == "Yoga"

    assert svc.update(replace(yoga, type="Power Yoga", description="sweat")) is True
    stored = svc.get_by_id(yoga.id)
    assert (stored.type, stored.description) == ("Power Yoga", "sweat")

    assert svc.delete(yoga.id, trainer_id=tom) is True
    with pytest.raises(NotFoundError):
        svc.get_by_id(yoga.id)


def test_other_trainer_cannot_delete(svc, trainers):
    tom, tina = trainers
    yoga = svc.create("Yoga", "relax", trainer_id=tom)

    with pytest.raises(UnauthorizedError):
        svc.delete(yoga.id, trainer_id=tina)
    assert svc.get_by_id(yoga.id) == yoga


def test_missing_class_is_unauthorized(svc, trainers):
    tom, _ = trainers
    with pytest.raises(UnauthorizedError):
        svc.delete(404, trainer_id=tom)
    with pytest.raises(UnauthorizedError):
        svc.update(replace(svc.create("Spin", "", trainer_id=tom), id=404))


def test_listing(svc, trainers):
    tom, tina = trainers
    svc.create("Yoga", "", trainer_id=tom)
    svc.create("Spin", "", trainer_id=tom)
    svc.create("Boxing", "", trainer_id=tina)

    assert {c.type for c in svc.list_by_trainer(tom)} == {"Yoga", "Spin"}
    assert len(svc.list_all()) == 3
