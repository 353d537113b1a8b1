from __future__ import annotations

import pytest

from gym.cli import Menu
from gym.services.session_service import SessionService


def _menu(service: SessionService, answers: list[str], secrets: list[str]):
    lines: list[str] = []
    answer_iter = iter(answers)
    secret_iter = iter(secrets)
    menu = Menu(
        service,
        read=lambda prompt: next(answer_iter),
        read_secret=lambda prompt: next(secret_iter),
        write=lines.append,
    )
    return menu, lines


@pytest.fixture()
def service(db_env) -> SessionService:
    return SessionService()


def test_member_registers_buys_and_logs_out(service):
    answers = [
        "2", "alice", "a@x.com", "555", "addr", "1",  # register as member
        "1", "alice",                                  # login
        "2", "1",                                      # purchase monthly
        "3",                                           # view memberships
        "5",                                           # logout
        "3",                                           # exit
    ]
    menu, lines = _menu(service, answers, ["pw1", "pw1"])

    menu.run()

    output = "\n".join(lines)
    assert "Registration successful! Please login." in output
    assert "Welcome, alice!" in output
    assert "Membership purchased successfully" in output
    assert "Monthly: 30-day membership $50.00" in output
    assert "Logged out successfully!" in output
    assert lines[-1] == "Goodbye!"
    assert not menu.session.authenticated


def test_wrong_password_is_reported(service):
    service.register("alice", "pw1", "", "", "", "MEMBER")
    menu, lines = _menu(service, ["1", "alice", "3"], ["nope"])

    menu.run()

    assert "Login failed: Invalid username or password" in lines


def test_trainer_cannot_edit_someone_elses_class(service):
    service.register("tom", "pw", "", "", "", "TRAINER")
    service.register("tina", "pw", "", "", "", "TRAINER")
    yoga = service.create_class(service.login("tom", "pw"), "Yoga", "relax")

    answers = ["1", "tina", "3", str(yoga.id), "Spin", "fast", "7", "3"]
    menu, lines = _menu(service, answers, ["pw"])

    menu.run()

    assert "Error: Unauthorized to update this workout class" in lines
    assert service.classes.get_by_id(yoga.id).type == "Yoga"


def test_admin_sees_revenue(service):
    service.accounts.register("root", "pw", "", "", "", "ADMIN")
    service.register("alice", "pw1", "", "", "", "MEMBER")
    service.purchase_membership(service.login("alice", "pw1"), "annual")

    menu, lines = _menu(service, ["1", "root", "3", "5", "3"], ["pw"])

    menu.run()

    assert "Total Revenue: $500.00" in lines
