#!/usr/bin/env python3
"""
Interactive front-desk menu for the gym.

Usage:
  gym [--log-level INFO]

DATABASE_URL selects the database (default: sqlite:///gym.db). Tables are
created on start.
"""
from __future__ import annotations

import argparse
from getpass import getpass
import sys
from typing import Callable

from gym.core.logging_setup import configure_logging
from gym.db.create_tables import create_all
from gym.domain.entities import Account, Membership, WorkoutClass
from gym.domain.plans import PLANS
from gym.domain.roles import Role
from gym.services.errors import GymError
from gym.services.session_service import Session, SessionService


def format_account(account: Account) -> str:
    return (
        f"#{account.id} {account.username} [{account.role.value}] "
        f"email={account.email} phone={account.phone} address={account.address}"
    )


def format_membership(membership: Membership) -> str:
    started = membership.start_date.isoformat() if membership.start_date else "-"
    return (
        f"#{membership.id} {membership.type}: {membership.description} "
        f"${membership.cost:.2f} (since {started})"
    )


def format_class(workout_class: WorkoutClass) -> str:
    when = workout_class.schedule_time.strftime("%Y-%m-%d %H:%M") if workout_class.schedule_time else "-"
    return "\n".join(
        [
            f"╭─ Workout Class #{workout_class.id} ─────────────────",
            f"│ Type: {workout_class.type}",
            f"│ Description: {workout_class.description}",
            f"│ Trainer ID: {workout_class.trainer_id}",
            f"│ Schedule: {when} ({workout_class.duration_minutes} min, capacity {workout_class.capacity})",
            "╰───────────────────────────────────",
        ]
    )


class Menu:
    """Text menus for each role; all decisions are left to SessionService."""

    def __init__(
        self,
        service: SessionService,
        *,
        read: Callable[[str], str] = input,
        read_secret: Callable[[str], str] = getpass,
        write: Callable[[str], None] = print,
    ) -> None:
        self.service = service
        self.read = read
        self.read_secret = read_secret
        self.write = write
        self.session = Session()

    # -------------------------- input helpers --------------------------
    def _ask_int(self, prompt: str) -> int | None:
        raw = self.read(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            self.write("Please enter a number.")
            return None

    def _show(self, items, formatter, empty: str) -> None:
        if not items:
            self.write(empty)
            return
        for item in items:
            self.write(formatter(item))

    # -------------------------- main menu --------------------------
    def run(self) -> None:
        while True:
            self.write("\n=== Gym Management System ===")
            self.write("1. Login")
            self.write("2. Register")
            self.write("3. Exit")
            choice = self._ask_int("Choose an option: ")
            if choice == 1:
                self.login()
            elif choice == 2:
                self.register()
            elif choice == 3:
                self.write("Goodbye!")
                return
            elif choice is not None:
                self.write("Invalid option. Please try again.")

    def login(self) -> None:
        username = self.read("Enter username: ")
        password = self.read_secret("Enter password: ")
        try:
            self.session = self.service.login(username, password)
        except GymError as exc:
            self.write(f"Login failed: {exc.message}")
            return
        self.write(f"Welcome, {self.session.account.username}!")
        self.role_menu()

    def register(self) -> None:
        username = self.read("Enter username: ")
        password = self.read_secret("Enter password: ")
        email = self.read("Enter email: ")
        phone = self.read("Enter phone number: ")
        address = self.read("Enter address: ")
        self.write("Select role:")
        self.write("1. Member")
        self.write("2. Trainer")
        choice = self._ask_int("Choose role (1-2): ")
        role = Role.TRAINER if choice == 2 else Role.MEMBER
        try:
            self.service.register(username, password, email, phone, address, role)
        except GymError as exc:
            self.write(f"Registration failed: {exc.message}")
            return
        self.write("Registration successful! Please login.")

    def role_menu(self) -> None:
        menus = {
            Role.ADMIN: self.admin_menu,
            Role.TRAINER: self.trainer_menu,
            Role.MEMBER: self.member_menu,
        }
        while self.session.authenticated:
            self.write(f"\n=== {self.session.role.value} Menu ===")
            try:
                menus[self.session.role]()
            except GymError as exc:
                self.write(f"Error: {exc.message}")
        self.write("Logged out successfully!")

    def _logout(self) -> None:
        self.service.logout(self.session)

    # -------------------------- role menus --------------------------
    def admin_menu(self) -> None:
        self.write("1. View all users")
        self.write("2. Delete user")
        self.write("3. View total revenue")
        self.write("4. Change my password")
        self.write("5. Logout")
        choice = self._ask_int("Choose an option: ")
        if choice == 1:
            self._show(self.service.list_accounts(self.session), format_account, "No users found.")
        elif choice == 2:
            account_id = self._ask_int("Enter user ID to delete: ")
            if account_id is not None and self.service.delete_account(self.session, account_id):
                self.write("User deleted successfully.")
        elif choice == 3:
            revenue = self.service.total_revenue(self.session)
            self.write(f"Total Revenue: ${revenue:.2f}")
        elif choice == 4:
            self.change_password()
        elif choice == 5:
            self._logout()
        elif choice is not None:
            self.write("Invalid option.")

    def trainer_menu(self) -> None:
        self.write("1. Create workout class")
        self.write("2. View my classes")
        self.write("3. Update class")
        self.write("4. Delete class")
        self.write("5. Purchase membership")
        self.write("6. Change my password")
        self.write("7. Logout")
        choice = self._ask_int("Choose an option: ")
        if choice == 1:
            class_type = self.read("Enter class type: ")
            description = self.read("Enter class description: ")
            created = self.service.create_class(self.session, class_type, description)
            self.write("Workout class created:")
            self.write(format_class(created))
        elif choice == 2:
            self._show(self.service.list_my_classes(self.session), format_class, "You have no classes yet.")
        elif choice == 3:
            class_id = self._ask_int("Enter class ID to update: ")
            if class_id is None:
                return
            class_type = self.read("Enter new class type: ")
            description = self.read("Enter new class description: ")
            if self.service.update_my_class(self.session, class_id, class_type, description):
                self.write("Workout class updated successfully.")
        elif choice == 4:
            class_id = self._ask_int("Enter class ID to delete: ")
            if class_id is not None and self.service.delete_my_class(self.session, class_id):
                self.write("Workout class deleted successfully.")
        elif choice == 5:
            self.purchase_membership()
        elif choice == 6:
            self.change_password()
        elif choice == 7:
            self._logout()
        elif choice is not None:
            self.write("Invalid option.")

    def member_menu(self) -> None:
        self.write("1. View available classes")
        self.write("2. Purchase membership")
        self.write("3. View my memberships")
        self.write("4. Change my password")
        self.write("5. Logout")
        choice = self._ask_int("Choose an option: ")
        if choice == 1:
            self._show(self.service.list_classes(self.session), format_class, "No classes scheduled.")
        elif choice == 2:
            self.purchase_membership()
        elif choice == 3:
            self._show(
                self.service.list_my_memberships(self.session), format_membership, "You have no memberships."
            )
        elif choice == 4:
            self.change_password()
        elif choice == 5:
            self._logout()
        elif choice is not None:
            self.write("Invalid option.")

    # -------------------------- shared actions --------------------------
    def purchase_membership(self) -> None:
        plans = list(PLANS.values())
        self.write("Available Membership Types:")
        for index, plan in enumerate(plans, start=1):
            self.write(f"{index}. {plan.type} (${plan.cost:.2f})")
        choice = self._ask_int(f"Choose membership type (1-{len(plans)}): ")
        if choice is None or not 1 <= choice <= len(plans):
            self.write("Invalid option.")
            return
        membership = self.service.purchase_membership(self.session, plans[choice - 1].code)
        self.write(f"Membership purchased successfully: {format_membership(membership)}")

    def change_password(self) -> None:
        first = self.read_secret("New password: ")
        second = self.read_secret("Confirm new password: ")
        if not first:
            self.write("Password cannot be empty.")
            return
        if first != second:
            self.write("Passwords do not match.")
            return
        if self.service.change_password(self.session, first):
            self.write("Password updated.")


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Gym management front desk")
    ap.add_argument("--log-level", help="Logging level (default: LOG_LEVEL or WARNING)")
    args = ap.parse_args(argv)

    configure_logging(args.log_level)
    create_all()
    Menu(SessionService()).run()


def cli() -> None:
    try:
        main()
    except KeyboardInterrupt:
        sys.stderr.write("\n")
        raise SystemExit(130)
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)


if __name__ == "__main__":
    cli()
