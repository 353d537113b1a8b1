#!/usr/bin/env python3
"""
Create an administrator account directly in the database.

Admins cannot register from the menu, so the first one is created here.

Usage:
  python scripts/create_admin.py --username admin [--password s3cret] [--email a@gym.test]
"""
from __future__ import annotations

import argparse
from getpass import getpass
import sys

from gym.core.logging_setup import configure_logging
from gym.db.create_tables import create_all
from gym.domain.roles import Role
from gym.services.account_service import AccountService


def main() -> None:
    ap = argparse.ArgumentParser(description="Create an admin account")
    ap.add_argument("--username", required=True, help="Login name for the admin")
    ap.add_argument("--password", help="Password (prompted when omitted)")
    ap.add_argument("--email", default="", help="Contact e-mail")
    ap.add_argument("--phone", default="", help="Contact phone")
    ap.add_argument("--address", default="", help="Postal address")
    args = ap.parse_args()

    configure_logging()
    create_all()

    username = (args.username or "").strip()
    if not username:
        raise SystemExit("Invalid username")
    password = args.password or getpass("Admin password: ")
    if not password:
        raise SystemExit("Password cannot be empty")

    account = AccountService().register(username, password, args.email, args.phone, args.address, Role.ADMIN)
    print("OK: admin created")
    print(f"  ID: {account.id}")
    print(f"  Username: {account.username}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
