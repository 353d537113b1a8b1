"""One-off migration script: first-generation gym database -> current schema.

The old system kept ``Users``, ``Memberships`` and ``WorkoutClasses`` tables in
Postgres with bcrypt password hashes. Rows are copied with their original ids
so references stay valid; bcrypt hashes are kept as-is and upgraded to Argon2
the next time each user logs in.

Usage:
  DATABASE_URL=sqlite:///gym.db python scripts/migrate_legacy.py --source postgresql+psycopg://user:pw@localhost/gym_management
"""
from __future__ import annotations

import argparse
from datetime import date, datetime, timezone
from decimal import Decimal
import logging
from pathlib import Path
import sys

from sqlalchemy import create_engine, text

# Make the gym package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gym.core.logging_setup import configure_logging
from gym.db.create_tables import create_all
from gym.db.models import AccountRow, MembershipRow, WorkoutClassRow
from gym.db.session import get_session
from gym.domain.roles import Role

logger = logging.getLogger("gym.migrate")


def _to_datetime(value) -> datetime:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    return datetime.now(timezone.utc)


def migrate(source_url: str) -> dict[str, int]:
    source = create_engine(source_url, future=True)
    counts = {"accounts": 0, "memberships": 0, "classes": 0}
    create_all()
    with source.connect() as conn, get_session() as session:
        for row in conn.execute(text("SELECT * FROM users")).mappings():
            session.merge(
                AccountRow(
                    id=row["userid"],
                    username=row["username"],
                    password_hash=row["userpassword"],
                    email=row["useremail"] or "",
                    phone=row["userphonenumber"] or "",
                    address=row["useraddress"] or "",
                    role=Role.parse(row["userrole"]).value,
                )
            )
            counts["accounts"] += 1
        # Accounts must exist before the rows that reference them.
        session.flush()

        for row in conn.execute(text("SELECT * FROM memberships")).mappings():
            session.merge(
                MembershipRow(
                    id=row["membershipid"],
                    type=row["membershiptype"],
                    description=row["membershipdescription"] or "",
                    cost=Decimal(str(row["membershipcost"])),
                    account_id=row["userid"],
                    start_date=row.get("startdate") or date.today(),
                )
            )
            counts["memberships"] += 1

        for row in conn.execute(text("SELECT * FROM workoutclasses")).mappings():
            session.merge(
                WorkoutClassRow(
                    id=row["workoutclassid"],
                    type=row["workoutclasstype"],
                    description=row["workoutclassdescription"] or "",
                    trainer_id=row["trainerid"],
                    capacity=row.get("capacity") or 20,
                    schedule_time=_to_datetime(row.get("scheduletime")),
                    duration_minutes=row.get("duration") or 60,
                )
            )
            counts["classes"] += 1

        session.flush()
        if session.get_bind().dialect.name == "postgresql":
            # Explicit ids leave the serial sequences behind.
            for table in ("accounts", "memberships", "workout_classes"):
                session.execute(
                    text(f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), COALESCE(MAX(id), 1)) FROM {table}")
                )
        session.commit()
    source.dispose()
    logger.info("Migrated %s", counts)
    return counts


def main() -> None:
    ap = argparse.ArgumentParser(description="Copy the first-generation gym database into the current schema")
    ap.add_argument("--source", required=True, help="SQLAlchemy URL of the old database")
    args = ap.parse_args()

    configure_logging("INFO")
    counts = migrate(args.source)
    print("Migration finished.")
    for name, total in counts.items():
        print(f"  {name}: {total}")


if __name__ == "__main__":
    main()
