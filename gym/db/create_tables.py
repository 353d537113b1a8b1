"""Create the accounts, memberships and workout_classes tables."""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from gym.core.logging_setup import configure_logging

from .session import Base, get_engine
from . import models  # noqa: F401  # registers the tables on Base.metadata

logger = logging.getLogger(__name__)


def create_all() -> list[str]:
    """Create any missing table and return the names known to the schema."""
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    tables = sorted(Base.metadata.tables)
    logger.debug("Schema ready on %s: %s", engine.url.render_as_string(hide_password=True), ", ".join(tables))
    return tables


if __name__ == "__main__":
    configure_logging()
    try:
        names = create_all()
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
    print(f"Tables ready: {', '.join(names)}")
