"""Create the database schema (idempotent) and seed the fixed roles."""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from agency_api.domain.errors import StoreFailure
from agency_api.repositories.sql_repository import SQLRepository
from agency_api.services.role_registry import RoleRegistry

from .session import Base, Database
from . import models  # noqa: F401  # ensure models are imported for metadata

logger = logging.getLogger(__name__)


def create_all(database: Database) -> None:
    """Create missing tables; existing tables are left untouched."""
    Base.metadata.create_all(bind=database.engine, checkfirst=True)


def init_database(database: Database) -> None:
    """Schema plus role seed, safe to run against an initialized store."""
    create_all(database)
    added = RoleRegistry(SQLRepository(database)).seed()
    if added:
        logger.info("Seeded roles: %s", ", ".join(added))


if __name__ == "__main__":
    from agency_api.core.config import get_settings

    db = Database(get_settings().database_url).open()
    try:
        init_database(db)
        print("Database tables created successfully.")
    except (SQLAlchemyError, StoreFailure) as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
    finally:
        db.close()
