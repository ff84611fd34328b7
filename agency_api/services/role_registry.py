"""Read-only registry over the fixed role set."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from agency_api.domain.errors import store_failure
from agency_api.domain.roles import ROLE_NAMES
from agency_api.repositories.sql_repository import SQLRepository


class RoleRegistry:
    """Resolves role names to ids; seeding is the only write path."""

    def __init__(self, repository: SQLRepository) -> None:
        self.repository = repository

    def resolve(self, name: str | None) -> Optional[int]:
        """Exact, case-sensitive lookup. Returns None when the name is unknown."""
        if not name:
            return None
        try:
            return self.repository.get_role_id(name)
        except SQLAlchemyError as exc:
            raise store_failure(exc) from exc

    def seed(self) -> list[str]:
        """Insert any missing role; running it again is a no-op."""
        try:
            return self.repository.seed_roles(ROLE_NAMES)
        except SQLAlchemyError as exc:
            raise store_failure(exc) from exc

    def list_roles(self) -> list[dict]:
        try:
            return [{"id": role.id, "name": role.name} for role in self.repository.list_roles()]
        except SQLAlchemyError as exc:
            raise store_failure(exc) from exc
