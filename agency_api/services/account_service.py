"""
Account provisioning and maintenance use cases.

Create and update run as ordered pipelines: role resolution, then password
hashing, then the write. The first failing step raises and nothing after it
runs, so validation errors never leave side effects behind.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from agency_api.core.security import hash_password
from agency_api.domain.errors import (
    DuplicateEmail,
    InvalidRole,
    MissingFields,
    NoUpdatableFields,
    NotFound,
    is_unique_violation,
    store_failure,
)
from agency_api.repositories.sql_repository import SQLRepository
from agency_api.services.role_registry import RoleRegistry

logger = logging.getLogger(__name__)


class AccountService:
    """CRUD over user accounts, enforcing role and email invariants."""

    def __init__(self, repository: SQLRepository, roles: Optional[RoleRegistry] = None) -> None:
        self.repository = repository
        self.roles = roles or RoleRegistry(repository)

    # -------------------------------------- helpers --------------------------------------
    def _resolve_role(self, name: str) -> int:
        role_id = self.roles.resolve(name)
        if role_id is None:
            raise InvalidRole()
        return role_id

    def _translate_write_error(self, exc: SQLAlchemyError) -> Exception:
        if isinstance(exc, IntegrityError) and is_unique_violation(exc, "email"):
            return DuplicateEmail()
        logger.error("Account store failure: %s", getattr(exc, "orig", None) or exc)
        return store_failure(exc)

    # -------------------------------------- use cases --------------------------------------
    def create_account(
        self,
        full_name: str | None,
        email: str | None,
        role: str | None,
        password: str | None,
        phone: str | None = None,
    ) -> int:
        """Create an account and return its id.

        Raises MissingFields, InvalidRole, HashFailure, DuplicateEmail or
        StoreFailure. The email is not pre-checked; the unique constraint on
        ``users.email`` is the single source of truth.
        """
        if not (full_name and email and role and password):
            raise MissingFields()
        role_id = self._resolve_role(role)
        password_hash = hash_password(password)
        try:
            user_id = self.repository.insert_user(full_name, email, role_id, password_hash, phone or None)
        except SQLAlchemyError as exc:
            raise self._translate_write_error(exc) from exc
        logger.info("Created account id=%s role=%s", user_id, role)
        return user_id

    def get_account(self, user_id: int) -> dict:
        try:
            account = self.repository.get_account(user_id)
        except SQLAlchemyError as exc:
            logger.error("Account store failure: %s", exc)
            raise store_failure(exc) from exc
        if account is None:
            raise NotFound()
        return account

    def list_accounts(self) -> list[dict]:
        try:
            return self.repository.list_accounts()
        except SQLAlchemyError as exc:
            logger.error("Account store failure: %s", exc)
            raise store_failure(exc) from exc

    def update_account(self, user_id: int, **changes: Any) -> int:
        """Apply a partial update and return the number of rows changed.

        Only non-empty values among full_name, email, phone, password and role
        are applied. A role is re-resolved and a password re-hashed before the
        write. Zero rows for an unknown id is a valid result, not NotFound.
        """
        values: dict[str, Any] = {}
        if changes.get("role"):
            values["role_id"] = self._resolve_role(changes["role"])
        if changes.get("password"):
            values["password_hash"] = hash_password(changes["password"])
        for field in ("full_name", "email", "phone"):
            if changes.get(field):
                values[field] = changes[field]
        if not values:
            raise NoUpdatableFields()
        try:
            changed = self.repository.update_user(user_id, values)
        except SQLAlchemyError as exc:
            raise self._translate_write_error(exc) from exc
        logger.info("Updated account id=%s fields=%s changed=%s", user_id, sorted(values), changed)
        return changed

    def delete_account(self, user_id: int) -> int:
        """Delete an account; the store cascades profiles and clears club managers."""
        try:
            deleted = self.repository.delete_user(user_id)
        except SQLAlchemyError as exc:
            logger.error("Account store failure: %s", exc)
            raise store_failure(exc) from exc
        if deleted:
            logger.info("Deleted account id=%s", user_id)
        return deleted
