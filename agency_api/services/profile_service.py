"""
Per-role detail records (player and agent profiles) and clubs.

Profiles are never auto-provisioned with an account; callers create them
explicitly once the owning account exists. The owner's role is not checked
against the profile kind.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from agency_api.db.models import Agent, Club, Player
from agency_api.domain.errors import (
    DuplicateProfile,
    MissingFields,
    NotFound,
    is_unique_violation,
    store_failure,
)
from agency_api.repositories.sql_repository import SQLRepository

logger = logging.getLogger(__name__)

PLAYER_FIELDS = ("position", "height_cm", "weight_kg", "nationality", "dob", "bio")
AGENT_FIELDS = ("agency_name", "license_number", "region")


def _player_to_dict(entity: Player) -> dict:
    return {
        "id": entity.id,
        "user_id": entity.user_id,
        "position": entity.position,
        "height_cm": entity.height_cm,
        "weight_kg": entity.weight_kg,
        "nationality": entity.nationality,
        "dob": entity.dob,
        "bio": entity.bio,
        "created_at": entity.created_at,
    }


def _agent_to_dict(entity: Agent) -> dict:
    return {
        "id": entity.id,
        "user_id": entity.user_id,
        "agency_name": entity.agency_name,
        "license_number": entity.license_number,
        "region": entity.region,
        "created_at": entity.created_at,
    }


def _club_to_dict(entity: Club) -> dict:
    return {
        "id": entity.id,
        "name": entity.name,
        "country": entity.country,
        "manager_user_id": entity.manager_user_id,
        "created_at": entity.created_at,
    }


class ProfileService:
    """Create and read player/agent profiles and clubs."""

    def __init__(self, repository: SQLRepository) -> None:
        self.repository = repository

    def _require_user(self, user_id: int | None) -> int:
        if not user_id:
            raise MissingFields()
        try:
            exists = self.repository.user_exists(user_id)
        except SQLAlchemyError as exc:
            raise store_failure(exc) from exc
        if not exists:
            raise NotFound()
        return user_id

    def _create_profile(self, kind: str, creator, user_id: int | None, fields: dict[str, Any], allowed: tuple[str, ...]) -> int:
        owner_id = self._require_user(user_id)
        values = {key: fields[key] for key in allowed if fields.get(key) is not None}
        try:
            profile_id = creator(owner_id, **values)
        except IntegrityError as exc:
            if is_unique_violation(exc, "user_id"):
                raise DuplicateProfile(f"{kind.capitalize()} profile already exists for user {owner_id}") from exc
            logger.error("Profile store failure: %s", exc.orig)
            raise store_failure(exc) from exc
        except SQLAlchemyError as exc:
            logger.error("Profile store failure: %s", exc)
            raise store_failure(exc) from exc
        logger.info("Created %s profile id=%s user_id=%s", kind, profile_id, owner_id)
        return profile_id

    def _fetch(self, loader, entity_id: int, message: str):
        try:
            entity = loader(entity_id)
        except SQLAlchemyError as exc:
            raise store_failure(exc) from exc
        if entity is None:
            raise NotFound(message)
        return entity

    # -------------------------- players --------------------------
    def create_player_profile(self, user_id: int | None, **fields: Any) -> int:
        return self._create_profile("player", self.repository.create_player, user_id, fields, PLAYER_FIELDS)

    def get_player_profile(self, profile_id: int) -> dict:
        return _player_to_dict(self._fetch(self.repository.get_player, profile_id, "Player profile not found"))

    # -------------------------- agents --------------------------
    def create_agent_profile(self, user_id: int | None, **fields: Any) -> int:
        return self._create_profile("agent", self.repository.create_agent, user_id, fields, AGENT_FIELDS)

    def get_agent_profile(self, profile_id: int) -> dict:
        return _agent_to_dict(self._fetch(self.repository.get_agent, profile_id, "Agent profile not found"))

    # -------------------------- clubs --------------------------
    def create_club(self, name: str | None, country: str | None = None, manager_user_id: int | None = None) -> int:
        if not name:
            raise MissingFields()
        if manager_user_id is not None:
            self._require_user(manager_user_id)
        try:
            club_id = self.repository.create_club(name, country or None, manager_user_id)
        except SQLAlchemyError as exc:
            logger.error("Club store failure: %s", exc)
            raise store_failure(exc) from exc
        logger.info("Created club id=%s manager_user_id=%s", club_id, manager_user_id)
        return club_id

    def get_club(self, club_id: int) -> dict:
        return _club_to_dict(self._fetch(self.repository.get_club, club_id, "Club not found"))
