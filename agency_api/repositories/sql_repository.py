"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from typing import Any, Iterable, Optional

from sqlalchemy import select, update, delete
from sqlalchemy.exc import IntegrityError

from agency_api.db.models import Agent, Club, Player, Role, User
from agency_api.db.session import Database
from agency_api.domain.errors import is_unique_violation

_ACCOUNT_COLUMNS = (
    User.id,
    User.full_name,
    User.email,
    User.phone,
    User.created_at,
    Role.name.label("role"),
)


class SQLRepository:
    """CRUD helpers wrapping a SQLAlchemy session from the given store handle."""

    def __init__(self, database: Database) -> None:
        self.database = database

    # -------------------------- roles --------------------------
    def list_roles(self) -> list[Role]:
        with self.database.session() as session:
            return session.execute(select(Role).order_by(Role.id)).scalars().all()

    def get_role_id(self, name: str) -> Optional[int]:
        with self.database.session() as session:
            stmt = select(Role.id).where(Role.name == name)
            return session.execute(stmt).scalar_one_or_none()

    def seed_roles(self, names: Iterable[str]) -> list[str]:
        """Insert the role names that are missing; returns the ones added.

        Each insert commits on its own. A name another process inserted after
        the read is skipped, like INSERT OR IGNORE.
        """
        with self.database.session() as session:
            existing = set(session.execute(select(Role.name)).scalars().all())
            added = []
            for name in names:
                if name in existing:
                    continue
                session.add(Role(name=name))
                try:
                    session.commit()
                except IntegrityError as exc:
                    session.rollback()
                    if not is_unique_violation(exc, "name"):
                        raise
                    continue
                existing.add(name)
                added.append(name)
            return added

    # -------------------------- users --------------------------
    def insert_user(
        self,
        full_name: str,
        email: str,
        role_id: int,
        password_hash: str,
        phone: str | None = None,
    ) -> int:
        entity = User(
            full_name=full_name,
            email=email,
            role_id=role_id,
            password_hash=password_hash,
            phone=phone or None,
        )
        with self.database.session() as session:
            session.add(entity)
            session.commit()
            return entity.id

    def get_account(self, user_id: int) -> Optional[dict]:
        """Account row joined with its role name; never includes password_hash."""
        with self.database.session() as session:
            stmt = select(*_ACCOUNT_COLUMNS).join(Role, User.role_id == Role.id).where(User.id == user_id)
            row = session.execute(stmt).first()
            return dict(row._mapping) if row else None

    def list_accounts(self) -> list[dict]:
        with self.database.session() as session:
            stmt = select(*_ACCOUNT_COLUMNS).join(Role, User.role_id == Role.id).order_by(User.id)
            return [dict(row._mapping) for row in session.execute(stmt)]

    def update_user(self, user_id: int, values: dict[str, Any]) -> int:
        with self.database.session() as session:
            result = session.execute(update(User).where(User.id == user_id).values(**values))
            session.commit()
            return int(result.rowcount or 0)

    def delete_user(self, user_id: int) -> int:
        with self.database.session() as session:
            result = session.execute(delete(User).where(User.id == user_id))
            session.commit()
            return int(result.rowcount or 0)

    def user_exists(self, user_id: int) -> bool:
        with self.database.session() as session:
            stmt = select(User.id).where(User.id == user_id).limit(1)
            return session.execute(stmt).first() is not None

    # -------------------------- profiles --------------------------
    def create_player(self, user_id: int, **fields: Any) -> int:
        entity = Player(user_id=user_id, **fields)
        with self.database.session() as session:
            session.add(entity)
            session.commit()
            return entity.id

    def get_player(self, player_id: int) -> Optional[Player]:
        with self.database.session() as session:
            return session.get(Player, player_id)

    def create_agent(self, user_id: int, **fields: Any) -> int:
        entity = Agent(user_id=user_id, **fields)
        with self.database.session() as session:
            session.add(entity)
            session.commit()
            return entity.id

    def get_agent(self, agent_id: int) -> Optional[Agent]:
        with self.database.session() as session:
            return session.get(Agent, agent_id)

    # -------------------------- clubs --------------------------
    def create_club(self, name: str, country: str | None = None, manager_user_id: int | None = None) -> int:
        entity = Club(name=name, country=country, manager_user_id=manager_user_id)
        with self.database.session() as session:
            session.add(entity)
            session.commit()
            return entity.id

    def get_club(self, club_id: int) -> Optional[Club]:
        with self.database.session() as session:
            return session.get(Club, club_id)
