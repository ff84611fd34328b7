"""Security helpers (hashing and verification)."""

from __future__ import annotations

from functools import lru_cache

from argon2 import PasswordHasher, exceptions as argon_exc

from agency_api.core.config import get_settings
from agency_api.domain.errors import HashFailure


@lru_cache
def _hasher(time_cost: int, memory_cost: int) -> PasswordHasher:
    return PasswordHasher(time_cost=time_cost, memory_cost=memory_cost)


def get_hasher() -> PasswordHasher:
    """Argon2 hasher tuned by PASSWORD_HASH_TIME_COST / PASSWORD_HASH_MEMORY_COST."""
    settings = get_settings()
    return _hasher(max(settings.password_hash_time_cost, 1), max(settings.password_hash_memory_cost, 32))


def hash_password(password: str) -> str:
    """Create a salted Argon2 hash; a fresh random salt is drawn on every call."""
    try:
        hashed = get_hasher().hash(password)
    except (argon_exc.HashingError, MemoryError) as exc:
        raise HashFailure(f"Password hashing failed: {exc}") from exc
    if not hashed:
        raise HashFailure()
    return hashed


def verify_password(password: str, stored_hash: str | None) -> bool:
    stored = stored_hash or ""
    if not stored:
        return False
    try:
        return get_hasher().verify(stored, password)
    except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
        return False
