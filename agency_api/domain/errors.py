"""Error taxonomy shared by services and routers."""
from __future__ import annotations


class AccountError(Exception):
    """Base class for account and profile workflow errors."""

    default_message = "Account error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingFields(AccountError):
    """Raised when a required field is absent or empty."""

    default_message = "Missing fields"


class InvalidRole(AccountError):
    """Raised when a role name does not match any seeded role."""

    default_message = "Invalid role"


class DuplicateEmail(AccountError):
    """Raised when the store reports that the email is already taken."""

    default_message = "Email already registered"


class NoUpdatableFields(AccountError):
    default_message = "No updatable fields"


class NotFound(AccountError):
    default_message = "User not found"


class DuplicateProfile(AccountError):
    """Raised when the account already owns a profile of the same kind."""

    default_message = "Profile already exists for this user"


class StoreFailure(AccountError):
    """Any storage fault not otherwise classified; keeps the driver message."""

    default_message = "Storage failure"


class HashFailure(AccountError):
    default_message = "Password hashing failed"


def store_failure(exc: BaseException) -> StoreFailure:
    """Wrap a driver/ORM exception, keeping the driver's own diagnostic text."""
    original = getattr(exc, "orig", None) or exc
    return StoreFailure(str(original))


def is_unique_violation(exc: BaseException, column: str) -> bool:
    """True when an IntegrityError reports a uniqueness conflict on ``column``."""
    message = str(getattr(exc, "orig", None) or exc).lower()
    if "unique" not in message and "duplicate" not in message:
        return False
    return column.lower() in message
