from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the agency_api package is importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import select  # noqa: E402

from agency_api.app import create_app  # noqa: E402
from agency_api.core import config as core_config  # noqa: E402
from agency_api.db.create_tables import init_database  # noqa: E402
from agency_api.db.session import Database  # noqa: E402
from agency_api.repositories.sql_repository import SQLRepository  # noqa: E402
from agency_api.services.account_service import AccountService  # noqa: E402
from agency_api.services.profile_service import ProfileService  # noqa: E402


@pytest.fixture(autouse=True)
def settings_env(tmp_path, monkeypatch):
    """Temporary SQLite file plus a cheap Argon2 cost; resets the settings cache."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("PASSWORD_HASH_TIME_COST", "1")
    monkeypatch.setenv("PASSWORD_HASH_MEMORY_COST", "1024")
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "0")
    core_config.get_settings.cache_clear()

    yield core_config.get_settings()

    core_config.get_settings.cache_clear()


@pytest.fixture()
def database(settings_env):
    db = Database(settings_env.database_url).open()
    init_database(db)
    yield db
    db.close()


@pytest.fixture()
def repo(database):
    return SQLRepository(database)


@pytest.fixture()
def accounts(repo):
    return AccountService(repo)


@pytest.fixture()
def profiles(repo):
    return ProfileService(repo)


@pytest.fixture()
def client(settings_env):
    app = create_app(settings_env, Database(settings_env.database_url))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def fetch_row(database):
    """Load a raw row (password_hash included) by primary key or by a column value."""
    def _fetch(model, **filters):
        with database.session() as session:
            return session.execute(select(model).filter_by(**filters)).scalar_one_or_none()

    return _fetch
