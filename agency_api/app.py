from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from agency_api.core.config import Settings, get_settings
from agency_api.core.logging import configure_logging
from agency_api.core.middleware import RequestTimeoutMiddleware
from agency_api.db.create_tables import init_database
from agency_api.db.session import Database
from agency_api.repositories.sql_repository import SQLRepository
from agency_api.routers import pages as pages_router
from agency_api.routers import profiles as profiles_router
from agency_api.routers import users as users_router
from agency_api.routers.errors import body_validation_handler
from agency_api.services.account_service import AccountService
from agency_api.services.profile_service import ProfileService
from agency_api.services.role_registry import RoleRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the store (schema + role seed) at startup, close it at shutdown."""
    database: Database = app.state.database
    logger.info("Opening database %s", database.url)
    database.open()
    init_database(database)
    yield
    logger.info("Closing database")
    database.close()


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``--factory``) and tests."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="FootballAgentSL API", lifespan=lifespan)
    app.add_middleware(RequestTimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)
    app.add_exception_handler(RequestValidationError, body_validation_handler)

    database = database or Database(settings.database_url)
    repository = SQLRepository(database)
    role_registry = RoleRegistry(repository)
    app.state.settings = settings
    app.state.database = database
    app.state.role_registry = role_registry
    app.state.account_service = AccountService(repository, role_registry)
    app.state.profile_service = ProfileService(repository)

    app.include_router(pages_router.router)
    app.include_router(users_router.router)
    app.include_router(profiles_router.router)
    return app


app = create_app()
