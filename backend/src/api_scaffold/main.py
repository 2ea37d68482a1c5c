from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from api_scaffold.api.deps import build_current_user_dependency, build_user_service_provider
from api_scaffold.api.errors import register_error_handlers
from api_scaffold.api.routers import auth, health, users
from api_scaffold.infra.db.database import Database
from api_scaffold.logging import configure_logging
from api_scaffold.services.auth import TokenService
from api_scaffold.settings import Settings, load_settings

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    active_settings = settings or load_settings()
    configure_logging(debug=active_settings.debug)

    owns_database = database is None and bool(active_settings.db_url)
    if owns_database:
        database = Database.connect(active_settings.db_url)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        logger.info("%s %s starting", active_settings.app_name, active_settings.app_version)
        yield
        if owns_database and database is not None:
            database.dispose()

    app = FastAPI(title=active_settings.app_name, version=active_settings.app_version, lifespan=lifespan)
    register_error_handlers(app, active_settings)

    tokens = TokenService.from_settings(active_settings)
    get_user_service = build_user_service_provider(database)
    get_current_user = build_current_user_dependency(tokens, get_user_service)

    app.include_router(health.build_router(active_settings))
    app.include_router(users.build_router(get_user_service, get_current_user))
    app.include_router(auth.build_router(get_user_service, tokens))

    return app
