"""Application lifespan: startup and shutdown.

Wires logging, the Database handle and optional schema creation on
startup, and disposes the engine on shutdown.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.persistence.database import Database
from app.shared.telemetry.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, Database handle on app.state.database, tables
    created when database_create_schema is set. Shutdown: engine dispose.
    A Database already placed on app.state (tests) is reused.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()
    database = getattr(app.state, "database", None)
    if database is None:
        database = Database.from_settings(settings)
        app.state.database = database
    if settings.database_create_schema:
        await database.create_schema()
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    await database.dispose()
    app.state.database = None
