"""FastAPI dependencies (composition root): database handle and task repository."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.application.interfaces.repositories import ITaskRepository
from app.core.config import get_settings
from app.domain.exceptions import TaskTreeException
from app.infrastructure.persistence.database import Database
from app.infrastructure.persistence.repositories import TaskRepository


def get_database(request: Request) -> Database:
    """Return the Database handle created by the application lifespan."""
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise TaskTreeException("Database is not initialised", "SERVICE_UNAVAILABLE")
    return database


def get_task_repo(
    database: Annotated[Database, Depends(get_database)],
) -> ITaskRepository:
    """Build TaskRepository over the shared Database (one transaction per call)."""
    settings = get_settings()
    return TaskRepository(
        database,
        enforce_transitions=settings.enforce_status_transitions,
    )
