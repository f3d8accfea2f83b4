"""Pytest configuration and fixtures for tasktree.

Each test gets its own SQLite file database (aiosqlite) under tmp_path,
so repository and API tests run without an external server.
"""

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from app.infrastructure.persistence.database import Database
from app.infrastructure.persistence.repositories import TaskRepository


@pytest.fixture
async def database(tmp_path) -> AsyncIterator[Database]:
    """Fresh database with the task table created. Disposed after the test."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'tasks.db'}")
    await db.create_schema()
    yield db
    await db.dispose()


@pytest.fixture
def repo(database: Database) -> TaskRepository:
    """Task repository enforcing status transitions on replace."""
    return TaskRepository(database)


@pytest.fixture
async def client(database: Database) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI), bound to the test database.

    ASGITransport does not run the lifespan, so the Database is placed on
    app.state directly.
    """
    from app.main import app

    app.state.database = database
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.state.database = None
