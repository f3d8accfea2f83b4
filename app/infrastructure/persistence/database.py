"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

A Database instance owns one engine and its session factory. It is built
from settings at application startup, kept on app.state, and handed to
repositories explicitly; nothing here is module-global.

Each repository call runs in its own session via Database.transaction():
the session commits when the block exits normally and rolls back on any
exception, so a failed multi-row write leaves storage unchanged.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


class Database:
    """Store handle: async engine plus session factory."""

    def __init__(self, url: str, *, echo: bool = False) -> None:
        connect_args: dict[str, Any] = {}
        engine_kwargs: dict[str, Any] = {"echo": echo}
        if url.startswith("sqlite"):
            # aiosqlite runs the connection on a worker thread.
            connect_args["check_same_thread"] = False
        else:
            engine_kwargs.update(pool_pre_ping=True, pool_recycle=3600)
        self.url = url
        self.engine: AsyncEngine = create_async_engine(
            url, connect_args=connect_args, **engine_kwargs
        )
        self.sessionmaker: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a Database from application settings."""
        return cls(settings.database_url, echo=settings.database_echo)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session without an explicit transaction (reads)."""
        async with self.sessionmaker() as session:
            yield session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncSession]:
        """Yield a session inside a transaction; commit on exit, rollback on error."""
        async with self.sessionmaker() as session:
            async with session.begin():
                yield session

    async def create_schema(self) -> None:
        """Create missing tables for every model registered on Base."""
        # Register models on Base.metadata before create_all.
        from app.infrastructure.persistence import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured url=%s", self.engine.url.render_as_string())

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()
        logger.info("SQL engine disposed")
