"""Base repository: generic session-bound CRUD over one ORM model."""

from typing import Any, Generic, TypeVar

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, exists, get_all, create, save and delete.

    Works inside the caller's session; committing is up to whoever opened
    the transaction. LSP: subclasses are substitutable for BaseRepository.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: int) -> ModelType | None:
        """Return a single record by primary key, or None."""
        return await self.db.get(self.model, entity_id)

    async def exists(self, entity_id: int) -> bool:
        """Return whether a record with this primary key exists."""
        model: Any = self.model
        result = await self.db.execute(select(exists().where(model.id == entity_id)))
        return bool(result.scalar())

    async def get_all(self) -> list[ModelType]:
        """Return every record in primary key order."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).order_by(model.id))
        return list(result.scalars().all())

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record; generated columns are loaded back."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def save(self, obj: ModelType) -> ModelType:
        """Flush pending changes on an attached record.

        Raises sqlalchemy.orm.exc.StaleDataError when an UPDATE finds the row
        gone, or sqlalchemy.exc.InvalidRequestError when nothing was written
        and the refresh finds it gone; callers translate both to a domain error.
        """
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete(self, obj: ModelType) -> None:
        """Delete the record."""
        await self.db.delete(obj)
        await self.db.flush()
