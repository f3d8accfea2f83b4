"""Task record store: flat, session-bound access to task rows.

Knows nothing about trees beyond the materialized path column; subtree
selection is a single prefix scan over it.
"""

from __future__ import annotations

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.value_objects.core import TaskPath
from app.infrastructure.persistence.models.task import Task
from app.infrastructure.persistence.repositories.base import BaseRepository


class TaskRecordStore(BaseRepository[Task]):
    """CRUD and scans over the task table inside one session."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Task)

    async def scan_subtree(self, prefix: str) -> list[Task]:
        """Return every row whose path starts with prefix, in id order.

        With prefix = TaskPath(node.path).subtree_prefix(node.id) this is
        exactly the strict descendants of node.
        """
        result = await self.db.execute(
            select(Task).where(Task.path.startswith(prefix)).order_by(Task.id)
        )
        return list(result.scalars().all())

    async def scan_children(self, parent_id: int) -> list[Task]:
        """Return the direct children of parent_id, in id order."""
        result = await self.db.execute(
            select(Task).where(Task.parent_id == parent_id).order_by(Task.id)
        )
        return list(result.scalars().all())

    async def has_children(self, parent_id: int) -> bool:
        result = await self.db.execute(select(exists().where(Task.parent_id == parent_id)))
        return bool(result.scalar())

    async def rewrite_subtree_paths(self, old_prefix: str, new_prefix: str) -> int:
        """Move every row under old_prefix to new_prefix. Returns the number of rows changed."""
        rows = await self.scan_subtree(old_prefix)
        for row in rows:
            row.path = TaskPath(row.path).rebase(old_prefix, new_prefix).value
        if rows:
            await self.db.flush()
        return len(rows)
