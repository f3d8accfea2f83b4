"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs or domain types only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.task import TaskResult
    from app.domain.entities.task import TaskEntity


class ITaskRepository(Protocol):
    """Protocol for the task hierarchy repository (DIP).

    Every failing call raises one of TaskNotFoundException,
    BadTaskException, TaskHasChildrenException or TaskUnfinishableException.
    """

    async def list_all(self) -> list[TaskResult]:
        """Return the full forest: every root task with its subtasks attached."""

    async def get(self, task_id: int) -> TaskResult:
        """Return the task with its whole subtree. Raises TaskNotFoundException."""

    async def create(self, task: TaskEntity) -> TaskResult:
        """Insert a task (caller id ignored, path computed) and return it without subtasks."""

    async def replace(self, task_id: int, task: TaskEntity) -> None:
        """Full replace of a task; path recomputed from its parent."""

    async def delete(self, task_id: int) -> None:
        """Delete a leaf task. Raises TaskHasChildrenException for non-leaves."""

    async def finish_subtree(
        self, task_id: int, completion_date: datetime | None, *, declared_id: int | None
    ) -> None:
        """Atomically complete a task and all of its descendants."""
