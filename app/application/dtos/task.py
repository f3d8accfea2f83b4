"""DTOs for tasks (no dependency on ORM)."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime

from app.domain.enums import TaskStatus


@dataclass(frozen=True)
class TaskResult:
    """Persisted task as returned by the repository.

    subtasks is derived by the tree assembler and never stored; it is
    empty for results of create and for flat scans.
    """

    id: int
    parent_id: int | None
    path: str
    name: str
    details: str
    assignees: str
    status: TaskStatus
    creation_date: datetime
    last_status_change_date: datetime
    planned_time: int
    actual_time: int
    completion_date: datetime | None
    subtasks: tuple[TaskResult, ...] = ()

    def iter_tree(self) -> Iterator[TaskResult]:
        """Yield this task and every descendant, depth first, parents before children."""
        stack: list[TaskResult] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.subtasks))
