"""Task repository: CRUD, delete guard and cascading completion over the task tree."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.exc import InvalidRequestError
from sqlalchemy.orm.exc import StaleDataError

from app.application.dtos.task import TaskResult
from app.application.interfaces.services import IStatusTransitionPolicy
from app.application.services.status_transition_policy import (
    StatusTransitionPolicy,
    accrued_time_ms,
)
from app.application.services.tree_assembler import build_forest, build_subtree
from app.domain.entities.task import TaskEntity
from app.domain.enums import TaskStatus
from app.domain.exceptions import (
    BadTaskException,
    TaskHasChildrenException,
    TaskNotFoundException,
    TaskUnfinishableException,
)
from app.domain.value_objects.core import TaskPath
from app.infrastructure.persistence.database import Database
from app.infrastructure.persistence.models.task import Task
from app.infrastructure.persistence.repositories.task_record_store import TaskRecordStore
from app.shared.utils.datetime import ensure_utc, utc_now

logger = logging.getLogger(__name__)


def _to_result(t: Task) -> TaskResult:
    """Map Task ORM to TaskResult DTO (no subtasks)."""
    return TaskResult(
        id=t.id,
        parent_id=t.parent_id,
        path=t.path,
        name=t.name,
        details=t.details,
        assignees=t.assignees,
        status=TaskStatus(t.status),
        creation_date=t.creation_date,
        last_status_change_date=t.last_status_change_date,
        planned_time=t.planned_time,
        actual_time=t.actual_time,
        completion_date=t.completion_date,
    )


class TaskRepository:
    """Task hierarchy repository. Implements ITaskRepository.

    Every public call is one unit of work in its own transaction, opened
    on the Database handle given at construction.
    """

    def __init__(
        self,
        database: Database,
        *,
        policy: IStatusTransitionPolicy | None = None,
        enforce_transitions: bool = True,
    ) -> None:
        self.database = database
        self.policy = policy or StatusTransitionPolicy()
        self.enforce_transitions = enforce_transitions

    async def _parent_path(self, store: TaskRecordStore, parent_id: int | None) -> TaskPath:
        """Return the path for a child of parent_id, read from the parent's stored row."""
        if parent_id is None:
            return TaskPath.root()
        parent = await store.get_by_id(parent_id)
        if parent is None:
            raise BadTaskException(
                f"Parent task {parent_id} does not exist", field="parent_id"
            )
        return TaskPath.for_child_of(parent.path, parent.id)

    async def list_all(self) -> list[TaskResult]:
        """Return the full forest from a single scan of all rows."""
        async with self.database.session() as session:
            rows = await TaskRecordStore(session).get_all()
        logger.debug("Loaded %d tasks for forest", len(rows))
        return build_forest([_to_result(r) for r in rows])

    async def get(self, task_id: int) -> TaskResult:
        """Return the task with its full subtree attached."""
        async with self.database.session() as session:
            store = TaskRecordStore(session)
            row = await store.get_by_id(task_id)
            if row is None:
                raise TaskNotFoundException(task_id)
            descendants = await store.scan_subtree(TaskPath(row.path).subtree_prefix(row.id))
        logger.debug("Loaded task %s with %d descendants", task_id, len(descendants))
        return build_subtree(_to_result(row), [_to_result(d) for d in descendants])

    async def create(self, task: TaskEntity) -> TaskResult:
        """Insert a new task; any caller-supplied id is ignored.

        Raises:
            BadTaskException: If the declared parent does not exist.
        """
        async with self.database.transaction() as session:
            store = TaskRecordStore(session)
            path = await self._parent_path(store, task.parent_id)
            now = utc_now()
            row = Task(
                parent_id=task.parent_id,
                path=path.value,
                name=task.name,
                details=task.details,
                assignees=task.assignees,
                status=task.status.value,
                creation_date=now,
                last_status_change_date=ensure_utc(task.last_status_change_date) or now,
                planned_time=task.planned_time,
                actual_time=task.actual_time,
                completion_date=ensure_utc(task.completion_date),
            )
            row = await store.create(row)
            result = _to_result(row)
        logger.info("Task created id=%s parent_id=%s path=%s", result.id, result.parent_id, result.path)
        return result

    async def replace(self, task_id: int, task: TaskEntity) -> None:
        """Full replace of a stored task; creation_date is kept.

        The path is recomputed from the declared parent's stored path. When
        the parent changes, descendants' paths move with the task in the
        same transaction.

        Raises:
            BadTaskException: id mismatch, missing parent, or parent inside the task's subtree.
            InvalidStatusTransitionException: status change rejected by the policy
                (only when enforce_transitions is on).
            TaskNotFoundException: task absent, or deleted while this write was in flight
                (a stale UPDATE, or a refresh that finds the row gone).
        """
        if task.id != task_id:
            raise BadTaskException(
                f"Task id {task.id} does not match target {task_id}", field="id"
            )
        try:
            async with self.database.transaction() as session:
                store = TaskRecordStore(session)
                row = await store.get_by_id(task_id)
                if row is None:
                    raise TaskNotFoundException(task_id)
                current = TaskStatus(row.status)
                if self.enforce_transitions:
                    self.policy.validate(task_id, current, task.status)

                path = await self._parent_path(store, task.parent_id)
                if path.has_ancestor(task_id):
                    raise BadTaskException(
                        f"Task {task_id} can't be moved under its own descendant {task.parent_id}",
                        field="parent_id",
                    )
                old_prefix = TaskPath(row.path).subtree_prefix(task_id)
                new_prefix = path.subtree_prefix(task_id)
                if old_prefix != new_prefix:
                    moved = await store.rewrite_subtree_paths(old_prefix, new_prefix)
                    logger.info(
                        "Task %s moved from %s to %s with %d descendants",
                        task_id,
                        row.path,
                        path.value,
                        moved,
                    )

                if task.last_status_change_date is not None:
                    last_change = ensure_utc(task.last_status_change_date)
                elif task.status != current:
                    last_change = utc_now()
                else:
                    last_change = row.last_status_change_date

                row.parent_id = task.parent_id
                row.path = path.value
                row.name = task.name
                row.details = task.details
                row.assignees = task.assignees
                row.status = task.status.value
                row.last_status_change_date = last_change
                row.planned_time = task.planned_time
                row.actual_time = task.actual_time
                row.completion_date = ensure_utc(task.completion_date)
                await store.save(row)
        except (StaleDataError, InvalidRequestError):
            async with self.database.session() as session:
                still_there = await TaskRecordStore(session).exists(task_id)
            if not still_there:
                raise TaskNotFoundException(task_id) from None
            raise
        logger.debug("Task replaced id=%s status=%s", task_id, task.status.name)

    async def delete(self, task_id: int) -> None:
        """Delete a leaf task.

        Raises:
            TaskNotFoundException: If the task does not exist.
            TaskHasChildrenException: If any task has it as parent.
        """
        async with self.database.transaction() as session:
            store = TaskRecordStore(session)
            row = await store.get_by_id(task_id)
            if row is None:
                raise TaskNotFoundException(task_id)
            if await store.has_children(task_id):
                logger.warning("Refusing to delete task %s: it has subtasks", task_id)
                raise TaskHasChildrenException(task_id)
            await store.delete(row)
        logger.info("Task deleted id=%s", task_id)

    async def finish_subtree(
        self,
        task_id: int,
        completion_date: datetime | None,
        *,
        declared_id: int | None,
    ) -> None:
        """Complete task_id and every descendant in one transaction.

        The subtree is finishable only if every node (target included) is
        IN_PROGRESS or COMPLETED. Nodes already COMPLETED are left alone;
        IN_PROGRESS nodes accrue (completion_date - last_status_change_date)
        into actual_time. Nothing is written unless every node qualifies.

        Args:
            task_id: Subtree root.
            completion_date: Completion timestamp applied to every node.
            declared_id: Id stated by the caller alongside the timestamp; must be
                present and equal task_id.

        Raises:
            BadTaskException: completion_date missing, declared_id missing or mismatched.
            TaskNotFoundException: task_id does not exist.
            TaskUnfinishableException: a node is NOT_STARTED or SUSPENDED.
        """
        if completion_date is None:
            raise BadTaskException("A completion date is required", field="completion_date")
        if declared_id is None:
            raise BadTaskException(f"Task id is required to finish task {task_id}", field="id")
        if declared_id != task_id:
            raise BadTaskException(
                f"Task id {declared_id} does not match target {task_id}", field="id"
            )
        at = ensure_utc(completion_date)

        async with self.database.transaction() as session:
            store = TaskRecordStore(session)
            root = await store.get_by_id(task_id)
            if root is None:
                raise TaskNotFoundException(task_id)
            subtree = [root, *await store.scan_subtree(TaskPath(root.path).subtree_prefix(task_id))]

            blocking = [r.id for r in subtree if not TaskStatus(r.status).is_finishable]
            if blocking:
                logger.warning(
                    "Task %s subtree can't be completed; blocked by %s", task_id, blocking
                )
                raise TaskUnfinishableException(task_id, blocking)

            completed = 0
            for row in subtree:
                if row.status == TaskStatus.COMPLETED:
                    continue
                if row.status == TaskStatus.IN_PROGRESS:
                    row.actual_time += accrued_time_ms(row.last_status_change_date, at)
                row.last_status_change_date = at
                row.completion_date = at
                row.status = TaskStatus.COMPLETED.value
                completed += 1
            await session.flush()
        logger.info(
            "Task %s subtree completed at %s: %d of %d tasks changed",
            task_id,
            at.isoformat(),
            completed,
            len(subtree),
        )
