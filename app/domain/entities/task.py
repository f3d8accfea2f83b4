"""Task domain entity.

Represents a task as supplied by a caller for create/replace, independent
of persistence. The repository owns id, path and creation date.
"""

from dataclasses import dataclass
from datetime import datetime

from app.domain.enums import TaskStatus
from app.domain.exceptions import BadTaskException


@dataclass
class TaskEntity:
    """Domain entity for a task write (SRP: business rules separate from persistence).

    Validation runs on construction: non-negative time accumulators, no
    self-parenting, and completion_date set iff status is COMPLETED.
    """

    id: int | None = None
    parent_id: int | None = None
    name: str = ""
    details: str = ""
    assignees: str = ""
    status: TaskStatus = TaskStatus.NOT_STARTED
    creation_date: datetime | None = None
    last_status_change_date: datetime | None = None
    planned_time: int = 0
    actual_time: int = 0
    completion_date: datetime | None = None

    def __post_init__(self) -> None:
        self.status = TaskStatus(self.status)
        self.name = self.name or ""
        self.details = self.details or ""
        self.assignees = self.assignees or ""
        self.validate()

    def validate(self) -> None:
        """Validate task business rules. Raises BadTaskException if invalid."""
        if self.planned_time < 0:
            raise BadTaskException("Planned time can't be negative", field="planned_time")
        if self.actual_time < 0:
            raise BadTaskException("Actual time can't be negative", field="actual_time")
        if self.id is not None and self.parent_id == self.id:
            raise BadTaskException("A task can't be its own parent", field="parent_id")
        if self.is_completed() and self.completion_date is None:
            raise BadTaskException(
                "A completed task needs a completion date", field="completion_date"
            )
        if not self.is_completed() and self.completion_date is not None:
            raise BadTaskException(
                "Only completed tasks carry a completion date", field="completion_date"
            )

    def is_root(self) -> bool:
        return self.parent_id is None

    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED
