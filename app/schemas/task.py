"""Task API schemas. JSON uses camelCase names (parentId, completionDate, ...)."""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.application.dtos.task import TaskResult
from app.domain.entities.task import TaskEntity
from app.domain.enums import TaskStatus


class TaskRequest(BaseModel):
    """Request body for create and full replace.

    On create, id is ignored. subtasks is accepted and ignored: the
    hierarchy is only ever changed through parentId.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int | None = None
    parent_id: int | None = None
    name: str | None = Field(default="", max_length=10_000)
    details: str | None = Field(default="", max_length=100_000)
    assignees: str | None = Field(default="", max_length=10_000)
    status: TaskStatus = TaskStatus.NOT_STARTED
    creation_date: datetime | None = None
    last_status_change_date: datetime | None = None
    planned_time: int = Field(default=0, ge=0)
    actual_time: int = Field(default=0, ge=0)
    completion_date: datetime | None = None
    subtasks: list[Any] = Field(default_factory=list)

    def to_entity(self, *, include_id: bool = True) -> TaskEntity:
        """Build the domain entity; include_id=False drops the body id (create)."""
        return TaskEntity(
            id=self.id if include_id else None,
            parent_id=self.parent_id,
            name=self.name or "",
            details=self.details or "",
            assignees=self.assignees or "",
            status=self.status,
            creation_date=self.creation_date,
            last_status_change_date=self.last_status_change_date,
            planned_time=self.planned_time,
            actual_time=self.actual_time,
            completion_date=self.completion_date,
        )


class FinishTreeRequest(BaseModel):
    """Request body for PATCH /tasks/finish-tree/{id}. Other task fields are ignored."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int | None = None
    completion_date: datetime | None = None


class TaskResponse(BaseModel):
    """Task with its subtasks (empty for create responses)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

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
    subtasks: list[TaskResponse] = Field(default_factory=list)

    @classmethod
    def from_result(cls, task: TaskResult) -> TaskResponse:
        """Build the response tree from a repository result (subtasks included)."""
        return cls.model_validate(asdict(task))
