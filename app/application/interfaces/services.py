"""Service interfaces (ports) for the application layer."""

from __future__ import annotations

from typing import Protocol

from app.domain.enums import TaskStatus


class IStatusTransitionPolicy(Protocol):
    """Protocol for single-task status change validation."""

    def validate(
        self, task_id: int | None, current: TaskStatus, requested: TaskStatus
    ) -> None:
        """Raise InvalidStatusTransitionException when the change is not allowed."""
