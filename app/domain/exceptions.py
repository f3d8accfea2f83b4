"""Domain exceptions for the task hierarchy.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class TaskTreeException(Exception):
    """Base exception for all task hierarchy errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, task_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class TaskNotFoundException(TaskTreeException):
    """Raised when a referenced task id does not exist."""

    def __init__(self, task_id: int) -> None:
        """Initialize with the missing task identifier.

        Args:
            task_id: The task ID that was not found.
        """
        super().__init__(
            f"No task found with id {task_id}",
            "TASK_NOT_FOUND",
            {"task_id": task_id},
        )


class BadTaskException(TaskTreeException):
    """Raised when caller-supplied identifiers or timestamps are inconsistent or missing."""

    def __init__(
        self,
        message: str = "Task payload is inconsistent",
        field: str | None = None,
        error_code: str = "BAD_TASK",
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with message and optional offending field.

        Args:
            message: Description of the inconsistency.
            field: Optional field that failed (e.g. 'id', 'completion_date').
            error_code: Machine-readable code; subclasses narrow it.
            details: Optional extra context merged with field.
        """
        merged = dict(details or {})
        if field:
            merged["field"] = field
        super().__init__(message, error_code, merged)


class InvalidStatusTransitionException(BadTaskException):
    """Raised when a status change is not allowed by the transition policy."""

    def __init__(self, task_id: int | None, current: Any, requested: Any) -> None:
        """Initialize with the task and the rejected transition.

        Args:
            task_id: Task whose status change was rejected (None for new tasks).
            current: Stored status.
            requested: Requested status.
        """
        super().__init__(
            f"Task {task_id} can't move from {current.name} to {requested.name}",
            field="status",
            error_code="INVALID_STATUS_TRANSITION",
            details={
                "task_id": task_id,
                "current": current.name,
                "requested": requested.name,
            },
        )


class TaskHasChildrenException(TaskTreeException):
    """Raised when deleting a task that still has subtasks."""

    def __init__(self, task_id: int) -> None:
        super().__init__(
            f"Task {task_id} isn't a terminal node and can't be deleted",
            "TASK_HAS_CHILDREN",
            {"task_id": task_id},
        )


class TaskUnfinishableException(TaskTreeException):
    """Raised when a subtree contains a task that is not started or suspended."""

    def __init__(self, task_id: int, blocking_task_ids: list[int] | None = None) -> None:
        """Initialize with the subtree root and the tasks blocking completion.

        Args:
            task_id: Root of the subtree that can't be completed.
            blocking_task_ids: Tasks whose status prevents completion.
        """
        super().__init__(
            f"Task with id {task_id} can't be recursively completed",
            "TASK_UNFINISHABLE",
            {"task_id": task_id, "blocking_task_ids": blocking_task_ids or []},
        )
