"""Domain enumerations for the task hierarchy.

Enums represent fixed sets of domain values (e.g. task status).
"""

from enum import Enum


class TaskStatus(int, Enum):
    """Task lifecycle status.

    Persisted as a small integer; values match the JSON wire format
    (0 = not started ... 3 = completed).
    """

    NOT_STARTED = 0
    IN_PROGRESS = 1
    SUSPENDED = 2
    COMPLETED = 3

    @classmethod
    def values(cls) -> list[int]:
        """Return all valid status values.

        Returns:
            List of enum integer values (e.g. for validation or CHECK constraints).
        """
        return [status.value for status in cls]

    @property
    def is_finishable(self) -> bool:
        """Whether a task in this status may take part in a cascading completion."""
        return self in (TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED)
