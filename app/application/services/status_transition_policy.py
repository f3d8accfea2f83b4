"""Status transition policy: which task status changes are structurally legal."""

from __future__ import annotations

from datetime import datetime, timedelta

from app.domain.enums import TaskStatus
from app.domain.exceptions import InvalidStatusTransitionException
from app.shared.utils.datetime import ensure_utc

# next status -> statuses a task may come from. Nothing moves back to NOT_STARTED.
_ALLOWED_PREDECESSORS: dict[TaskStatus, frozenset[TaskStatus]] = {
    TaskStatus.NOT_STARTED: frozenset(),
    TaskStatus.IN_PROGRESS: frozenset({TaskStatus.SUSPENDED, TaskStatus.NOT_STARTED}),
    TaskStatus.SUSPENDED: frozenset({TaskStatus.IN_PROGRESS}),
    TaskStatus.COMPLETED: frozenset({TaskStatus.IN_PROGRESS}),
}


def is_valid_transition(current: TaskStatus, requested: TaskStatus) -> bool:
    """Return True if a task in current may be moved to requested.

    Staying in the same status is always allowed.
    """
    current = TaskStatus(current)
    requested = TaskStatus(requested)
    return requested == current or current in _ALLOWED_PREDECESSORS[requested]


def allowed_next_statuses(current: TaskStatus) -> list[TaskStatus]:
    """Return every status reachable from current in one step (current included)."""
    return [s for s in TaskStatus if is_valid_transition(current, s)]


def accrued_time_ms(since: datetime, until: datetime) -> int:
    """Milliseconds spent between since and until, never negative.

    Both datetimes are normalised to UTC first so naive values read back
    from SQLite compare with aware caller timestamps.
    """
    delta = ensure_utc(until) - ensure_utc(since)
    return max(0, int(delta / timedelta(milliseconds=1)))


class StatusTransitionPolicy:
    """Validates single-task status changes (implements IStatusTransitionPolicy).

    Decides structural legality only; whether a whole subtree may be
    completed is decided by the repository.
    """

    def validate(
        self, task_id: int | None, current: TaskStatus, requested: TaskStatus
    ) -> None:
        """Raise InvalidStatusTransitionException if current -> requested is not allowed."""
        if not is_valid_transition(current, requested):
            raise InvalidStatusTransitionException(
                task_id, TaskStatus(current), TaskStatus(requested)
            )
