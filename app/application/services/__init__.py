"""Application services: status transition policy and tree assembly."""

from app.application.services.status_transition_policy import (
    StatusTransitionPolicy,
    accrued_time_ms,
    allowed_next_statuses,
    is_valid_transition,
)
from app.application.services.tree_assembler import (
    build_forest,
    build_subtree,
    count_nodes,
)

__all__ = [
    "StatusTransitionPolicy",
    "accrued_time_ms",
    "allowed_next_statuses",
    "build_forest",
    "build_subtree",
    "count_nodes",
    "is_valid_transition",
]
