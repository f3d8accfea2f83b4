"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import TaskEntity
from app.domain.enums import TaskStatus
from app.domain.exceptions import (
    BadTaskException,
    InvalidStatusTransitionException,
    TaskHasChildrenException,
    TaskNotFoundException,
    TaskTreeException,
    TaskUnfinishableException,
)
from app.domain.value_objects import TaskPath, encode_path, is_descendant_path

__all__ = [
    # Entities
    "TaskEntity",
    # Enums
    "TaskStatus",
    # Exceptions
    "BadTaskException",
    "InvalidStatusTransitionException",
    "TaskHasChildrenException",
    "TaskNotFoundException",
    "TaskTreeException",
    "TaskUnfinishableException",
    # Value objects
    "TaskPath",
    "encode_path",
    "is_descendant_path",
]
