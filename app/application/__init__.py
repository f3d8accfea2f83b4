"""Application layer: interfaces, DTOs and services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (task repository).
"""

from app.application.dtos import TaskResult
from app.application.interfaces import IStatusTransitionPolicy, ITaskRepository
from app.application.services import StatusTransitionPolicy, build_forest, build_subtree

__all__ = [
    "IStatusTransitionPolicy",
    "ITaskRepository",
    "StatusTransitionPolicy",
    "TaskResult",
    "build_forest",
    "build_subtree",
]
