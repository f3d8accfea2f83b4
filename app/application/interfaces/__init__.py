"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import ITaskRepository
from app.application.interfaces.services import IStatusTransitionPolicy

__all__ = [
    "IStatusTransitionPolicy",
    "ITaskRepository",
]
