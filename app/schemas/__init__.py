"""Pydantic request/response schemas for the API."""

from app.schemas.health import HealthResponse
from app.schemas.task import FinishTreeRequest, TaskRequest, TaskResponse

__all__ = [
    "FinishTreeRequest",
    "HealthResponse",
    "TaskRequest",
    "TaskResponse",
]
