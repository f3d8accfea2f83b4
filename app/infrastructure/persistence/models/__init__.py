"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.mixins import (
    IntegerIdMixin,
    TimestampMixin,
    UtcDateTime,
)
from app.infrastructure.persistence.models.task import Task

__all__ = [
    "IntegerIdMixin",
    "Task",
    "TimestampMixin",
    "UtcDateTime",
]
