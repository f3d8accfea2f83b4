"""Application DTOs: plain data passed between layers (no ORM, no HTTP)."""

from app.application.dtos.task import TaskResult

__all__ = ["TaskResult"]
