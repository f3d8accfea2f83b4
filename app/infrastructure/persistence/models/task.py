"""Task ORM model. One flat row per task; the hierarchy lives in parent_id and path."""

from datetime import datetime

from sqlalchemy import BigInteger, CheckConstraint, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import TaskStatus
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    IntegerIdMixin,
    TimestampMixin,
    UtcDateTime,
)

_STATUS_VALUES = ", ".join(str(v) for v in TaskStatus.values())


class Task(IntegerIdMixin, TimestampMixin, Base):
    """Task row. Table: task.

    parent_id is not a foreign key: the repository checks that parents
    exist and refuses to delete tasks with children. path lists every
    ancestor id ('/1/4/'); subtasks are never stored.
    """

    __tablename__ = "task"

    parent_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    path: Mapped[str] = mapped_column(
        String(1024), nullable=False, default="/", server_default="/"
    )
    name: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    details: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    assignees: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    status: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=TaskStatus.NOT_STARTED.value,
        server_default=text(str(TaskStatus.NOT_STARTED.value)),
    )
    planned_time: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0, server_default=text("0")
    )
    actual_time: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0, server_default=text("0")
    )
    completion_date: Mapped[datetime | None] = mapped_column(UtcDateTime(), nullable=True)

    __table_args__ = (
        Index("ix_task_path", "path"),
        CheckConstraint(f"status IN ({_STATUS_VALUES})", name="task_status_check"),
        CheckConstraint("planned_time >= 0", name="task_planned_time_check"),
        CheckConstraint("actual_time >= 0", name="task_actual_time_check"),
        CheckConstraint(
            f"(status = {TaskStatus.COMPLETED.value} AND completion_date IS NOT NULL) "
            f"OR (status <> {TaskStatus.COMPLETED.value} AND completion_date IS NULL)",
            name="task_completion_date_check",
        ),
    )
