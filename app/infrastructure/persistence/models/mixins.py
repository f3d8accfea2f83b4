"""SQLAlchemy mixins and column types for common model patterns (DRY).

Provides: UtcDateTime, IntegerIdMixin, TimestampMixin.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, Integer
from sqlalchemy.engine import Dialect
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func
from sqlalchemy.types import TypeDecorator

from app.shared.utils.datetime import ensure_utc


class UtcDateTime(TypeDecorator[datetime]):
    """Timezone-aware DateTime stored as UTC.

    Backends without timezone support (SQLite) hand back naive values;
    they are read as UTC so arithmetic against aware timestamps works.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> Any:
        return ensure_utc(value)

    def process_result_value(self, value: Any, dialect: Dialect) -> datetime | None:
        return ensure_utc(value)


class IntegerIdMixin:
    """Mixin for models with a store-generated integer primary key."""

    @declared_attr
    def id(cls) -> Mapped[int]:
        return mapped_column(Integer, primary_key=True, autoincrement=True)


class TimestampMixin:
    """Mixin for creation_date and last_status_change_date (server default now)."""

    @declared_attr
    def creation_date(cls) -> Mapped[datetime]:
        return mapped_column(UtcDateTime(), server_default=func.now(), nullable=False)

    @declared_attr
    def last_status_change_date(cls) -> Mapped[datetime]:
        return mapped_column(UtcDateTime(), server_default=func.now(), nullable=False)
