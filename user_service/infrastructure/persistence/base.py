"""Declarative base for database models.

BaseModel carries the columns every row in this service has: a uuid7
primary key, created_at set on insert and a nullable updated_at that the
repository writes explicitly in its UPDATE statement.

Domain entities never inherit from this class; repositories map between
the two. The generic Uuid and DateTime types keep models portable between
PostgreSQL and SQLite.
"""

from datetime import UTC, datetime
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides:
    - id: UUID primary key (time-ordered uuid7)
    - created_at: Timestamp when record was created (UTC)
    - updated_at: Timestamp of the last update, NULL before the first one
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    # Python-side default keeps microsecond precision on every backend;
    # server_default covers rows inserted outside the ORM.
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=func.now(),
    )

    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )
