"""Infrastructure layer error types.

Infrastructure errors represent failures in external systems (database,
message transport).

Architecture:
- Infrastructure catches exceptions and maps them to DomainError subclasses
- Infrastructure errors inherit from DomainError (not Exception)
- InfrastructureErrorCode is for internal tracking and logging
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from user_service.core.errors import DomainError


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes."""

    # Database errors
    DATABASE_CONNECTION_FAILED = "database_connection_failed"
    DATABASE_CONSTRAINT_VIOLATION = "database_constraint_violation"
    DATABASE_ERROR = "database_error"

    # Message transport errors
    PUBLISH_CONNECTION_FAILED = "publish_connection_failed"
    PUBLISH_SERIALIZATION_FAILED = "publish_serialization_failed"
    PUBLISH_FAILED = "publish_failed"


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        infrastructure_code: Original infrastructure error code.
        details: Additional context.
    """

    infrastructure_code: InfrastructureErrorCode | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class DatabaseError(InfrastructureError):
    """Database-specific errors.

    Wraps SQLAlchemy exceptions so they flow as data.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        infrastructure_code: Database-specific error code.
        details: Additional context (constraint name, error type).
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class PublishError(InfrastructureError):
    """Event publication failure (always non-fatal to the caller).

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        topic: Topic the event was meant for.
        infrastructure_code: Transport-specific error code.
        details: Additional context.
    """

    topic: str
