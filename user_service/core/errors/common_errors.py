"""Common error classes used across all layers.

Error Types:
- ValidationError: Input validation failures (field-tagged)
- NotFoundError: Resource not found
- ConflictError: Uniqueness constraint violations

Usage:
    return Failure(error=NotFoundError(
        code=ErrorCode.USER_NOT_FOUND,
        message="user does not exist",
        resource_type="User",
        resource_id=user_id,
    ))
"""

from dataclasses import dataclass

from user_service.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (User).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (uniqueness constraint violated).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (email).
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None
