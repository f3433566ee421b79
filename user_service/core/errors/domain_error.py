"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for every error in the service. Errors flow
through the system as data (inside Failure), not as exceptions.

Architecture:
- Base class for all error types (core, domain, infrastructure)
- Does NOT inherit from Exception (not raised, returned in Result)
- Uses dataclass inheritance (NOT Protocol/ABC)

Usage:
    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass, replace
from typing import Any, Self

from user_service.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"

    def with_context(self, context: str) -> Self:
        """Return a copy of this error with its message prefixed by context.

        The error keeps its type and code, so callers can still match on
        the kind of failure after it has been wrapped.

        Args:
            context: Text describing what the caller was doing.

        Returns:
            Same error type with message ``"{context}: {message}"``.
        """
        return replace(self, message=f"{context}: {self.message}")
