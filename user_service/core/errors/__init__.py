"""Core errors package.

Usage:
    from user_service.core.errors import DomainError, NotFoundError
"""

from user_service.core.errors.common_errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from user_service.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
]
