"""Repository adapters."""

from user_service.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = ["UserRepository"]
