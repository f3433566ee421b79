"""Domain entities."""

from user_service.domain.entities.user import User

__all__ = ["User"]
