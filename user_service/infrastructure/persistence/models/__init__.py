"""Database models."""

from user_service.infrastructure.persistence.models.user import UserModel

__all__ = ["UserModel"]
