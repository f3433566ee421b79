"""Application services."""

from user_service.application.services.user_service import UserService

__all__ = ["UserService"]
