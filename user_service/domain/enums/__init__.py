"""Domain enums."""

from user_service.domain.enums.update_user_field import UpdateUserField

__all__ = ["UpdateUserField"]
