"""Domain value objects."""

from user_service.domain.value_objects.user_filters import UserFilters

__all__ = ["UserFilters"]
