"""Domain events for the user lifecycle."""

from user_service.domain.events.base_event import DomainEvent
from user_service.domain.events.user_events import (
    UserCreated,
    UserDeleted,
    UserUpdated,
)

__all__ = ["DomainEvent", "UserCreated", "UserDeleted", "UserUpdated"]
