"""User lifecycle events.

One event per mutation kind. Each carries a snapshot of the affected user
as it was when the event was built.

Events:
    UserCreated: A user was stored.
    UserUpdated: Fields of a user were rewritten.
    UserDeleted: A user was removed (carries the pre-deletion state).
"""

from dataclasses import dataclass
from typing import Any

from user_service.domain.entities.user import User
from user_service.domain.enums.update_user_field import UpdateUserField
from user_service.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class UserCreated(DomainEvent):
    """User was created.

    Attributes:
        user: Created user including server-assigned id and created_at.
    """

    user: User

    def to_dict(self) -> dict[str, Any]:
        """Serialize event for publishing."""
        data = DomainEvent.to_dict(self)
        data["user"] = self.user.to_dict()
        return data


@dataclass(frozen=True, kw_only=True, slots=True)
class UserUpdated(DomainEvent):
    """User was updated.

    Attributes:
        user: User after the update, including the new updated_at.
        update_fields: Field mask that was applied.
    """

    user: User
    update_fields: frozenset[UpdateUserField]

    def to_dict(self) -> dict[str, Any]:
        """Serialize event for publishing (fields sorted by wire value)."""
        data = DomainEvent.to_dict(self)
        data["user"] = self.user.to_dict()
        data["update_fields"] = [
            field.name for field in sorted(self.update_fields, key=lambda f: f.value)
        ]
        return data


@dataclass(frozen=True, kw_only=True, slots=True)
class UserDeleted(DomainEvent):
    """User was deleted.

    Attributes:
        user: User as it was immediately before deletion.
    """

    user: User

    def to_dict(self) -> dict[str, Any]:
        """Serialize event for publishing."""
        data = DomainEvent.to_dict(self)
        data["user"] = self.user.to_dict()
        return data
