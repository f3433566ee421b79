"""Base domain event class.

Domain events represent "things that happened" and are always named in past
tense (UserCreated, UserDeleted).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for event tracking
    - occurred_at timestamp (UTC) for event ordering

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class UserCreated(DomainEvent):
    ...     user: User
    >>>
    >>> event = UserCreated(user=user)
    >>> print(event.event_id)  # Auto-generated UUID
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    Attributes:
        event_id: Unique identifier for this event instance. Used by
            consumers for deduplication.
        occurred_at: Timestamp when the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        """Event class name, used as the message type on the wire."""
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        """Serialize the envelope fields shared by every event.

        Subclasses extend the returned dictionary with their payload.
        """
        return {
            "event_id": str(self.event_id),
            "event_type": self.event_type,
            "occurred_at": self.occurred_at.isoformat(),
        }
