"""In-memory publisher implementing EventPublisherProtocol.

Keeps published events in process memory, one list per topic. Used when
``EVENT_PUBLISHER=memory`` (local runs without Redis) and in tests that
need to inspect what was published.
"""

from collections import defaultdict

from user_service.core.errors import DomainError
from user_service.core.result import Result, Success
from user_service.domain.events.base_event import DomainEvent
from user_service.domain.protocols.event_publisher_protocol import PublishReceipt


class InMemoryEventPublisher:
    """In-memory publisher recording (topic, event) pairs.

    Offsets increase by one per topic, starting at 0.

    Example:
        >>> publisher = InMemoryEventPublisher()
        >>> await publisher.publish("user-created_v1", UserCreated(user=user))
        >>> publisher.events_for("user-created_v1")
        [UserCreated(...)]
    """

    def __init__(self) -> None:
        self._topics: defaultdict[str, list[DomainEvent]] = defaultdict(list)

    async def publish(
        self, topic: str, event: DomainEvent
    ) -> Result[PublishReceipt, DomainError]:
        """Record an event under its topic."""
        events = self._topics[topic]
        events.append(event)
        return Success(
            value=PublishReceipt(topic=topic, partition=0, offset=str(len(events) - 1))
        )

    def events_for(self, topic: str) -> list[DomainEvent]:
        """Return the events published to a topic, oldest first."""
        return list(self._topics.get(topic, []))

    @property
    def published(self) -> list[tuple[str, DomainEvent]]:
        """All (topic, event) pairs, grouped by topic."""
        return [
            (topic, event)
            for topic, events in self._topics.items()
            for event in events
        ]

    def clear(self) -> None:
        """Forget every recorded event."""
        self._topics.clear()

    async def close(self) -> None:
        """Nothing to release."""
