"""EventPublisherProtocol definition for topic-based event publishing.

Publishing hands a serialized domain event to a message transport under a
named topic. The transport acknowledges with a receipt identifying where
the message landed.

Architecture:
    - Protocol-based (structural typing)
    - Returns Result, never raises for transport failures
    - Payload serialization is owned by the adapter (event.to_dict())

Usage:
    >>> match await publisher.publish(USER_CREATED_TOPIC, UserCreated(user=user)):
    ...     case Success(value=receipt):
    ...         ...
    ...     case Failure(error=error):
    ...         logger.error("unable to produce message", error_message=error.message)
"""

from dataclasses import dataclass
from typing import Protocol

from user_service.core.errors import DomainError
from user_service.core.result import Result
from user_service.domain.events.base_event import DomainEvent


@dataclass(frozen=True, slots=True, kw_only=True)
class PublishReceipt:
    """Acknowledgement of a published message.

    Attributes:
        topic: Topic the message was written to.
        partition: Partition within the topic.
        offset: Transport-specific position of the message.
    """

    topic: str
    partition: int
    offset: str


class EventPublisherProtocol(Protocol):
    """Protocol for topic-based event publishers."""

    async def publish(
        self, topic: str, event: DomainEvent
    ) -> Result[PublishReceipt, DomainError]:
        """Publish an event to a topic.

        Args:
            topic: Destination topic name.
            event: Domain event to serialize and send.

        Returns:
            Success(PublishReceipt) once the transport accepted the message.
            Failure(PublishError) if the transport rejected or failed.
        """
        ...

    async def close(self) -> None:
        """Release transport resources (connections, buffers)."""
        ...
