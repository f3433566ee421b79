"""Redis Streams publisher implementing EventPublisherProtocol.

Every topic is a Redis stream. Publishing XADDs one entry per event with
two fields:

    event_type: Event class name (UserCreated, ...)
    payload:    JSON document from event.to_dict()

Consumers read the streams with XREAD / consumer groups.

Architecture:
    - Implements EventPublisherProtocol without inheritance (structural typing)
    - Transport errors are returned as Failure(PublishError), never raised
"""

import json

from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError

from user_service.core.enums import ErrorCode
from user_service.core.errors import DomainError
from user_service.core.result import Failure, Result, Success
from user_service.domain.events.base_event import DomainEvent
from user_service.domain.protocols.event_publisher_protocol import PublishReceipt
from user_service.domain.protocols.logger_protocol import LoggerProtocol
from user_service.infrastructure.errors import InfrastructureErrorCode, PublishError

STREAM_PARTITION = 0
"""Redis streams are unpartitioned; every entry reports partition 0."""


class RedisStreamEventPublisher:
    """Redis implementation of EventPublisherProtocol.

    Attributes:
        _redis: Async Redis client instance.
        _max_len: Approximate cap on entries kept per stream (None keeps all).
        _logger: Logger instance.
    """

    def __init__(
        self,
        redis_client: "Redis[bytes]",  # type: ignore[type-arg]
        logger: LoggerProtocol,
        max_len: int | None = None,
    ) -> None:
        """Initialize Redis stream publisher.

        Args:
            redis_client: Async Redis client instance.
            logger: Structured logger.
            max_len: Approximate MAXLEN per stream (None keeps all entries).
        """
        self._redis = redis_client
        self._logger = logger
        self._max_len = max_len

    async def publish(
        self, topic: str, event: DomainEvent
    ) -> Result[PublishReceipt, DomainError]:
        """Append an event to the topic's stream.

        Args:
            topic: Stream name.
            event: Domain event to serialize.

        Returns:
            Success(PublishReceipt) with the stream entry id as offset.
            Failure(PublishError) on serialization or Redis failure.
        """
        try:
            payload = json.dumps(event.to_dict())
        except (TypeError, ValueError) as e:
            return Failure(
                error=_publish_error(
                    topic,
                    f"unable to serialize {event.event_type}: {e}",
                    InfrastructureErrorCode.PUBLISH_SERIALIZATION_FAILED,
                )
            )

        try:
            entry_id = await self._redis.xadd(
                topic,
                {"event_type": event.event_type, "payload": payload},
                maxlen=self._max_len,
                approximate=True,
            )
        except RedisConnectionError as e:
            return Failure(
                error=_publish_error(
                    topic,
                    f"unable to reach redis: {e}",
                    InfrastructureErrorCode.PUBLISH_CONNECTION_FAILED,
                )
            )
        except RedisError as e:
            return Failure(
                error=_publish_error(
                    topic,
                    f"unable to publish to {topic}: {e}",
                    InfrastructureErrorCode.PUBLISH_FAILED,
                )
            )

        offset = entry_id.decode() if isinstance(entry_id, bytes) else str(entry_id)
        self._logger.debug(
            "event published",
            topic_name=topic,
            event_type=event.event_type,
            event_id=str(event.event_id),
            offset=offset,
        )
        return Success(
            value=PublishReceipt(topic=topic, partition=STREAM_PARTITION, offset=offset)
        )

    async def close(self) -> None:
        """Close the Redis client and its connection pool."""
        await self._redis.aclose()


def _publish_error(
    topic: str, message: str, infrastructure_code: InfrastructureErrorCode
) -> PublishError:
    return PublishError(
        code=ErrorCode.EVENT_PUBLISH_FAILED,
        message=message,
        topic=topic,
        infrastructure_code=infrastructure_code,
    )
