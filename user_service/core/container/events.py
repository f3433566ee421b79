"""Event publisher dependency factory.

Application-scoped singleton for lifecycle event publishing.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from user_service.core.config import settings
from user_service.core.container.infrastructure import get_logger, get_redis_client

if TYPE_CHECKING:
    from user_service.domain.protocols.event_publisher_protocol import (
        EventPublisherProtocol,
    )


@lru_cache()
def get_event_publisher() -> "EventPublisherProtocol":
    """Get event publisher singleton (app-scoped).

    Container owns the adapter choice, driven by EVENT_PUBLISHER:
        - 'redis': RedisStreamEventPublisher (one stream per topic)
        - 'memory': InMemoryEventPublisher (no external dependency)

    Returns:
        Publisher implementing EventPublisherProtocol.
    """
    if settings.event_publisher == "memory":
        from user_service.infrastructure.events.in_memory_event_publisher import (
            InMemoryEventPublisher,
        )

        return InMemoryEventPublisher()

    from user_service.infrastructure.events.redis_event_publisher import (
        RedisStreamEventPublisher,
    )

    return RedisStreamEventPublisher(
        redis_client=get_redis_client(),
        logger=get_logger(),
    )
