"""Event publisher adapters."""

from user_service.infrastructure.events.in_memory_event_publisher import (
    InMemoryEventPublisher,
)
from user_service.infrastructure.events.redis_event_publisher import (
    RedisStreamEventPublisher,
)

__all__ = ["InMemoryEventPublisher", "RedisStreamEventPublisher"]
