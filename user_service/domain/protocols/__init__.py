"""Domain protocols (ports) implemented by infrastructure adapters."""

from user_service.domain.protocols.event_publisher_protocol import (
    EventPublisherProtocol,
    PublishReceipt,
)
from user_service.domain.protocols.logger_protocol import LoggerProtocol
from user_service.domain.protocols.user_repository import UserRepository

__all__ = [
    "EventPublisherProtocol",
    "LoggerProtocol",
    "PublishReceipt",
    "UserRepository",
]
