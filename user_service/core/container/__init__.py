"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from user_service.core.container import get_logger, get_user_service

Modules:
- infrastructure: Database, logging, Redis client
- events: Event publisher
- repositories: Repository factories
- user_handlers: Service, validator and request handler factories
"""

from user_service.core.container.events import get_event_publisher
from user_service.core.container.infrastructure import (
    get_database,
    get_logger,
    get_redis_client,
)
from user_service.core.container.repositories import get_user_repository
from user_service.core.container.user_handlers import (
    get_user_request_handler,
    get_user_request_validator,
    get_user_service,
)

__all__ = [
    "get_database",
    "get_event_publisher",
    "get_logger",
    "get_redis_client",
    "get_user_repository",
    "get_user_request_handler",
    "get_user_request_validator",
    "get_user_service",
]
