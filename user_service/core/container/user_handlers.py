"""User service and request handler factories.

Request-scoped instances wired from app-scoped infrastructure:

    get_user_request_handler
        ├── get_user_service
        │     ├── get_user_repository ── get_database
        │     ├── get_event_publisher
        │     └── get_logger
        ├── get_user_request_validator
        └── get_logger
"""

from functools import lru_cache

from fastapi import Depends

from user_service.application.services.user_service import UserService
from user_service.core.container.events import get_event_publisher
from user_service.core.container.infrastructure import get_logger
from user_service.core.container.repositories import get_user_repository
from user_service.domain.protocols.event_publisher_protocol import (
    EventPublisherProtocol,
)
from user_service.domain.protocols.logger_protocol import LoggerProtocol
from user_service.infrastructure.persistence.repositories import UserRepository
from user_service.presentation.handlers.user_request_handler import (
    UserRequestHandler,
)
from user_service.presentation.handlers.user_request_validator import (
    UserRequestValidator,
)


def get_user_service(
    user_repo: UserRepository = Depends(get_user_repository),
    event_publisher: EventPublisherProtocol = Depends(get_event_publisher),
    logger: LoggerProtocol = Depends(get_logger),
) -> UserService:
    """Get user orchestration service.

    Returns:
        UserService with repository, publisher and logger injected.
    """
    return UserService(
        user_repo=user_repo,
        event_publisher=event_publisher,
        logger=logger,
    )


@lru_cache()
def get_user_request_validator() -> UserRequestValidator:
    """Get request validator singleton (stateless, app-scoped)."""
    return UserRequestValidator()


def get_user_request_handler(
    service: UserService = Depends(get_user_service),
    validator: UserRequestValidator = Depends(get_user_request_validator),
    logger: LoggerProtocol = Depends(get_logger),
) -> UserRequestHandler:
    """Get user request handler.

    Usage:
        @router.post("/users")
        async def create_user(
            handler: UserRequestHandler = Depends(get_user_request_handler),
        ): ...

    Returns:
        UserRequestHandler with service, validator and logger injected.
    """
    return UserRequestHandler(service=service, validator=validator, logger=logger)
