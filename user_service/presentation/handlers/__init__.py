"""Transport-facing request handlers."""

from user_service.presentation.handlers.status import (
    INTERNAL_ERROR_MESSAGE,
    RequestError,
    StatusCode,
)
from user_service.presentation.handlers.user_request_handler import (
    UserRequestHandler,
)
from user_service.presentation.handlers.user_request_validator import (
    UserRequestValidator,
)

__all__ = [
    "INTERNAL_ERROR_MESSAGE",
    "RequestError",
    "StatusCode",
    "UserRequestHandler",
    "UserRequestValidator",
]
