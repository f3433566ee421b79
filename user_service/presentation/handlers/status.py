"""Caller-visible status taxonomy.

Every failed request ends in exactly one of these categories. The HTTP
layer maps them to status codes; other transports can map them to their
own codes.
"""

from dataclasses import dataclass
from enum import Enum

INTERNAL_ERROR_MESSAGE = "oops something went wrong!"


class StatusCode(Enum):
    """Status categories returned to callers."""

    INVALID_ARGUMENT = "invalid_argument"
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


@dataclass(frozen=True, slots=True, kw_only=True)
class RequestError:
    """Failed request as seen by the caller.

    Attributes:
        status: Status category.
        message: Caller-facing message. Never raw internal error text for
            INTERNAL.
        field: Offending field for INVALID_ARGUMENT, when known.
    """

    status: StatusCode
    message: str
    field: str | None = None

    @classmethod
    def internal(cls) -> "RequestError":
        """Generic internal error hiding the underlying cause."""
        return cls(status=StatusCode.INTERNAL, message=INTERNAL_ERROR_MESSAGE)
