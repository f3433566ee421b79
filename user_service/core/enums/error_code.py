"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    INVALID_COUNTRY = "invalid_country"
    INVALID_USER_ID = "invalid_user_id"
    INVALID_UPDATE_FIELDS = "invalid_update_fields"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"

    # Infrastructure errors surfaced to the domain
    STORAGE_FAILED = "storage_failed"
    EVENT_PUBLISH_FAILED = "event_publish_failed"
