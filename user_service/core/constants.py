"""Centralized constants for internal implementation details.

These values are part of the service contract, NOT environment-specific
configuration. For environment-specific settings use
``user_service/core/config.py``.

Categories:
- Topics: Stream names for user lifecycle events
- Pagination: Default page size for list queries
- Persistence: Names the storage layer relies on
"""

# =============================================================================
# Event Topics
# =============================================================================

USER_CREATED_TOPIC: str = "user-created_v1"
"""Topic receiving an event for every created user."""

USER_UPDATED_TOPIC: str = "user-updated_v1"
"""Topic receiving an event for every updated user."""

USER_DELETED_TOPIC: str = "user-deleted_v1"
"""Topic receiving an event for every deleted user."""


# =============================================================================
# Pagination
# =============================================================================

DEFAULT_LIST_LIMIT: int = 100
"""Page size used when a list request asks for a limit of zero."""


# =============================================================================
# Persistence
# =============================================================================

USERS_EMAIL_UNIQUE_CONSTRAINT: str = "users_email_key"
"""Name of the unique constraint on users.email."""

COUNTRY_CODE_LENGTH: int = 3
"""ISO 3166-1 alpha-3 country codes are exactly three characters."""
