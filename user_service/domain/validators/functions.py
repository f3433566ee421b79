"""Centralized validation functions.

Validators are pure functions that raise ValueError on validation failure.
The presentation layer turns those into field-tagged ValidationError values.
"""

from uuid import UUID

from email_validator import EmailNotValidError
from email_validator import validate_email as _validate_email_address

from user_service.core.constants import COUNTRY_CODE_LENGTH


def validate_required(v: str, field: str) -> str:
    """Validate that a string field is non-empty.

    Args:
        v: Value to check.
        field: Field name used in the error message.

    Returns:
        The value unchanged.

    Raises:
        ValueError: If the value is empty.
    """
    if not v:
        raise ValueError(f"{field} is required")
    return v


def validate_email(v: str) -> str:
    """Validate email syntax.

    Uses email-validator without deliverability (DNS) checks.

    Args:
        v: Email address to validate.

    Returns:
        The address unchanged (storage keeps what the caller sent).

    Raises:
        ValueError: If the address is syntactically invalid.

    Example:
        >>> validate_email("a@b.com")
        'a@b.com'
        >>> validate_email("user@")
        ValueError: email must be a valid email address
    """
    try:
        _validate_email_address(v, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError("email must be a valid email address") from e
    return v


def validate_country_code(v: str) -> str:
    """Validate an ISO 3166-1 alpha-3 country code length.

    Args:
        v: Country code.

    Returns:
        The code unchanged.

    Raises:
        ValueError: If the code is not exactly three characters.
    """
    if len(v) != COUNTRY_CODE_LENGTH:
        raise ValueError(
            f"country must be exactly {COUNTRY_CODE_LENGTH} characters"
        )
    return v


def validate_uuid(v: str) -> UUID:
    """Parse a UUID string.

    Args:
        v: Candidate identifier.

    Returns:
        Parsed UUID.

    Raises:
        ValueError: If the value is not a UUID.
    """
    return UUID(v)
