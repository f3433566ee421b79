"""Reusable field validators."""

from user_service.domain.validators.functions import (
    validate_country_code,
    validate_email,
    validate_required,
    validate_uuid,
)

__all__ = [
    "validate_country_code",
    "validate_email",
    "validate_required",
    "validate_uuid",
]
