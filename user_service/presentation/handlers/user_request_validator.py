"""Validation of untrusted user requests.

Rules run in a fixed order and the first failure wins. Failures are
field-tagged ValidationError values carrying the caller-facing message.

User record (create and update):
    first_name, last_name, nickname, password: non-empty
    email: non-empty, syntactically valid
    country: non-empty, exactly three characters

Update request, checked before the record:
    user present, user id non-empty, update_fields non-empty,
    update_fields not just UNSPECIFIED, update_fields without duplicates

Get/Delete:
    id non-empty, id parses as a UUID
"""

from uuid import UUID

from user_service.core.enums import ErrorCode
from user_service.core.errors import ValidationError
from user_service.core.result import Failure, Result, Success
from user_service.domain.entities.user import User
from user_service.domain.enums.update_user_field import UpdateUserField
from user_service.domain.validators import (
    validate_country_code,
    validate_email,
    validate_required,
    validate_uuid,
)
from user_service.schemas.user_schemas import UpdateUserRequest, UserSchema

USER_REQUIRED = "user must be provided"
USER_ID_REQUIRED = "user id must be provided"
USER_ID_NOT_UUID = "user id must be in the UUID format"
UPDATE_FIELDS_REQUIRED = "at least one update field must be provided"
UPDATE_FIELDS_UNSPECIFIED = (
    "at least one update field must be provided and not be unspecified value"
)
UPDATE_FIELDS_NOT_UNIQUE = "should only input unique update fields"

_REQUIRED_TEXT_FIELDS = ("first_name", "last_name", "nickname", "password")


class UserRequestValidator:
    """Validates user requests before they reach the service.

    Stateless; one instance can be shared by every request.
    """

    def validate_user(self, user: UserSchema | None) -> Result[User, ValidationError]:
        """Validate a user record and convert it to a domain entity.

        Args:
            user: Record from the request.

        Returns:
            Success(User) or Failure(ValidationError) naming the field.
        """
        if user is None:
            return Failure(error=_invalid(USER_REQUIRED, "user"))

        for field in _REQUIRED_TEXT_FIELDS:
            try:
                validate_required(getattr(user, field), field)
            except ValueError as e:
                return Failure(error=_invalid(str(e), field))

        try:
            validate_required(user.email, "email")
            validate_email(user.email)
        except ValueError as e:
            return Failure(error=_invalid(str(e), "email", ErrorCode.INVALID_EMAIL))

        try:
            validate_required(user.country, "country")
            validate_country_code(user.country)
        except ValueError as e:
            return Failure(
                error=_invalid(str(e), "country", ErrorCode.INVALID_COUNTRY)
            )

        return Success(value=user.to_domain())

    def validate_update(
        self, request: UpdateUserRequest
    ) -> Result[tuple[User, frozenset[UpdateUserField]], ValidationError]:
        """Validate an update request.

        Args:
            request: UpdateUser request.

        Returns:
            Success((User, field mask)) or Failure(ValidationError).
        """
        if request.user is None:
            return Failure(error=_invalid(USER_REQUIRED, "user"))
        if not request.user.id:
            return Failure(
                error=_invalid(USER_ID_REQUIRED, "user.id", ErrorCode.INVALID_USER_ID)
            )

        fields = request.update_fields
        if not fields:
            return Failure(
                error=_invalid(
                    UPDATE_FIELDS_REQUIRED,
                    "update_fields",
                    ErrorCode.INVALID_UPDATE_FIELDS,
                )
            )
        if fields == [UpdateUserField.UNSPECIFIED]:
            return Failure(
                error=_invalid(
                    UPDATE_FIELDS_UNSPECIFIED,
                    "update_fields",
                    ErrorCode.INVALID_UPDATE_FIELDS,
                )
            )
        mask = frozenset(fields)
        if len(mask) != len(fields):
            return Failure(
                error=_invalid(
                    UPDATE_FIELDS_NOT_UNIQUE,
                    "update_fields",
                    ErrorCode.INVALID_UPDATE_FIELDS,
                )
            )

        match self.validate_user(request.user):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=user):
                return Success(value=(user, mask))

    def validate_user_id(self, user_id: str) -> Result[UUID, ValidationError]:
        """Validate a user id for get and delete.

        Args:
            user_id: Raw id from the request.

        Returns:
            Success(UUID) or Failure(ValidationError).
        """
        if not user_id:
            return Failure(
                error=_invalid(USER_ID_REQUIRED, "id", ErrorCode.INVALID_USER_ID)
            )
        try:
            return Success(value=validate_uuid(user_id))
        except ValueError:
            return Failure(
                error=_invalid(USER_ID_NOT_UUID, "id", ErrorCode.INVALID_USER_ID)
            )

    def validate_page(self, offset: int, limit: int) -> ValidationError | None:
        """Validate pagination bounds (both must be non-negative)."""
        if offset < 0:
            return _invalid("offset must not be negative", "offset")
        if limit < 0:
            return _invalid("limit must not be negative", "limit")
        return None


def _invalid(
    message: str, field: str, code: ErrorCode = ErrorCode.VALIDATION_FAILED
) -> ValidationError:
    return ValidationError(code=code, message=message, field=field)
