"""Unit tests for UserRequestValidator.

Tests cover:
- User record rules and their messages
- Rule priority (first failing rule wins)
- Update request rules (user, id, field mask)
- Id rules for get/delete
- Pagination bounds

Architecture:
- Pure validation tests, no I/O
- Failures are field-tagged ValidationError values
"""

from uuid import UUID

import pytest

from user_service.core.errors import ValidationError
from user_service.core.result import Failure, Success
from user_service.domain.entities.user import User
from user_service.domain.enums.update_user_field import UpdateUserField
from user_service.presentation.handlers.user_request_validator import (
    UPDATE_FIELDS_NOT_UNIQUE,
    UPDATE_FIELDS_REQUIRED,
    UPDATE_FIELDS_UNSPECIFIED,
    USER_ID_NOT_UUID,
    USER_ID_REQUIRED,
    USER_REQUIRED,
    UserRequestValidator,
)
from user_service.schemas.user_schemas import UpdateUserRequest, UserSchema

USER_ID = "01890a5d-ac96-774b-bcce-b302099a8057"


@pytest.fixture
def validator():
    return UserRequestValidator()


def _failure_message(result) -> str:
    assert isinstance(result, Failure)
    assert isinstance(result.error, ValidationError)
    return result.error.message


@pytest.mark.unit
class TestValidateUser:
    """Test user record validation."""

    def test_valid_user_converts_to_entity(self, validator, make_user_schema):
        """Test a complete record becomes a User entity."""
        result = validator.validate_user(make_user_schema())

        assert isinstance(result, Success)
        assert isinstance(result.value, User)
        assert result.value.email == "ada@example.com"
        assert result.value.country == "GBR"

    def test_missing_user(self, validator):
        """Test an absent record is rejected."""
        assert _failure_message(validator.validate_user(None)) == USER_REQUIRED

    @pytest.mark.parametrize(
        ("field", "message"),
        [
            ("first_name", "first_name is required"),
            ("last_name", "last_name is required"),
            ("nickname", "nickname is required"),
            ("password", "password is required"),
            ("email", "email is required"),
            ("country", "country is required"),
        ],
    )
    def test_required_fields(self, validator, make_user_schema, field, message):
        """Test each empty required field reports its own message."""
        result = validator.validate_user(make_user_schema(**{field: ""}))

        assert _failure_message(result) == message
        assert result.error.field == field

    @pytest.mark.parametrize("email", ["user@", "not-an-email", "a@", "@b.com"])
    def test_invalid_email(self, validator, make_user_schema, email):
        """Test syntactically invalid emails are rejected."""
        result = validator.validate_user(make_user_schema(email=email))

        assert _failure_message(result) == "email must be a valid email address"
        assert result.error.field == "email"

    @pytest.mark.parametrize("country", ["DE", "DEUT", "X"])
    def test_country_must_be_three_characters(
        self, validator, make_user_schema, country
    ):
        """Test country codes of the wrong length are rejected."""
        result = validator.validate_user(make_user_schema(country=country))

        assert _failure_message(result) == "country must be exactly 3 characters"
        assert result.error.field == "country"

    def test_first_failing_rule_wins(self, validator):
        """Test an entirely empty record reports first_name first."""
        result = validator.validate_user(UserSchema())

        assert _failure_message(result) == "first_name is required"

    def test_email_checked_before_country(self, validator, make_user_schema):
        """Test a bad email is reported even when country is also bad."""
        result = validator.validate_user(
            make_user_schema(email="user@", country="DE")
        )

        assert result.error.field == "email"


@pytest.mark.unit
class TestValidateUpdate:
    """Test update request validation."""

    def test_valid_update(self, validator, make_user_schema):
        """Test a valid request yields the entity and a frozenset mask."""
        request = UpdateUserRequest(
            user=make_user_schema(id=USER_ID, first_name="Augusta"),
            update_fields=[UpdateUserField.FIRST_NAME, UpdateUserField.COUNTRY],
        )

        result = validator.validate_update(request)

        assert isinstance(result, Success)
        user, fields = result.value
        assert user.id == USER_ID
        assert user.first_name == "Augusta"
        assert fields == frozenset(
            {UpdateUserField.FIRST_NAME, UpdateUserField.COUNTRY}
        )

    def test_missing_user(self, validator):
        """Test the user must be present."""
        request = UpdateUserRequest(update_fields=[UpdateUserField.FIRST_NAME])

        assert _failure_message(validator.validate_update(request)) == USER_REQUIRED

    def test_missing_user_id(self, validator, make_user_schema):
        """Test the user id must be present."""
        request = UpdateUserRequest(
            user=make_user_schema(), update_fields=[UpdateUserField.FIRST_NAME]
        )

        assert _failure_message(validator.validate_update(request)) == USER_ID_REQUIRED

    def test_empty_update_fields(self, validator, make_user_schema):
        """Test at least one update field is needed."""
        request = UpdateUserRequest(user=make_user_schema(id=USER_ID))

        assert (
            _failure_message(validator.validate_update(request))
            == UPDATE_FIELDS_REQUIRED
        )

    def test_only_unspecified_update_field(self, validator, make_user_schema):
        """Test a mask holding only UNSPECIFIED is rejected."""
        request = UpdateUserRequest(
            user=make_user_schema(id=USER_ID),
            update_fields=[UpdateUserField.UNSPECIFIED],
        )

        assert (
            _failure_message(validator.validate_update(request))
            == UPDATE_FIELDS_UNSPECIFIED
        )

    def test_duplicate_update_fields(self, validator, make_user_schema):
        """Test repeated fields are rejected."""
        request = UpdateUserRequest(
            user=make_user_schema(id=USER_ID),
            update_fields=[UpdateUserField.EMAIL, UpdateUserField.EMAIL],
        )

        assert (
            _failure_message(validator.validate_update(request))
            == UPDATE_FIELDS_NOT_UNIQUE
        )

    def test_mask_checked_before_record(self, validator):
        """Test mask rules run before the user record rules."""
        request = UpdateUserRequest(user=UserSchema(id=USER_ID))

        assert (
            _failure_message(validator.validate_update(request))
            == UPDATE_FIELDS_REQUIRED
        )

    def test_record_rules_apply_to_update(self, validator, make_user_schema):
        """Test the full record is validated on update."""
        request = UpdateUserRequest(
            user=make_user_schema(id=USER_ID, country="DE"),
            update_fields=[UpdateUserField.FIRST_NAME],
        )

        assert (
            _failure_message(validator.validate_update(request))
            == "country must be exactly 3 characters"
        )

    def test_unspecified_mixed_with_fields_is_allowed(
        self, validator, make_user_schema
    ):
        """Test UNSPECIFIED alongside a real field passes validation."""
        request = UpdateUserRequest(
            user=make_user_schema(id=USER_ID),
            update_fields=[UpdateUserField.UNSPECIFIED, UpdateUserField.NICKNAME],
        )

        assert isinstance(validator.validate_update(request), Success)


@pytest.mark.unit
class TestValidateUserId:
    """Test id validation for get and delete."""

    def test_valid_uuid(self, validator):
        """Test a UUID string parses."""
        result = validator.validate_user_id(USER_ID)

        assert result == Success(value=UUID(USER_ID))

    def test_empty_id(self, validator):
        """Test an empty id is rejected."""
        result = validator.validate_user_id("")

        assert _failure_message(result) == USER_ID_REQUIRED
        assert result.error.field == "id"

    def test_malformed_id(self, validator):
        """Test a non-UUID id is rejected."""
        assert _failure_message(validator.validate_user_id("abc")) == USER_ID_NOT_UUID


@pytest.mark.unit
class TestValidatePage:
    """Test pagination bounds."""

    def test_zero_values_are_valid(self, validator):
        assert validator.validate_page(0, 0) is None

    def test_negative_offset(self, validator):
        error = validator.validate_page(-1, 10)

        assert error is not None
        assert error.field == "offset"

    def test_negative_limit(self, validator):
        error = validator.validate_page(0, -5)

        assert error is not None
        assert error.field == "limit"
