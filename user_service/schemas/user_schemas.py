"""User request/response schemas.

Pydantic models for the user RPC messages. Kept separate from the domain
entity: these describe what crosses the wire.

String fields default to "" and nested messages to None so that missing
input reaches the request validator, which reports it with the service's
own messages instead of a generic schema error.

Endpoints:
    POST   /api/v1/users             - CreateUser
    GET    /api/v1/users/{user_id}   - GetUser
    GET    /api/v1/users             - ListUsers
    PATCH  /api/v1/users             - UpdateUser
    DELETE /api/v1/users/{user_id}   - DeleteUser
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from user_service.domain.entities.user import User
from user_service.domain.enums.update_user_field import UpdateUserField


class UserSchema(BaseModel):
    """User message."""

    id: str = Field(default="", description="User ID (UUID), assigned on creation")
    first_name: str = Field(default="", examples=["Ada"])
    last_name: str = Field(default="", examples=["Lovelace"])
    nickname: str = Field(default="", examples=["ada"])
    password: str = Field(default="", examples=["s3cret"])
    email: str = Field(default="", examples=["ada@example.com"])
    country: str = Field(
        default="",
        description="ISO 3166-1 alpha-3 country code",
        examples=["GBR"],
    )
    created_at: datetime | None = Field(default=None, description="Set on creation")
    updated_at: datetime | None = Field(default=None, description="Set on update")

    def to_domain(self) -> User:
        """Convert to a domain entity."""
        return User(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            nickname=self.nickname,
            password=self.password,
            email=self.email,
            country=self.country,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    @classmethod
    def from_domain(cls, user: User) -> "UserSchema":
        """Build from a domain entity."""
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            nickname=user.nickname,
            password=user.password,
            email=user.email,
            country=user.country,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


# =============================================================================
# CreateUser
# =============================================================================


class CreateUserRequest(BaseModel):
    """CreateUser request."""

    user: UserSchema | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user": {
                    "first_name": "Ada",
                    "last_name": "Lovelace",
                    "nickname": "ada",
                    "password": "s3cret",
                    "email": "ada@example.com",
                    "country": "GBR",
                }
            }
        }
    )


class CreateUserResponse(BaseModel):
    """CreateUser response with server-assigned id and created_at."""

    user: UserSchema


# =============================================================================
# GetUser
# =============================================================================


class GetUserRequest(BaseModel):
    """GetUser request."""

    id: str = ""


class GetUserResponse(BaseModel):
    """GetUser response."""

    user: UserSchema


# =============================================================================
# ListUsers
# =============================================================================


class ListUsersFilters(BaseModel):
    """ListUsers filters."""

    countries: list[str] = Field(default_factory=list)


class ListUsersRequest(BaseModel):
    """ListUsers request. A limit of 0 selects the default page size."""

    filters: ListUsersFilters | None = None
    offset: int = 0
    limit: int = 0


class ListUsersResponse(BaseModel):
    """ListUsers response."""

    users: list[UserSchema] = Field(default_factory=list)


# =============================================================================
# UpdateUser
# =============================================================================


class UpdateUserRequest(BaseModel):
    """UpdateUser request.

    update_fields accepts enum names ("FIRST_NAME") or wire numbers (1).
    Duplicates are kept so the validator can reject them.
    """

    user: UserSchema | None = None
    update_fields: list[UpdateUserField] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user": {
                    "id": "01890a5d-ac96-774b-bcce-b302099a8057",
                    "first_name": "Augusta",
                    "last_name": "Lovelace",
                    "nickname": "ada",
                    "password": "s3cret",
                    "email": "ada@example.com",
                    "country": "GBR",
                },
                "update_fields": ["FIRST_NAME"],
            }
        }
    )

    @field_validator("update_fields", mode="before")
    @classmethod
    def parse_update_fields(cls, v: Any) -> Any:
        """Accept enum names as well as wire numbers.

        Args:
            v: Raw update_fields value.

        Returns:
            List with names replaced by enum members; anything else is left
            for the regular enum validation.
        """
        if not isinstance(v, list):
            return v
        return [
            UpdateUserField[item]
            if isinstance(item, str) and item in UpdateUserField.__members__
            else item
            for item in v
        ]


class UpdateUserResponse(BaseModel):
    """UpdateUser response with server-assigned updated_at."""

    user: UserSchema


# =============================================================================
# DeleteUser
# =============================================================================


class DeleteUserRequest(BaseModel):
    """DeleteUser request."""

    id: str = ""


class DeleteUserResponse(BaseModel):
    """DeleteUser response (empty)."""
