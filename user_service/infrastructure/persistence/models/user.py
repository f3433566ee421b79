"""User database model.

Fields:
    id: UUID primary key (from BaseModel)
    created_at: Set on insert (from BaseModel)
    updated_at: Set on every update, NULL before (from BaseModel)
    first_name, last_name, nickname, password, email: Required strings
    country: ISO 3166-1 alpha-3 code

Constraints:
    - users_email_key: UNIQUE (email). The repository recognizes this name
      to report a duplicate email instead of a generic storage failure.
"""

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from user_service.core.constants import (
    COUNTRY_CODE_LENGTH,
    USERS_EMAIL_UNIQUE_CONSTRAINT,
)
from user_service.infrastructure.persistence.base import BaseModel


class UserModel(BaseModel):
    """User row."""

    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("email", name=USERS_EMAIL_UNIQUE_CONSTRAINT),
    )

    first_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Given name",
    )
    last_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Family name",
    )
    nickname: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name",
    )
    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Opaque password string",
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Email address (unique via users_email_key)",
    )
    country: Mapped[str] = mapped_column(
        String(COUNTRY_CODE_LENGTH),
        nullable=False,
        index=True,
        comment="ISO 3166-1 alpha-3 country code",
    )
