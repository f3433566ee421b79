"""User domain entity.

Pure business data, no framework dependencies. The storage layer assigns
``id`` and ``created_at`` on creation and ``updated_at`` on every update by
mutating the entity it was handed.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any

from user_service.domain.enums.update_user_field import UpdateUserField


@dataclass
class User:
    """User domain entity.

    Attributes:
        id: Opaque identifier in UUID format. Empty until the user is stored.
        first_name: Given name.
        last_name: Family name.
        nickname: Display name.
        password: Opaque password string (hashing is out of scope here).
        email: Email address, unique across all users.
        country: ISO 3166-1 alpha-3 country code.
        created_at: Set once by the store on creation.
        updated_at: Set by the store on every update, None until then.

    Example:
        >>> user = User(
        ...     first_name="Ada",
        ...     last_name="Lovelace",
        ...     nickname="ada",
        ...     password="secret",
        ...     email="ada@example.com",
        ...     country="GBR",
        ... )
        >>> user.is_persisted()
        False
    """

    first_name: str = ""
    last_name: str = ""
    nickname: str = ""
    password: str = ""
    email: str = ""
    country: str = ""
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def is_persisted(self) -> bool:
        """Check whether the store has assigned an identity."""
        return bool(self.id) and self.created_at is not None

    def snapshot(self) -> "User":
        """Return an independent copy of the current state.

        Events carry snapshots so later mutations of this entity do not
        leak into already-built events.
        """
        return replace(self)

    def values_for(self, fields: frozenset[UpdateUserField]) -> dict[str, str]:
        """Collect the attribute values named by an update field mask.

        Args:
            fields: Fields to read. UNSPECIFIED is skipped.

        Returns:
            Mapping of attribute name to current value.
        """
        values: dict[str, str] = {}
        for field in fields:
            if field.attribute is not None:
                values[field.attribute] = getattr(self, field.attribute)
        return values

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "nickname": self.nickname,
            "password": self.password,
            "email": self.email,
            "country": self.country,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
