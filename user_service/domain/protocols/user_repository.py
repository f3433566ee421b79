"""UserRepository protocol (port) for user persistence.

Structural typing: implementations do not inherit from this protocol.
Every operation returns a Result; storage exceptions never escape the
adapter.
"""

from typing import Protocol

from user_service.core.errors import DomainError
from user_service.core.result import Result
from user_service.domain.entities.user import User
from user_service.domain.enums.update_user_field import UpdateUserField
from user_service.domain.value_objects.user_filters import UserFilters


class UserRepository(Protocol):
    """User persistence port.

    Operations run inside the caller's transaction scope when one is
    active, otherwise each operation commits on its own.

    Example:
        >>> class SQLAlchemyUserRepository:
        ...     async def get_user(self, user_id: str) -> Result[User, DomainError]:
        ...         # Implementation
        ...         pass
    """

    async def get_user(self, user_id: str) -> Result[User, DomainError]:
        """Fetch a user by id.

        Args:
            user_id: User identifier. Values that are not UUIDs never match.

        Returns:
            Success(User) if found.
            Failure(NotFoundError) if no such user.
            Failure(DatabaseError) on storage failure.
        """
        ...

    async def list_users(
        self,
        filters: UserFilters | None,
        offset: int,
        limit: int,
    ) -> Result[list[User], DomainError]:
        """List users, optionally narrowed by filters.

        Args:
            filters: Predicates to apply. None or empty returns all rows.
            offset: Number of rows to skip.
            limit: Maximum number of rows to return. No default applied here.

        Returns:
            Success(list[User]) ordered by creation time. Empty when nothing
            matches.
            Failure(DatabaseError) on storage failure.
        """
        ...

    async def create_user(self, user: User) -> Result[User, DomainError]:
        """Insert a user.

        Assigns ``id`` and ``created_at`` on the passed entity.

        Args:
            user: User to store.

        Returns:
            Success(User) with the same (mutated) entity.
            Failure(ConflictError) if the email is already taken.
            Failure(DatabaseError) on any other storage failure.
        """
        ...

    async def update_user(
        self,
        user: User,
        update_fields: frozenset[UpdateUserField],
    ) -> Result[User, DomainError]:
        """Write the fields named by the mask.

        Untouched columns keep their stored values. Assigns ``updated_at``
        on the passed entity.

        Args:
            user: User carrying id and new values.
            update_fields: Field mask naming the attributes to write.

        Returns:
            Success(User) with the same (mutated) entity.
            Failure(ValidationError) if the mask names no writable field.
            Failure(NotFoundError) if no such user.
            Failure(ConflictError) if a new email is already taken.
            Failure(DatabaseError) on any other storage failure.
        """
        ...

    async def delete_user(self, user_id: str) -> Result[None, DomainError]:
        """Delete a user permanently.

        Args:
            user_id: User identifier.

        Returns:
            Success(None) if a row was removed.
            Failure(NotFoundError) if no row was affected.
            Failure(DatabaseError) on storage failure.
        """
        ...
