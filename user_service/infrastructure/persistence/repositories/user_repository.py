"""UserRepository - SQLAlchemy implementation of the UserRepository protocol.

Adapter for hexagonal architecture. Maps between the domain User entity and
UserModel rows and converts SQLAlchemy exceptions into Result failures.

Every operation asks the Database for a session, so it runs inside the
caller's transaction scope when one is active. Inside a scope a failed
statement rolls back to its own savepoint, so a ConflictError leaves the
scope usable.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from user_service.core.constants import USERS_EMAIL_UNIQUE_CONSTRAINT
from user_service.core.enums import ErrorCode
from user_service.core.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from user_service.core.result import Failure, Result, Success
from user_service.domain.entities.user import User
from user_service.domain.enums.update_user_field import UpdateUserField
from user_service.domain.value_objects.user_filters import UserFilters
from user_service.infrastructure.errors import DatabaseError, InfrastructureErrorCode
from user_service.infrastructure.persistence.database import Database
from user_service.infrastructure.persistence.models.user import UserModel

USER_NOT_FOUND_MESSAGE = "user does not exist"
EMAIL_EXISTS_MESSAGE = "email already exists"
MISSING_UPDATE_FIELDS_MESSAGE = "missing update fields"


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from the protocol (structural typing).

    Attributes:
        database: Database providing sessions and transaction scopes.

    Example:
        >>> repo = UserRepository(database)
        >>> match await repo.get_user(user_id):
        ...     case Success(value=user):
        ...         ...
    """

    def __init__(self, database: Database) -> None:
        """Initialize repository.

        Args:
            database: Database providing sessions.
        """
        self.database = database

    async def get_user(self, user_id: str) -> Result[User, DomainError]:
        """Fetch a user by id.

        Args:
            user_id: User identifier. Malformed ids never match a row.

        Returns:
            Success(User), Failure(NotFoundError) or Failure(DatabaseError).
        """
        parsed_id = _parse_id(user_id)
        if parsed_id is None:
            return Failure(error=_not_found(user_id))

        try:
            async with self.database.session() as session:
                result = await session.execute(
                    select(UserModel).where(UserModel.id == parsed_id)
                )
                user_model = result.scalar_one_or_none()
        except (SQLAlchemyError, OSError) as e:
            return Failure(error=_database_failure("get user", e))

        if user_model is None:
            return Failure(error=_not_found(user_id))

        return Success(value=self._to_domain(user_model))

    async def list_users(
        self,
        filters: UserFilters | None,
        offset: int,
        limit: int,
    ) -> Result[list[User], DomainError]:
        """List users ordered by creation time.

        Args:
            filters: Country filter; None or empty means all users.
            offset: Rows to skip.
            limit: Maximum rows to return.

        Returns:
            Success(list[User]) (possibly empty) or Failure(DatabaseError).
        """
        stmt = select(UserModel)
        if filters is not None and filters.countries:
            stmt = stmt.where(UserModel.country.in_(filters.countries))
        stmt = (
            stmt.order_by(UserModel.created_at, UserModel.id)
            .offset(offset)
            .limit(limit)
        )

        try:
            async with self.database.session() as session:
                result = await session.execute(stmt)
                user_models = result.scalars().all()
        except (SQLAlchemyError, OSError) as e:
            return Failure(error=_database_failure("list users", e))

        return Success(value=[self._to_domain(model) for model in user_models])

    async def create_user(self, user: User) -> Result[User, DomainError]:
        """Insert a user and assign its id and created_at.

        Args:
            user: User to store. Mutated in place on success.

        Returns:
            Success(User), Failure(ConflictError) on duplicate email,
            Failure(DatabaseError) otherwise.
        """
        user_model = self._to_model(user)

        try:
            async with self.database.session() as session:
                session.add(user_model)
                await session.flush()
        except IntegrityError as e:
            return Failure(error=_integrity_failure("create user", e))
        except (SQLAlchemyError, OSError) as e:
            return Failure(error=_database_failure("create user", e))

        user.id = str(user_model.id)
        user.created_at = user_model.created_at
        return Success(value=user)

    async def update_user(
        self,
        user: User,
        update_fields: frozenset[UpdateUserField],
    ) -> Result[User, DomainError]:
        """Write only the columns named by the field mask.

        updated_at is always refreshed and assigned back on the entity.

        Args:
            user: User carrying id and the new values.
            update_fields: Attributes to write.

        Returns:
            Success(User), Failure(ValidationError) for an empty write set,
            Failure(NotFoundError), Failure(ConflictError) on duplicate
            email, or Failure(DatabaseError).
        """
        values: dict[str, object] = dict(user.values_for(update_fields))
        if not values:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_UPDATE_FIELDS,
                    message=MISSING_UPDATE_FIELDS_MESSAGE,
                    field="update_fields",
                )
            )

        parsed_id = _parse_id(user.id)
        if parsed_id is None:
            return Failure(error=_not_found(user.id))

        values["updated_at"] = datetime.now(UTC)
        stmt = (
            update(UserModel)
            .where(UserModel.id == parsed_id)
            .values(**values)
            .returning(UserModel.updated_at)
            .execution_options(synchronize_session=False)
        )

        try:
            async with self.database.session() as session:
                result = await session.execute(stmt)
                updated_at = result.scalar_one_or_none()
        except IntegrityError as e:
            return Failure(error=_integrity_failure("update user", e))
        except (SQLAlchemyError, OSError) as e:
            return Failure(error=_database_failure("update user", e))

        if updated_at is None:
            return Failure(error=_not_found(user.id))

        user.updated_at = updated_at
        return Success(value=user)

    async def delete_user(self, user_id: str) -> Result[None, DomainError]:
        """Delete a user row.

        Args:
            user_id: User identifier.

        Returns:
            Success(None), Failure(NotFoundError) when no row was affected,
            or Failure(DatabaseError).
        """
        parsed_id = _parse_id(user_id)
        if parsed_id is None:
            return Failure(error=_not_found(user_id))

        stmt = (
            delete(UserModel)
            .where(UserModel.id == parsed_id)
            .execution_options(synchronize_session=False)
        )

        try:
            async with self.database.session() as session:
                result = await session.execute(stmt)
                rows_affected = result.rowcount
        except (SQLAlchemyError, OSError) as e:
            return Failure(error=_database_failure("delete user", e))

        if rows_affected == 0:
            return Failure(error=_not_found(user_id))

        return Success(value=None)

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity."""
        return User(
            id=str(user_model.id),
            first_name=user_model.first_name,
            last_name=user_model.last_name,
            nickname=user_model.nickname,
            password=user_model.password,
            email=user_model.email,
            country=user_model.country,
            created_at=user_model.created_at,
            updated_at=user_model.updated_at,
        )

    def _to_model(self, user: User) -> UserModel:
        """Convert domain entity to a new database model.

        id and created_at are left to the model defaults.
        """
        return UserModel(
            first_name=user.first_name,
            last_name=user.last_name,
            nickname=user.nickname,
            password=user.password,
            email=user.email,
            country=user.country,
        )


def _parse_id(user_id: str) -> UUID | None:
    try:
        return UUID(user_id)
    except (TypeError, ValueError):
        return None


def _not_found(user_id: str) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.USER_NOT_FOUND,
        message=USER_NOT_FOUND_MESSAGE,
        resource_type="User",
        resource_id=user_id,
    )


def _violated_constraint(error: IntegrityError) -> str | None:
    """Name of the violated constraint when the driver reports one.

    asyncpg exposes ``constraint_name`` on its exception, which SQLAlchemy
    keeps as the cause of the DBAPI error it wraps.
    """
    for candidate in (error.orig, getattr(error.orig, "__cause__", None)):
        name = getattr(candidate, "constraint_name", None)
        if name:
            return str(name)
    return None


def _is_email_conflict(error: IntegrityError) -> bool:
    constraint = _violated_constraint(error)
    if constraint is not None:
        return constraint == USERS_EMAIL_UNIQUE_CONSTRAINT
    # SQLite reports the column instead: "UNIQUE constraint failed: users.email"
    text = str(error.orig)
    return USERS_EMAIL_UNIQUE_CONSTRAINT in text or "users.email" in text


def _integrity_failure(operation: str, error: IntegrityError) -> DomainError:
    if _is_email_conflict(error):
        return ConflictError(
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
            message=EMAIL_EXISTS_MESSAGE,
            resource_type="User",
            conflicting_field="email",
        )
    # Driver text can quote the offending row, so only its type is kept.
    return DatabaseError(
        code=ErrorCode.STORAGE_FAILED,
        message=f"unable to {operation}: {type(error.orig).__name__}",
        infrastructure_code=InfrastructureErrorCode.DATABASE_CONSTRAINT_VIOLATION,
        details={
            "constraint": _violated_constraint(error),
            "error_type": type(error).__name__,
        },
    )


def _database_failure(operation: str, error: Exception) -> DatabaseError:
    return DatabaseError(
        code=ErrorCode.STORAGE_FAILED,
        message=f"unable to {operation}: {error}",
        infrastructure_code=InfrastructureErrorCode.DATABASE_ERROR,
        details={"error_type": type(error).__name__},
    )
