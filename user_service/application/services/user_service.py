"""User orchestration service.

Business rules on top of the UserRepository, independent of transport:

- Default pagination: a list limit of 0 becomes DEFAULT_LIST_LIMIT.
- Fetch-before-delete: DeleteUser reads the user first so the deletion event
  carries its final state. The fetch and the delete are separate statements;
  a concurrent delete in between surfaces as not-found from the delete step.
- Best-effort events: after a successful mutation the matching event is
  published with a direct await. A publish failure is logged with the user
  id and topic and otherwise ignored; the mutation stands.

Repository errors are returned unchanged, except the delete-path fetch
failure which is wrapped with context.
"""

from user_service.core.constants import (
    DEFAULT_LIST_LIMIT,
    USER_CREATED_TOPIC,
    USER_DELETED_TOPIC,
    USER_UPDATED_TOPIC,
)
from user_service.core.errors import DomainError
from user_service.core.result import Failure, Result, Success
from user_service.domain.entities.user import User
from user_service.domain.enums.update_user_field import UpdateUserField
from user_service.domain.events import (
    DomainEvent,
    UserCreated,
    UserDeleted,
    UserUpdated,
)
from user_service.domain.protocols.event_publisher_protocol import (
    EventPublisherProtocol,
)
from user_service.domain.protocols.logger_protocol import LoggerProtocol
from user_service.domain.protocols.user_repository import UserRepository
from user_service.domain.value_objects.user_filters import UserFilters

DELETE_FETCH_CONTEXT = "unable to get user when trying to delete"


class UserService:
    """Orchestrates user persistence and lifecycle events.

    Stateless across calls; safe to share between concurrent requests.

    Dependencies (injected):
        - UserRepository: Persistence
        - EventPublisherProtocol: Event publication
        - LoggerProtocol: Structured logging

    Example:
        >>> service = UserService(user_repo, publisher, logger)
        >>> match await service.create_user(user):
        ...     case Success(value=created):
        ...         print(created.id)
    """

    def __init__(
        self,
        user_repo: UserRepository,
        event_publisher: EventPublisherProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            user_repo: User persistence.
            event_publisher: Publisher for lifecycle events.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._event_publisher = event_publisher
        self._logger = logger

    async def create_user(self, user: User) -> Result[User, DomainError]:
        """Store a new user, then publish UserCreated.

        Args:
            user: User to create. Receives id and created_at on success.

        Returns:
            Success(User) or the repository's failure unchanged.
        """
        result = await self._user_repo.create_user(user)
        match result:
            case Success(value=created):
                await self._produce(
                    USER_CREATED_TOPIC, UserCreated(user=created.snapshot()), created.id
                )
        return result

    async def get_user(self, user_id: str) -> Result[User, DomainError]:
        """Fetch a user by id."""
        return await self._user_repo.get_user(user_id)

    async def list_users(
        self,
        filters: UserFilters | None,
        offset: int,
        limit: int,
    ) -> Result[list[User], DomainError]:
        """List users, applying the default page size for a zero limit.

        Args:
            filters: Optional predicates.
            offset: Rows to skip.
            limit: Page size; 0 means DEFAULT_LIST_LIMIT.

        Returns:
            Success(list[User]) or the repository's failure unchanged.
        """
        if limit == 0:
            limit = DEFAULT_LIST_LIMIT
        return await self._user_repo.list_users(filters, offset, limit)

    async def update_user(
        self,
        user: User,
        update_fields: frozenset[UpdateUserField],
    ) -> Result[User, DomainError]:
        """Write the masked fields, then publish UserUpdated.

        Args:
            user: User carrying id and new values. Receives updated_at.
            update_fields: Field mask to apply.

        Returns:
            Success(User) or the repository's failure unchanged.
        """
        result = await self._user_repo.update_user(user, update_fields)
        match result:
            case Success(value=updated):
                await self._produce(
                    USER_UPDATED_TOPIC,
                    UserUpdated(user=updated.snapshot(), update_fields=update_fields),
                    updated.id,
                )
        return result

    async def delete_user(self, user_id: str) -> Result[None, DomainError]:
        """Fetch, delete, then publish UserDeleted with the fetched state.

        Args:
            user_id: User identifier.

        Returns:
            Success(None).
            Failure with the fetch error wrapped in context if the fetch
            failed (delete is not attempted).
            The delete failure unchanged if the delete failed.
        """
        fetched = await self._user_repo.get_user(user_id)
        if isinstance(fetched, Failure):
            return Failure(error=fetched.error.with_context(DELETE_FETCH_CONTEXT))
        user = fetched.value

        result = await self._user_repo.delete_user(user_id)
        match result:
            case Success():
                await self._produce(USER_DELETED_TOPIC, UserDeleted(user=user), user_id)
        return result

    async def _produce(self, topic: str, event: DomainEvent, user_id: str) -> None:
        try:
            result = await self._event_publisher.publish(topic, event)
        except Exception as e:
            # Fail-open: log error but don't raise
            self._logger.error(
                "unable to produce message",
                error=e,
                user_id=user_id,
                topic_name=topic,
            )
            return

        match result:
            case Failure(error=error):
                self._logger.error(
                    "unable to produce message",
                    error=error,
                    user_id=user_id,
                    topic_name=topic,
                )
            case Success(value=receipt):
                self._logger.debug(
                    "message produced",
                    user_id=user_id,
                    topic_name=topic,
                    partition=receipt.partition,
                    offset=receipt.offset,
                )
