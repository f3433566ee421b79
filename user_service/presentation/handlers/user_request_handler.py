"""User request handler.

Transport-facing entry point for the five user operations. Each call runs
validate -> delegate to UserService -> map the result, and returns a
Result the transport renders:

    Success(<Operation>Response)
    Failure(RequestError(status, message))

Error mapping (same for every operation):
    ValidationError (request)   -> INVALID_ARGUMENT, rule message
    ConflictError               -> ALREADY_EXISTS, "user already exists with this email"
    NotFoundError (get/delete)  -> NOT_FOUND, "user is not found"
    NotFoundError (update)      -> NOT_FOUND, underlying message
    anything else               -> INTERNAL, generic message (cause is logged)
"""

from user_service.application.services.user_service import UserService
from user_service.core.errors import ConflictError, DomainError, NotFoundError
from user_service.core.result import Failure, Result, Success
from user_service.domain.protocols.logger_protocol import LoggerProtocol
from user_service.domain.value_objects.user_filters import UserFilters
from user_service.presentation.handlers.status import RequestError, StatusCode
from user_service.presentation.handlers.user_request_validator import (
    UserRequestValidator,
)
from user_service.schemas.user_schemas import (
    CreateUserRequest,
    CreateUserResponse,
    DeleteUserRequest,
    DeleteUserResponse,
    GetUserRequest,
    GetUserResponse,
    ListUsersRequest,
    ListUsersResponse,
    UpdateUserRequest,
    UpdateUserResponse,
    UserSchema,
)

USER_ALREADY_EXISTS = "user already exists with this email"
USER_NOT_FOUND = "user is not found"


class UserRequestHandler:
    """Validates user requests and maps service results to statuses.

    Stateless across requests.

    Dependencies (injected):
        - UserService: Business operations
        - UserRequestValidator: Input validation
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        service: UserService,
        validator: UserRequestValidator,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            service: User orchestration service.
            validator: Request validator.
            logger: Structured logger.
        """
        self._service = service
        self._validator = validator
        self._logger = logger

    async def create_user(
        self, request: CreateUserRequest
    ) -> Result[CreateUserResponse, RequestError]:
        """CreateUser: validate the record, store it, return it with its id."""
        match self._validator.validate_user(request.user):
            case Failure(error=invalid):
                return Failure(error=_invalid_argument(invalid))
            case Success(value=user):
                pass

        match await self._service.create_user(user):
            case Failure(error=error):
                self._logger.error("unable to create user", error=error)
                return Failure(error=_map_error(error))
            case Success(value=created):
                self._logger.info("user is created", user_id=created.id)
                return Success(
                    value=CreateUserResponse(user=UserSchema.from_domain(created))
                )

    async def get_user(
        self, request: GetUserRequest
    ) -> Result[GetUserResponse, RequestError]:
        """GetUser: validate the id and fetch the user."""
        checked = self._validator.validate_user_id(request.id)
        if isinstance(checked, Failure):
            return Failure(error=_invalid_argument(checked.error))

        match await self._service.get_user(request.id):
            case Failure(error=error):
                self._logger.error(
                    "unable to get user", error=error, user_id=request.id
                )
                return Failure(
                    error=_map_error(error, not_found_message=USER_NOT_FOUND)
                )
            case Success(value=user):
                self._logger.info("user is fetched", user_id=user.id)
                return Success(
                    value=GetUserResponse(user=UserSchema.from_domain(user))
                )

    async def list_users(
        self, request: ListUsersRequest
    ) -> Result[ListUsersResponse, RequestError]:
        """ListUsers: page through users, optionally filtered by country."""
        invalid = self._validator.validate_page(request.offset, request.limit)
        if invalid is not None:
            return Failure(error=_invalid_argument(invalid))

        filters = None
        if request.filters is not None:
            filters = UserFilters(countries=tuple(request.filters.countries))

        match await self._service.list_users(filters, request.offset, request.limit):
            case Failure(error=error):
                self._logger.error(
                    "unable to list users",
                    error=error,
                    filters=filters.to_dict() if filters is not None else None,
                    offset=request.offset,
                    limit=request.limit,
                )
                return Failure(error=RequestError.internal())
            case Success(value=users):
                return Success(
                    value=ListUsersResponse(
                        users=[UserSchema.from_domain(user) for user in users]
                    )
                )

    async def update_user(
        self, request: UpdateUserRequest
    ) -> Result[UpdateUserResponse, RequestError]:
        """UpdateUser: validate request and mask, write the masked fields."""
        match self._validator.validate_update(request):
            case Failure(error=invalid):
                return Failure(error=_invalid_argument(invalid))
            case Success(value=(user, update_fields)):
                pass

        field_names = sorted(field.name for field in update_fields)
        match await self._service.update_user(user, update_fields):
            case Failure(error=error):
                self._logger.error(
                    "unable to update user",
                    error=error,
                    user_id=user.id,
                    update_fields=field_names,
                )
                return Failure(error=_map_error(error))
            case Success(value=updated):
                self._logger.info(
                    "user is updated",
                    user_id=updated.id,
                    update_fields=field_names,
                )
                return Success(
                    value=UpdateUserResponse(user=UserSchema.from_domain(updated))
                )

    async def delete_user(
        self, request: DeleteUserRequest
    ) -> Result[DeleteUserResponse, RequestError]:
        """DeleteUser: validate the id and remove the user."""
        checked = self._validator.validate_user_id(request.id)
        if isinstance(checked, Failure):
            return Failure(error=_invalid_argument(checked.error))

        match await self._service.delete_user(request.id):
            case Failure(error=error):
                self._logger.error(
                    "unable to delete user", error=error, user_id=request.id
                )
                return Failure(
                    error=_map_error(error, not_found_message=USER_NOT_FOUND)
                )
            case Success():
                self._logger.info("user is deleted", user_id=request.id)
                return Success(value=DeleteUserResponse())


def _invalid_argument(error: DomainError) -> RequestError:
    return RequestError(
        status=StatusCode.INVALID_ARGUMENT,
        message=error.message,
        field=getattr(error, "field", None),
    )


def _map_error(
    error: DomainError, not_found_message: str | None = None
) -> RequestError:
    """Map a service error to the caller-visible status.

    Args:
        error: Error returned by the service.
        not_found_message: Fixed message for NOT_FOUND; None passes the
            underlying message through.
    """
    match error:
        case ConflictError():
            return RequestError(
                status=StatusCode.ALREADY_EXISTS, message=USER_ALREADY_EXISTS
            )
        case NotFoundError(message=message):
            return RequestError(
                status=StatusCode.NOT_FOUND,
                message=not_found_message if not_found_message is not None else message,
            )
        case _:
            return RequestError.internal()
