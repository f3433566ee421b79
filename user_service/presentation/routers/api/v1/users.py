"""Users resource handlers.

HTTP transport for the user operations. Each endpoint builds the request
message, hands it to UserRequestHandler and renders the Result: the
response model on success, RFC 9457 problem details on failure.

Endpoints:
    POST   /users             - CreateUser (201)
    GET    /users/{user_id}   - GetUser (200)
    GET    /users             - ListUsers (200)
    PATCH  /users             - UpdateUser (200)
    DELETE /users/{user_id}   - DeleteUser (204)
"""

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from user_service.core.container import get_user_request_handler
from user_service.core.result import Failure, Success
from user_service.presentation.handlers.user_request_handler import (
    UserRequestHandler,
)
from user_service.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from user_service.presentation.routers.api.v1.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
)
from user_service.schemas.user_schemas import (
    CreateUserRequest,
    CreateUserResponse,
    DeleteUserRequest,
    GetUserRequest,
    GetUserResponse,
    ListUsersFilters,
    ListUsersRequest,
    ListUsersResponse,
    UpdateUserRequest,
    UpdateUserResponse,
)

router = APIRouter(prefix="/users", tags=["Users"])

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ProblemDetails},
    status.HTTP_404_NOT_FOUND: {"model": ProblemDetails},
    status.HTTP_409_CONFLICT: {"model": ProblemDetails},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ProblemDetails},
}


@router.post(
    "",
    response_model=CreateUserResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
    summary="Create user",
)
async def create_user(
    request: Request,
    data: CreateUserRequest,
    handler: UserRequestHandler = Depends(get_user_request_handler),
) -> CreateUserResponse | JSONResponse:
    """Create a user.

    POST /api/v1/users → 201 Created

    Returns:
        CreateUserResponse with server-assigned id and created_at.
        Problem details on failure (400/409/500).
    """
    match await handler.create_user(data):
        case Success(value=response):
            return response
        case Failure(error=error):
            return ErrorResponseBuilder.from_request_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@router.get(
    "",
    response_model=ListUsersResponse,
    responses=_ERROR_RESPONSES,
    summary="List users",
)
async def list_users(
    request: Request,
    countries: list[str] = Query(default=[]),
    offset: int = Query(default=0, ge=0),
    limit: int = Query(
        default=0, ge=0, description="0 selects the default page size"
    ),
    handler: UserRequestHandler = Depends(get_user_request_handler),
) -> ListUsersResponse | JSONResponse:
    """List users, optionally filtered by country.

    GET /api/v1/users?countries=DEU&countries=FRA&offset=0&limit=10 → 200 OK
    """
    filters = ListUsersFilters(countries=countries) if countries else None
    message = ListUsersRequest(filters=filters, offset=offset, limit=limit)

    match await handler.list_users(message):
        case Success(value=response):
            return response
        case Failure(error=error):
            return ErrorResponseBuilder.from_request_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@router.get(
    "/{user_id}",
    response_model=GetUserResponse,
    responses=_ERROR_RESPONSES,
    summary="Get user",
)
async def get_user(
    request: Request,
    user_id: str,
    handler: UserRequestHandler = Depends(get_user_request_handler),
) -> GetUserResponse | JSONResponse:
    """Fetch one user.

    GET /api/v1/users/{user_id} → 200 OK
    """
    match await handler.get_user(GetUserRequest(id=user_id)):
        case Success(value=response):
            return response
        case Failure(error=error):
            return ErrorResponseBuilder.from_request_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@router.patch(
    "",
    response_model=UpdateUserResponse,
    responses=_ERROR_RESPONSES,
    summary="Update user",
)
async def update_user(
    request: Request,
    data: UpdateUserRequest,
    handler: UserRequestHandler = Depends(get_user_request_handler),
) -> UpdateUserResponse | JSONResponse:
    """Write the fields named in update_fields.

    PATCH /api/v1/users → 200 OK
    """
    match await handler.update_user(data):
        case Success(value=response):
            return response
        case Failure(error=error):
            return ErrorResponseBuilder.from_request_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ERROR_RESPONSES,
    summary="Delete user",
)
async def delete_user(
    request: Request,
    user_id: str,
    handler: UserRequestHandler = Depends(get_user_request_handler),
) -> Response:
    """Delete a user.

    DELETE /api/v1/users/{user_id} → 204 No Content
    """
    match await handler.delete_user(DeleteUserRequest(id=user_id)):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_request_error(
                error=error, request=request, trace_id=get_trace_id()
            )
