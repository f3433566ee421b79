"""Error response builder for RFC 9457 Problem Details.

Converts handler RequestError values into problem responses.

Status mapping:
    INVALID_ARGUMENT -> 400
    NOT_FOUND        -> 404
    ALREADY_EXISTS   -> 409
    INTERNAL         -> 500
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from user_service.core.config import settings
from user_service.presentation.handlers.status import RequestError, StatusCode
from user_service.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

PROBLEM_JSON = "application/problem+json"

_STATUS_INFO: dict[StatusCode, tuple[int, str]] = {
    StatusCode.INVALID_ARGUMENT: (status.HTTP_400_BAD_REQUEST, "Invalid Argument"),
    StatusCode.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    StatusCode.ALREADY_EXISTS: (status.HTTP_409_CONFLICT, "Resource Conflict"),
    StatusCode.INTERNAL: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
    ),
}


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> response = ErrorResponseBuilder.from_request_error(
        ...     error=RequestError(status=StatusCode.NOT_FOUND, message="user is not found"),
        ...     request=request,
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    @staticmethod
    def from_request_error(
        error: RequestError,
        request: Request,
        trace_id: str | None,
    ) -> JSONResponse:
        """Convert RequestError to an RFC 9457 JSON response.

        Args:
            error: Handler failure to render
            request: FastAPI Request object (for instance URL)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with ProblemDetails content
        """
        status_code = ErrorResponseBuilder.get_status_code(error.status)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.status.value}",
            title=ErrorResponseBuilder.get_title(error.status),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id,
        )

        if error.status is StatusCode.INVALID_ARGUMENT and error.field:
            problem.errors = [
                ErrorDetail(
                    field=error.field,
                    code=error.status.value,
                    message=error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            media_type=PROBLEM_JSON,
        )

    @staticmethod
    def get_status_code(code: StatusCode) -> int:
        """Map a status category to an HTTP status code."""
        return _STATUS_INFO[code][0]

    @staticmethod
    def get_title(code: StatusCode) -> str:
        """Human-readable title for a status category."""
        return _STATUS_INFO[code][1]
