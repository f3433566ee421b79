"""Application-wide exception handlers.

Requests that never reach a user handler still answer with problem
details:

    starlette HTTPException   unknown route, wrong method   -> its own status
    RequestValidationError    body/query of the wrong shape -> 422
    Exception                 anything unhandled            -> 500, logged
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from user_service.core.config import settings
from user_service.presentation.handlers.status import INTERNAL_ERROR_MESSAGE
from user_service.presentation.routers.api.v1.errors.error_response_builder import (
    PROBLEM_JSON,
)
from user_service.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

HTTP_422_UNPROCESSABLE = 422

# status -> (title, type slug)
_PROBLEM_TYPES: dict[int, tuple[str, str]] = {
    status.HTTP_400_BAD_REQUEST: ("Bad Request", "bad_request"),
    status.HTTP_404_NOT_FOUND: ("Resource Not Found", "not_found"),
    status.HTTP_405_METHOD_NOT_ALLOWED: ("Method Not Allowed", "method_not_allowed"),
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: (
        "Unsupported Media Type",
        "unsupported_media_type",
    ),
    HTTP_422_UNPROCESSABLE: ("Validation Failed", "validation_failed"),
    status.HTTP_500_INTERNAL_SERVER_ERROR: (
        "Internal Server Error",
        "internal",
    ),
}


def _problem_response(
    request: Request,
    status_code: int,
    detail: str,
    errors: list[ErrorDetail] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    title, slug = _PROBLEM_TYPES.get(status_code, ("Error", "error"))
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=request.url.path,
        errors=errors or None,
        trace_id=getattr(request.state, "trace_id", None),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
        media_type=PROBLEM_JSON,
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render routing errors (404 unknown path, 405 wrong method)."""
    assert isinstance(exc, HTTPException)

    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return _problem_response(
        request, exc.status_code, detail, headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Render structurally malformed input as 422 with one entry per problem.

    Rules on field values (email syntax, country length, ...) are not
    checked here; the request validator reports those as 400.
    """
    assert isinstance(exc, RequestValidationError)

    errors = []
    for error in exc.errors():
        path = [
            str(part)
            for part in error.get("loc", ())
            if part not in ("body", "query", "path")
        ]
        errors.append(
            ErrorDetail(
                field=".".join(path) or "unknown",
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    return _problem_response(
        request,
        HTTP_422_UNPROCESSABLE,
        "Request validation failed. Check 'errors' for details.",
        errors=errors,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled exception and answer with the generic message."""
    from user_service.core.container import get_logger

    get_logger().error(
        "unhandled exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
    )
    return _problem_response(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers above to an application."""
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
