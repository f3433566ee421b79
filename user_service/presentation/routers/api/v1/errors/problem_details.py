"""Error body schema shared by every non-2xx response.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457

Bodies are served as application/problem+json.
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One offending field of a rejected request.

    Examples:
        >>> ErrorDetail(
        ...     field="country",
        ...     code="invalid_argument",
        ...     message="country must be exactly 3 characters",
        ... )
    """

    field: str = Field(..., description="Dotted path of the offending field")
    code: str = Field(..., description="Error category, e.g. invalid_argument or missing")
    message: str = Field(..., description="What is wrong with the value")


class ProblemDetails(BaseModel):
    """Problem body returned for handler, routing and validation errors.

    Attributes:
        type: ``{api_base_url}/errors/{category}``
        title: Fixed title for the category
        status: Same value as the response status line
        detail: Message produced by the failing layer
        instance: Request path
        errors: Per-field entries, 422 responses only
        trace_id: Value of the X-Trace-Id response header

    Examples:
        >>> ProblemDetails(
        ...     type="http://localhost:8000/errors/not_found",
        ...     title="Resource Not Found",
        ...     status=404,
        ...     detail="user is not found",
        ...     instance="/api/v1/users/01890a5d-ac96-774b-bcce-b302099a8057",
        ... )
    """

    type: str = Field(
        ...,
        description="Category URI",
        examples=["http://localhost:8000/errors/invalid_argument"],
    )
    title: str = Field(
        ...,
        description="Category title",
        examples=["Invalid Argument"],
    )
    status: int = Field(
        ...,
        description="HTTP status",
        examples=[400],
    )
    detail: str = Field(
        ...,
        description="Failure message",
        examples=["email must be a valid email address"],
    )
    instance: str = Field(
        ...,
        description="Path of the failed request",
        examples=["/api/v1/users"],
    )
    errors: list[ErrorDetail] | None = Field(
        default=None,
        description="Per-field validation errors",
    )
    trace_id: str | None = Field(
        default=None,
        description="Trace id echoed in X-Trace-Id",
    )
