"""HTTP middleware."""

from user_service.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)

__all__ = ["TraceMiddleware", "get_trace_id"]
