"""Per-request trace id.

An incoming ``X-Trace-Id`` header is reused, otherwise a UUID4 is minted.
The id is echoed on the response, stored on ``request.state``, exposed via
get_trace_id() for problem responses and bound into structlog's context so
handler and service log lines carry it.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Awaitable, Callable
from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

TRACE_HEADER = "X-Trace-Id"

_current_trace_id: ContextVar[str | None] = ContextVar("trace_id", default=None)


def get_trace_id() -> str | None:
    """Trace id of the request being served, None outside a request."""
    return _current_trace_id.get()


class TraceMiddleware(BaseHTTPMiddleware):
    """Assigns a trace id to every request."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        trace_id = request.headers.get(TRACE_HEADER) or str(uuid4())
        request.state.trace_id = trace_id

        token = _current_trace_id.set(trace_id)
        structlog.contextvars.bind_contextvars(trace_id=trace_id)
        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars("trace_id")
            _current_trace_id.reset(token)

        response.headers[TRACE_HEADER] = trace_id
        return response
