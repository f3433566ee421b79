"""Structured logging port.

Services and handlers log through this protocol so the backend (structlog
today) stays an infrastructure detail. Messages are short constant strings;
variable data goes into keyword context:

    logger.info("user is created", user_id=user.id)

    scoped = logger.bind(trace_id=trace_id)
    scoped.warning("event publish failed", topic=topic)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Anything with leveled, keyword-context log methods."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Diagnostic detail, usually disabled outside development."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """A completed operation (user created, server started)."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Something degraded but the caller still gets its answer."""
        ...

    def error(
        self, message: str, /, *, error: object | None = None, **context: Any
    ) -> None:
        """A failed operation.

        Args:
            message: Constant event text.
            error: Exception or DomainError; its type name and message are
                added to the entry as error_type and error_message.
            **context: Extra key-value fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: object | None = None, **context: Any
    ) -> None:
        """The process cannot carry on (startup failure)."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Copy of this logger that adds ``context`` to every entry."""
        ...
