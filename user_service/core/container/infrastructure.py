"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure:
- Database (PostgreSQL, SQLite in tests)
- Redis client (event streams)
- Logging (structlog console adapter)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from user_service.core.config import settings
from user_service.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from user_service.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns:
        Database manager with connection pool.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )


@lru_cache()
def get_redis_client() -> "Redis":
    """Get Redis client singleton (app-scoped).

    Connection pool is shared across the entire application.

    Returns:
        Async Redis client.
    """
    from redis.asyncio import ConnectionPool, Redis

    pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=50,
        decode_responses=False,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
    )
    return Redis(connection_pool=pool)


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from user_service.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )
