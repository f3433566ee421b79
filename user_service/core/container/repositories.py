"""Repository dependency factories."""

from fastapi import Depends

from user_service.core.container.infrastructure import get_database
from user_service.infrastructure.persistence.database import Database
from user_service.infrastructure.persistence.repositories import UserRepository


def get_user_repository(
    database: Database = Depends(get_database),
) -> UserRepository:
    """Get user repository.

    The repository opens its own sessions from the Database (joining any
    active transaction scope), so one instance serves a whole request.

    Args:
        database: Database manager. Injected via Depends(get_database).

    Returns:
        UserRepository instance.
    """
    return UserRepository(database=database)
