"""Pytest configuration and shared fixtures.

This file ensures:
1. Settings resolve to the in-process test stack before any app import
2. Custom markers are registered
3. Database fixtures are isolated (fresh in-memory SQLite per test)
4. Domain objects are built through one factory
"""

import os

# Must run before user_service.core.config builds its module-level settings.
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("EVENT_PUBLISHER", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from user_service.domain.entities.user import User  # noqa: E402
from user_service.schemas.user_schemas import UserSchema  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: HTTP endpoint tests")


@pytest_asyncio.fixture
async def test_database():
    """Provide a fresh Database with the schema created.

    Each test gets its own in-memory SQLite database, so no data leaks
    between tests. The engine is disposed afterwards.

    Usage:
        async def test_something(test_database):
            async with test_database.session() as session:
                ...
    """
    from user_service.infrastructure.persistence.database import Database

    database = Database(TEST_DATABASE_URL)
    await database.create_all()

    yield database

    await database.close()


@pytest.fixture
def make_user():
    """Factory for unsaved User entities with valid defaults.

    Usage:
        def test_something(make_user):
            user = make_user(email="other@example.com", country="FRA")
    """

    def _make_user(**overrides) -> User:
        values = {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "nickname": "ada",
            "password": "s3cret",
            "email": "ada@example.com",
            "country": "GBR",
        }
        values.update(overrides)
        return User(**values)

    return _make_user


@pytest.fixture
def make_user_schema():
    """Factory for valid UserSchema request records."""

    def _make_user_schema(**overrides) -> UserSchema:
        values = {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "nickname": "ada",
            "password": "s3cret",
            "email": "ada@example.com",
            "country": "GBR",
        }
        values.update(overrides)
        return UserSchema(**values)

    return _make_user_schema
