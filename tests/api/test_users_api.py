"""API tests for user endpoints.

Tests the complete HTTP request/response cycle for user management:
- POST   /api/v1/users             (CreateUser)
- GET    /api/v1/users/{user_id}   (GetUser)
- GET    /api/v1/users             (ListUsers)
- PATCH  /api/v1/users             (UpdateUser)
- DELETE /api/v1/users/{user_id}   (DeleteUser)
- Health endpoints and trace id propagation

Architecture:
- Uses real app with dependency overrides
- Stub handler returns canned Results to test request/response flow
- Verifies RFC 9457 problem details for errors

Note:
    These tests focus on HTTP mapping and error formats. The full stack
    (real handler, service and database) is covered in integration tests.
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from user_service.core.container import get_user_request_handler
from user_service.core.result import Failure, Success
from user_service.domain.enums.update_user_field import UpdateUserField
from user_service.main import app
from user_service.presentation.handlers.status import RequestError, StatusCode
from user_service.schemas.user_schemas import (
    CreateUserResponse,
    DeleteUserResponse,
    GetUserResponse,
    ListUsersResponse,
    UpdateUserResponse,
    UserSchema,
)

USER_ID = "01890a5d-ac96-774b-bcce-b302099a8057"

USER_PAYLOAD = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "nickname": "ada",
    "password": "s3cret",
    "email": "ada@example.com",
    "country": "GBR",
}


def _user_schema(**overrides) -> UserSchema:
    values = {"id": USER_ID, **USER_PAYLOAD, "created_at": datetime.now(UTC)}
    values.update(overrides)
    return UserSchema(**values)


# =============================================================================
# Test Doubles - Stub handler
# =============================================================================


class StubUserRequestHandler:
    """Stub handler recording requests and returning a fixed Result."""

    def __init__(self, result):
        """Initialize stub with the Result every operation returns.

        Args:
            result: Success or Failure returned by every method.
        """
        self.result = result
        self.requests = []

    async def _answer(self, request):
        self.requests.append(request)
        return self.result

    async def create_user(self, request):
        return await self._answer(request)

    async def get_user(self, request):
        return await self._answer(request)

    async def list_users(self, request):
        return await self._answer(request)

    async def update_user(self, request):
        return await self._answer(request)

    async def delete_user(self, request):
        return await self._answer(request)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def override_dependencies():
    """Clear dependency overrides after each test."""
    yield

    app.dependency_overrides.clear()


@pytest.fixture
def client():
    """Create TestClient for API tests using real app."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def use_handler():
    """Install a stub handler returning the given Result."""

    def _use_handler(result) -> StubUserRequestHandler:
        stub = StubUserRequestHandler(result)
        app.dependency_overrides[get_user_request_handler] = lambda: stub
        return stub

    return _use_handler


# =============================================================================
# Tests: POST /api/v1/users
# =============================================================================


@pytest.mark.api
class TestCreateUser:
    """Tests for POST /api/v1/users endpoint."""

    def test_create_user_success(self, client, use_handler):
        """Should return 201 Created with the stored user."""
        stub = use_handler(Success(value=CreateUserResponse(user=_user_schema())))

        response = client.post("/api/v1/users", json={"user": USER_PAYLOAD})

        assert response.status_code == 201
        data = response.json()
        assert data["user"]["id"] == USER_ID
        assert data["user"]["email"] == "ada@example.com"
        assert data["user"]["created_at"] is not None
        assert stub.requests[0].user.country == "GBR"

    def test_create_user_invalid_argument(self, client, use_handler):
        """Should return 400 problem details naming the field."""
        use_handler(
            Failure(
                error=RequestError(
                    status=StatusCode.INVALID_ARGUMENT,
                    message="email must be a valid email address",
                    field="email",
                )
            )
        )

        response = client.post(
            "/api/v1/users", json={"user": {**USER_PAYLOAD, "email": "user@"}}
        )

        assert response.status_code == 400
        assert response.headers["content-type"] == "application/problem+json"
        data = response.json()
        assert data["title"] == "Invalid Argument"
        assert data["detail"] == "email must be a valid email address"
        assert data["instance"] == "/api/v1/users"
        assert data["errors"][0]["field"] == "email"

    def test_create_user_duplicate_email(self, client, use_handler):
        """Should return 409 Conflict."""
        use_handler(
            Failure(
                error=RequestError(
                    status=StatusCode.ALREADY_EXISTS,
                    message="user already exists with this email",
                )
            )
        )

        response = client.post("/api/v1/users", json={"user": USER_PAYLOAD})

        assert response.status_code == 409
        assert response.json()["detail"] == "user already exists with this email"

    def test_create_user_internal_error(self, client, use_handler):
        """Should return 500 with the generic message."""
        use_handler(Failure(error=RequestError.internal()))

        response = client.post("/api/v1/users", json={"user": USER_PAYLOAD})

        assert response.status_code == 500
        assert response.json()["detail"] == "oops something went wrong!"

    def test_create_user_malformed_body(self, client, use_handler):
        """Should return 422 when the body has the wrong shape."""
        use_handler(Success(value=CreateUserResponse(user=_user_schema())))

        response = client.post("/api/v1/users", json={"user": "not-an-object"})

        assert response.status_code == 422
        assert response.json()["title"] == "Validation Failed"


# =============================================================================
# Tests: GET /api/v1/users/{user_id}
# =============================================================================


@pytest.mark.api
class TestGetUser:
    """Tests for GET /api/v1/users/{user_id} endpoint."""

    def test_get_user_success(self, client, use_handler):
        """Should return 200 with the user."""
        stub = use_handler(Success(value=GetUserResponse(user=_user_schema())))

        response = client.get(f"/api/v1/users/{USER_ID}")

        assert response.status_code == 200
        assert response.json()["user"]["nickname"] == "ada"
        assert stub.requests[0].id == USER_ID

    def test_get_user_not_found(self, client, use_handler):
        """Should return 404 problem details."""
        use_handler(
            Failure(
                error=RequestError(
                    status=StatusCode.NOT_FOUND, message="user is not found"
                )
            )
        )

        response = client.get(f"/api/v1/users/{USER_ID}")

        assert response.status_code == 404
        data = response.json()
        assert data["detail"] == "user is not found"
        assert data["type"].endswith("/errors/not_found")


# =============================================================================
# Tests: GET /api/v1/users
# =============================================================================


@pytest.mark.api
class TestListUsers:
    """Tests for GET /api/v1/users endpoint."""

    def test_list_users_with_filters(self, client, use_handler):
        """Should pass countries, offset and limit to the handler."""
        stub = use_handler(
            Success(value=ListUsersResponse(users=[_user_schema(country="DEU")]))
        )

        response = client.get(
            "/api/v1/users",
            params={"countries": ["DEU", "FRA"], "offset": 5, "limit": 10},
        )

        assert response.status_code == 200
        assert response.json()["users"][0]["country"] == "DEU"
        request = stub.requests[0]
        assert request.filters.countries == ["DEU", "FRA"]
        assert request.offset == 5
        assert request.limit == 10

    def test_list_users_defaults(self, client, use_handler):
        """Should send no filters and a zero limit by default."""
        stub = use_handler(Success(value=ListUsersResponse()))

        response = client.get("/api/v1/users")

        assert response.status_code == 200
        assert response.json() == {"users": []}
        assert stub.requests[0].filters is None
        assert stub.requests[0].limit == 0

    def test_list_users_negative_limit(self, client, use_handler):
        """Should reject negative pagination at the HTTP layer."""
        use_handler(Success(value=ListUsersResponse()))

        response = client.get("/api/v1/users", params={"limit": -1})

        assert response.status_code == 422


# =============================================================================
# Tests: PATCH /api/v1/users
# =============================================================================


@pytest.mark.api
class TestUpdateUser:
    """Tests for PATCH /api/v1/users endpoint."""

    def test_update_user_accepts_field_names_and_numbers(self, client, use_handler):
        """Should parse update_fields given as names or wire numbers."""
        stub = use_handler(
            Success(value=UpdateUserResponse(user=_user_schema(first_name="Augusta")))
        )

        response = client.patch(
            "/api/v1/users",
            json={
                "user": {**USER_PAYLOAD, "id": USER_ID, "first_name": "Augusta"},
                "update_fields": ["FIRST_NAME", 6],
            },
        )

        assert response.status_code == 200
        assert response.json()["user"]["first_name"] == "Augusta"
        assert stub.requests[0].update_fields == [
            UpdateUserField.FIRST_NAME,
            UpdateUserField.COUNTRY,
        ]

    def test_update_user_unknown_field_name(self, client, use_handler):
        """Should return 422 for a field name that does not exist."""
        use_handler(Success(value=UpdateUserResponse(user=_user_schema())))

        response = client.patch(
            "/api/v1/users",
            json={"user": {**USER_PAYLOAD, "id": USER_ID}, "update_fields": ["AGE"]},
        )

        assert response.status_code == 422

    def test_update_user_invalid_mask(self, client, use_handler):
        """Should return 400 for a rejected field mask."""
        use_handler(
            Failure(
                error=RequestError(
                    status=StatusCode.INVALID_ARGUMENT,
                    message="should only input unique update fields",
                    field="update_fields",
                )
            )
        )

        response = client.patch(
            "/api/v1/users",
            json={
                "user": {**USER_PAYLOAD, "id": USER_ID},
                "update_fields": ["EMAIL", "EMAIL"],
            },
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "update_fields"


# =============================================================================
# Tests: DELETE /api/v1/users/{user_id}
# =============================================================================


@pytest.mark.api
class TestDeleteUser:
    """Tests for DELETE /api/v1/users/{user_id} endpoint."""

    def test_delete_user_success(self, client, use_handler):
        """Should return 204 No Content."""
        stub = use_handler(Success(value=DeleteUserResponse()))

        response = client.delete(f"/api/v1/users/{USER_ID}")

        assert response.status_code == 204
        assert response.content == b""
        assert stub.requests[0].id == USER_ID

    def test_delete_user_invalid_id(self, client, use_handler):
        """Should return 400 for a malformed id."""
        use_handler(
            Failure(
                error=RequestError(
                    status=StatusCode.INVALID_ARGUMENT,
                    message="user id must be in the UUID format",
                    field="id",
                )
            )
        )

        response = client.delete("/api/v1/users/abc")

        assert response.status_code == 400
        assert response.json()["detail"] == "user id must be in the UUID format"


# =============================================================================
# Tests: Cross-cutting
# =============================================================================


@pytest.mark.api
class TestCrossCutting:
    """Tests for health endpoints, tracing and unknown routes."""

    def test_health(self, client):
        """Should report liveness."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    @pytest.mark.parametrize(
        ("connected", "status_code", "body"),
        [
            (True, 200, {"status": "ready"}),
            (False, 503, {"status": "unavailable"}),
        ],
    )
    def test_readiness(self, client, monkeypatch, connected, status_code, body):
        """Should report readiness from the database check."""
        database = Mock()
        database.check_connection = AsyncMock(return_value=connected)
        monkeypatch.setattr("user_service.main.get_database", lambda: database)

        response = client.get("/health/ready")

        assert response.status_code == status_code
        assert response.json() == body

    def test_trace_id_is_echoed(self, client, use_handler):
        """Should reuse an incoming X-Trace-Id in header and problem body."""
        use_handler(
            Failure(
                error=RequestError(
                    status=StatusCode.NOT_FOUND, message="user is not found"
                )
            )
        )

        response = client.get(
            f"/api/v1/users/{USER_ID}", headers={"X-Trace-Id": "trace-123"}
        )

        assert response.headers["X-Trace-Id"] == "trace-123"
        assert response.json()["trace_id"] == "trace-123"

    def test_trace_id_is_generated(self, client):
        """Should generate a trace id when none is sent."""
        response = client.get("/health")

        assert response.headers["X-Trace-Id"]

    def test_unknown_route(self, client):
        """Should return 404 problem details for unknown paths."""
        response = client.get("/api/v1/unknown")

        assert response.status_code == 404
        assert response.headers["content-type"] == "application/problem+json"
