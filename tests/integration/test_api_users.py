"""
Integration tests for /v1/users endpoints.
Uses TestClient with the real use cases wired to an in-memory repository (no real DB).
"""
import warnings
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from app.di.base_container import BaseContainer
from app.di.providers import UserProvider
from app.domain.exceptions import RepositoryError
from app.domain.repositories.user_repository import UserRepository

VALID_ID = "507f1f77bcf86cd799439011"


def _build_container(repository) -> BaseContainer:
    container = BaseContainer()
    container.register_singleton(UserRepository, repository)
    UserProvider.register(container)
    return container


@pytest.fixture
def client(memory_repo):
    """Create test client backed by the in-memory repository."""
    from app.main import app

    container = _build_container(memory_repo)
    with patch("app.api.v1.user_controller.get_container", return_value=container), patch(
        "app.main.get_container", return_value=container
    ):
        with TestClient(app) as c:
            yield c


@pytest.fixture
def failing_client():
    """Create test client whose repository fails every call."""
    from app.main import app

    repository = AsyncMock(spec=UserRepository)
    error = RepositoryError("connection refused by mongo-0:27017")
    repository.find_all.side_effect = error
    repository.create.side_effect = error
    repository.update_by_id.side_effect = error
    repository.delete_by_id.side_effect = error
    container = _build_container(repository)
    with patch("app.api.v1.user_controller.get_container", return_value=container), patch(
        "app.main.get_container", return_value=container
    ):
        with TestClient(app) as c:
            yield c


def _create(client, email="test@example.com", full_name="JohnDoe"):
    return client.post("/v1/users", json={"email": email, "fullName": full_name})


class TestUsersAPI:
    """Tests for /v1/users endpoints"""

    def test_list_empty(self, client):
        response = client.get("/v1/users")
        assert response.status_code == 200
        assert response.json() == {"data": []}

    def test_create_success(self, client):
        response = _create(client)
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["email"] == "test@example.com"
        assert data["fullName"] == "JohnDoe"
        assert len(data["id"]) == 24

    def test_create_then_list(self, client):
        _create(client)
        response = client.get("/v1/users")
        assert [user["email"] for user in response.json()["data"]] == ["test@example.com"]

    def test_create_duplicate_email_returns_409(self, client):
        _create(client)
        response = _create(client, full_name="Another User")
        assert response.status_code == 409
        assert response.json() == {"message": "E_DUPLICATE_EMAIL"}
        assert len(client.get("/v1/users").json()["data"]) == 1

    def test_create_empty_email_returns_422(self, client):
        response = client.post("/v1/users", json={"email": "", "fullName": "Test"})
        assert response.status_code == 422
        body = response.json()
        assert body["message"] == "E_MISSING_OR_INVALID_PARAMS"
        assert body["details"][0] == {
            "message": '"email" is not allowed to be empty',
            "path": ["email"],
            "kind": "empty",
        }

    @pytest.mark.parametrize("full_name, kind", [
        ("", "empty"),
        ("asd", "too_short"),
        ("a" * 31, "too_long"),
        ("John D0e", "pattern_mismatch"),
    ])
    def test_create_invalid_full_name_returns_422(self, client, full_name, kind):
        response = _create(client, full_name=full_name)
        assert response.status_code == 422
        assert response.json()["details"][0]["kind"] == kind

    def test_create_non_object_body_returns_422(self, client):
        response = client.post("/v1/users", json=["test@example.com"])
        assert response.status_code == 422
        assert response.json()["details"][0]["kind"] == "invalid_type"

    def test_malformed_json_returns_422(self, client):
        response = client.post(
            "/v1/users",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422
        assert response.json()["message"] == "E_MISSING_OR_INVALID_PARAMS"

    def test_422_responses_raise_no_status_deprecation(self, client):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            client.post("/v1/users", json={"email": "", "fullName": "JohnDoe"})
            client.post("/v1/users", content="{not json", headers={"Content-Type": "application/json"})
        assert not [w for w in caught if "HTTP_422" in str(w.message)]

    def test_get_found(self, client):
        created = _create(client).json()["data"]
        response = client.get(f"/v1/users/{created['id']}")
        assert response.status_code == 200
        assert response.json() == {"data": created}

    def test_get_nonexistent_returns_null(self, client):
        response = client.get(f"/v1/users/{VALID_ID}")
        assert response.status_code == 200
        assert response.json() == {"data": None}

    def test_get_malformed_id_returns_422(self, client):
        response = client.get("/v1/users/not-an-object-id")
        assert response.status_code == 422
        assert response.json()["details"][0]["path"] == ["id"]

    def test_update_success(self, client):
        created = _create(client).json()["data"]
        response = client.put("/v1/users", json={"id": created["id"], "fullName": "Jane Doe"})
        assert response.status_code == 200
        assert response.json() == {"data": {"matched": True, "modified": True}}
        assert client.get(f"/v1/users/{created['id']}").json()["data"]["fullName"] == "Jane Doe"

    def test_update_nonexistent(self, client):
        response = client.put("/v1/users", json={"id": VALID_ID, "fullName": "Jane Doe"})
        assert response.status_code == 200
        assert response.json() == {"data": {"matched": False, "modified": False}}

    def test_update_short_name_returns_422(self, client):
        response = client.put("/v1/users", json={"id": VALID_ID, "fullName": "abcd"})
        assert response.status_code == 422
        assert response.json()["details"][0]["kind"] == "too_short"

    def test_delete_existing(self, client):
        created = _create(client).json()["data"]
        response = client.request("DELETE", "/v1/users", json={"id": created["id"]})
        assert response.status_code == 200
        assert response.json() == {"data": {"deleted": True}}
        assert client.get(f"/v1/users/{created['id']}").json() == {"data": None}

    def test_delete_nonexistent(self, client):
        response = client.request("DELETE", "/v1/users", json={"id": VALID_ID})
        assert response.status_code == 200
        assert response.json() == {"data": {"deleted": False}}

    def test_delete_without_body_returns_422(self, client):
        response = client.request("DELETE", "/v1/users")
        assert response.status_code == 422


class TestUsersAPIFailures:
    """Storage failures map to 500 without leaking driver details"""

    def test_list_failure(self, failing_client):
        response = failing_client.get("/v1/users")
        assert response.status_code == 500
        assert response.json() == {"message": "E_INTERNAL_SERVER_ERROR"}

    def test_create_failure(self, failing_client):
        response = _create(failing_client)
        assert response.status_code == 500
        assert "mongo" not in response.text

    def test_validation_still_runs_first(self, failing_client):
        response = failing_client.put("/v1/users", json={"id": "bad", "fullName": "Jane Doe"})
        assert response.status_code == 422

    def test_unhandled_exception_returns_500(self):
        from app.main import app

        container = MagicMock()
        container.get.side_effect = RuntimeError("container exploded")
        with patch("app.api.v1.user_controller.get_container", return_value=container), patch(
            "app.main.get_container", return_value=container
        ):
            with TestClient(app, raise_server_exceptions=False) as c:
                response = c.get("/v1/users")
        assert response.status_code == 500
        assert response.json() == {"message": "E_INTERNAL_SERVER_ERROR"}


class TestLifespan:
    """Startup index creation"""

    def test_indexes_ensured_on_startup(self):
        from app.main import app

        repository = AsyncMock(spec=UserRepository)
        container = _build_container(repository)
        with patch("app.main.get_container", return_value=container):
            with TestClient(app):
                pass
        repository.ensure_indexes.assert_awaited_once()

    def test_index_creation_can_be_disabled(self, mock_settings):
        from app.main import app

        mock_settings.mongo_ensure_indexes = False
        repository = AsyncMock(spec=UserRepository)
        container = _build_container(repository)
        with patch("app.main.get_container", return_value=container):
            with TestClient(app):
                pass
        repository.ensure_indexes.assert_not_called()

    def test_startup_survives_index_failure(self):
        from app.main import app

        repository = AsyncMock(spec=UserRepository)
        repository.ensure_indexes.side_effect = RepositoryError("mongo unavailable")
        container = _build_container(repository)
        with patch("app.main.get_container", return_value=container), patch(
            "app.api.v1.user_controller.get_container", return_value=container
        ):
            repository.find_all.return_value = []
            with TestClient(app) as c:
                assert c.get("/v1/users").status_code == 200
