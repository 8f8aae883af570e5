"""End-to-end tests for the user directory routes."""

import pytest
from fastapi.testclient import TestClient

from user_directory.config import Settings
from user_directory.factory import create_app
from user_directory.models.user import User
from user_directory.services.user_store import InMemoryUserStore


@pytest.mark.unit
def test_root_returns_hello_world(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.text == "Hello World"
    assert response.headers["content-type"].startswith("text/plain")


@pytest.mark.unit
def test_list_usernames(client: TestClient) -> None:
    response = client.get("/users")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() == ["Steve Rogers", "Tony Stark", "Bruce Banner", "Natasha Romanoff", "Carol Danvers"]


@pytest.mark.unit
def test_get_user_by_id(client: TestClient) -> None:
    response = client.get("/users/2")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.text == '{"id":2,"name":"Bruce Banner"}'


@pytest.mark.unit
def test_get_unknown_user_returns_plain_not_found(client: TestClient) -> None:
    response = client.get("/users/99")

    assert response.status_code == 200
    assert response.text == "Not Found"
    assert response.headers["content-type"].startswith("text/plain")


@pytest.mark.unit
def test_get_user_with_non_integer_id_is_client_error(client: TestClient) -> None:
    response = client.get("/users/abc")

    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid user id: 'abc'"}


@pytest.mark.unit
@pytest.mark.parametrize("raw_id", ["2147483648", "-2147483649", "1" * 5000])
def test_get_user_with_out_of_range_id_is_client_error(client: TestClient, raw_id: str) -> None:
    response = client.get(f"/users/{raw_id}")

    assert response.status_code == 400
    assert response.json()["detail"].startswith("Invalid user id")


@pytest.mark.unit
def test_get_user_with_missing_id_is_client_error(client: TestClient) -> None:
    response = client.get("/users/")

    assert response.status_code == 400
    assert response.json() == {"detail": "Missing user id"}


@pytest.mark.unit
def test_not_found_status_is_configurable(settings: Settings, store: InMemoryUserStore) -> None:
    settings.not_found_status_code = 404

    with TestClient(create_app(settings, store)) as client:
        response = client.get("/users/99")

    assert response.status_code == 404
    assert response.text == "Not Found"


@pytest.mark.unit
def test_classic_seed_from_settings(settings: Settings) -> None:
    settings.user_seed = "classic"

    with TestClient(create_app(settings)) as client:
        assert client.get("/users").json() == ["Steve Rogers", "Tony Stark", "Carol Danvers"]
        assert client.get("/users/2").json() == {"id": 2, "name": "Carol Danvers"}


@pytest.mark.unit
def test_injected_store_is_served(settings: Settings) -> None:
    store = InMemoryUserStore([User(id=10, name="Sam Wilson")])

    with TestClient(create_app(settings, store)) as client:
        assert client.get("/users").json() == ["Sam Wilson"]
        assert client.get("/users/10").json() == {"id": 10, "name": "Sam Wilson"}


class _BrokenStore(InMemoryUserStore):
    def find_by_id(self, user_id: int) -> User | None:
        raise RuntimeError("store unavailable")


@pytest.mark.unit
def test_unhandled_error_returns_500(settings: Settings) -> None:
    app = create_app(settings, _BrokenStore([]))

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/users/1", headers={"Origin": "http://localhost:5173"})

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal Server Error"}
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
