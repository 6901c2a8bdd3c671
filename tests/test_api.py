"""Tests for the HTTP API."""

from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from travel_journal.api.app import create_app
from travel_journal.containers import AppContainer
from travel_journal.services.tokens import TokenService
from tests.conftest import (
    TEST_SECRET,
    InMemoryCaptionRepository,
    InMemoryUserRepository,
)

CAPTION = {
    "title": "Sunrise over Bromo",
    "story": "We hiked up before dawn.",
    "visitedLocation": "Mount Bromo",
    "imageUrl": "http://testserver/uploads/1700000000000.jpg",
    "visitedDate": "2024-05-01",
}


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def _register(client: TestClient, email: str = "ann@x.com") -> str:
    response = client.post(
        "/create-account",
        json={"fullName": "Ann", "email": email, "password": "pw1"},
    )
    assert response.status_code == 201
    return response.json()["accessToken"]


def _auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "OK"


def test_client_page_is_served(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert "Create Caption" in response.text


def test_create_account_returns_user_and_token(client: TestClient) -> None:
    response = client.post(
        "/create-account",
        json={"fullName": "Ann", "email": "ann@x.com", "password": "pw1"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["error"] is False
    assert data["user"] == {"fullName": "Ann", "email": "ann@x.com"}
    assert data["accessToken"]
    assert "password" not in str(data["user"]).lower()


def test_create_account_twice_conflicts(
    client: TestClient, user_repository: InMemoryUserRepository
) -> None:
    _register(client)

    response = client.post(
        "/create-account",
        json={"fullName": "Ann", "email": "ann@x.com", "password": "pw2"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": True, "message": "User already exists"}
    assert len(user_repository.users) == 1


def test_create_account_missing_field(client: TestClient) -> None:
    response = client.post(
        "/create-account", json={"email": "ann@x.com", "password": "pw1"}
    )

    assert response.status_code == 400
    assert response.json()["message"] == "All fields are required"


def test_create_account_without_body(client: TestClient) -> None:
    response = client.post("/create-account")

    assert response.status_code == 400
    assert response.json()["error"] is True


def test_login_success(client: TestClient) -> None:
    _register(client)

    response = client.post("/login", json={"email": "ann@x.com", "password": "pw1"})

    assert response.status_code == 200
    assert response.json()["user"]["fullName"] == "Ann"


def test_login_wrong_password(client: TestClient) -> None:
    _register(client)

    response = client.post("/login", json={"email": "ann@x.com", "password": "nope"})

    assert response.status_code == 401
    assert "accessToken" not in response.json()


def test_login_unknown_email(client: TestClient) -> None:
    response = client.post("/login", json={"email": "who@x.com", "password": "pw1"})

    assert response.status_code == 404


def test_login_missing_password(client: TestClient) -> None:
    response = client.post("/login", json={"email": "ann@x.com"})

    assert response.status_code == 400


def test_get_user(client: TestClient) -> None:
    token = _register(client)

    response = client.get("/get-user", headers=_auth(token))

    assert response.status_code == 200
    assert response.json()["user"] == {"fullName": "Ann", "email": "ann@x.com"}


def test_get_user_for_missing_account(client: TestClient) -> None:
    token = TokenService(secret=TEST_SECRET).issue("0123456789abcdef01234567")

    response = client.get("/get-user", headers=_auth(token))

    assert response.status_code == 404


@pytest.mark.parametrize("path", ["/get-user", "/get-caption"])
def test_protected_routes_require_token(client: TestClient, path: str) -> None:
    assert client.get(path).status_code == 401
    assert client.get(path, headers={"Authorization": "Bearer"}).status_code == 401
    assert client.get(path, headers=_auth("garbage")).status_code == 403


def test_expired_token_is_forbidden(client: TestClient) -> None:
    _register(client)
    issued_at = datetime.now(tz=UTC) - timedelta(hours=73)
    stale = TokenService(secret=TEST_SECRET, clock=lambda: issued_at)

    response = client.get(
        "/get-caption", headers=_auth(stale.issue("0123456789abcdef01234567"))
    )

    assert response.status_code == 403
    assert response.json()["message"] == "Invalid token"


def test_create_and_list_caption(client: TestClient) -> None:
    token = _register(client)

    created = client.post("/caption", json=CAPTION, headers=_auth(token))
    listed = client.get("/get-caption", headers=_auth(token))

    assert created.status_code == 201
    caption = created.json()["caption"]
    assert caption["_id"]
    assert caption["visitedDate"] == "2024-05-01"
    assert caption["visitedLocation"] == "Mount Bromo"
    assert "isFavourite" not in caption
    assert listed.status_code == 200
    assert listed.json()["stories"] == [caption]


@pytest.mark.parametrize("missing", sorted(CAPTION))
def test_create_caption_missing_field(
    client: TestClient, caption_repository: InMemoryCaptionRepository, missing: str
) -> None:
    token = _register(client)

    response = client.post(
        "/caption", json={**CAPTION, missing: ""}, headers=_auth(token)
    )

    assert response.status_code == 400
    assert caption_repository.captions == {}


def test_create_caption_invalid_date(client: TestClient) -> None:
    token = _register(client)

    response = client.post(
        "/caption", json={**CAPTION, "visitedDate": "not-a-date"}, headers=_auth(token)
    )

    assert response.status_code == 400
    assert response.json()["error"] is True


def test_create_caption_requires_token(client: TestClient) -> None:
    assert client.post("/caption", json=CAPTION).status_code == 401


def test_list_captions_empty(client: TestClient) -> None:
    token = _register(client)

    response = client.get("/get-caption", headers=_auth(token))

    assert response.status_code == 200
    assert response.json() == {"stories": []}


def test_captions_are_isolated_between_users(client: TestClient) -> None:
    token_a = _register(client, "ann@x.com")
    token_b = _register(client, "bob@x.com")
    client.post("/caption", json=CAPTION, headers=_auth(token_a))

    response = client.get("/get-caption", headers=_auth(token_b))

    assert response.json()["stories"] == []


def test_image_upload_serves_file(client: TestClient, upload_dir: Path) -> None:
    response = client.post(
        "/image-upload",
        files={"image": ("beach.png", b"\x89PNG-bytes", "image/png")},
    )

    assert response.status_code == 201
    image_url = response.json()["imageUrl"]
    assert image_url.startswith("http://testserver/uploads/")
    assert image_url.endswith(".png")
    served = client.get(image_url.removeprefix("http://testserver"))
    assert served.status_code == 200
    assert served.content == b"\x89PNG-bytes"


def test_image_upload_uses_public_base_url(container: AppContainer) -> None:
    container.settings.public_base_url = "https://journal.example.com"
    client = TestClient(create_app(container))

    response = client.post(
        "/image-upload",
        files={"image": ("beach.jpg", b"jpeg", "image/jpeg")},
    )

    assert response.json()["imageUrl"].startswith(
        "https://journal.example.com/uploads/"
    )


def test_image_upload_rejects_non_image(client: TestClient, upload_dir: Path) -> None:
    response = client.post(
        "/image-upload",
        files={"image": ("notes.txt", b"hello", "text/plain")},
    )

    assert response.status_code == 400
    assert list(upload_dir.glob("*")) == []


def test_image_upload_without_file(client: TestClient) -> None:
    response = client.post("/image-upload")

    assert response.status_code == 400
    assert response.json()["message"] == "No image uploaded"


def test_unexpected_failure_returns_500(container: AppContainer) -> None:
    class BrokenRepository(InMemoryCaptionRepository):
        async def list_by_owner(self, user_id: str) -> list:
            raise RuntimeError("store unreachable")

    container.caption_service.repository = BrokenRepository()
    client = TestClient(create_app(container), raise_server_exceptions=False)
    token = _register(client)

    response = client.get("/get-caption", headers=_auth(token))

    assert response.status_code == 500
    assert response.json() == {"error": True, "message": "Internal server error"}


def test_unknown_route_uses_error_body(client: TestClient) -> None:
    response = client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.json()["error"] is True


def test_register_login_caption_flow(client: TestClient) -> None:
    token_a = _register(client)
    login = client.post("/login", json={"email": "ann@x.com", "password": "pw1"})
    token_b = login.json()["accessToken"]

    assert login.status_code == 200
    assert token_a != token_b
    assert client.get("/get-user", headers=_auth(token_a)).status_code == 200
    assert client.get("/get-user", headers=_auth(token_b)).status_code == 200

    created = client.post("/caption", json=CAPTION, headers=_auth(token_b))
    stories = client.get("/get-caption", headers=_auth(token_b)).json()["stories"]

    assert created.status_code == 201
    assert [story["title"] for story in stories] == ["Sunrise over Bromo"]
