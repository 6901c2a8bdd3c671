"""HTTP client for the travel journal API."""

from dataclasses import dataclass, field
from datetime import date
from typing import BinaryIO

import httpx


class JournalClientError(Exception):
    """Raised when the API answers with an error status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


@dataclass
class HttpxJournalClient:
    """API client that keeps the session token and user in memory."""

    http_client: httpx.AsyncClient
    access_token: str | None = field(default=None, init=False)
    user: dict[str, object] | None = field(default=None, init=False)

    @classmethod
    def create(cls, base_url: str) -> "HttpxJournalClient":
        """Create a client with a managed httpx session."""
        return cls(http_client=httpx.AsyncClient(base_url=base_url, timeout=10))

    @property
    def is_authenticated(self) -> bool:
        return self.access_token is not None

    async def create_account(
        self, full_name: str, email: str, password: str
    ) -> dict[str, object]:
        """Register and keep the returned session."""
        payload = await self._request(
            "POST",
            "/create-account",
            json={"fullName": full_name, "email": email, "password": password},
        )
        self._remember_session(payload)
        return payload

    async def login(self, email: str, password: str) -> dict[str, object]:
        """Log in and keep the returned session."""
        payload = await self._request(
            "POST", "/login", json={"email": email, "password": password}
        )
        self._remember_session(payload)
        return payload

    def logout(self) -> None:
        """Forget the in-memory session."""
        self.access_token = None
        self.user = None

    async def get_user(self) -> dict[str, object]:
        """Return the authenticated user's profile."""
        payload = await self._request("GET", "/get-user", authenticated=True)
        return payload["user"]

    async def upload_image(
        self, filename: str, content: bytes | BinaryIO, content_type: str
    ) -> str:
        """Upload an image and return its public URL."""
        payload = await self._request(
            "POST",
            "/image-upload",
            files={"image": (filename, content, content_type)},
        )
        return str(payload["imageUrl"])

    async def create_caption(  # noqa: PLR0913
        self,
        title: str,
        story: str,
        visited_location: str,
        image_url: str,
        visited_date: date,
    ) -> dict[str, object]:
        """Create a caption for the authenticated user."""
        payload = await self._request(
            "POST",
            "/caption",
            authenticated=True,
            json={
                "title": title,
                "story": story,
                "visitedLocation": visited_location,
                "imageUrl": image_url,
                "visitedDate": visited_date.isoformat(),
            },
        )
        return payload["caption"]

    async def list_captions(self) -> list[dict[str, object]]:
        """Return the authenticated user's captions."""
        payload = await self._request("GET", "/get-caption", authenticated=True)
        return payload["stories"]

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        authenticated: bool = False,
        **kwargs: object,
    ) -> dict:
        headers: dict[str, str] = {}
        if authenticated and self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        response = await self.http_client.request(
            method, path, headers=headers, **kwargs
        )
        if response.is_error:
            raise JournalClientError(response.status_code, _error_message(response))
        return response.json()

    def _remember_session(self, payload: dict) -> None:
        self.access_token = payload["accessToken"]
        self.user = payload["user"]


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason_phrase
