"""Request dependencies shared by the API routes."""

from fastapi import Depends, Header, Request

from travel_journal.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


def bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    parts = authorization.split(" ")
    if len(parts) < 2:  # noqa: PLR2004
        return None
    return parts[1] or None


async def require_user_id(
    token: str | None = Depends(bearer_token),
    container: AppContainer = Depends(get_container),
) -> str:
    """Validate the bearer token and return the caller's user id."""
    return container.auth_service.validate_token(token)
