"""Signed session tokens."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import uuid4

import jwt

from travel_journal.domain.errors import ForbiddenError, UnauthorizedError

_ALGORITHM = "HS256"
_USER_CLAIM = "userId"


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class TokenService:
    """Issue and validate HS256 bearer tokens carrying a user id."""

    secret: str
    ttl: timedelta = timedelta(hours=72)
    clock: Callable[[], datetime] = field(default=_utcnow)

    def issue(self, user_id: str) -> str:
        """Return a signed token for the user that expires after the TTL."""
        issued_at = self.clock()
        payload = {
            _USER_CLAIM: user_id,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.ttl).timestamp()),
            "jti": uuid4().hex,
        }
        return jwt.encode(payload, self.secret, algorithm=_ALGORITHM)

    def validate(self, token: str | None) -> str:
        """Return the user id embedded in a valid token."""
        if not token:
            raise UnauthorizedError("Access token required")
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[_ALGORITHM],
                options={"require": ["exp", "iat"]},
            )
        except jwt.PyJWTError as exc:
            raise ForbiddenError("Invalid token") from exc
        user_id = payload.get(_USER_CLAIM)
        if not isinstance(user_id, str) or not user_id:
            raise ForbiddenError("Invalid token")
        return user_id
