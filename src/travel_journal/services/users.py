"""Account registration, login and profile lookups."""

import logging
from dataclasses import dataclass
from typing import Protocol

from travel_journal.domain.errors import (
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from travel_journal.domain.models import PublicUser, UserRecord
from travel_journal.services.passwords import PasswordHashing
from travel_journal.services.tokens import TokenService

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user accounts."""

    async def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with the email, if present."""

    async def get_by_id(self, user_id: str) -> UserRecord | None:
        """Return the user with the given id, if present."""

    async def create_user(
        self, full_name: str, email: str, password_hash: str
    ) -> UserRecord:
        """Create and return a new user; raise ConflictError on a taken email."""


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful registration or login."""

    user: PublicUser
    access_token: str


def to_public(user: UserRecord) -> PublicUser:
    """Strip credentials from a user record."""
    return PublicUser(full_name=user.full_name, email=user.email)


@dataclass
class AuthService:
    """Application service for account lifecycle and session tokens."""

    repository: UserRepository
    passwords: PasswordHashing
    tokens: TokenService

    async def register(
        self, full_name: str | None, email: str | None, password: str | None
    ) -> AuthResult:
        """Create an account and return a token for it."""
        if not full_name or not email or not password:
            raise ValidationError("All fields are required")
        if await self.repository.get_by_email(email):
            raise ConflictError("User already exists")

        password_hash = self.passwords.hash(password)
        user = await self.repository.create_user(full_name, email, password_hash)
        logger.info("Registered user", extra={"user_id": user.id})
        return AuthResult(user=to_public(user), access_token=self.tokens.issue(user.id))

    async def login(self, email: str | None, password: str | None) -> AuthResult:
        """Verify credentials and return a fresh token."""
        if not email or not password:
            raise ValidationError("Email and password are required")
        user = await self.repository.get_by_email(email)
        if user is None:
            raise NotFoundError("User not found")
        if not self.passwords.verify(password, user.password_hash):
            raise UnauthorizedError("Invalid password")
        logger.info("User logged in", extra={"user_id": user.id})
        return AuthResult(user=to_public(user), access_token=self.tokens.issue(user.id))

    def validate_token(self, token: str | None) -> str:
        """Return the user id asserted by a bearer token."""
        return self.tokens.validate(token)

    async def get_profile(self, user_id: str) -> PublicUser:
        """Return the public view of an existing user."""
        user = await self.repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return to_public(user)
