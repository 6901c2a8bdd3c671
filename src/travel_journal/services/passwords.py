"""Password hashing helpers."""

from dataclasses import dataclass, field
from typing import Protocol

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError


class PasswordHashing(Protocol):
    """Interface for one-way salted password hashing."""

    def hash(self, password: str) -> str:
        """Return a salted hash for the password."""

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True when the password matches the stored hash."""


@dataclass
class Argon2PasswordHashing(PasswordHashing):
    """Argon2id hashing with a random salt per password."""

    hasher: PasswordHasher = field(default_factory=PasswordHasher)

    def hash(self, password: str) -> str:
        """Return an encoded Argon2 hash including its salt."""
        return self.hasher.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True when the password matches the stored hash."""
        try:
            return self.hasher.verify(password_hash, password)
        except (VerificationError, InvalidHashError):
            return False
