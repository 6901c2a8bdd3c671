"""Domain models for the travel journal."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: str
    full_name: str
    email: str
    password_hash: str


@dataclass(frozen=True)
class PublicUser:
    """User fields that are safe to return to clients."""

    full_name: str
    email: str


@dataclass(frozen=True)
class CaptionRecord:
    """Represents a persisted travel caption."""

    id: str
    user_id: str
    title: str
    story: str
    visited_location: str
    image_url: str
    visited_date: date
    is_favourite: bool = False


@dataclass(frozen=True)
class NewCaption:
    """Caption fields supplied by the owner before persistence."""

    user_id: str
    title: str
    story: str
    visited_location: str
    image_url: str
    visited_date: date
