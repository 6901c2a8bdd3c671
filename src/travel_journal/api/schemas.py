"""Pydantic models for the JSON API."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from travel_journal.domain.models import CaptionRecord, PublicUser


class CamelModel(BaseModel):
    """Base model using camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateAccountRequest(CamelModel):
    """Registration payload; presence is checked by the auth service."""

    full_name: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(CamelModel):
    """Login payload."""

    email: str | None = None
    password: str | None = None


class CaptionRequest(CamelModel):
    """Caption creation payload."""

    title: str | None = None
    story: str | None = None
    visited_location: str | None = None
    image_url: str | None = None
    visited_date: date | None = None

    @field_validator("visited_date", mode="before")
    @classmethod
    def blank_date_is_missing(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class UserOut(CamelModel):
    """Public user view."""

    full_name: str
    email: str

    @classmethod
    def from_domain(cls, user: PublicUser) -> "UserOut":
        return cls(full_name=user.full_name, email=user.email)


class CaptionOut(CamelModel):
    """Caption as returned to clients."""

    id: str = Field(alias="_id")
    user_id: str
    title: str
    story: str
    visited_location: str
    image_url: str
    visited_date: date

    @classmethod
    def from_domain(cls, caption: CaptionRecord) -> "CaptionOut":
        return cls(
            id=caption.id,
            user_id=caption.user_id,
            title=caption.title,
            story=caption.story,
            visited_location=caption.visited_location,
            image_url=caption.image_url,
            visited_date=caption.visited_date,
        )


class AuthResponse(CamelModel):
    """Response for registration and login."""

    error: bool = False
    user: UserOut
    access_token: str
    message: str


class UserResponse(CamelModel):
    error: bool = False
    user: UserOut
    message: str


class CaptionResponse(CamelModel):
    error: bool = False
    caption: CaptionOut
    message: str


class StoriesResponse(CamelModel):
    stories: list[CaptionOut]


class UploadResponse(CamelModel):
    image_url: str


class HealthResponse(CamelModel):
    status: str
    message: str
