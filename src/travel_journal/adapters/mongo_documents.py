"""Beanie document models for the travel journal collections."""

from datetime import datetime

from beanie import Document, PydanticObjectId
from pymongo import ASCENDING, DESCENDING, IndexModel


class UserDocument(Document):
    """A registered account in the ``users`` collection."""

    full_name: str
    email: str
    password_hash: str

    class Settings:
        name = "users"
        indexes = [
            IndexModel([("email", ASCENDING)], name="users_email_uq", unique=True)
        ]


class CaptionDocument(Document):
    """A travel caption in the ``captions`` collection."""

    user_id: PydanticObjectId
    title: str
    story: str
    visited_location: str
    image_url: str
    visited_date: datetime
    is_favourite: bool = False

    class Settings:
        name = "captions"
        indexes = [
            IndexModel(
                [("user_id", ASCENDING), ("is_favourite", DESCENDING)],
                name="captions_owner_favourite",
            )
        ]


DOCUMENT_MODELS: list[type[Document]] = [UserDocument, CaptionDocument]
