"""Services for travel captions."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from travel_journal.domain.errors import ValidationError
from travel_journal.domain.models import CaptionRecord, NewCaption

logger = logging.getLogger(__name__)


class CaptionRepository(Protocol):
    """Persistence interface for captions."""

    async def create_caption(self, caption: NewCaption) -> CaptionRecord:
        """Persist a caption and return the stored record."""

    async def list_by_owner(self, user_id: str) -> list[CaptionRecord]:
        """Return the user's captions, favourites first."""


@dataclass
class CaptionService:
    """Application service for creating and listing captions."""

    repository: CaptionRepository

    async def create_caption(  # noqa: PLR0913
        self,
        user_id: str,
        title: str | None,
        story: str | None,
        visited_location: str | None,
        image_url: str | None,
        visited_date: date | None,
    ) -> CaptionRecord:
        """Create a caption owned by the user; every field is required."""
        if (
            not title
            or not story
            or not visited_location
            or not image_url
            or visited_date is None
        ):
            raise ValidationError("All fields are required")
        caption = await self.repository.create_caption(
            NewCaption(
                user_id=user_id,
                title=title,
                story=story,
                visited_location=visited_location,
                image_url=image_url,
                visited_date=visited_date,
            )
        )
        logger.info(
            "Created caption",
            extra={"user_id": user_id, "caption_id": caption.id},
        )
        return caption

    async def list_captions(self, user_id: str) -> list[CaptionRecord]:
        """Return every caption owned by the user."""
        return await self.repository.list_by_owner(user_id)
