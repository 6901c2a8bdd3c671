"""MongoDB-backed caption repository."""

from dataclasses import dataclass
from datetime import UTC, datetime, time

from beanie import PydanticObjectId
from bson import ObjectId

from travel_journal.adapters.mongo_documents import CaptionDocument
from travel_journal.domain.models import CaptionRecord, NewCaption
from travel_journal.services.captions import CaptionRepository


@dataclass
class MongoCaptionRepository(CaptionRepository):
    """Beanie implementation for caption persistence."""

    model: type[CaptionDocument] = CaptionDocument

    async def create_caption(self, caption: NewCaption) -> CaptionRecord:
        """Insert a caption document and return it."""
        document = self.model(
            user_id=PydanticObjectId(caption.user_id),
            title=caption.title,
            story=caption.story,
            visited_location=caption.visited_location,
            image_url=caption.image_url,
            visited_date=datetime.combine(caption.visited_date, time.min, tzinfo=UTC),
        )
        await document.insert()
        return _to_record(document)

    async def list_by_owner(self, user_id: str) -> list[CaptionRecord]:
        """Return the user's captions sorted by the favourite flag."""
        if not ObjectId.is_valid(user_id):
            return []
        documents = (
            await self.model.find({"user_id": PydanticObjectId(user_id)})
            .sort("-is_favourite")
            .to_list()
        )
        return [_to_record(document) for document in documents]


def _to_record(document: CaptionDocument) -> CaptionRecord:
    return CaptionRecord(
        id=str(document.id),
        user_id=str(document.user_id),
        title=document.title,
        story=document.story,
        visited_location=document.visited_location,
        image_url=document.image_url,
        visited_date=document.visited_date.date(),
        is_favourite=document.is_favourite,
    )
