"""MongoDB-backed user repository."""

from dataclasses import dataclass

from beanie import PydanticObjectId
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from travel_journal.adapters.mongo_documents import UserDocument
from travel_journal.domain.errors import ConflictError
from travel_journal.domain.models import UserRecord
from travel_journal.services.users import UserRepository


@dataclass
class MongoUserRepository(UserRepository):
    """Beanie implementation for user persistence."""

    model: type[UserDocument] = UserDocument

    async def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with the email, if present."""
        document = await self.model.find_one({"email": email})
        return _to_record(document) if document else None

    async def get_by_id(self, user_id: str) -> UserRecord | None:
        """Return the user with the given id, if present."""
        if not ObjectId.is_valid(user_id):
            return None
        document = await self.model.get(PydanticObjectId(user_id))
        return _to_record(document) if document else None

    async def create_user(
        self, full_name: str, email: str, password_hash: str
    ) -> UserRecord:
        """Insert a user document; the unique email index decides races."""
        document = self.model(
            full_name=full_name, email=email, password_hash=password_hash
        )
        try:
            await document.insert()
        except DuplicateKeyError as exc:
            raise ConflictError("User already exists") from exc
        return _to_record(document)


def _to_record(document: UserDocument) -> UserRecord:
    return UserRecord(
        id=str(document.id),
        full_name=document.full_name,
        email=document.email,
        password_hash=document.password_hash,
    )
