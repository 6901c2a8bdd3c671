"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path
from uuid import uuid4

import pytest
from argon2 import PasswordHasher

from travel_journal.adapters.local_image_store import LocalImageStore
from travel_journal.config import Settings
from travel_journal.containers import AppContainer
from travel_journal.domain.errors import ConflictError
from travel_journal.domain.models import CaptionRecord, NewCaption, UserRecord
from travel_journal.services.captions import CaptionRepository, CaptionService
from travel_journal.services.passwords import Argon2PasswordHashing
from travel_journal.services.tokens import TokenService
from travel_journal.services.uploads import UploadService
from travel_journal.services.users import AuthService, UserRepository

TEST_SECRET = "test-access-token-secret-0123456789abcdef"


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[str, UserRecord] = field(default_factory=dict)

    async def get_by_email(self, email: str) -> UserRecord | None:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    async def get_by_id(self, user_id: str) -> UserRecord | None:
        return self.users.get(user_id)

    async def create_user(
        self, full_name: str, email: str, password_hash: str
    ) -> UserRecord:
        if await self.get_by_email(email):
            raise ConflictError("User already exists")
        user = UserRecord(
            id=uuid4().hex[:24],
            full_name=full_name,
            email=email,
            password_hash=password_hash,
        )
        self.users[user.id] = user
        return user


@dataclass
class InMemoryCaptionRepository(CaptionRepository):
    """In-memory caption repository for tests."""

    captions: dict[str, CaptionRecord] = field(default_factory=dict)

    async def create_caption(self, caption: NewCaption) -> CaptionRecord:
        record = CaptionRecord(
            id=uuid4().hex[:24],
            user_id=caption.user_id,
            title=caption.title,
            story=caption.story,
            visited_location=caption.visited_location,
            image_url=caption.image_url,
            visited_date=caption.visited_date,
        )
        self.captions[record.id] = record
        return record

    async def list_by_owner(self, user_id: str) -> list[CaptionRecord]:
        owned = [c for c in self.captions.values() if c.user_id == user_id]
        return sorted(owned, key=lambda caption: caption.is_favourite, reverse=True)


def fast_password_hashing() -> Argon2PasswordHashing:
    """Argon2 hashing with minimal cost parameters to keep tests quick."""
    return Argon2PasswordHashing(
        PasswordHasher(time_cost=1, memory_cost=8, parallelism=1)
    )


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def settings(upload_dir: Path) -> Settings:
    return Settings(
        mongodb_uri="mongodb://localhost:27017",
        access_token_secret=TEST_SECRET,
        upload_dir=str(upload_dir),
        public_base_url=None,
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def caption_repository() -> InMemoryCaptionRepository:
    return InMemoryCaptionRepository()


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(secret=TEST_SECRET)


@pytest.fixture
def auth_service(
    user_repository: InMemoryUserRepository, token_service: TokenService
) -> AuthService:
    return AuthService(
        repository=user_repository,
        passwords=fast_password_hashing(),
        tokens=token_service,
    )


@pytest.fixture
def container(
    settings: Settings,
    auth_service: AuthService,
    caption_repository: InMemoryCaptionRepository,
    upload_dir: Path,
) -> AppContainer:
    image_store = LocalImageStore(upload_dir)

    async def open_resources() -> None:
        image_store.ensure_directory()

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        auth_service=auth_service,
        caption_service=CaptionService(caption_repository),
        upload_service=UploadService(image_store),
        image_store=image_store,
        open_resources=open_resources,
        close_resources=close_resources,
    )
