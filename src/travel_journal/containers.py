"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from travel_journal.adapters.local_image_store import LocalImageStore
from travel_journal.adapters.mongo_caption_repository import MongoCaptionRepository
from travel_journal.adapters.mongo_store import MongoStore
from travel_journal.adapters.mongo_user_repository import MongoUserRepository
from travel_journal.config import Settings
from travel_journal.services.captions import CaptionService
from travel_journal.services.passwords import Argon2PasswordHashing
from travel_journal.services.tokens import TokenService
from travel_journal.services.uploads import UploadService
from travel_journal.services.users import AuthService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    caption_service: CaptionService
    upload_service: UploadService
    image_store: LocalImageStore
    open_resources: Callable[[], Awaitable[None]]
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = MongoStore(
        uri=resolved_settings.mongodb_uri,
        database=resolved_settings.mongodb_database,
    )
    token_service = TokenService(
        secret=resolved_settings.access_token_secret,
        ttl=timedelta(hours=resolved_settings.access_token_ttl_hours),
    )
    auth_service = AuthService(
        repository=MongoUserRepository(),
        passwords=Argon2PasswordHashing(),
        tokens=token_service,
    )
    caption_service = CaptionService(MongoCaptionRepository())
    image_store = LocalImageStore(Path(resolved_settings.upload_dir))
    upload_service = UploadService(image_store)

    async def open_resources() -> None:
        image_store.ensure_directory()
        await store.open()

    async def close_resources() -> None:
        await store.close()

    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        caption_service=caption_service,
        upload_service=upload_service,
        image_store=image_store,
        open_resources=open_resources,
        close_resources=close_resources,
    )
