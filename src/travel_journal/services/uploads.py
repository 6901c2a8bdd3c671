"""Image upload handling."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import PurePath
from typing import BinaryIO, Protocol

from travel_journal.domain.errors import ValidationError
from travel_journal.domain.uploads import StoredImage

logger = logging.getLogger(__name__)

UPLOADS_PATH = "/uploads"


class ImageStore(Protocol):
    """Storage interface for uploaded image bytes."""

    def save(self, filename: str, stream: BinaryIO) -> None:
        """Write the stream under the given file name."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class UploadService:
    """Store uploaded images and return their public URLs."""

    store: ImageStore
    clock: Callable[[], datetime] = field(default=_utcnow)

    def store_image(
        self,
        stream: BinaryIO | None,
        original_name: str | None,
        mime_type: str | None,
        base_url: str,
    ) -> StoredImage:
        """Validate and persist an image, returning where it is served."""
        if stream is None:
            raise ValidationError("No image uploaded")
        if not mime_type or not mime_type.startswith("image/"):
            raise ValidationError("Only image files are allowed")

        filename = self._filename_for(original_name or "")
        self.store.save(filename, stream)
        url = f"{base_url.rstrip('/')}{UPLOADS_PATH}/{filename}"
        logger.info("Stored image upload", extra={"upload_name": filename})
        return StoredImage(filename=filename, url=url)

    def _filename_for(self, original_name: str) -> str:
        millis = int(self.clock().timestamp() * 1000)
        return f"{millis}{PurePath(original_name).suffix}"
