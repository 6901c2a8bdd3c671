"""Filesystem storage for uploaded images."""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from travel_journal.services.uploads import ImageStore


@dataclass
class LocalImageStore(ImageStore):
    """Write uploads into a single server-managed directory."""

    directory: Path

    def ensure_directory(self) -> None:
        """Create the upload directory if it does not exist yet."""
        self.directory.mkdir(parents=True, exist_ok=True)

    def save(self, filename: str, stream: BinaryIO) -> None:
        """Copy the stream into the upload directory."""
        self.ensure_directory()
        target_path = self.directory / filename
        try:
            with target_path.open("wb") as target:
                shutil.copyfileobj(stream, target)
        except BaseException:
            target_path.unlink(missing_ok=True)
            raise

    def exists(self, filename: str) -> bool:
        """Return True when a file with this name has been stored."""
        return (self.directory / filename).is_file()
