"""Domain models for uploaded images."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StoredImage:
    """An image written to the upload directory."""

    filename: str
    url: str
