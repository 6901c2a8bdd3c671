"""MongoDB connection lifecycle."""

import logging
from dataclasses import dataclass, field

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient

from travel_journal.adapters.mongo_documents import DOCUMENT_MODELS

logger = logging.getLogger(__name__)


@dataclass
class MongoStore:
    """Owns the Motor client and registers document models with Beanie."""

    uri: str
    database: str
    server_selection_timeout_ms: int = 5000
    client: AsyncIOMotorClient | None = field(default=None, init=False)

    @property
    def is_open(self) -> bool:
        """Return True between open() and close()."""
        return self.client is not None

    async def open(self) -> None:
        """Connect to MongoDB and initialise the document models."""
        if self.client is not None:
            return
        client = AsyncIOMotorClient(
            self.uri, serverSelectionTimeoutMS=self.server_selection_timeout_ms
        )
        try:
            await init_beanie(
                database=client[self.database], document_models=DOCUMENT_MODELS
            )
        except BaseException:
            client.close()
            raise
        self.client = client
        logger.info("Connected to MongoDB", extra={"database": self.database})

    async def close(self) -> None:
        """Close the Motor client; safe to call more than once."""
        if self.client is None:
            return
        self.client.close()
        self.client = None
