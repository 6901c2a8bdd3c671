"""Run the travel journal API with uvicorn."""

import uvicorn

from travel_journal.config import Settings


def main() -> None:
    """Serve the ASGI app on the configured port."""
    settings = Settings()
    uvicorn.run(
        "travel_journal.api.asgi:app",
        host="0.0.0.0",  # noqa: S104
        port=settings.port,
    )


if __name__ == "__main__":
    main()
