"""ASGI entrypoint for the travel journal API."""

from travel_journal.api.app import create_app
from travel_journal.containers import build_container

app = create_app(build_container())
