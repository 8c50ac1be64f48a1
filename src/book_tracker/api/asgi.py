"""ASGI entrypoint for the book tracker API."""

from book_tracker.api.app import create_app
from book_tracker.containers import build_container

app = create_app(build_container())
