"""ASGI entrypoint for the Ayurvedic diet API."""

from ayurdiet.api.app import create_app
from ayurdiet.containers import build_container

app = create_app(build_container())
