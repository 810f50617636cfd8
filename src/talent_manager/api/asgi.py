"""ASGI entrypoint for the talent manager API."""

from talent_manager.api.app import create_app
from talent_manager.containers import build_container

app = create_app(build_container())
