"""ASGI entrypoint for the cycle tracker API."""

from cycle_tracker.api.app import create_app
from cycle_tracker.containers import build_container

app = create_app(build_container())
