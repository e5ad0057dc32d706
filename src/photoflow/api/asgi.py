"""ASGI entrypoint for the PhotoFlow API."""

from photoflow.api.app import create_app
from photoflow.containers import build_container

app = create_app(build_container())
