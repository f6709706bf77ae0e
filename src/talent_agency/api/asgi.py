"""ASGI entrypoint for the talent agency API."""

from talent_agency.api.app import create_app
from talent_agency.containers import build_container

app = create_app(build_container())
