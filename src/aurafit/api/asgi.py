"""ASGI entrypoint for the AuraFit API."""

from aurafit.api.app import create_app
from aurafit.containers import build_container

app = create_app(build_container())
