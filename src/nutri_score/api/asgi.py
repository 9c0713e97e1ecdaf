"""ASGI entrypoint for the Nutri-Score API."""

from nutri_score.api.app import create_app
from nutri_score.containers import build_container

app = create_app(build_container())
