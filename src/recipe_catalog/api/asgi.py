"""ASGI entrypoint for the recipe catalog API."""

from recipe_catalog.api.app import create_app
from recipe_catalog.containers import build_container

app = create_app(build_container())
