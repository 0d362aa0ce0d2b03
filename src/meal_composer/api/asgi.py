"""ASGI entrypoint for the meal composer API."""

from meal_composer.api.app import create_app
from meal_composer.containers import build_container

app = create_app(build_container())
