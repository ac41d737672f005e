"""ASGI entrypoint for the food recognition API."""

from food_recognition.api.app import create_app
from food_recognition.containers import build_container

app = create_app(build_container())
