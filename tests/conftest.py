"""Pytest configuration and fixtures."""

import os
import sys
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

# Set test environment variables
os.environ.pop("DOGCEO_BASE_URL", None)
os.environ["DOGCEO_LOG_LEVEL"] = "WARNING"


class FakeDogAPI:
    """Serves canned envelopes by path and records every request made."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, path, payload, status_code=200):
        """Register a JSON payload (or raw bytes, or an exception) for a path."""
        self.routes[path] = (status_code, payload)

    @property
    def paths(self):
        return [request.url.path for request in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.startswith("/api/"):
            path = path[len("/api/"):]

        if path not in self.routes:
            return httpx.Response(
                404,
                json={
                    "status": "error",
                    "message": "No route found for \"GET /api/" + path + "\"",
                    "code": 404,
                },
            )

        status_code, payload = self.routes[path]
        if isinstance(payload, Exception):
            raise payload
        if isinstance(payload, bytes):
            return httpx.Response(status_code, content=payload)
        return httpx.Response(status_code, json=payload)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so env changes in a test take effect."""
    from dogceo.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def dog_api():
    """Route all client traffic to an in-memory fake of the service."""
    fake = FakeDogAPI()

    def build_client(settings=None, extra_headers=None):
        return httpx.AsyncClient(transport=httpx.MockTransport(fake.handler))

    with patch("dogceo.api.build_async_client", side_effect=build_client):
        yield fake
