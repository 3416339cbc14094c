"""
Pytest configuration and fixtures
"""
import json
import os
from typing import Any, Callable

import httpx
import pytest

# Never pick up a developer's real key or .env during tests
os.environ["APP_ENV"] = "test"
os.environ.pop("GEMINI_API_KEY", None)
os.environ.pop("API_KEY", None)

from core.entities import GeminiConfig  # noqa: E402


def gemini_reply(obj: Any, status_code: int = 200) -> httpx.Response:
    """Wrap a JSON-able object the way generateContent returns it."""
    body = {
        "candidates": [
            {"content": {"role": "model", "parts": [{"text": json.dumps(obj)}]}}
        ]
    }
    return httpx.Response(status_code, json=body)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def config() -> GeminiConfig:
    return GeminiConfig(
        api_key="test-key",
        model="gemini-2.5-flash",
        api_url="https://example.test/v1beta/models",
    )


@pytest.fixture
def keyless_config() -> GeminiConfig:
    return GeminiConfig(api_key="", model="gemini-2.5-flash", api_url="https://example.test")


@pytest.fixture
def replying() -> Callable[[Any], RecordingTransport]:
    """Build a transport that answers every call with the given JSON object."""

    def _make(obj: Any, status_code: int = 200) -> RecordingTransport:
        return RecordingTransport(lambda request: gemini_reply(obj, status_code))

    return _make
