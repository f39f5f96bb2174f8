"""Pytest configuration and shared fixtures for httpplz tests."""

import httpx
import pytest

from httpplz import ClientConfig, create_client
from httpplz.testing import RecordingTransport, create_mock_response

BASE_URL = "https://api.example.com"


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear test-related environment variables before each test.

    Keeps ``ClientConfig.from_env`` tests independent of the developer's shell.
    """
    import os

    test_prefixes = ("TEST_", "HTTPPLZ_", "MYAPP_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def success_transport():
    """Transport answering every call with ``{"success": true}``."""

    def handler(url: httpx.URL, options: dict) -> httpx.Response:
        return create_mock_response({"success": True})

    return RecordingTransport(handler=handler)


@pytest.fixture
def json_client(success_transport):
    """Client with a JSON resolver over ``success_transport``."""
    config = ClientConfig(base_url=BASE_URL, resolver="json")
    return create_client(config, transport=success_transport)
