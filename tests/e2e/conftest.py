"""Fixtures for end-to-end tests."""

import pytest
from fastapi.testclient import TestClient

from hive.adapter.identity import MockIdentityVerifier
from hive.config import Settings
from hive.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Test client over an app backed by in-memory storage.

    Used as a context manager so HTTP requests and WebSocket sessions share
    one event loop.
    """
    app = create_app(build_test_container())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def token_for():
    """Mint identity tokens accepted by the mock verifier."""
    verifier = MockIdentityVerifier(Settings().auth)

    def _issue(name: str) -> str:
        return verifier.issue(
            subject=f"uid-{name}", email=f"{name}@example.com", name=name.title()
        )

    return _issue


@pytest.fixture
def auth(token_for):
    """Authorization headers for a named user."""

    def _headers(name: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token_for(name)}"}

    return _headers
