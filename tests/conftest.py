"""Test configuration and fixtures.

Every test gets an empty SessionRegistry wired into the app through a
dependency override, so boards left behind by one test never show up in
another (matchmaking scans all boards).
"""

import os
from typing import Any, Generator, List

# Set env flags BEFORE importing application modules
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
os.environ.setdefault("DEBUG", "1")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("PUBLIC_DIR", os.path.join(ROOT, "public"))

import pytest
from fastapi.testclient import TestClient

from main import app  # imports routers
from services.game.registry import SessionRegistry, get_registry


class FakeChannel:
    """Records every payload sent to it."""

    def __init__(self) -> None:
        self.sent: List[Any] = []

    async def send_json(self, data: Any) -> None:
        self.sent.append(data)


class BrokenChannel:
    async def send_json(self, data: Any) -> None:
        raise RuntimeError("connection closed")


@pytest.fixture()
def registry() -> SessionRegistry:
    return SessionRegistry()


@pytest.fixture(autouse=True)
def override_registry_dependency(registry):
    app.dependency_overrides[get_registry] = lambda: registry
    yield
    app.dependency_overrides.pop(get_registry, None)


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    # Entering the client keeps one event loop for all websocket sessions of a test
    with TestClient(app) as c:
        yield c
