"""Shared pytest fixtures."""

from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from sessionauth.app import App
from sessionauth.config import Config
from sessionauth.web.server import create_fastapi_app

JOHN_PASSWORD = "5f4dcc3b5aa765d61d8327deb882cf99"
TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"
ID_SIZE = 32


class FakeClock:
    """Controllable clock; call to read, advance() to move forward."""

    def __init__(self, start: datetime) -> None:
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> datetime:
        self.current += delta
        return self.current


@pytest.fixture
def clock():
    """Create a clock fixed at a known instant."""
    return FakeClock(datetime(2024, 5, 1, 12, 0, 0, tzinfo=UTC))


@pytest.fixture
def config():
    """Create a config that ignores the environment and any .env file."""
    return Config(
        _env_file=None,
        port=8080,
        jwt_secret=TEST_SECRET,
        id_size=ID_SIZE,
        users={"JohnDoe": JOHN_PASSWORD, "alice": "wonderland"},
    )


@pytest.fixture
def app(config, clock):
    """Create a fresh application facade with empty stores."""
    return App(config, clock)


@pytest.fixture
def client(app):
    """Create an HTTP test client around a fresh application."""
    with TestClient(create_fastapi_app(app)) as test_client:
        yield test_client
