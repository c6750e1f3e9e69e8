"""Pytest fixtures for all tests."""

from datetime import datetime, timezone

import pytest
from httpx import AsyncClient, ASGITransport

from api.app import create_app
from config import Config
from rando import Rando
from rando.alphabets import BASE_10


class FakeRandom:
    """Deterministic random source cycling through fixed draws."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def randbelow(self, n):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value % n


@pytest.fixture
def fake_random():
    """Factory for deterministic random sources."""
    return FakeRandom


@pytest.fixture
def instant():
    """The instant used across round-trip scenarios."""
    return datetime(2024, 9, 11, 17, 51, 46, 274000, tzinfo=timezone.utc)


@pytest.fixture
def decimal_rando():
    """Timestamped generator with a decimal timestamp alphabet."""
    return Rando(include_timestamp=True, timestamp_alphabet=BASE_10, random_length=4, separator="-")


@pytest.fixture
def service_config():
    """Service config with obfuscated, timestamped ids."""
    return Config.from_dict({
        "generator": {
            "random_length": 16,
            "include_timestamp": True,
            "obfuscate_timestamp": True,
            "separator": "-",
        },
        "logging": {"level": "ERROR"},
    })


@pytest.fixture
async def client(service_config):
    """Async test client for the identifier service."""
    app = create_app(service_config)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
