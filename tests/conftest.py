import pytest
from fastapi.testclient import TestClient

from app import create_app
from registry import RoomRegistry


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def registry(clock):
    return RoomRegistry(ttl_seconds=1200, clock=clock)


@pytest.fixture
def client(registry):
    with TestClient(create_app(registry)) as test_client:
        yield test_client
