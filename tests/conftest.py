import pytest
from fastapi.testclient import TestClient

from typetrial.app import create_app
from typetrial.services import InMemorySessionStore, JsonFileLeaderboardStore


class FakeClock:
    """Manually advanced stand-in for the monotonic server clock."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def session_store(clock):
    return InMemorySessionStore(ttl_seconds=3600, max_sessions=100, clock=clock)


@pytest.fixture()
def leaderboard(tmp_path):
    return JsonFileLeaderboardStore(tmp_path / "scores.json")


@pytest.fixture()
def api_app(session_store, leaderboard):
    return create_app(session_store=session_store, leaderboard=leaderboard)


@pytest.fixture()
def client(api_app):
    with TestClient(api_app) as test_client:
        yield test_client
