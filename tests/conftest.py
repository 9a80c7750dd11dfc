"""
Test configuration and fixtures
"""

from typing import List

import pytest

from userstream.domain.entities import User
from userstream.infrastructure.fake_api_client import FakeApiService
from userstream.repositories.user_repository import UserRepository
from userstream.services.user_stream_service import UserStreamService

TEST_DELAY_SECONDS = 2.0


class FakeClock:
    """Controllable clock: sleeping advances time without waiting."""

    def __init__(self):
        self.now = 0.0
        self.sleeps: List[float] = []

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    """Fresh fake clock for each test"""
    return FakeClock()


@pytest.fixture
def api_service(clock):
    """Simulated backend with the default seed data and a fake clock"""
    return FakeApiService(delay_seconds=TEST_DELAY_SECONDS, sleep=clock.sleep)


@pytest.fixture
def repository(api_service):
    """User repository over the simulated backend"""
    return UserRepository(api_service)


@pytest.fixture
def stream_service():
    """Open user stream, disposed after the test"""
    service = UserStreamService()
    yield service
    service.dispose()


@pytest.fixture
def seed_users():
    """Users matching the default seed data"""
    return [
        User(id=1, name="Alice", email="alice@mail.com"),
        User(id=2, name="Bob", email="bob@mail.com"),
        User(id=3, name="Charlie", email="charlie@mail.com"),
    ]
