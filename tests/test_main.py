"""
Tests for the demo entry point.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from structlog.testing import capture_logs

from userstream.config import Settings
from userstream.infrastructure.fake_api_client import IUserAPIClient
from userstream.main import main


@pytest.fixture
def demo_settings():
    return Settings(
        _env_file=None, FAKE_API_DELAY_SECONDS=2.0, DEMO_PUBLISH_INTERVAL_SECONDS=0
    )


@pytest.mark.asyncio
async def test_main_runs_full_flow(demo_settings, api_service):
    """Test the demo fetches, looks up Bob, then streams David and Eva."""
    with capture_logs() as logs:
        await main(demo_settings, api_service)

    # fetch_all + fetch_by_id, no cache
    assert api_service.call_count == 2

    listed = [e["user"] for e in logs if e["event"] == "User"]
    assert listed == [
        "User(id: 1, name: Alice, email: alice@mail.com)",
        "User(id: 2, name: Bob, email: bob@mail.com)",
        "User(id: 3, name: Charlie, email: charlie@mail.com)",
        "User(id: 2, name: Bob, email: bob@mail.com)",
    ]

    streamed = [e["user"] for e in logs if e["event"] == "New user added via stream"]
    assert streamed == [
        "User(id: 4, name: David, email: david@mail.com)",
        "User(id: 5, name: Eva, email: eva@mail.com)",
    ]


@pytest.mark.asyncio
async def test_main_reports_backend_failure(demo_settings):
    """Test repository errors are logged and the stream still runs."""
    client = MagicMock(spec=IUserAPIClient)
    client.get_users_json = AsyncMock(side_effect=ConnectionError("down"))

    with capture_logs() as logs:
        await main(demo_settings, client)

    errors = [e for e in logs if e["event"] == "Repository error"]
    assert len(errors) == 1
    assert "down" in errors[0]["error"]

    streamed = [e for e in logs if e["event"] == "New user added via stream"]
    assert len(streamed) == 2
