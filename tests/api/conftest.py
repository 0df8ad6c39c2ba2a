"""
API test fixtures.

Provides: TestClient factories over the full application with an
injected agent (real pipeline over fakes, or a mock).
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from sales_coach.main import create_app


@pytest.fixture
def make_client(settings):
    """
    Build a TestClient around create_app with the given agent.

    Yields:
        Callable: (agent, settings=None, raise_server_exceptions=True) -> TestClient
    """
    clients: list[TestClient] = []

    def _make(agent, app_settings=None, raise_server_exceptions: bool = True) -> TestClient:
        app = create_app(app_settings or settings, agent=agent)
        client = TestClient(app, raise_server_exceptions=raise_server_exceptions)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def mock_agent() -> MagicMock:
    """Agent mock with async methods."""
    agent = MagicMock()
    agent.ask = AsyncMock()
    agent.ask_with_context = AsyncMock()
    agent.ingest_text = AsyncMock()
    agent.ingest_file = AsyncMock()
    return agent
