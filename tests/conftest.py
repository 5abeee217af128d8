"""Shared test fixtures for the relay."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from src.config import Config
from src.main import create_app
from tests.fakes import claude_message, text_block

# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def test_config() -> Config:
    """Create a test Config."""
    return Config(anthropic_api_key="test-key", port=9090)


# ============================================================================
# Client / App Fixtures
# ============================================================================


@pytest.fixture
def mock_anthropic_client() -> MagicMock:
    """Create a mock Anthropic client whose messages.create is awaitable."""
    client = MagicMock()
    client.messages.create = AsyncMock(return_value=claude_message(text_block("Hello!")))
    return client


@pytest.fixture
def client(test_config: Config, mock_anthropic_client: MagicMock):
    """Create a test client for the relay app backed by the mock Anthropic client."""
    app = create_app(test_config, client=mock_anthropic_client)
    with TestClient(app) as test_client:
        yield test_client
