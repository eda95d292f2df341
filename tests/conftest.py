"""Shared fixtures for Sequence SDK tests."""

import pytest
from unittest.mock import AsyncMock, patch

from sequence_sdk.client import Client
from sequence_sdk.core.config import SequenceConfig


@pytest.fixture
def config():
    """Test configuration."""
    return SequenceConfig(
        ledger_name="test-ledger",
        credential="test-credential",
        api_url="https://api.seq.com",
        request_timeout=5.0,
        max_retries=2,
        retry_delay=0.01
    )


@pytest.fixture
def client(config):
    """Test client."""
    return Client(config)


@pytest.fixture
def mock_request(client):
    """Replace the client's transport with an AsyncMock."""
    with patch.object(client, 'request', AsyncMock()) as request:
        yield request
