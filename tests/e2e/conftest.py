"""E2E test fixtures."""
from __future__ import annotations

import pytest

from aster_mcp_server.config import Config
from aster_mcp_server.mcp_server import AsterMcpServer


@pytest.fixture
def server(exchange, clock):
    """Server on the default /mcp path, talking to the fake exchange."""
    return AsterMcpServer(Config(), client=exchange.client(), clock=clock)
