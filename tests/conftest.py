"""Shared fixtures."""
from __future__ import annotations

from typing import Callable

import pytest

from .helpers import FIXED_TIMESTAMP, FakeExchange


@pytest.fixture
def anyio_backend():
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def exchange() -> FakeExchange:
    return FakeExchange()


@pytest.fixture
def clock() -> Callable[[], int]:
    return lambda: FIXED_TIMESTAMP
