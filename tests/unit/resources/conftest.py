"""Fixtures for resource client tests: a runner over a mocked transport."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from sonarqube.web.runtime.rest import RestRunner, RESTTransport


@pytest.fixture
def transport():
    transport = MagicMock(spec=RESTTransport)
    transport.get = AsyncMock(return_value={})
    transport.post = AsyncMock(return_value=None)
    return transport


@pytest.fixture
def runner(transport):
    return RestRunner(transport)
