"""Shared fixtures for integration tests."""

import os
from pathlib import Path

import pytest
import pytest_asyncio

from sonarqube.web import SonarQubeClient

# Skip all integration tests unless RUN_SONARQUBE_INTEGRATION_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_SONARQUBE_INTEGRATION_TESTS") != "1" or not os.environ.get("SONARQUBE_URL"),
    reason="Requires a SonarQube server. Set RUN_SONARQUBE_INTEGRATION_TESTS=1 and SONARQUBE_URL",
)

_HERE = Path(__file__).parent


def pytest_collection_modifyitems(config, items):
    for item in items:
        if _HERE in item.path.parents:
            item.add_marker(pytestmark)


@pytest_asyncio.fixture
async def client():
    """Client configured from SONARQUBE_URL / SONARQUBE_TOKEN."""
    async with SonarQubeClient.from_env() as sonar:
        yield sonar
