"""Pytest configuration and shared fixtures for unit tests."""

import pytest
from fixtures import ENDPOINT, TOKEN
from wavefront_sdk import Credentials


@pytest.fixture
def credentials():
    return Credentials(endpoint=ENDPOINT, token=TOKEN)
