import pytest
from xal.tests.fixtures.address import *


@pytest.fixture(scope="function")
def mock_log_level(monkeypatch):
    """Fixture setting a valid LOG_LEVEL for settings built inside a test."""
    monkeypatch.setenv("LOG_LEVEL", "debug")
    return "debug"
