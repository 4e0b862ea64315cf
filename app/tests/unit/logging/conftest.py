"""Fixtures for stabilizer.logging tests."""

import pytest
from unittest.mock import Mock

from stabilizer.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    return settings


@pytest.fixture
def outside_pytest(monkeypatch):
    """Pretend the process is not a test run, with configure calls captured."""
    from unittest.mock import MagicMock

    configure = MagicMock()
    basic_config = MagicMock()
    monkeypatch.setattr("stabilizer.logging.setup._is_test_environment", lambda: False)
    monkeypatch.setattr("stabilizer.logging.setup.structlog.configure", configure)
    monkeypatch.setattr("stabilizer.logging.setup.logging.basicConfig", basic_config)
    return configure, basic_config
