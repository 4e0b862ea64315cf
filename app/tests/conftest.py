"""Shared fixtures for the test-stabilizer test suite."""

import pytest
import structlog

from stabilizer.logging import configure_logging
from stabilizer.services import get_retry_engine, get_settings

# Quiet, test-mode structlog configuration for the whole session
configure_logging()


@pytest.fixture(autouse=True)
def reset_providers():
    """Drop cached settings/engine so environment overrides apply per test."""
    get_settings.cache_clear()
    get_retry_engine.cache_clear()
    yield
    get_settings.cache_clear()
    get_retry_engine.cache_clear()


@pytest.fixture(autouse=True)
def clean_log_context():
    """Prevent structlog context from leaking between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
