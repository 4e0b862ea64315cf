"""Shared fixtures for retry engine tests."""

import pytest
from unittest.mock import MagicMock

from stabilizer.configuration import RetrySettings
from stabilizer.resilience.retry import RetryEngine


class FakeClock:
    """Clock that advances only when slept on."""

    def __init__(self, start: float = 0.0):
        self.now = start
        self.sleeps: list[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class Counter:
    """Mutable counter shared between a task and its predicate."""

    def __init__(self):
        self.value = 0

    def increment(self, *_args) -> int:
        self.value += 1
        return self.value


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def counter():
    return Counter()


@pytest.fixture
def retry_settings_factory():
    """Factory for creating RetrySettings instances."""

    def _factory(
        max_attempts: int = 3,
        wait_interval: float = 500,
        wait_unit: str = "milliseconds",
        condition_poll_seconds: float = 0.5,
        polling_interval_seconds: float = 1,
        timeout_seconds: float = 10,
    ) -> RetrySettings:
        return RetrySettings(
            RETRY_MAX_ATTEMPTS=max_attempts,
            RETRY_WAIT_INTERVAL=wait_interval,
            RETRY_WAIT_UNIT=wait_unit,
            RETRY_CONDITION_POLL_SECONDS=condition_poll_seconds,
            RETRY_POLLING_INTERVAL_SECONDS=polling_interval_seconds,
            RETRY_TIMEOUT_SECONDS=timeout_seconds,
        )

    return _factory


@pytest.fixture
def mock_logger():
    """Logger double; the engine logs through ``mock_logger.bind()``."""
    return MagicMock()


@pytest.fixture
def engine_factory(fake_clock, retry_settings_factory, mock_logger):
    """Factory for RetryEngine instances driven by the fake clock."""

    def _factory(**settings_overrides) -> RetryEngine:
        return RetryEngine(
            logger=mock_logger,
            clock=fake_clock,
            settings=retry_settings_factory(**settings_overrides),
        )

    return _factory


@pytest.fixture
def retry_engine(engine_factory):
    return engine_factory()
