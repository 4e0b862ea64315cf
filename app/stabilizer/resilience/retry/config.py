"""Retry policy configuration.

This module defines the policies that drive the two retry modes.
"""

from dataclasses import dataclass

from stabilizer.configuration import RetrySettings
from stabilizer.resilience.retry.models import TimeUnit


@dataclass
class AttemptPolicy:
    """Policy for attempt-bounded retries.

    Each attempt runs the task once, then waits up to ``wait_interval``
    (expressed in ``wait_unit``) for the completion predicate to hold.

    ``max_attempts`` is deliberately not validated: a value of zero or less
    means the task is never run and the run fails straight away.

    Attributes:
        max_attempts: Maximum number of task invocations
        wait_interval: Per-attempt time budget for the completion predicate
        wait_unit: Unit of ``wait_interval``

    Example:
        policy = AttemptPolicy(max_attempts=4, wait_interval=100)
        policy.wait_seconds  # 0.1
    """

    max_attempts: int = 3
    wait_interval: float = 500
    wait_unit: TimeUnit = TimeUnit.MILLISECONDS

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not isinstance(self.wait_unit, TimeUnit):
            raise ValueError("wait_unit must be a TimeUnit")
        if self.wait_interval < 0:
            raise ValueError("wait_interval must be >= 0")

    @property
    def wait_seconds(self) -> float:
        """Per-attempt wait converted to seconds."""
        return self.wait_unit.to_seconds(self.wait_interval)

    @classmethod
    def from_settings(cls, settings: RetrySettings) -> "AttemptPolicy":
        """Build a policy from the configured retry defaults.

        Raises:
            ValueError: If ``settings.wait_unit`` is not a known unit name.
        """
        return cls(
            max_attempts=settings.max_attempts,
            wait_interval=settings.wait_interval,
            wait_unit=TimeUnit(settings.wait_unit),
        )


@dataclass
class TimeoutPolicy:
    """Policy for timeout-bounded retries.

    The task is retried every ``polling_interval_seconds`` until it runs
    without raising, or until ``timeout_seconds`` have elapsed. A polling
    interval longer than the timeout is accepted: the task then runs once
    at the start and once more after the first interval.

    Attributes:
        polling_interval_seconds: Delay between attempts
        timeout_seconds: Overall time budget
    """

    polling_interval_seconds: float = 1
    timeout_seconds: float = 10

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.polling_interval_seconds < 0:
            raise ValueError("polling_interval_seconds must be >= 0")
        if self.timeout_seconds < 0:
            raise ValueError("timeout_seconds must be >= 0")

    @classmethod
    def from_settings(cls, settings: RetrySettings) -> "TimeoutPolicy":
        """Build a policy from the configured retry defaults."""
        return cls(
            polling_interval_seconds=settings.polling_interval_seconds,
            timeout_seconds=settings.timeout_seconds,
        )
