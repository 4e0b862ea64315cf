"""Retry engine for stabilizing flaky actions.

Architecture:
- RetryEngine: runs a task in attempt-bounded or timeout-bounded mode
- wait_until: wait-until-condition-or-timeout primitive both modes use
- Clock / SystemClock: injectable time source
- AttemptPolicy / TimeoutPolicy: policies driving the two modes
- TimeUnit: unit of an attempt-bounded wait interval

Usage:
    from stabilizer.resilience.retry import RetryEngine, TimeUnit

    engine = RetryEngine()

    # Click until the confirmation banner shows, at most 4 times
    engine.perform_task_until(
        driver,
        click_submit,
        banner_visible,
        max_attempts=4,
        wait_interval=100,
        wait_unit=TimeUnit.MILLISECONDS,
    )

    # Retry every second until no exception, for at most 10 seconds
    engine.perform_task_until_no_exception(driver, click_submit, 1, 10)
"""

from stabilizer.resilience.retry.clock import Clock, SystemClock
from stabilizer.resilience.retry.config import AttemptPolicy, TimeoutPolicy
from stabilizer.resilience.retry.engine import RetryEngine
from stabilizer.resilience.retry.exceptions import (
    RetryError,
    RetryExhaustedError,
    TaskTimeoutError,
    WaitTimeoutError,
)
from stabilizer.resilience.retry.functions import (
    perform_task_until,
    perform_task_until_no_exception,
)
from stabilizer.resilience.retry.models import TimeUnit
from stabilizer.resilience.retry.wait import wait_until

__all__ = [
    # Models
    "TimeUnit",
    # Configuration
    "AttemptPolicy",
    "TimeoutPolicy",
    # Clock
    "Clock",
    "SystemClock",
    # Engine
    "RetryEngine",
    "wait_until",
    "perform_task_until",
    "perform_task_until_no_exception",
    # Exceptions
    "RetryError",
    "TaskTimeoutError",
    "WaitTimeoutError",
    "RetryExhaustedError",
]
