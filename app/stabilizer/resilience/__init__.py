"""Resilience patterns and implementations.

This module contains the retry engine used to stabilize flaky actions.
"""

from stabilizer.resilience.retry import (
    AttemptPolicy,
    RetryEngine,
    RetryError,
    RetryExhaustedError,
    TaskTimeoutError,
    TimeoutPolicy,
    TimeUnit,
    WaitTimeoutError,
    perform_task_until,
    perform_task_until_no_exception,
    wait_until,
)

__all__ = [
    "AttemptPolicy",
    "TimeoutPolicy",
    "TimeUnit",
    "RetryEngine",
    "wait_until",
    "perform_task_until",
    "perform_task_until_no_exception",
    "RetryError",
    "TaskTimeoutError",
    "WaitTimeoutError",
    "RetryExhaustedError",
]
