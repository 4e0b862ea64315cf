"""test-stabilizer: retry flaky actions until they take effect.

Example:
    from stabilizer import TimeUnit, perform_task_until

    perform_task_until(
        driver,
        lambda d: d.find_element(By.ID, "menu").click(),
        lambda d: d.find_element(By.ID, "submenu").is_displayed(),
        max_attempts=4,
        wait_interval=100,
        wait_unit=TimeUnit.MILLISECONDS,
    )
"""

from stabilizer.resilience import (
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
