"""Exceptions raised by the retry engine.

Only the final, aggregate failure of a retry run reaches the caller. Errors
raised by individual attempts are logged and suppressed.
"""

from typing import Optional


class RetryError(Exception):
    """Base exception for all retry engine errors.

    Example:
        try:
            perform_task_until_no_exception(driver, click_submit, 1, 10)
        except RetryError as e:
            logger.error("retry_failed", error=str(e))
    """

    pass


class TaskTimeoutError(RetryError, TimeoutError):
    """Raised when a task did not complete within its budget.

    Catch this to handle both an exhausted attempt budget and an expired
    overall timeout with a single clause.
    """

    pass


class WaitTimeoutError(TaskTimeoutError):
    """Raised when a polled condition did not hold before the timeout.

    Attributes:
        timeout: Time budget that expired, in seconds
        poll_interval: Delay between evaluations, in seconds
        last_error: Last ignored exception raised by the condition, if any

    Example:
        >>> wait_until(lambda: False, timeout=0, poll_interval=0.1)
        Traceback (most recent call last):
        ...
        WaitTimeoutError: Condition not met (tried for 0 second(s) with 0.1 second(s) interval)
    """

    def __init__(
        self,
        message: str,
        timeout: float,
        poll_interval: float,
        last_error: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.timeout = timeout
        self.poll_interval = poll_interval
        self.last_error = last_error

    def __reduce__(self):
        return (
            type(self),
            (str(self), self.timeout, self.poll_interval, self.last_error),
        )


class RetryExhaustedError(TaskTimeoutError):
    """Raised when every attempt of an attempt-bounded run failed.

    Task failures and completion predicates that never held are reported
    the same way; the per-attempt causes are only in the DEBUG logs.

    Attributes:
        attempts: Number of attempts actually made
        max_attempts: Attempt budget of the run
    """

    def __init__(self, attempts: int, max_attempts: int) -> None:
        super().__init__(f"Task not completed in {attempts} attempts")
        self.attempts = attempts
        self.max_attempts = max_attempts

    def __reduce__(self):
        return (type(self), (self.attempts, self.max_attempts))
