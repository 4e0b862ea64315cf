"""Retry engine for flaky, non-deterministic actions.

Two strategies share the same attempt → check → wait → retry shape:

- Attempt-bounded: run the task, then wait a fixed interval for a completion
  predicate to hold; retry up to a fixed number of attempts.
- Timeout-bounded: run the task every polling interval until it completes
  without raising, or until an overall timeout elapses.

Failures of individual attempts are logged at DEBUG and swallowed. Only the
aggregate failure of a run (``RetryExhaustedError`` or ``WaitTimeoutError``)
reaches the caller.
"""

from typing import Any, Callable, Optional, TypeVar

from structlog.stdlib import BoundLogger

from stabilizer.configuration import RetrySettings
from stabilizer.logging import bind_task_context, get_logger
from stabilizer.resilience.retry.clock import Clock, SystemClock
from stabilizer.resilience.retry.config import AttemptPolicy, TimeoutPolicy
from stabilizer.resilience.retry.exceptions import (
    RetryExhaustedError,
    WaitTimeoutError,
)
from stabilizer.resilience.retry.models import TimeUnit
from stabilizer.resilience.retry.wait import wait_until

C = TypeVar("C")

Task = Callable[[C], Any]
Predicate = Callable[[C], bool]

DEFAULT_RETRY_ON: tuple[type[BaseException], ...] = (Exception,)


def _task_name(task: Callable[..., Any]) -> str:
    return getattr(task, "__qualname__", None) or repr(task)


class RetryEngine:
    """Runs caller-supplied tasks until they succeed or a budget runs out.

    The engine holds no state between runs; the context handle (for example
    a Selenium ``WebDriver``) is passed through to the task and predicate
    untouched.

    Attributes:
        clock: Time source used for all waits
        settings: Retry defaults (predicate poll cadence and policy defaults)
        log: Logger bound to the engine component
    """

    def __init__(
        self,
        logger: Optional[BoundLogger] = None,
        clock: Optional[Clock] = None,
        settings: Optional[RetrySettings] = None,
    ) -> None:
        """Initialize the retry engine.

        Args:
            logger: Logger to report swallowed failures to. Defaults to the
                structlog logger for this module.
            clock: Time source. Defaults to the system clock.
            settings: Optional RetrySettings. If not provided, uses defaults.
        """
        self.clock = clock or SystemClock()
        self.settings = settings or RetrySettings()
        self.log = (logger or get_logger(__name__)).bind(component="retry_engine")

    def perform_task_until(
        self,
        context: C,
        task: Task,
        is_task_completed: Predicate,
        max_attempts: int,
        wait_interval: float,
        wait_unit: TimeUnit = TimeUnit.SECONDS,
        *,
        retry_on: tuple[type[BaseException], ...] = DEFAULT_RETRY_ON,
    ) -> None:
        """Run ``task`` until ``is_task_completed`` holds after it.

        After each task run the predicate is re-evaluated for up to
        ``wait_interval`` (in ``wait_unit``). A task that raises, or a
        predicate that never holds within the interval, fails the attempt.

        Args:
            context: Handle passed to the task and the predicate
            task: Action to perform, called as ``task(context)``
            is_task_completed: Completion check, called as
                ``is_task_completed(context)``
            max_attempts: Maximum number of task invocations
            wait_interval: How long to wait for the predicate per attempt
            wait_unit: Unit of ``wait_interval``
            retry_on: Exception types that fail a single attempt. Anything
                else propagates immediately.

        Raises:
            RetryExhaustedError: If no attempt succeeded.
        """
        policy = AttemptPolicy(
            max_attempts=max_attempts,
            wait_interval=wait_interval,
            wait_unit=wait_unit,
        )
        self.run_with_attempts(
            context, task, is_task_completed, policy, retry_on=retry_on
        )

    def perform_task_until_no_exception(
        self,
        context: C,
        task: Task,
        polling_interval_seconds: float,
        timeout_seconds: float,
        *,
        retry_on: tuple[type[BaseException], ...] = DEFAULT_RETRY_ON,
    ) -> None:
        """Run ``task`` until it completes without raising.

        Args:
            context: Handle passed to the task
            task: Action to perform, called as ``task(context)``
            polling_interval_seconds: Delay between attempts
            timeout_seconds: Overall time budget
            retry_on: Exception types that fail a single attempt. Anything
                else propagates immediately.

        Raises:
            WaitTimeoutError: If the timeout elapsed before any attempt succeeded.
        """
        policy = TimeoutPolicy(
            polling_interval_seconds=polling_interval_seconds,
            timeout_seconds=timeout_seconds,
        )
        self.run_with_timeout(context, task, policy, retry_on=retry_on)

    def run_with_attempts(
        self,
        context: C,
        task: Task,
        is_task_completed: Predicate,
        policy: Optional[AttemptPolicy] = None,
        *,
        retry_on: tuple[type[BaseException], ...] = DEFAULT_RETRY_ON,
    ) -> None:
        """Attempt-bounded retry driven by an ``AttemptPolicy``.

        Uses the configured defaults when no policy is given.
        """
        policy = policy or AttemptPolicy.from_settings(self.settings)
        wait_seconds = policy.wait_seconds
        attempt = 0
        succeeded = False
        escaped: Optional[BaseException] = None

        def check_completed() -> bool:
            nonlocal escaped
            try:
                return is_task_completed(context)
            except retry_on:
                raise
            except BaseException as e:
                escaped = e
                raise

        with bind_task_context(retry_mode="attempts", task=_task_name(task)):
            while not succeeded and attempt < policy.max_attempts:
                attempt += 1
                try:
                    task(context)
                except retry_on as e:
                    self._log_attempt_failure(attempt, policy.max_attempts, e)
                    continue

                # An unmet predicate fails the attempt whatever retry_on says
                try:
                    wait_until(
                        check_completed,
                        timeout=wait_seconds,
                        poll_interval=self.settings.condition_poll_seconds,
                        clock=self.clock,
                        ignored_exceptions=retry_on,
                        message="Task completion condition not met",
                    )
                    succeeded = True
                except WaitTimeoutError as e:
                    if e is escaped:
                        raise
                    self._log_attempt_failure(attempt, policy.max_attempts, e)

            if not succeeded:
                self.log.warning(
                    "task_retries_exhausted",
                    attempts=attempt,
                    max_attempts=policy.max_attempts,
                )
                raise RetryExhaustedError(attempts=attempt, max_attempts=policy.max_attempts)

            self.log.info("task_completed", attempts=attempt)

    def run_with_timeout(
        self,
        context: C,
        task: Task,
        policy: Optional[TimeoutPolicy] = None,
        *,
        retry_on: tuple[type[BaseException], ...] = DEFAULT_RETRY_ON,
    ) -> None:
        """Timeout-bounded retry driven by a ``TimeoutPolicy``.

        Uses the configured defaults when no policy is given.
        """
        policy = policy or TimeoutPolicy.from_settings(self.settings)
        attempts = 0
        escaped: Optional[BaseException] = None

        def attempt_task() -> bool:
            nonlocal attempts, escaped
            attempts += 1
            try:
                task(context)
            except retry_on as e:
                self._log_attempt_failure(attempts, None, e)
                raise
            except BaseException as e:
                escaped = e
                raise
            return True

        with bind_task_context(retry_mode="timeout", task=_task_name(task)):
            try:
                wait_until(
                    attempt_task,
                    timeout=policy.timeout_seconds,
                    poll_interval=policy.polling_interval_seconds,
                    clock=self.clock,
                    ignored_exceptions=retry_on,
                    message="Task did not complete without an exception",
                )
            except WaitTimeoutError as e:
                # A WaitTimeoutError raised by the task itself is not our deadline
                if e is not escaped:
                    self.log.warning(
                        "task_timed_out",
                        attempts=attempts,
                        timeout_seconds=policy.timeout_seconds,
                    )
                raise

            self.log.info("task_completed", attempts=attempts)

    def _log_attempt_failure(
        self, attempt: int, max_attempts: Optional[int], error: BaseException
    ) -> None:
        fields = {"attempt": attempt, "error": str(error)}
        if max_attempts is not None:
            fields["max_attempts"] = max_attempts
        self.log.debug("task_attempt_failed", exc_info=True, **fields)
