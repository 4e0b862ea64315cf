"""Module-level shortcuts for the process-wide retry engine.

Example:
    from stabilizer import perform_task_until, TimeUnit

    perform_task_until(
        driver,
        lambda d: d.find_element(By.ID, "submit").click(),
        lambda d: "Thanks" in d.page_source,
        4,
        100,
        TimeUnit.MILLISECONDS,
    )
"""

from typing import Any, Callable, TypeVar

from stabilizer.resilience.retry.engine import DEFAULT_RETRY_ON
from stabilizer.resilience.retry.models import TimeUnit
from stabilizer.services import providers

C = TypeVar("C")


def perform_task_until(
    context: C,
    task: Callable[[C], Any],
    is_task_completed: Callable[[C], bool],
    max_attempts: int,
    wait_interval: float,
    wait_unit: TimeUnit = TimeUnit.SECONDS,
    *,
    retry_on: tuple[type[BaseException], ...] = DEFAULT_RETRY_ON,
) -> None:
    """Perform ``task`` until ``is_task_completed`` holds.

    See ``RetryEngine.perform_task_until``.
    """
    providers.get_retry_engine().perform_task_until(
        context,
        task,
        is_task_completed,
        max_attempts,
        wait_interval,
        wait_unit,
        retry_on=retry_on,
    )


def perform_task_until_no_exception(
    context: C,
    task: Callable[[C], Any],
    polling_interval_seconds: float,
    timeout_seconds: float,
    *,
    retry_on: tuple[type[BaseException], ...] = DEFAULT_RETRY_ON,
) -> None:
    """Perform ``task`` until it runs without raising.

    See ``RetryEngine.perform_task_until_no_exception``.
    """
    providers.get_retry_engine().perform_task_until_no_exception(
        context,
        task,
        polling_interval_seconds,
        timeout_seconds,
        retry_on=retry_on,
    )
