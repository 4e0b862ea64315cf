"""Wait-until-condition-or-timeout primitive.

Both retry modes are built on ``wait_until``: it evaluates a condition,
returns as soon as it is truthy, and otherwise sleeps a fixed interval
between evaluations until a deadline passes.
"""

from typing import Callable, Optional, TypeVar

from stabilizer.resilience.retry.clock import Clock, SystemClock
from stabilizer.resilience.retry.exceptions import WaitTimeoutError

T = TypeVar("T")


def wait_until(
    condition: Callable[[], T],
    timeout: float,
    poll_interval: float,
    *,
    clock: Optional[Clock] = None,
    ignored_exceptions: tuple[type[BaseException], ...] = (),
    message: Optional[str] = None,
) -> T:
    """Block until ``condition()`` returns a truthy value.

    The condition is always evaluated at least once, so a zero timeout
    means "check exactly once". The deadline is only checked after a falsy
    evaluation, and the full ``poll_interval`` is slept between evaluations.

    Args:
        condition: Zero-argument callable to evaluate
        timeout: Time budget in seconds
        poll_interval: Delay between evaluations in seconds
        clock: Time source. Defaults to the system clock.
        ignored_exceptions: Exception types that count as a falsy result
            instead of propagating
        message: Prefix for the timeout error message

    Returns:
        The first truthy value returned by ``condition``

    Raises:
        WaitTimeoutError: If the deadline passes first. Chained from the last
            ignored exception, if there was one.
    """
    clock = clock or SystemClock()
    end = clock.monotonic() + timeout
    last_error: Optional[BaseException] = None

    while True:
        try:
            value = condition()
            if value:
                return value
        except ignored_exceptions as e:
            last_error = e

        if clock.monotonic() >= end:
            error = WaitTimeoutError(
                f"{message or 'Condition not met'} "
                f"(tried for {timeout:g} second(s) with {poll_interval:g} second(s) interval)",
                timeout=timeout,
                poll_interval=poll_interval,
                last_error=last_error,
            )
            raise error from last_error

        clock.sleep(poll_interval)
