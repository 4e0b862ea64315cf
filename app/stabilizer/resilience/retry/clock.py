"""Clock abstraction used by the wait primitive.

The engine never calls ``time`` directly so tests can substitute a clock
that advances instantly.
"""

import time
from typing import Protocol


class Clock(Protocol):
    """Protocol for a monotonic time source that can block."""

    def monotonic(self) -> float:
        """Return the current time in seconds from an arbitrary origin."""
        ...

    def sleep(self, seconds: float) -> None:
        """Block the calling thread for ``seconds``."""
        ...


class SystemClock:
    """Clock backed by ``time.monotonic`` and ``time.sleep``."""

    def monotonic(self) -> float:
        return time.monotonic()

    def sleep(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)
