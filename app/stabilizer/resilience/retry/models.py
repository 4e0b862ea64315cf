"""Retry models.

Defines the units in which attempt-bounded wait intervals are expressed.
"""

from enum import Enum


class TimeUnit(Enum):
    """Unit of time for a wait interval.

    Values are the lowercase unit names so they can be read straight from
    configuration (``RETRY_WAIT_UNIT=milliseconds``).

    Example:
        >>> TimeUnit.MILLISECONDS.to_seconds(250)
        0.25
    """

    NANOSECONDS = "nanoseconds"
    MICROSECONDS = "microseconds"
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"

    @property
    def seconds(self) -> float:
        """Length of one unit, in seconds."""
        return _SECONDS_PER_UNIT[self]

    def to_seconds(self, value: float) -> float:
        """Convert ``value`` expressed in this unit to seconds."""
        return value * self.seconds


_SECONDS_PER_UNIT = {
    TimeUnit.NANOSECONDS: 1e-9,
    TimeUnit.MICROSECONDS: 1e-6,
    TimeUnit.MILLISECONDS: 1e-3,
    TimeUnit.SECONDS: 1.0,
    TimeUnit.MINUTES: 60.0,
    TimeUnit.HOURS: 3600.0,
    TimeUnit.DAYS: 86400.0,
}
