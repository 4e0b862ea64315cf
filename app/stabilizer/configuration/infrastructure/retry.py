"""Retry engine infrastructure settings."""

from pydantic import Field, field_validator

from stabilizer.configuration.base import InfrastructureSettings


class RetrySettings(InfrastructureSettings):
    """Default values for the retry engine.

    The attempt-bounded mode reads ``max_attempts``, ``wait_interval`` and
    ``wait_unit``; the timeout-bounded mode reads ``polling_interval_seconds``
    and ``timeout_seconds``. ``condition_poll_seconds`` is the cadence at which
    a completion predicate is re-evaluated inside one attempt.

    Environment Variables:
        RETRY_MAX_ATTEMPTS: Attempts before giving up (default: 3)
        RETRY_WAIT_INTERVAL: How long to wait for the predicate per attempt (default: 500)
        RETRY_WAIT_UNIT: Unit of RETRY_WAIT_INTERVAL (default: milliseconds)
        RETRY_CONDITION_POLL_SECONDS: Predicate re-check cadence (default: 0.5)
        RETRY_POLLING_INTERVAL_SECONDS: Sleep between timeout-bounded attempts (default: 1)
        RETRY_TIMEOUT_SECONDS: Overall timeout-bounded budget (default: 10)

    Example:
        ```python
        from stabilizer.services import get_settings

        settings = get_settings()
        policy = AttemptPolicy.from_settings(settings.retry)
        ```
    """

    max_attempts: int = Field(
        default=3,
        alias="RETRY_MAX_ATTEMPTS",
        description="Maximum number of task attempts in attempt-bounded mode",
    )
    wait_interval: float = Field(
        default=500,
        alias="RETRY_WAIT_INTERVAL",
        description="How long each attempt waits for the completion predicate",
    )
    wait_unit: str = Field(
        default="milliseconds",
        alias="RETRY_WAIT_UNIT",
        description="Time unit of wait_interval (e.g. 'milliseconds', 'seconds')",
    )
    condition_poll_seconds: float = Field(
        default=0.5,
        alias="RETRY_CONDITION_POLL_SECONDS",
        description="Cadence at which the completion predicate is re-evaluated",
    )
    polling_interval_seconds: float = Field(
        default=1,
        alias="RETRY_POLLING_INTERVAL_SECONDS",
        description="Delay between attempts in timeout-bounded mode (seconds)",
    )
    timeout_seconds: float = Field(
        default=10,
        alias="RETRY_TIMEOUT_SECONDS",
        description="Overall time budget in timeout-bounded mode (seconds)",
    )

    @field_validator("wait_unit")
    @classmethod
    def validate_wait_unit(cls, value: str) -> str:
        from stabilizer.resilience.retry.models import TimeUnit

        unit = value.strip().lower()
        valid = [u.value for u in TimeUnit]
        if unit not in valid:
            raise ValueError(
                f"Unsupported wait unit '{value}'. Expected one of: {', '.join(valid)}"
            )
        return unit

    @field_validator("wait_interval", "timeout_seconds")
    @classmethod
    def validate_non_negative_duration(cls, value: float) -> float:
        if value < 0:
            raise ValueError("durations must be >= 0")
        return value

    @field_validator("condition_poll_seconds", "polling_interval_seconds")
    @classmethod
    def validate_non_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError("polling intervals must be >= 0")
        return value
