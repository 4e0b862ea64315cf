"""Infrastructure settings __init__ - exports all infrastructure settings."""

from stabilizer.configuration.infrastructure.retry import RetrySettings

__all__ = [
    "RetrySettings",
]
