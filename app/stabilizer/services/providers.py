"""
Factory functions for dependency injection.

Provides process-scoped singleton providers for the library's services.
"""

from functools import lru_cache

from stabilizer.configuration import Settings
from stabilizer.resilience.retry.engine import RetryEngine


@lru_cache
def get_settings() -> Settings:
    """
    Get process-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.
    Call ``get_settings.cache_clear()`` after changing the environment.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_retry_engine() -> RetryEngine:
    """
    Get process-scoped retry engine singleton.

    Returns:
        RetryEngine: Cached engine configured from ``settings.retry``.
    """
    settings = get_settings()
    return RetryEngine(settings=settings.retry)
