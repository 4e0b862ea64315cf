"""Service providers for dependency injection."""

from stabilizer.services.providers import get_retry_engine, get_settings

__all__ = ["get_settings", "get_retry_engine"]
