"""Configuration module - public API.

This module provides centralized configuration management for
test-stabilizer using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class
    RetrySettings: Retry engine defaults
    SeleniumSettings: Browser driver settings

Example:
    ```python
    from stabilizer.services import get_settings

    settings = get_settings()

    timeout = settings.retry.timeout_seconds
    driver_path = settings.selenium.driver_path
    ```
"""

from stabilizer.configuration.settings import Settings
from stabilizer.configuration.infrastructure.retry import RetrySettings
from stabilizer.configuration.integrations.selenium import SeleniumSettings

__all__ = ["Settings", "RetrySettings", "SeleniumSettings"]
