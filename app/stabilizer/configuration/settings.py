"""test-stabilizer configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Integration settings
from stabilizer.configuration.integrations import SeleniumSettings

# Infrastructure settings
from stabilizer.configuration.infrastructure import RetrySettings


class Settings(BaseSettings):
    """test-stabilizer configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object:

    - **Integrations**: browser driver configuration (``selenium``)
    - **Infrastructure**: retry engine defaults (``retry``)

    Environment Variables:
        ENVIRONMENT: Deployment environment name (default: development)
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from stabilizer.services import get_settings

        settings = get_settings()
        max_attempts = settings.retry.max_attempts
        browser = settings.selenium.browser
        ```
    """

    # Application-level settings
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Integration settings
    selenium: SeleniumSettings

    # Infrastructure settings
    retry: RetrySettings

    @property
    def is_production(self) -> bool:
        """Check if the library is running in production.

        Returns:
            True if ENVIRONMENT is 'production', False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            # Integrations
            "selenium": SeleniumSettings,
            # Infrastructure
            "retry": RetrySettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
