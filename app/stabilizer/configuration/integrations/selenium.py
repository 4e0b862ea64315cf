"""Selenium browser driver settings."""

from pydantic import Field, field_validator

from stabilizer.configuration.base import IntegrationSettings

SUPPORTED_BROWSERS = ("chrome", "firefox")


class SeleniumSettings(IntegrationSettings):
    """Browser driver configuration for the Selenium session client.

    Environment Variables:
        SELENIUM_BROWSER: Browser to launch, 'chrome' or 'firefox' (default: chrome)
        SELENIUM_DRIVER_PATH: Path to the driver executable, e.g. chromedriver.
            When unset, Selenium Manager resolves the driver.
        SELENIUM_HEADLESS: Run the browser without a window (default: False)
        SELENIUM_PAGE_LOAD_TIMEOUT_SECONDS: Page load timeout (default: 30)

    Example:
        ```python
        from stabilizer.services import get_settings

        settings = get_settings()
        browser = settings.selenium.browser
        ```
    """

    browser: str = Field(default="chrome", alias="SELENIUM_BROWSER")
    driver_path: str | None = Field(default=None, alias="SELENIUM_DRIVER_PATH")
    headless: bool = Field(default=False, alias="SELENIUM_HEADLESS")
    page_load_timeout_seconds: int = Field(
        default=30,
        alias="SELENIUM_PAGE_LOAD_TIMEOUT_SECONDS",
    )

    @field_validator("browser")
    @classmethod
    def validate_browser(cls, value: str) -> str:
        browser = value.strip().lower()
        if browser not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser '{value}'. Expected one of: {', '.join(SUPPORTED_BROWSERS)}"
            )
        return browser
