"""Selenium WebDriver session lifecycle.

The retry engine treats the driver as an opaque handle. This module only
creates and disposes of it: one driver per session, always quit on exit.
"""

from contextlib import contextmanager
from typing import TYPE_CHECKING, Generator, Optional

import structlog
from selenium import webdriver
from selenium.webdriver.remote.webdriver import WebDriver

if TYPE_CHECKING:
    from stabilizer.configuration import SeleniumSettings

logger = structlog.get_logger()


def _chrome(settings: "SeleniumSettings") -> WebDriver:
    options = webdriver.ChromeOptions()
    if settings.headless:
        options.add_argument("--headless=new")
    service = webdriver.ChromeService(executable_path=settings.driver_path)
    return webdriver.Chrome(options=options, service=service)


def _firefox(settings: "SeleniumSettings") -> WebDriver:
    options = webdriver.FirefoxOptions()
    if settings.headless:
        options.add_argument("-headless")
    service = webdriver.FirefoxService(executable_path=settings.driver_path)
    return webdriver.Firefox(options=options, service=service)


_DRIVER_FACTORIES = {
    "chrome": _chrome,
    "firefox": _firefox,
}


def create_driver(settings: "SeleniumSettings") -> WebDriver:
    """Start a browser according to ``settings``.

    Args:
        settings: SeleniumSettings with browser, driver path and headless flag

    Returns:
        A started WebDriver with the configured page load timeout

    Raises:
        ValueError: If the configured browser is not supported
    """
    factory = _DRIVER_FACTORIES.get(settings.browser)
    if factory is None:
        raise ValueError(f"Unsupported browser '{settings.browser}'")

    driver = factory(settings)
    driver.set_page_load_timeout(settings.page_load_timeout_seconds)
    logger.info(
        "webdriver_started",
        browser=settings.browser,
        headless=settings.headless,
        driver_path=settings.driver_path,
    )
    return driver


@contextmanager
def driver_session(
    settings: Optional["SeleniumSettings"] = None,
) -> Generator[WebDriver, None, None]:
    """Yield a WebDriver and quit it when the block exits.

    Args:
        settings: Optional SeleniumSettings. Defaults to ``settings.selenium``
            from ``stabilizer.services.get_settings``.

    Example:
        with driver_session() as driver:
            perform_task_until_no_exception(driver, click_submit, 1, 10)
    """
    if settings is None:
        from stabilizer.services import get_settings

        settings = get_settings().selenium

    driver = create_driver(settings)
    try:
        yield driver
    finally:
        try:
            driver.quit()
        except Exception as e:
            logger.warning("webdriver_quit_failed", error=str(e))
        else:
            logger.info("webdriver_stopped", browser=settings.browser)
