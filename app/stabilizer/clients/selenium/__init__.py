"""Selenium client for the browser sessions the retry engine operates on.

Public API (Package Level):
- create_driver: Start a WebDriver from SeleniumSettings
- driver_session: Context manager that quits the driver on exit

Usage:
    from stabilizer.clients.selenium import driver_session

    with driver_session() as driver:
        driver.get("https://example.com")
"""

from stabilizer.clients.selenium.session import create_driver, driver_session

__all__ = [
    "create_driver",
    "driver_session",
]
