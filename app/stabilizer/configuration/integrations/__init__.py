"""Integration settings __init__ - exports all integration settings."""

from stabilizer.configuration.integrations.selenium import SeleniumSettings

__all__ = [
    "SeleniumSettings",
]
