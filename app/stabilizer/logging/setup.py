"""Structlog configuration and logger setup.

This module provides the core logging configuration for test-stabilizer.
It configures structlog with processors for debugging context, proper
exception formatting, and environment-aware rendering.

The library never configures logging on import; applications and test
suites call ``configure_logging()`` once at startup.

Usage:
    from stabilizer.logging import configure_logging, get_logger

    configure_logging()

    logger = get_logger(__name__)
    logger.info("event_name", key="value")

Dependencies:
    - stabilizer.configuration.Settings
"""

import logging
import sys
import structlog
from structlog.stdlib import BoundLogger
from typing import Optional
from stabilizer.configuration import Settings


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging with enhanced processors.

    Configures structlog with:
    - Enhanced processors for file/line/function context
    - Proper exception formatting with stack traces
    - Context variable merging for run IDs bound by the retry engine
    - Test environment detection for log suppression

    Args:
        settings: Optional Settings instance. Defaults to the cached
            settings from ``stabilizer.services.get_settings``.
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Defaults to
            settings.is_production if not provided. Controls JSON vs console output.

    Returns:
        Configured logger instance

    Example:
        logger = configure_logging(log_level="DEBUG", is_production=False)
    """
    # Suppress all logging during tests
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)

        # Basic processors only; nothing is emitted because the root logger
        # level is above CRITICAL
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    if settings is None:
        from stabilizer.services import get_settings

        settings = get_settings()

    prod_mode = is_production if is_production is not None else settings.is_production

    processors = [
        # Add context variables (run IDs, retry mode, etc)
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        # Format exceptions with full stack traces
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if not prod_mode:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a logger instance, optionally bound to a name.

    Args:
        name: Optional logger name (typically __name__ in calling module)

    Returns:
        Logger instance with ``logger_name`` bound when a name is given

    Example:
        logger = get_logger(__name__)
    """
    logger = structlog.stdlib.get_logger()
    if name:
        return logger.bind(logger_name=name)
    return logger
