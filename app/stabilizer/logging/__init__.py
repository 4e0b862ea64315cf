"""Structured logging infrastructure.

This package provides logging configuration and utilities for
test-stabilizer using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_logger(): Get a logger instance with a specific name
    - bind_task_context(): Context manager for call-scoped logging
    - get_run_id(): Get the current retry run ID from context
    - clear_task_context(): Clear all call-scoped context

Example:
    from stabilizer.logging import configure_logging, get_logger

    # At test session startup
    configure_logging()

    logger = get_logger(__name__)
    logger.info("module_initialized")
"""

from stabilizer.logging.setup import (
    configure_logging,
    get_logger,
)

from stabilizer.logging.context import (
    bind_task_context,
    get_run_id,
    clear_task_context,
)

__all__ = [
    # Setup
    "configure_logging",
    "get_logger",
    # Context
    "bind_task_context",
    "get_run_id",
    "clear_task_context",
]
