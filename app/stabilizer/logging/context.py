"""Per-call context binding for structured logging.

The retry engine binds a run ID and the retry mode for the duration of a
single call, so every log entry emitted inside that call (including any
logged by the task itself) can be correlated.

Usage:
    from stabilizer.logging import bind_task_context

    with bind_task_context(retry_mode="attempts", task="click_submit"):
        logger.info("clicking")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_task_context(
    run_id: Optional[str] = None,
    retry_mode: Optional[str] = None,
    task: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind call-scoped context to all logs within the context manager.

    Args:
        run_id: Identifier for this retry run. Auto-generated if not provided.
        retry_mode: Which retry strategy is running ("attempts" or "timeout").
        task: Human-readable name of the task being retried.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        The run ID bound for this block.

    Example:
        with bind_task_context(retry_mode="timeout") as run_id:
            logger.debug("task_attempt_failed")
    """
    context: dict[str, Any] = {"run_id": run_id or str(uuid.uuid4())}

    if retry_mode is not None:
        context["retry_mode"] = retry_mode

    if task is not None:
        context["task"] = task

    context.update(extra_context)

    # Restore whatever the caller had bound before this block
    tokens = structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["run_id"]
    finally:
        structlog.contextvars.reset_contextvars(**tokens)


def get_run_id() -> Optional[str]:
    """Get the current retry run ID from the logging context.

    Returns:
        The run ID if inside ``bind_task_context``, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("run_id")


def clear_task_context() -> None:
    """Clear all call-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
